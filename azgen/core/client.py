"""Clients for Azure API packages"""
from __future__ import annotations

from typing import ClassVar, List, Optional, Type

import requests
from azure.core.credentials import TokenCredential

from azgen.core.pipeline import Context, Pipeline, RetryPolicy, TransportOptions

AZURE_PUBLIC_CLOUD = "https://management.azure.com"
AZURE_CHINA_CLOUD = "https://management.chinacloudapi.cn"
AZURE_US_GOVERNMENT = "https://management.usgovcloudapi.net"

DEFAULT_ENDPOINT = AZURE_PUBLIC_CLOUD


def default_scopes(endpoint: str) -> List[str]:
	"""The OAuth scopes for the resource at an endpoint"""
	return [endpoint.rstrip("/") + "/.default"]


class Client:
	"""
	Connection-level configuration shared by all operations of an API package

	Clients are immutable after construction, so one can be shared between threads.
	Generated packages subclass this with accessors for their groups of operations.
	"""

	def __init__(self, endpoint: str, credential: TokenCredential, scopes: List[str], pipeline: Pipeline):
		self.endpoint = endpoint.rstrip("/")
		self.credential = credential
		self.scopes = list(scopes)
		self.pipeline = pipeline

	def token(self) -> str:
		"""Get a bearer token for this client's scopes"""
		return self.credential.get_token(*self.scopes).token

	def send(self, context: Context, request: requests.Request) -> requests.Response:
		"""Send a request through the pipeline"""
		return self.pipeline.send(context, request)


class SubClient:
	"""A group of operations sharing a Client"""

	def __init__(self, client: Client):
		self.client = client


class ClientBuilder:
	"""
	Configure a Client

	>>> from azure.identity import DefaultAzureCredential
	>>> client = ClientBuilder(DefaultAzureCredential()).retry(RetryPolicy(retries=3)).build()
	"""

	client_cls: ClassVar[Type[Client]] = Client
	default_endpoint: ClassVar[str] = DEFAULT_ENDPOINT
	package: ClassVar[Optional[str]] = None
	version: ClassVar[Optional[str]] = None

	def __init__(self, credential: TokenCredential):
		self.credential = credential
		self._endpoint: Optional[str] = None
		self._scopes: Optional[List[str]] = None
		self._retry = RetryPolicy()
		self._transport = TransportOptions()

	def endpoint(self, endpoint: str) -> ClientBuilder:
		"""Set the endpoint"""
		self._endpoint = endpoint
		return self

	def scopes(self, scopes: List[str]) -> ClientBuilder:
		"""Set the OAuth scopes"""
		self._scopes = list(scopes)
		return self

	def retry(self, retry: RetryPolicy) -> ClientBuilder:
		"""Set the retry policy"""
		self._retry = retry
		return self

	def transport(self, transport: TransportOptions) -> ClientBuilder:
		"""Set the transport options"""
		self._transport = transport
		return self

	def build(self) -> Client:
		"""Build the Client, filling in defaults"""
		endpoint = self._endpoint or self.default_endpoint
		scopes = self._scopes or default_scopes(endpoint)
		pipeline = Pipeline(self._retry, self._transport, self.package, self.version)
		return self.client_cls(endpoint, self.credential, scopes, pipeline)
