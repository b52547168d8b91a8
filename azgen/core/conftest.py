"""
Helpers for testing clients without reaching Azure

These fakes stand in for the credential and the requests Session,
so the real Pipeline and Operation code prepare every request.
"""
# pylint: disable=redefined-outer-name
import json
from typing import Any, Dict, Iterable, List, Optional, Union

import pytest
import requests
from azure.core.credentials import AccessToken

from azgen.core.client import Client, ClientBuilder
from azgen.core.pipeline import RetryPolicy, TransportOptions

FAKE_TOKEN = "fake-token"


class FakeCredential:
	"""A credential which hands out a fixed token and records the scopes it was asked for"""

	def __init__(self, token: str = FAKE_TOKEN):
		self.token = token
		self.calls: List[tuple] = []

	def get_token(self, *scopes: str, **kwargs) -> AccessToken:
		self.calls.append(scopes)
		return AccessToken(self.token, 0)


def mk_response(status: int, body: Any = None, headers: Optional[Dict[str, str]] = None) -> requests.Response:
	"""Build a requests.Response"""
	res = requests.Response()
	res.status_code = status
	if body is None:
		res._content = b""  # pylint: disable=protected-access
	elif isinstance(body, bytes):
		res._content = body  # pylint: disable=protected-access
	else:
		res._content = json.dumps(body).encode("utf-8")  # pylint: disable=protected-access
	res.headers.update(headers or {})
	return res


class FakeSession(requests.Session):
	"""A Session which returns queued responses instead of making requests"""

	def __init__(self, responses: Iterable[Union[requests.Response, Exception]] = ()):
		super().__init__()
		self.responses = list(responses)
		self.sent: List[requests.PreparedRequest] = []

	def queue(self, *responses: Union[requests.Response, Exception]) -> "FakeSession":
		self.responses.extend(responses)
		return self

	def send(self, request, **kwargs):  # pylint: disable=arguments-differ
		self.sent.append(request)
		if not self.responses:
			raise AssertionError(f"unexpected request url={request.url}")
		res = self.responses.pop(0)
		if isinstance(res, Exception):
			raise res
		res.request = request
		res.url = request.url
		return res


def fake_client(session: FakeSession, endpoint: str = "https://management.azure.com", retry_policy: RetryPolicy = RetryPolicy(), credential=None) -> Client:
	"""A Client which sends through a FakeSession"""
	return ClientBuilder(credential or FakeCredential()).endpoint(endpoint).retry(retry_policy).transport(TransportOptions(session=session)).build()


@pytest.fixture
def session() -> FakeSession:
	"""Fixture: a fake session with no responses queued"""
	return FakeSession()


@pytest.fixture
def credential() -> FakeCredential:
	"""Fixture: a fake credential"""
	return FakeCredential()


@pytest.fixture
def client(session, credential) -> Client:
	"""Fixture: a client sending through the fake session"""
	return fake_client(session, credential=credential)
