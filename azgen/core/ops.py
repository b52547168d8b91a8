"""Builders for Azure operations"""
from __future__ import annotations

import copy
import dataclasses
import json
import logging
import re
from datetime import date, datetime
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, Generic, Iterator, List, Mapping, Optional, Tuple, TypeVar
from urllib.parse import parse_qsl, quote, urljoin, urlsplit, urlunsplit

import pydantic_core
import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from azgen.core.client import Client
from azgen.core.errors import DeserialiseError, HttpResponseError, UrlError
from azgen.core.models import Page, Ret_T
from azgen.core.pipeline import Context, fmt_log

l = logging.getLogger(__name__)

API_VERSION = "api-version"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"

Op_T = TypeVar("Op_T", bound="Operation")

_path_param = re.compile(r"\{([^}]+)\}")


@dataclasses.dataclass(frozen=True)
class Outcome(Generic[Ret_T]):
	"""A response with one of the statuses an operation expects"""

	status: int
	value: Optional[Ret_T] = None
	headers: Mapping[str, str] = dataclasses.field(default_factory=dict, compare=False, repr=False)


@dataclasses.dataclass(frozen=True)
class Ok200(Outcome[Ret_T]):
	status: int = 200


@dataclasses.dataclass(frozen=True)
class Created201(Outcome[Ret_T]):
	status: int = 201


@dataclasses.dataclass(frozen=True)
class Accepted202(Outcome[Ret_T]):
	status: int = 202


@dataclasses.dataclass(frozen=True)
class NoContent204(Outcome[Ret_T]):
	status: int = 204


OUTCOMES = {cls.status: cls for cls in (Ok200, Created201, Accepted202, NoContent204)}


def mk_outcome(status: int, value: Any, headers: Mapping[str, str]) -> Outcome:
	"""Tag a response value with the status it arrived with"""
	outcome_t = OUTCOMES.get(status)
	if outcome_t is None:
		return Outcome(status, value, headers)
	return outcome_t(value=value, headers=headers)


def fmt_param(value: Any) -> str:
	"""Format a value for a query string or header"""
	if isinstance(value, bool):
		return "true" if value else "false"
	if isinstance(value, Enum):
		return str(value.value)
	if isinstance(value, (datetime, date)):
		return value.isoformat()
	if isinstance(value, (list, tuple, set, frozenset)):
		return ",".join(fmt_param(e) for e in value)
	return str(value)


def serialise_body(body: Any) -> str:
	"""Serialise a request body to JSON"""
	if isinstance(body, BaseModel):
		return body.model_dump_json(exclude_none=True, by_alias=True, serialize_as_any=True)
	if isinstance(body, dict):
		# allows you to do your own serialisation
		return json.dumps(body)
	return pydantic_core.to_json(body, exclude_none=True, by_alias=True, serialize_as_any=True).decode("utf-8")


def has_api_version(url: str) -> bool:
	"""Whether a url already carries the api-version"""
	return any(k == API_VERSION for k, _ in parse_qsl(urlsplit(url).query, keep_blank_values=True))


class Operation(Generic[Ret_T]):
	"""
	One Azure operation, ready to send

	Generated packages subclass this for each operation, filling in the class variables.
	Required parameters are passed to the constructor;
	optional ones are set with the chainable setters, which return a modified copy.
	"""

	operation_id: ClassVar[str]
	http_method: ClassVar[str]
	path_template: ClassVar[str]
	api_version: ClassVar[Optional[str]] = None
	responses: ClassVar[Dict[int, Any]] = {200: None}
	unencoded: ClassVar[FrozenSet[str]] = frozenset()

	def __init__(
		self,
		client: Client,
		path_params: Optional[Dict[str, Any]] = None,
		params: Optional[Dict[str, Any]] = None,
		headers: Optional[Dict[str, Any]] = None,
		body: Any = None,
	):
		self.client = client
		self.path_params = dict(path_params or {})
		self.params = {k: fmt_param(v) for k, v in (params or {}).items() if v is not None}
		self.headers = {k: fmt_param(v) for k, v in (headers or {}).items() if v is not None}
		self.body = body

	def add_param(self: Op_T, name: str, value: Any) -> Op_T:
		"""Copy this operation with a query parameter set"""
		new = copy.copy(self)
		new.params = {**self.params, name: fmt_param(value)}
		return new

	def add_header(self: Op_T, name: str, value: Any) -> Op_T:
		"""Copy this operation with a header set"""
		new = copy.copy(self)
		new.headers = {**self.headers, name: fmt_param(value)}
		return new

	def with_body(self: Op_T, body: Any) -> Op_T:
		"""Copy this operation with a body set"""
		new = copy.copy(self)
		new.body = body
		return new

	def context(self, page: int = 0) -> Context:
		return Context(self.operation_id, page)

	def _encode_path_param(self, name: str) -> str:
		try:
			value = fmt_param(self.path_params[name])
		except KeyError:
			raise UrlError(self.path_template, f"missing path parameter {name}")
		safe = "/" if name in self.unencoded else ""
		return quote(value, safe=safe)

	@staticmethod
	def _validate_url(url: str) -> str:
		scheme = urlsplit(url).scheme
		if scheme not in ("http", "https"):
			raise UrlError(url, f"unsupported scheme={scheme!r}")
		try:
			requests.PreparedRequest().prepare_url(url, None)
		except (requests.exceptions.MissingSchema, requests.exceptions.InvalidURL) as e:
			raise UrlError(url, str(e)) from e
		return url

	def url(self) -> str:
		"""The url of the first request of this operation"""
		path = _path_param.sub(lambda m: self._encode_path_param(m.group(1)), self.path_template)
		return self._validate_url(self.client.endpoint + path)

	def next_url(self, link: str) -> str:
		"""Resolve a continuation link against the endpoint"""
		endpoint = urlsplit(self.client.endpoint)
		base = urlunsplit((endpoint.scheme, endpoint.netloc, "/", "", ""))
		return self._validate_url(urljoin(base, link))

	def to_request(self, continuation: Optional[str] = None) -> requests.Request:
		"""
		Build the request for this operation

		With a continuation, the request targets the continuation link instead.
		The link already has the query parameters, so only the api-version is added, and only if it is missing.
		"""
		url = self.url() if continuation is None else self.next_url(continuation)
		r = requests.Request(method=self.http_method, url=url)
		r.headers = {HEADER_AUTHORIZATION: f"Bearer {self.client.token()}"}

		params: Dict[str, str] = {}
		if self.api_version and not (continuation is not None and has_api_version(url)):
			params[API_VERSION] = self.api_version
		if continuation is None:
			params.update(self.params)
		r.params = params

		r.headers.update(self.headers)
		if self.body is not None:
			r.headers[HEADER_CONTENT_TYPE] = "application/json"
			r.data = serialise_body(self.body)
		return r

	def _deserialise(self, ret_t: Any, res: requests.Response) -> Any:
		type_adapter: TypeAdapter = TypeAdapter(ret_t)
		try:
			if len(res.content) == 0:
				return type_adapter.validate_python(None)
			return type_adapter.validate_json(res.content)
		except ValidationError as e:
			raise DeserialiseError(res.status_code, str(ret_t), e) from e

	def _execute(self, request: requests.Request, context: Context) -> Tuple[int, Any, Mapping[str, str]]:
		"""Send a request and map its status to a value"""
		res = self.client.send(context, request)
		if res.status_code not in self.responses:
			l.warning(fmt_log("req returned unexpected status", context, status=res.status_code))
			raise HttpResponseError.from_response(res)

		ret_t = self.responses[res.status_code]
		value = None if ret_t is None else self._deserialise(ret_t, res)
		return res.status_code, value, res.headers

	def send(self) -> Any:
		"""
		Make the request to Azure

		If the operation expects only one status, this returns the deserialised body.
		Otherwise it returns an Outcome, tagged with the status that was received.
		"""
		context = self.context()
		status, value, headers = self._execute(self.to_request(), context)
		if len(self.responses) > 1:
			return mk_outcome(status, value, headers)
		return value


class PagedOperation(Operation[Ret_T]):
	"""An operation whose response may be split over many pages"""

	def pages(self) -> Iterator[Ret_T]:
		"""
		Fetch the pages of the response, following continuation links

		Pages are fetched as they are consumed.
		Each call starts again from the first page.
		"""
		continuation: Optional[str] = None
		page = 0
		while True:
			context = self.context(page)
			if continuation is not None:
				l.debug(fmt_log("paginating req", context, page=page))
			_, value, _ = self._execute(self.to_request(continuation), context)
			yield value

			continuation = value.continuation() if isinstance(value, Page) else None
			if not continuation:
				return
			page += 1

	def items(self) -> Iterator[Any]:
		"""Fetch the items from all the pages of the response"""
		for page in self.pages():
			if isinstance(page, Page):
				yield from page.page_items()
			elif isinstance(page, list):
				yield from page
			else:
				yield page

	def collect(self) -> List[Any]:
		"""Fetch all items from all pages"""
		return list(self.items())
