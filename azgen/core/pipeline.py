"""Send requests to Azure, retrying where the policy allows"""
from __future__ import annotations

import dataclasses
import logging
import time
from typing import Dict, FrozenSet, Optional, Union

import requests

l = logging.getLogger(__name__)

HEADER_RETRY_AFTER = "Retry-After"
HEADER_USER_AGENT = "User-Agent"


@dataclasses.dataclass(frozen=True)
class Context:
	"""What a request is for. Threaded through the pipeline for logging"""

	operation_id: str
	page: int = 0


def fmt_log(msg: str, context: Context, **kwargs: Union[str, int, float]) -> str:
	"""Format a log statement referencing a request"""
	arg_s = " ".join(f"{k}={v}" for k, v in kwargs.items())
	return f"{msg} req={context.operation_id} {arg_s}".rstrip()


@dataclasses.dataclass(frozen=True)
class RetryPolicy:
	"""
	Parameters for retrying requests which failed for transient reasons

	Responses with a status in `statuses` are retried for any method.
	Connection errors are retried only for `idempotent_methods`,
	except a connect timeout, which fails before anything is sent.
	"""

	retries: int = 0  # number of times to retry. This is in addition to the initial try
	backoff: float = 0.8  # seconds to wait before the first retry, doubled for each attempt
	max_backoff: float = 60.0
	statuses: FrozenSet[int] = frozenset({408, 429, 500, 502, 503, 504})
	idempotent_methods: FrozenSet[str] = frozenset({"GET", "HEAD", "OPTIONS", "PUT", "DELETE"})

	def time_to_wait(self, attempt: int, res: Optional[requests.Response] = None) -> float:
		"""How long to wait before retry number `attempt` (counting from 0)"""
		if res is not None and HEADER_RETRY_AFTER in res.headers:
			try:
				return float(res.headers[HEADER_RETRY_AFTER])
			except ValueError:
				l.debug(f"could not parse {HEADER_RETRY_AFTER} header value={res.headers[HEADER_RETRY_AFTER]}")
		return min(self.backoff * (2**attempt), self.max_backoff)

	def can_retry_connection_error(self, method: str, e: requests.ConnectionError) -> bool:
		"""Whether a request which failed to connect is safe to send again"""
		return isinstance(e, requests.exceptions.ConnectTimeout) or method.upper() in self.idempotent_methods


@dataclasses.dataclass(frozen=True)
class TransportOptions:
	"""Parameters for the HTTP transport"""

	session: Optional[requests.Session] = None
	timeout: Optional[float] = None  # seconds, passed to requests
	headers: Dict[str, str] = dataclasses.field(default_factory=dict)


class Pipeline:
	"""Send requests through a shared session"""

	def __init__(
		self,
		retry_policy: RetryPolicy = RetryPolicy(),
		transport: TransportOptions = TransportOptions(),
		package: Optional[str] = None,
		version: Optional[str] = None,
	):
		self.retry_policy = retry_policy
		self.transport = transport
		self.session = transport.session or requests.Session()
		self.user_agent = f"azsdk-python-{package or 'azgen'}/{version or '0'}"

	def prepare(self, request: requests.Request) -> requests.PreparedRequest:
		"""Prepare a request with the session's and transport's defaults"""
		prepared = self.session.prepare_request(request)
		for k, v in self.transport.headers.items():
			prepared.headers.setdefault(k, v)
		prepared.headers[HEADER_USER_AGENT] = self.user_agent
		return prepared

	def send(self, context: Context, request: requests.Request) -> requests.Response:
		"""Send a request, retrying connection errors and transient statuses"""
		prepared = self.prepare(request)

		attempt = 0
		while True:
			l.debug(fmt_log("making req", context, method=str(prepared.method), page=context.page, attempt=attempt))
			try:
				res = self.session.send(prepared, timeout=self.transport.timeout)
			except requests.ConnectionError as e:
				if attempt >= self.retry_policy.retries:
					l.warning(fmt_log("req failed to connect; retries exhausted", context, err=str(e)))
					raise
				if not self.retry_policy.can_retry_connection_error(str(prepared.method), e):
					l.warning(fmt_log("req failed to connect; not retrying a request which may have been sent", context, method=str(prepared.method), err=str(e)))
					raise
				l.debug(fmt_log("req failed to connect; retrying", context, err=str(e)))
				wait = self.retry_policy.time_to_wait(attempt)
			else:
				if res.status_code not in self.retry_policy.statuses:
					l.debug(fmt_log("req complete", context, status=res.status_code))
					return res
				if attempt >= self.retry_policy.retries:
					if self.retry_policy.retries:
						l.warning(fmt_log("req returned transient error; retries exhausted", context, status=res.status_code))
					return res
				l.debug(fmt_log("req returned transient error; retrying", context, status=res.status_code))
				wait = self.retry_policy.time_to_wait(attempt, res)

			attempt += 1
			time.sleep(wait)
