"""Errors raised while calling Azure"""
from __future__ import annotations

import logging
from typing import Mapping, Optional

import requests
from pydantic import ValidationError

from azgen.core.models import ErrorDetail, ErrorResponse

l = logging.getLogger(__name__)

HEADER_ERROR_CODE = "x-ms-error-code"


class AzureError(Exception):
	"""Base for errors raised by azgen clients"""


class HttpResponseError(AzureError):
	"""Azure responded with a status the operation does not expect"""

	def __init__(self, status: int, error_code: Optional[str] = None, error: Optional[ErrorDetail] = None, headers: Optional[Mapping[str, str]] = None):
		self.status = status
		self.error_code = error_code
		self.error = error
		self.headers = dict(headers or {})

		msg = f"unexpected status={status}"
		if error_code:
			msg += f" code={error_code}"
		if error and error.message:
			msg += f" message={error.message}"
		super().__init__(msg)

	@classmethod
	def from_response(cls, res: requests.Response) -> HttpResponseError:
		"""Build from a response, parsing the Azure error envelope if the body has one"""
		error = None
		if res.content:
			try:
				error = ErrorResponse.model_validate_json(res.content).error
			except ValidationError:
				l.debug(f"error body could not be deserialised status={res.status_code}")

		error_code = res.headers.get(HEADER_ERROR_CODE)
		if not error_code and error:
			error_code = error.code
		return cls(res.status_code, error_code, error, res.headers)


class UrlError(AzureError):
	"""A request URL could not be built"""

	def __init__(self, url: str, reason: str):
		self.url = url
		self.reason = reason
		super().__init__(f"invalid url={url} reason={reason}")


class DeserialiseError(AzureError):
	"""A response with an expected status did not have the expected shape"""

	def __init__(self, status: int, expected: str, cause: ValidationError):
		self.status = status
		self.expected = expected
		self.cause = cause
		super().__init__(f"could not deserialise response status={status} expected={expected}")
