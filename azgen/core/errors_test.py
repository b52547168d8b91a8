"""Tests for building errors from Azure responses"""
from azgen.core.conftest import mk_response
from azgen.core.errors import HttpResponseError, UrlError


class TestHttpResponseError:
	def test_structured_envelope(self):
		res = mk_response(404, {"error": {"code": "ResourceNotFound", "message": "The resource was not found"}})
		err = HttpResponseError.from_response(res)

		assert err.status == 404
		assert err.error_code == "ResourceNotFound"
		assert err.error is not None
		assert err.error.message == "The resource was not found"
		assert "ResourceNotFound" in str(err)

	def test_header_code_wins(self):
		res = mk_response(409, {"error": {"code": "BodyCode"}}, headers={"x-ms-error-code": "HeaderCode"})
		err = HttpResponseError.from_response(res)
		assert err.error_code == "HeaderCode"
		assert err.error is not None and err.error.code == "BodyCode"

	def test_unstructured_body(self):
		res = mk_response(502, b"<html>Bad Gateway</html>")
		err = HttpResponseError.from_response(res)
		assert err.status == 502
		assert err.error is None
		assert err.error_code is None

	def test_empty_body_uses_header(self):
		res = mk_response(403, headers={"x-ms-error-code": "AuthorizationFailed"})
		err = HttpResponseError.from_response(res)
		assert err.error is None
		assert err.error_code == "AuthorizationFailed"

	def test_json_without_envelope(self):
		err = HttpResponseError.from_response(mk_response(500, {"unrelated": True}))
		assert err.status == 500
		assert err.error is None


class TestUrlError:
	def test_message(self):
		err = UrlError("ftp://example.com", "unsupported scheme='ftp'")
		assert err.url == "ftp://example.com"
		assert "ftp://example.com" in str(err)
