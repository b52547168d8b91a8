"""Tests for sending requests with retries"""
import pytest
import requests
from hypothesis import given
from hypothesis.strategies import integers

from azgen.core.conftest import FakeSession, mk_response
from azgen.core.pipeline import Context, Pipeline, RetryPolicy, TransportOptions, fmt_log

ctx = Context("Test_Get")
no_wait = RetryPolicy(retries=2, backoff=0)


def req() -> requests.Request:
	return requests.Request("GET", "https://management.azure.com/subscriptions")


class TestRetryPolicy:
	def test_exponential(self):
		policy = RetryPolicy(backoff=1, max_backoff=60)
		assert [policy.time_to_wait(i) for i in range(4)] == [1, 2, 4, 8]

	@given(integers(min_value=0, max_value=64))
	def test_capped(self, attempt):
		policy = RetryPolicy(backoff=1, max_backoff=10)
		assert policy.time_to_wait(attempt) <= 10

	def test_retry_after(self):
		res = mk_response(429, headers={"Retry-After": "7"})
		assert RetryPolicy().time_to_wait(0, res) == 7

	def test_retry_after_unparseable(self):
		res = mk_response(429, headers={"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"})
		assert RetryPolicy(backoff=0.5).time_to_wait(0, res) == 0.5


class TestPipeline:
	def test_user_agent(self):
		session = FakeSession([mk_response(200)])
		Pipeline(transport=TransportOptions(session=session), package="azgen-test", version="1.2.3").send(ctx, req())
		assert session.sent[0].headers["User-Agent"] == "azsdk-python-azgen-test/1.2.3"

	def test_transport_headers(self):
		session = FakeSession([mk_response(200)])
		Pipeline(transport=TransportOptions(session=session, headers={"x-ms-correlation-request-id": "c0"})).send(ctx, req())
		assert session.sent[0].headers["x-ms-correlation-request-id"] == "c0"

	def test_no_retry_by_default(self):
		session = FakeSession([mk_response(503), mk_response(200)])
		res = Pipeline(transport=TransportOptions(session=session)).send(ctx, req())
		assert res.status_code == 503
		assert len(session.sent) == 1

	def test_retries_transient_status(self):
		session = FakeSession([mk_response(503), mk_response(429), mk_response(200)])
		res = Pipeline(no_wait, TransportOptions(session=session)).send(ctx, req())
		assert res.status_code == 200
		assert len(session.sent) == 3

	def test_retries_exhausted_returns_last(self):
		session = FakeSession([mk_response(500), mk_response(500), mk_response(502)])
		res = Pipeline(no_wait, TransportOptions(session=session)).send(ctx, req())
		assert res.status_code == 502

	def test_does_not_retry_client_errors(self):
		session = FakeSession([mk_response(404), mk_response(200)])
		res = Pipeline(no_wait, TransportOptions(session=session)).send(ctx, req())
		assert res.status_code == 404
		assert len(session.sent) == 1

	def test_retries_connection_error(self):
		session = FakeSession([requests.ConnectionError("reset"), mk_response(200)])
		res = Pipeline(no_wait, TransportOptions(session=session)).send(ctx, req())
		assert res.status_code == 200

	def test_connection_error_exhausted(self):
		session = FakeSession([requests.ConnectionError("reset")] * 3)
		with pytest.raises(requests.ConnectionError):
			Pipeline(no_wait, TransportOptions(session=session)).send(ctx, req())
		assert len(session.sent) == 3

	def test_does_not_resend_post_after_connection_error(self):
		session = FakeSession([requests.ConnectionError("reset"), mk_response(200)])
		with pytest.raises(requests.ConnectionError):
			Pipeline(no_wait, TransportOptions(session=session)).send(ctx, requests.Request("POST", "https://management.azure.com/subscriptions/sub0/providers/Test/widgets/w0/restart"))
		assert len(session.sent) == 1

	def test_retries_post_connect_timeout(self):
		session = FakeSession([requests.exceptions.ConnectTimeout("timed out"), mk_response(200)])
		res = Pipeline(no_wait, TransportOptions(session=session)).send(ctx, requests.Request("POST", "https://management.azure.com/subscriptions/sub0/providers/Test/widgets/w0/restart"))
		assert res.status_code == 200
		assert len(session.sent) == 2

	def test_retries_post_transient_status(self):
		session = FakeSession([mk_response(503), mk_response(200)])
		res = Pipeline(no_wait, TransportOptions(session=session)).send(ctx, requests.Request("POST", "https://management.azure.com/subscriptions/sub0/providers/Test/widgets/w0/restart"))
		assert res.status_code == 200


class TestFmtLog:
	def test_fmt(self):
		assert fmt_log("making req", Context("Op_Get", 2), page=2) == "making req req=Op_Get page=2"

	def test_no_kwargs(self):
		assert fmt_log("done", ctx) == "done req=Test_Get"
