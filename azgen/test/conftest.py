import pytest

from azgen.test.credentials import load_credentials, load_secrets


@pytest.fixture()
def credentials():
	return load_credentials()


@pytest.fixture()
def it_info():
	"""Fixture: Bundle of config for integration tests"""
	return load_secrets()["azgen"]
