"""The integration fixtures can be collected without running integration tests"""

CONFTEST = """
from azgen.test.conftest import credentials, it_info  # noqa: F401
"""

TESTS = """
import pytest


@pytest.mark.integration
def test_needs_azure(credentials, it_info):
	assert credentials


def test_offline():
	assert True
"""


def test_deselect_integration(pytester):
	pytester.makeini("[pytest]\nmarkers =\n\tintegration: tests which reach Azure or the network\n")
	pytester.makeconftest(CONFTEST)
	pytester.makepyfile(test_fixtures=TESTS)

	result = pytester.runpytest_inprocess("-m", "not integration")

	result.assert_outcomes(passed=1, deselected=1)
