"""Integration tests for the generated alerts management client"""
import random

# pylint: disable=redefined-outer-name
import pytest

from azgen.core.ops import Created201, Ok200
from azgen.core.pipeline import RetryPolicy
from azgen.services.mgmt.alertsmanagement.package_2021_08 import (
	ActionType,
	AlertProcessingRule,
	AlertProcessingRuleProperties,
	Client,
	ClientBuilder,
	MetadataIdentifier,
	PatchObject,
	PatchProperties,
	RemoveAllActionGroups,
)
from azgen.test.inspect import print_output


@pytest.fixture
def client(credentials) -> Client:
	return ClientBuilder(credentials).retry(RetryPolicy(retries=3)).build()


class TestAlertProcessingRules:
	def test_nothing(self):
		"""Prevent collection problems for partitions"""

	@pytest.mark.integration
	def test_list_by_subscription(self, client, it_info):
		sub = it_info["subscription"]
		rules = client.alert_processing_rules_client().list_by_subscription(sub).collect()
		print_output("rules", rules)
		assert all(isinstance(r, AlertProcessingRule) for r in rules)

	@pytest.mark.integration
	def test_lifecycle(self, client, it_info):
		"""Create, read, patch, and delete a rule"""
		sub, rg = it_info["subscription"], it_info["resource_group"]
		name = f"azgen-test-{random.randint(0, 65535)}"
		rules = client.alert_processing_rules_client()

		rule = AlertProcessingRule(
			location="Global",
			properties=AlertProcessingRuleProperties(
				scopes=[f"/subscriptions/{sub}/resourceGroups/{rg}"],
				actions=[RemoveAllActionGroups(action_type=ActionType.RemoveAllActionGroups)],
				description="created by the azgen integration tests",
			),
		)
		created = rules.create_or_update(sub, rg, name, rule).send()
		assert isinstance(created, (Created201, Ok200))
		try:
			got = rules.get_by_name(sub, rg, name).send()
			print_output("rule", got)
			assert got.name == name

			patched = rules.update(sub, rg, name, PatchObject(properties=PatchProperties(enabled=False))).send()
			assert patched.properties.enabled is False
		finally:
			rules.delete(sub, rg, name).send()


class TestOperations:
	def test_nothing(self):
		"""Prevent collection problems for partitions"""

	@pytest.mark.integration
	def test_list(self, client):
		operations = client.operations_client().list().collect()
		assert len(operations) > 0


class TestAlerts:
	def test_nothing(self):
		"""Prevent collection problems for partitions"""

	@pytest.mark.integration
	def test_get_all(self, client, it_info):
		sub = it_info["subscription"]
		alerts = client.alerts_client().get_all(sub).time_range("1d").page_count(25).collect()
		print_output("alerts", [a.rid for a in alerts])

	@pytest.mark.integration
	def test_summary(self, client, it_info):
		summary = client.alerts_client().get_summary(it_info["subscription"], "severity").send()
		assert summary.properties.groupedby == "severity"

	@pytest.mark.integration
	def test_meta_data(self, client):
		meta = client.alerts_client().meta_data("MonitorServiceList").send()
		assert meta.properties.metadata_identifier is MetadataIdentifier.MonitorServiceList


class TestSmartGroups:
	def test_nothing(self):
		"""Prevent collection problems for partitions"""

	@pytest.mark.integration
	def test_get_all(self, client, it_info):
		groups = client.smart_groups_client().get_all(it_info["subscription"]).collect()
		print_output("smart_groups", [g.rid for g in groups])
