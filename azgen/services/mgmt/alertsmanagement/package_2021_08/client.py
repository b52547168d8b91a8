# pylint: disable
# flake8: noqa
"""Client for Azure Alerts Management Service Resource Provider 2021-08-08"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from azgen.core.client import Client as AzClient
from azgen.core.client import ClientBuilder as AzClientBuilder
from azgen.core.client import SubClient
from azgen.core.models import format_rfc1123

from .models import *
from .operations import *


class AlertProcessingRulesClient(SubClient):
	"""Operations for AlertProcessingRules"""

	def list_by_subscription(self, subscription_id: str) -> AlertProcessingRulesListBySubscription:
		"""List all alert processing rules in a subscription."""
		return AlertProcessingRulesListBySubscription(
			self.client,
			path_params={"subscriptionId": subscription_id},
		)

	def list_by_resource_group(self, subscription_id: str, resource_group_name: str) -> AlertProcessingRulesListByResourceGroup:
		"""List all alert processing rules in a resource group."""
		return AlertProcessingRulesListByResourceGroup(
			self.client,
			path_params={"subscriptionId": subscription_id, "resourceGroupName": resource_group_name},
		)

	def get_by_name(self, subscription_id: str, resource_group_name: str, alert_processing_rule_name: str) -> AlertProcessingRulesGetByName:
		"""Get an alert processing rule by name."""
		return AlertProcessingRulesGetByName(
			self.client,
			path_params={"subscriptionId": subscription_id, "resourceGroupName": resource_group_name, "alertProcessingRuleName": alert_processing_rule_name},
		)

	def create_or_update(self, subscription_id: str, resource_group_name: str, alert_processing_rule_name: str, alert_processing_rule: AlertProcessingRule) -> AlertProcessingRulesCreateOrUpdate:
		"""Create or update an alert processing rule."""
		return AlertProcessingRulesCreateOrUpdate(
			self.client,
			path_params={"subscriptionId": subscription_id, "resourceGroupName": resource_group_name, "alertProcessingRuleName": alert_processing_rule_name},
			body=alert_processing_rule,
		)

	def delete(self, subscription_id: str, resource_group_name: str, alert_processing_rule_name: str) -> AlertProcessingRulesDelete:
		"""Delete an alert processing rule."""
		return AlertProcessingRulesDelete(
			self.client,
			path_params={"subscriptionId": subscription_id, "resourceGroupName": resource_group_name, "alertProcessingRuleName": alert_processing_rule_name},
		)

	def update(self, subscription_id: str, resource_group_name: str, alert_processing_rule_name: str, alert_processing_rule_patch: PatchObject) -> AlertProcessingRulesUpdate:
		"""Enable, disable, or update tags for an alert processing rule."""
		return AlertProcessingRulesUpdate(
			self.client,
			path_params={"subscriptionId": subscription_id, "resourceGroupName": resource_group_name, "alertProcessingRuleName": alert_processing_rule_name},
			body=alert_processing_rule_patch,
		)


class OperationsClient(SubClient):
	"""Operations for Operations"""

	def list(self) -> OperationsListOp:
		"""List all operations available through Azure Alerts Management Resource Provider."""
		return OperationsListOp(self.client)


class AlertsClient(SubClient):
	"""Operations for Alerts"""

	def meta_data(self, identifier: str) -> AlertsMetaDataOp:
		"""List alerts meta data information based on value of identifier parameter."""
		return AlertsMetaDataOp(
			self.client,
			params={"identifier": identifier},
		)

	def get_all(self, subscription_id: str) -> AlertsGetAll:
		"""List all existing alerts, where the results can be filtered on the basis of multiple parameters (e.g. time range). The results can then be sorted on the basis specific fields, with the default being lastModifiedDateTime."""
		return AlertsGetAll(
			self.client,
			path_params={"subscriptionId": subscription_id},
		)

	def get_by_id(self, subscription_id: str, alert_id: str) -> AlertsGetById:
		"""Get information related to a specific alert"""
		return AlertsGetById(
			self.client,
			path_params={"subscriptionId": subscription_id, "alertId": alert_id},
		)

	def change_state(self, subscription_id: str, alert_id: str, new_state: str) -> AlertsChangeState:
		"""Change the state of an alert."""
		return AlertsChangeState(
			self.client,
			path_params={"subscriptionId": subscription_id, "alertId": alert_id},
			params={"newState": new_state},
		)

	def get_history(self, subscription_id: str, alert_id: str) -> AlertsGetHistory:
		"""Get the history of an alert, which captures any monitor condition changes (Fire/Resolve) and alert state changes (New/Acknowledged/Closed)."""
		return AlertsGetHistory(
			self.client,
			path_params={"subscriptionId": subscription_id, "alertId": alert_id},
		)

	def get_summary(self, subscription_id: str, groupby: str) -> AlertsGetSummary:
		"""Get a summarized count of your alerts grouped by various parameters (e.g. grouping by 'Severity' returns the count of alerts for each severity)."""
		return AlertsGetSummary(
			self.client,
			path_params={"subscriptionId": subscription_id},
			params={"groupby": groupby},
		)


class SmartGroupsClient(SubClient):
	"""Operations for SmartGroups"""

	def get_all(self, subscription_id: str) -> SmartGroupsGetAll:
		"""List all the Smart Groups within a specified subscription."""
		return SmartGroupsGetAll(
			self.client,
			path_params={"subscriptionId": subscription_id},
		)

	def get_by_id(self, subscription_id: str, smart_group_id: str) -> SmartGroupsGetById:
		"""Get information related to a specific Smart Group."""
		return SmartGroupsGetById(
			self.client,
			path_params={"subscriptionId": subscription_id, "smartGroupId": smart_group_id},
		)

	def change_state(self, subscription_id: str, smart_group_id: str, new_state: str) -> SmartGroupsChangeState:
		"""Change the state of a Smart Group."""
		return SmartGroupsChangeState(
			self.client,
			path_params={"subscriptionId": subscription_id, "smartGroupId": smart_group_id},
			params={"newState": new_state},
		)

	def get_history(self, subscription_id: str, smart_group_id: str) -> SmartGroupsGetHistory:
		"""Get the history a smart group, which captures any Smart Group state changes (New/Acknowledged/Closed) ."""
		return SmartGroupsGetHistory(
			self.client,
			path_params={"subscriptionId": subscription_id, "smartGroupId": smart_group_id},
		)


class Client(AzClient):
	"""Client for Azure Alerts Management Service Resource Provider 2021-08-08"""

	def alert_processing_rules_client(self) -> AlertProcessingRulesClient:
		return AlertProcessingRulesClient(self)

	def operations_client(self) -> OperationsClient:
		return OperationsClient(self)

	def alerts_client(self) -> AlertsClient:
		return AlertsClient(self)

	def smart_groups_client(self) -> SmartGroupsClient:
		return SmartGroupsClient(self)


class ClientBuilder(AzClientBuilder):
	"""Configure a Client for Azure Alerts Management Service Resource Provider 2021-08-08"""

	client_cls = Client
	default_endpoint = "https://management.azure.com"
	package = "azgen-alertsmanagement"
	version = "2021-08-08"
