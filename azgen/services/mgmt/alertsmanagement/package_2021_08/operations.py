# pylint: disable
# flake8: noqa
"""Operations for Azure Alerts Management Service Resource Provider 2021-08-08"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from azgen.core import ops
from azgen.core.models import format_rfc1123

from .models import *


class AlertProcessingRulesListBySubscription(ops.PagedOperation[AlertProcessingRulesList]):
	"""List all alert processing rules in a subscription."""

	operation_id = "AlertProcessingRules_ListBySubscription"
	http_method = "GET"
	path_template = "/subscriptions/{subscriptionId}/providers/Microsoft.AlertsManagement/actionRules"
	api_version = "2021-08-08"
	responses = {200: AlertProcessingRulesList}


class AlertProcessingRulesListByResourceGroup(ops.PagedOperation[AlertProcessingRulesList]):
	"""List all alert processing rules in a resource group."""

	operation_id = "AlertProcessingRules_ListByResourceGroup"
	http_method = "GET"
	path_template = "/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.AlertsManagement/actionRules"
	api_version = "2021-08-08"
	responses = {200: AlertProcessingRulesList}


class AlertProcessingRulesGetByName(ops.Operation[AlertProcessingRule]):
	"""Get an alert processing rule by name."""

	operation_id = "AlertProcessingRules_GetByName"
	http_method = "GET"
	path_template = "/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.AlertsManagement/actionRules/{alertProcessingRuleName}"
	api_version = "2021-08-08"
	responses = {200: AlertProcessingRule}


class AlertProcessingRulesCreateOrUpdate(ops.Operation[ops.Outcome[AlertProcessingRule]]):
	"""Create or update an alert processing rule."""

	operation_id = "AlertProcessingRules_CreateOrUpdate"
	http_method = "PUT"
	path_template = "/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.AlertsManagement/actionRules/{alertProcessingRuleName}"
	api_version = "2021-08-08"
	responses = {200: AlertProcessingRule, 201: AlertProcessingRule}


class AlertProcessingRulesDelete(ops.Operation[ops.Outcome[None]]):
	"""Delete an alert processing rule."""

	operation_id = "AlertProcessingRules_Delete"
	http_method = "DELETE"
	path_template = "/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.AlertsManagement/actionRules/{alertProcessingRuleName}"
	api_version = "2021-08-08"
	responses = {200: None, 204: None}


class AlertProcessingRulesUpdate(ops.Operation[AlertProcessingRule]):
	"""Enable, disable, or update tags for an alert processing rule."""

	operation_id = "AlertProcessingRules_Update"
	http_method = "PATCH"
	path_template = "/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.AlertsManagement/actionRules/{alertProcessingRuleName}"
	api_version = "2021-08-08"
	responses = {200: AlertProcessingRule}


class OperationsListOp(ops.PagedOperation[OperationsList]):
	"""List all operations available through Azure Alerts Management Resource Provider."""

	operation_id = "Operations_List"
	http_method = "GET"
	path_template = "/providers/Microsoft.AlertsManagement/operations"
	api_version = "2019-05-05-preview"
	responses = {200: OperationsList}


class AlertsMetaDataOp(ops.Operation[AlertsMetaData]):
	"""List alerts meta data information based on value of identifier parameter."""

	operation_id = "Alerts_MetaData"
	http_method = "GET"
	path_template = "/providers/Microsoft.AlertsManagement/alertsMetaData"
	api_version = "2019-05-05-preview"
	responses = {200: AlertsMetaData}


class AlertsGetAll(ops.PagedOperation[AlertsList]):
	"""List all existing alerts, where the results can be filtered on the basis of multiple parameters (e.g. time range). The results can then be sorted on the basis specific fields, with the default being lastModifiedDateTime."""

	operation_id = "Alerts_GetAll"
	http_method = "GET"
	path_template = "/subscriptions/{subscriptionId}/providers/Microsoft.AlertsManagement/alerts"
	api_version = "2019-05-05-preview"
	responses = {200: AlertsList}

	def target_resource(self, value: str) -> AlertsGetAll:
		"""Filter by target resource( which is full ARM ID) Default value is select all."""
		return self.add_param("targetResource", value)

	def target_resource_type(self, value: str) -> AlertsGetAll:
		"""Filter by target resource type. Default value is select all."""
		return self.add_param("targetResourceType", value)

	def target_resource_group(self, value: str) -> AlertsGetAll:
		"""Filter by target resource group name. Default value is select all."""
		return self.add_param("targetResourceGroup", value)

	def monitor_service(self, value: str) -> AlertsGetAll:
		"""Filter by monitor service which generates the alert instance. Default value is select all."""
		return self.add_param("monitorService", value)

	def monitor_condition(self, value: str) -> AlertsGetAll:
		"""Filter by monitor condition which is either 'Fired' or 'Resolved'. Default value is to select all."""
		return self.add_param("monitorCondition", value)

	def severity(self, value: str) -> AlertsGetAll:
		"""Filter by severity.  Default value is select all."""
		return self.add_param("severity", value)

	def alert_state(self, value: str) -> AlertsGetAll:
		"""Filter by state of the alert instance. Default value is to select all."""
		return self.add_param("alertState", value)

	def alert_rule(self, value: str) -> AlertsGetAll:
		"""Filter by specific alert rule.  Default value is to select all."""
		return self.add_param("alertRule", value)

	def smart_group_id(self, value: str) -> AlertsGetAll:
		"""Filter the alerts list by the Smart Group Id. Default value is none."""
		return self.add_param("smartGroupId", value)

	def include_context(self, value: bool) -> AlertsGetAll:
		"""Include context which has contextual data specific to the monitor service. Default value is false'"""
		return self.add_param("includeContext", value)

	def include_egress_config(self, value: bool) -> AlertsGetAll:
		"""Include egress config which would be used for displaying the content in portal.  Default value is 'false'."""
		return self.add_param("includeEgressConfig", value)

	def page_count(self, value: int) -> AlertsGetAll:
		"""Determines number of alerts returned per page in response. Permissible value is between 1 to 250. When the \"includeContent\"  filter is selected, maximum value allowed is 25. Default value is 25."""
		return self.add_param("pageCount", value)

	def sort_by(self, value: str) -> AlertsGetAll:
		"""Sort the query results by input field,  Default value is 'lastModifiedDateTime'."""
		return self.add_param("sortBy", value)

	def sort_order(self, value: str) -> AlertsGetAll:
		"""Sort the query results order in either ascending or descending.  Default value is 'desc' for time fields and 'asc' for others."""
		return self.add_param("sortOrder", value)

	def select(self, value: str) -> AlertsGetAll:
		"""This filter allows to selection of the fields(comma separated) which would  be part of the essential section. This would allow to project only the  required fields rather than getting entire content.  Default is to fetch all the fields in the essentials section."""
		return self.add_param("select", value)

	def time_range(self, value: str) -> AlertsGetAll:
		"""Filter by time range by below listed values. Default value is 1 day."""
		return self.add_param("timeRange", value)

	def custom_time_range(self, value: str) -> AlertsGetAll:
		"""Filter by custom time range in the format <start-time>/<end-time>  where time is in (ISO-8601 format)'. Permissible values is within 30 days from  query time. Either timeRange or customTimeRange could be used but not both. Default is none."""
		return self.add_param("customTimeRange", value)


class AlertsGetById(ops.Operation[Alert]):
	"""Get information related to a specific alert"""

	operation_id = "Alerts_GetById"
	http_method = "GET"
	path_template = "/subscriptions/{subscriptionId}/providers/Microsoft.AlertsManagement/alerts/{alertId}"
	api_version = "2019-05-05-preview"
	responses = {200: Alert}


class AlertsChangeState(ops.Operation[Alert]):
	"""Change the state of an alert."""

	operation_id = "Alerts_ChangeState"
	http_method = "POST"
	path_template = "/subscriptions/{subscriptionId}/providers/Microsoft.AlertsManagement/alerts/{alertId}/changestate"
	api_version = "2019-05-05-preview"
	responses = {200: Alert}

	def comment(self, value: str) -> AlertsChangeState:
		"""reason of change alert state"""
		return self.with_body(value)


class AlertsGetHistory(ops.Operation[AlertModification]):
	"""Get the history of an alert, which captures any monitor condition changes (Fire/Resolve) and alert state changes (New/Acknowledged/Closed)."""

	operation_id = "Alerts_GetHistory"
	http_method = "GET"
	path_template = "/subscriptions/{subscriptionId}/providers/Microsoft.AlertsManagement/alerts/{alertId}/history"
	api_version = "2019-05-05-preview"
	responses = {200: AlertModification}


class AlertsGetSummary(ops.Operation[AlertsSummary]):
	"""Get a summarized count of your alerts grouped by various parameters (e.g. grouping by 'Severity' returns the count of alerts for each severity)."""

	operation_id = "Alerts_GetSummary"
	http_method = "GET"
	path_template = "/subscriptions/{subscriptionId}/providers/Microsoft.AlertsManagement/alertsSummary"
	api_version = "2019-05-05-preview"
	responses = {200: AlertsSummary}

	def include_smart_groups_count(self, value: bool) -> AlertsGetSummary:
		"""Include count of the SmartGroups as part of the summary. Default value is 'false'."""
		return self.add_param("includeSmartGroupsCount", value)

	def target_resource(self, value: str) -> AlertsGetSummary:
		"""Filter by target resource( which is full ARM ID) Default value is select all."""
		return self.add_param("targetResource", value)

	def target_resource_type(self, value: str) -> AlertsGetSummary:
		"""Filter by target resource type. Default value is select all."""
		return self.add_param("targetResourceType", value)

	def target_resource_group(self, value: str) -> AlertsGetSummary:
		"""Filter by target resource group name. Default value is select all."""
		return self.add_param("targetResourceGroup", value)

	def monitor_service(self, value: str) -> AlertsGetSummary:
		"""Filter by monitor service which generates the alert instance. Default value is select all."""
		return self.add_param("monitorService", value)

	def monitor_condition(self, value: str) -> AlertsGetSummary:
		"""Filter by monitor condition which is either 'Fired' or 'Resolved'. Default value is to select all."""
		return self.add_param("monitorCondition", value)

	def severity(self, value: str) -> AlertsGetSummary:
		"""Filter by severity.  Default value is select all."""
		return self.add_param("severity", value)

	def alert_state(self, value: str) -> AlertsGetSummary:
		"""Filter by state of the alert instance. Default value is to select all."""
		return self.add_param("alertState", value)

	def alert_rule(self, value: str) -> AlertsGetSummary:
		"""Filter by specific alert rule.  Default value is to select all."""
		return self.add_param("alertRule", value)

	def time_range(self, value: str) -> AlertsGetSummary:
		"""Filter by time range by below listed values. Default value is 1 day."""
		return self.add_param("timeRange", value)

	def custom_time_range(self, value: str) -> AlertsGetSummary:
		"""Filter by custom time range in the format <start-time>/<end-time>  where time is in (ISO-8601 format)'. Permissible values is within 30 days from  query time. Either timeRange or customTimeRange could be used but not both. Default is none."""
		return self.add_param("customTimeRange", value)


class SmartGroupsGetAll(ops.PagedOperation[SmartGroupsList]):
	"""List all the Smart Groups within a specified subscription."""

	operation_id = "SmartGroups_GetAll"
	http_method = "GET"
	path_template = "/subscriptions/{subscriptionId}/providers/Microsoft.AlertsManagement/smartGroups"
	api_version = "2019-05-05-preview"
	responses = {200: SmartGroupsList}

	def target_resource(self, value: str) -> SmartGroupsGetAll:
		"""Filter by target resource( which is full ARM ID) Default value is select all."""
		return self.add_param("targetResource", value)

	def target_resource_group(self, value: str) -> SmartGroupsGetAll:
		"""Filter by target resource group name. Default value is select all."""
		return self.add_param("targetResourceGroup", value)

	def target_resource_type(self, value: str) -> SmartGroupsGetAll:
		"""Filter by target resource type. Default value is select all."""
		return self.add_param("targetResourceType", value)

	def monitor_service(self, value: str) -> SmartGroupsGetAll:
		"""Filter by monitor service which generates the alert instance. Default value is select all."""
		return self.add_param("monitorService", value)

	def monitor_condition(self, value: str) -> SmartGroupsGetAll:
		"""Filter by monitor condition which is either 'Fired' or 'Resolved'. Default value is to select all."""
		return self.add_param("monitorCondition", value)

	def severity(self, value: str) -> SmartGroupsGetAll:
		"""Filter by severity.  Default value is select all."""
		return self.add_param("severity", value)

	def smart_group_state(self, value: str) -> SmartGroupsGetAll:
		"""Filter by state of the smart group. Default value is to select all."""
		return self.add_param("smartGroupState", value)

	def time_range(self, value: str) -> SmartGroupsGetAll:
		"""Filter by time range by below listed values. Default value is 1 day."""
		return self.add_param("timeRange", value)

	def page_count(self, value: int) -> SmartGroupsGetAll:
		"""Determines number of alerts returned per page in response. Permissible value is between 1 to 250. When the \"includeContent\"  filter is selected, maximum value allowed is 25. Default value is 25."""
		return self.add_param("pageCount", value)

	def sort_by(self, value: str) -> SmartGroupsGetAll:
		"""Sort the query results by input field. Default value is sort by 'lastModifiedDateTime'."""
		return self.add_param("sortBy", value)

	def sort_order(self, value: str) -> SmartGroupsGetAll:
		"""Sort the query results order in either ascending or descending.  Default value is 'desc' for time fields and 'asc' for others."""
		return self.add_param("sortOrder", value)


class SmartGroupsGetById(ops.Operation[SmartGroup]):
	"""Get information related to a specific Smart Group."""

	operation_id = "SmartGroups_GetById"
	http_method = "GET"
	path_template = "/subscriptions/{subscriptionId}/providers/Microsoft.AlertsManagement/smartGroups/{smartGroupId}"
	api_version = "2019-05-05-preview"
	responses = {200: SmartGroup}


class SmartGroupsChangeState(ops.Operation[SmartGroup]):
	"""Change the state of a Smart Group."""

	operation_id = "SmartGroups_ChangeState"
	http_method = "POST"
	path_template = "/subscriptions/{subscriptionId}/providers/Microsoft.AlertsManagement/smartGroups/{smartGroupId}/changeState"
	api_version = "2019-05-05-preview"
	responses = {200: SmartGroup}


class SmartGroupsGetHistory(ops.Operation[SmartGroupModification]):
	"""Get the history a smart group, which captures any Smart Group state changes (New/Acknowledged/Closed) ."""

	operation_id = "SmartGroups_GetHistory"
	http_method = "GET"
	path_template = "/subscriptions/{subscriptionId}/providers/Microsoft.AlertsManagement/smartGroups/{smartGroupId}/history"
	api_version = "2019-05-05-preview"
	responses = {200: SmartGroupModification}
