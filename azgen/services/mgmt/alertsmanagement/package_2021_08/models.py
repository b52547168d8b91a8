# pylint: disable
# flake8: noqa
"""Models for Azure Alerts Management Service Resource Provider 2021-08-08"""
from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, Dict, List, Optional, Union

from pydantic import Field

from azgen.core.enums import AzEnum
from azgen.core.models import AzModel, Page, ReadOnly, Rfc1123Datetime


class Field_(AzEnum):
	"""Field for a given condition."""

	Severity = "Severity"
	MonitorService = "MonitorService"
	MonitorCondition = "MonitorCondition"
	SignalType = "SignalType"
	TargetResourceType = "TargetResourceType"
	TargetResource = "TargetResource"
	TargetResourceGroup = "TargetResourceGroup"
	AlertRuleId = "AlertRuleId"
	AlertRuleName = "AlertRuleName"
	Description = "Description"
	AlertContext = "AlertContext"


class Operator(AzEnum):
	"""Operator for a given condition."""

	Equals = "Equals"
	NotEquals = "NotEquals"
	Contains = "Contains"
	DoesNotContain = "DoesNotContain"


class RecurrenceType(AzEnum):
	"""Specifies when the recurrence should be applied."""

	Daily = "Daily"
	Weekly = "Weekly"
	Monthly = "Monthly"


class ActionType(AzEnum):
	"""Action that should be applied."""

	AddActionGroups = "AddActionGroups"
	RemoveAllActionGroups = "RemoveAllActionGroups"


class CreatedByType(AzEnum):
	"""The type of identity that created the resource."""

	User = "User"
	Application = "Application"
	ManagedIdentity = "ManagedIdentity"
	Key = "Key"


class DaysOfWeek(AzEnum):
	"""Days of week."""

	Sunday = "Sunday"
	Monday = "Monday"
	Tuesday = "Tuesday"
	Wednesday = "Wednesday"
	Thursday = "Thursday"
	Friday = "Friday"
	Saturday = "Saturday"


class Severity(AzEnum):
	"""Severity of alert Sev0 being highest and Sev4 being lowest."""

	Sev0 = "Sev0"
	Sev1 = "Sev1"
	Sev2 = "Sev2"
	Sev3 = "Sev3"
	Sev4 = "Sev4"


class SignalType(AzEnum):
	"""The type of signal the alert is based on, which could be metrics, logs or activity logs."""

	Metric = "Metric"
	Log = "Log"
	Unknown = "Unknown"


class AlertState(AzEnum):
	"""Alert object state, which can be modified by the user."""

	New = "New"
	Acknowledged = "Acknowledged"
	Closed = "Closed"


class MonitorCondition(AzEnum):
	"""Condition of the rule at the monitor service. It represents whether the underlying conditions have crossed the defined alert rule thresholds."""

	Fired = "Fired"
	Resolved = "Resolved"


class MonitorService(AzEnum):
	"""Monitor service on which the rule(monitor) is set."""

	ApplicationInsights = "Application Insights"
	ActivityLogAdministrative = "ActivityLog Administrative"
	ActivityLogSecurity = "ActivityLog Security"
	ActivityLogRecommendation = "ActivityLog Recommendation"
	ActivityLogPolicy = "ActivityLog Policy"
	ActivityLogAutoscale = "ActivityLog Autoscale"
	LogAnalytics = "Log Analytics"
	Nagios = "Nagios"
	Platform = "Platform"
	SCOM = "SCOM"
	ServiceHealth = "ServiceHealth"
	SmartDetector = "SmartDetector"
	VMInsights = "VM Insights"
	Zabbix = "Zabbix"


class AlertModificationEvent(AzEnum):
	"""Reason for the modification"""

	AlertCreated = "AlertCreated"
	StateChange = "StateChange"
	MonitorConditionChange = "MonitorConditionChange"
	SeverityChange = "SeverityChange"
	ActionRuleTriggered = "ActionRuleTriggered"
	ActionRuleSuppressed = "ActionRuleSuppressed"
	ActionsTriggered = "ActionsTriggered"
	ActionsSuppressed = "ActionsSuppressed"
	ActionsFailed = "ActionsFailed"


class MetadataIdentifier(AzEnum):
	"""Identification of the information to be retrieved by API call"""

	MonitorServiceList = "MonitorServiceList"


class SmartGroupState(AzEnum):
	"""Smart group state"""

	New = "New"
	Acknowledged = "Acknowledged"
	Closed = "Closed"


class SmartGroupModificationEvent(AzEnum):
	"""Reason for the modification"""

	SmartGroupCreated = "SmartGroupCreated"
	StateChange = "StateChange"
	AlertAdded = "AlertAdded"
	AlertRemoved = "AlertRemoved"


class Resource(AzModel):
	"""An azure resource object"""

	rid: ReadOnly[str] = Field(alias="id", default=None)
	type_: ReadOnly[str] = Field(alias="type", default=None)
	name: ReadOnly[str] = None


class ManagedResource(Resource):
	"""An azure managed resource object."""

	location: str
	tags: Optional[Dict[str, str]] = None


class Condition(AzModel):
	"""Condition to trigger an alert processing rule."""

	field: Optional[Field_] = None
	operator: Optional[Operator] = None
	values: Optional[List[str]] = None


class Recurrence(AzModel):
	"""Recurrence object."""

	recurrence_type: RecurrenceType = Field(alias="recurrenceType")
	start_time: Optional[str] = Field(alias="startTime", default=None)
	end_time: Optional[str] = Field(alias="endTime", default=None)


class Schedule(AzModel):
	"""Scheduling configuration for a given alert processing rule."""

	effective_from: Optional[str] = Field(alias="effectiveFrom", default=None)
	effective_until: Optional[str] = Field(alias="effectiveUntil", default=None)
	time_zone: Optional[str] = Field(alias="timeZone", default=None)
	recurrences: Optional[List[Recurrence]] = None


class Action(AzModel):
	"""Action to be applied."""

	action_type: ActionType = Field(alias="actionType")


class AlertProcessingRuleProperties(AzModel):
	"""Alert processing rule properties defining scopes, conditions and scheduling logic for alert processing rule."""

	scopes: Scopes
	conditions: Optional[Conditions] = None
	schedule: Optional[Schedule] = None
	actions: List[Action]
	description: Optional[str] = None
	enabled: Optional[bool] = None


class SystemData(AzModel):
	"""Metadata pertaining to creation and last modification of the resource."""

	created_by: Optional[str] = Field(alias="createdBy", default=None)
	created_by_type: Optional[CreatedByType] = Field(alias="createdByType", default=None)
	created_at: Optional[datetime] = Field(alias="createdAt", default=None)
	last_modified_by: Optional[str] = Field(alias="lastModifiedBy", default=None)
	last_modified_by_type: Optional[CreatedByType] = Field(alias="lastModifiedByType", default=None)
	last_modified_at: Optional[datetime] = Field(alias="lastModifiedAt", default=None)


class AlertProcessingRule(ManagedResource):
	"""Alert processing rule object containing target scopes, conditions and scheduling logic."""

	properties: Optional[AlertProcessingRuleProperties] = None
	system_data: ReadOnly[SystemData] = Field(alias="systemData", default=None)


class AlertProcessingRulesList(Page):
	"""List of alert processing rules."""

	next_link_field: ClassVar[Optional[str]] = "next_link"
	item_field: ClassVar[str] = "value"

	next_link: Optional[str] = Field(alias="nextLink", default=None)
	value: Optional[List[AlertProcessingRule]] = None


class AddActionGroups(Action):
	"""Add action groups to alert processing rule."""

	action_group_ids: List[str] = Field(alias="actionGroupIds")


class RemoveAllActionGroups(Action):
	"""Indicates if all action groups should be removed."""


class DailyRecurrence(Recurrence):
	"""Daily recurrence object."""


class WeeklyRecurrence(Recurrence):
	"""Weekly recurrence object."""

	days_of_week: List[DaysOfWeek] = Field(alias="daysOfWeek")


class MonthlyRecurrence(Recurrence):
	"""Monthly recurrence object."""

	days_of_month: List[int] = Field(alias="daysOfMonth")


class PatchProperties(AzModel):
	"""Alert processing rule properties supported by patch."""

	enabled: Optional[bool] = None


class PatchObject(AzModel):
	"""Data contract for patch."""

	properties: Optional[PatchProperties] = None
	tags: Optional[Dict[str, str]] = None


class ErrorResponseBody(AzModel):
	"""Details of error response."""

	code: Optional[str] = None
	message: Optional[str] = None
	target: Optional[str] = None
	details: Optional[List[ErrorResponseBody]] = None


class ErrorResponse(AzModel):
	"""An error response from the service."""

	error: Optional[ErrorResponseBody] = None


class OperationDisplay(AzModel):
	"""Properties of the operation"""

	provider: Optional[str] = None
	resource: Optional[str] = None
	operation: Optional[str] = None
	description: Optional[str] = None


class Operation(AzModel):
	"""Operation provided by provider"""

	name: Optional[str] = None
	display: Optional[OperationDisplay] = None
	origin: Optional[str] = None


class OperationsList(Page):
	"""Lists the operations available in the AlertsManagement RP."""

	next_link_field: ClassVar[Optional[str]] = "next_link"
	item_field: ClassVar[str] = "value"

	next_link: Optional[str] = Field(alias="nextLink", default=None)
	value: List[Operation]


class ActionStatus(AzModel):
	"""Action status"""

	is_suppressed: Optional[bool] = Field(alias="isSuppressed", default=None)


class Essentials(AzModel):
	"""This object contains consistent fields across different monitor services."""

	severity: ReadOnly[Severity] = None
	signal_type: ReadOnly[SignalType] = Field(alias="signalType", default=None)
	alert_state: ReadOnly[AlertState] = Field(alias="alertState", default=None)
	monitor_condition: ReadOnly[MonitorCondition] = Field(alias="monitorCondition", default=None)
	target_resource: Optional[str] = Field(alias="targetResource", default=None)
	target_resource_name: Optional[str] = Field(alias="targetResourceName", default=None)
	target_resource_group: Optional[str] = Field(alias="targetResourceGroup", default=None)
	target_resource_type: Optional[str] = Field(alias="targetResourceType", default=None)
	monitor_service: ReadOnly[MonitorService] = Field(alias="monitorService", default=None)
	alert_rule: ReadOnly[str] = Field(alias="alertRule", default=None)
	source_created_id: ReadOnly[str] = Field(alias="sourceCreatedId", default=None)
	smart_group_id: ReadOnly[str] = Field(alias="smartGroupId", default=None)
	smart_grouping_reason: ReadOnly[str] = Field(alias="smartGroupingReason", default=None)
	start_date_time: ReadOnly[datetime] = Field(alias="startDateTime", default=None)
	last_modified_date_time: ReadOnly[datetime] = Field(alias="lastModifiedDateTime", default=None)
	monitor_condition_resolved_date_time: ReadOnly[datetime] = Field(alias="monitorConditionResolvedDateTime", default=None)
	last_modified_user_name: ReadOnly[str] = Field(alias="lastModifiedUserName", default=None)
	action_status: Optional[ActionStatus] = Field(alias="actionStatus", default=None)
	description: Optional[str] = None


class AlertProperties(AzModel):
	"""Alert property bag"""

	essentials: Optional[Essentials] = None
	context: ReadOnly[AlertContext] = None
	egress_config: ReadOnly[EgressConfig] = Field(alias="egressConfig", default=None)


class Alert(Resource):
	"""An alert created in alert management service."""

	properties: Optional[AlertProperties] = None


class AlertsList(Page):
	"""List the alerts."""

	next_link_field: ClassVar[Optional[str]] = "next_link"
	item_field: ClassVar[str] = "value"

	next_link: Optional[str] = Field(alias="nextLink", default=None)
	value: Optional[List[Alert]] = None


class AlertModificationItem(AzModel):
	"""Alert modification item."""

	modification_event: Optional[AlertModificationEvent] = Field(alias="modificationEvent", default=None)
	old_value: Optional[str] = Field(alias="oldValue", default=None)
	new_value: Optional[str] = Field(alias="newValue", default=None)
	modified_at: Optional[str] = Field(alias="modifiedAt", default=None)
	modified_by: Optional[str] = Field(alias="modifiedBy", default=None)
	comments: Optional[str] = None
	description: Optional[str] = None


class AlertModificationProperties(AzModel):
	"""Properties of the alert modification item."""

	alert_id: ReadOnly[str] = Field(alias="alertId", default=None)
	modifications: Optional[List[AlertModificationItem]] = None


class AlertModification(Resource):
	"""Alert Modification details"""

	properties: Optional[AlertModificationProperties] = None


class AlertsMetaDataProperties(AzModel):
	"""alert meta data property bag"""

	metadata_identifier: MetadataIdentifier = Field(alias="metadataIdentifier")


class AlertsMetaData(AzModel):
	"""alert meta data information."""

	properties: Optional[AlertsMetaDataProperties] = None


class MonitorServiceDetails(AzModel):
	"""Details of a monitor service"""

	name: Optional[str] = None
	display_name: Optional[str] = Field(alias="displayName", default=None)


class MonitorServiceList(AlertsMetaDataProperties):
	"""Monitor service details"""

	data: List[MonitorServiceDetails]


class AlertsSummaryGroupItem(AzModel):
	"""Alerts summary group item"""

	name: Optional[str] = None
	count: Optional[int] = None
	groupedby: Optional[str] = None
	values: Optional[List[AlertsSummaryGroupItem]] = None


class AlertsSummaryGroup(AzModel):
	"""Group the result set."""

	total: Optional[int] = None
	smart_groups_count: Optional[int] = Field(alias="smartGroupsCount", default=None)
	groupedby: Optional[str] = None
	values: Optional[List[AlertsSummaryGroupItem]] = None


class AlertsSummary(Resource):
	"""Summary of alerts based on the input filters and 'groupby' parameters."""

	properties: Optional[AlertsSummaryGroup] = None


class SmartGroupAggregatedProperty(AzModel):
	"""Aggregated property of each type"""

	name: Optional[str] = None
	count: Optional[int] = None


class SmartGroupProperties(AzModel):
	"""Properties of smart group."""

	alerts_count: Optional[int] = Field(alias="alertsCount", default=None)
	smart_group_state: ReadOnly[SmartGroupState] = Field(alias="smartGroupState", default=None)
	severity: ReadOnly[Severity] = None
	start_date_time: ReadOnly[datetime] = Field(alias="startDateTime", default=None)
	last_modified_date_time: ReadOnly[datetime] = Field(alias="lastModifiedDateTime", default=None)
	last_modified_user_name: ReadOnly[str] = Field(alias="lastModifiedUserName", default=None)
	resources: Optional[List[SmartGroupAggregatedProperty]] = None
	resource_types: Optional[List[SmartGroupAggregatedProperty]] = Field(alias="resourceTypes", default=None)
	resource_groups: Optional[List[SmartGroupAggregatedProperty]] = Field(alias="resourceGroups", default=None)
	monitor_services: Optional[List[SmartGroupAggregatedProperty]] = Field(alias="monitorServices", default=None)
	monitor_conditions: Optional[List[SmartGroupAggregatedProperty]] = Field(alias="monitorConditions", default=None)
	alert_states: Optional[List[SmartGroupAggregatedProperty]] = Field(alias="alertStates", default=None)
	alert_severities: Optional[List[SmartGroupAggregatedProperty]] = Field(alias="alertSeverities", default=None)
	next_link: Optional[str] = Field(alias="nextLink", default=None)


class SmartGroup(Resource):
	"""Set of related alerts grouped together smartly by AMS."""

	properties: Optional[SmartGroupProperties] = None


class SmartGroupsList(Page):
	"""List the alerts."""

	next_link_field: ClassVar[Optional[str]] = "next_link"
	item_field: ClassVar[str] = "value"

	next_link: Optional[str] = Field(alias="nextLink", default=None)
	value: Optional[List[SmartGroup]] = None


class SmartGroupModificationItem(AzModel):
	"""smartGroup modification item."""

	modification_event: Optional[SmartGroupModificationEvent] = Field(alias="modificationEvent", default=None)
	old_value: Optional[str] = Field(alias="oldValue", default=None)
	new_value: Optional[str] = Field(alias="newValue", default=None)
	modified_at: Optional[str] = Field(alias="modifiedAt", default=None)
	modified_by: Optional[str] = Field(alias="modifiedBy", default=None)
	comments: Optional[str] = None
	description: Optional[str] = None


class SmartGroupModificationProperties(AzModel):
	"""Properties of the smartGroup modification item."""

	smart_group_id: ReadOnly[str] = Field(alias="smartGroupId", default=None)
	modifications: Optional[List[SmartGroupModificationItem]] = None
	next_link: Optional[str] = Field(alias="nextLink", default=None)


class SmartGroupModification(Resource):
	"""Alert Modification details"""

	properties: Optional[SmartGroupModificationProperties] = None


Scopes = List[str]


Conditions = List[Condition]


AlertContext = Dict[str, Any]


EgressConfig = Dict[str, Any]


Resource.model_rebuild()
ManagedResource.model_rebuild()
Condition.model_rebuild()
Recurrence.model_rebuild()
Schedule.model_rebuild()
Action.model_rebuild()
AlertProcessingRuleProperties.model_rebuild()
SystemData.model_rebuild()
AlertProcessingRule.model_rebuild()
AlertProcessingRulesList.model_rebuild()
AddActionGroups.model_rebuild()
RemoveAllActionGroups.model_rebuild()
DailyRecurrence.model_rebuild()
WeeklyRecurrence.model_rebuild()
MonthlyRecurrence.model_rebuild()
PatchProperties.model_rebuild()
PatchObject.model_rebuild()
ErrorResponseBody.model_rebuild()
ErrorResponse.model_rebuild()
OperationDisplay.model_rebuild()
Operation.model_rebuild()
OperationsList.model_rebuild()
ActionStatus.model_rebuild()
Essentials.model_rebuild()
AlertProperties.model_rebuild()
Alert.model_rebuild()
AlertsList.model_rebuild()
AlertModificationItem.model_rebuild()
AlertModificationProperties.model_rebuild()
AlertModification.model_rebuild()
AlertsMetaDataProperties.model_rebuild()
AlertsMetaData.model_rebuild()
MonitorServiceDetails.model_rebuild()
MonitorServiceList.model_rebuild()
AlertsSummaryGroupItem.model_rebuild()
AlertsSummaryGroup.model_rebuild()
AlertsSummary.model_rebuild()
SmartGroupAggregatedProperty.model_rebuild()
SmartGroupProperties.model_rebuild()
SmartGroup.model_rebuild()
SmartGroupsList.model_rebuild()
SmartGroupModificationItem.model_rebuild()
SmartGroupModificationProperties.model_rebuild()
SmartGroupModification.model_rebuild()
