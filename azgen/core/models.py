"""Models shared by all generated Azure packages"""
from __future__ import annotations

import email.utils
from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer

from azgen.core.enums import AzEnum

Ret_T = TypeVar("Ret_T")
ReadOnly = Optional


def parse_rfc1123(value: Any) -> Any:
	"""Parse an RFC 1123 date, like `Fri, 01 Jan 2021 00:00:00 GMT`. Other values pass through to pydantic"""
	if not isinstance(value, str):
		return value
	try:
		return email.utils.parsedate_to_datetime(value)
	except (TypeError, ValueError) as e:
		raise ValueError(f"not an RFC 1123 date value={value!r}") from e


def format_rfc1123(value: datetime) -> str:
	"""Format a datetime as an RFC 1123 date. Naive datetimes are taken to be UTC"""
	if value.tzinfo is None:
		value = value.replace(tzinfo=timezone.utc)
	return email.utils.format_datetime(value.astimezone(timezone.utc), usegmt=True)


# a datetime which is sent and received in RFC 1123 format instead of ISO 8601
Rfc1123Datetime = Annotated[datetime, BeforeValidator(parse_rfc1123), PlainSerializer(format_rfc1123, return_type=str, when_used="json")]


class AzModel(BaseModel):
	"""Base for Azure request and response bodies"""

	model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

	def to_json(self) -> str:
		"""Serialise to the wire format, omitting absent fields"""
		return self.model_dump_json(exclude_none=True, by_alias=True, serialize_as_any=True)

	def to_dict(self) -> Dict[str, Any]:
		"""Serialise to JSON-compatible primitives, omitting absent fields"""
		return self.model_dump(mode="json", exclude_none=True, by_alias=True, serialize_as_any=True)


class Page(AzModel):
	"""
	A response which may be one of many pages

	`next_link_field` names the field holding the link to the next page.
	If it is None, the response is always the last page.
	"""

	next_link_field: ClassVar[Optional[str]] = None
	item_field: ClassVar[str] = "value"

	def continuation(self) -> Optional[str]:
		"""The link to the next page, if there is one"""
		if self.next_link_field is None:
			return None
		link = getattr(self, self.next_link_field, None)
		return link or None

	def page_items(self) -> List[Any]:
		"""The items in this page"""
		return getattr(self, self.item_field, None) or []


class AzList(Page, Generic[Ret_T]):
	"""A page of an Azure list result"""

	next_link_field: ClassVar[Optional[str]] = "next_link"

	value: List[Ret_T] = []
	next_link: Optional[str] = Field(alias="nextLink", default=None)


class ODataList(Page, Generic[Ret_T]):
	"""A page of an OData list result, as used by data-plane and Graph APIs"""

	next_link_field: ClassVar[Optional[str]] = "odata_next_link"

	value: List[Ret_T] = []
	odata_next_link: Optional[str] = Field(alias="@odata.nextLink", default=None)


class CreatedByType(AzEnum):
	"""The type of identity that created or modified the resource."""

	User = "User"
	Application = "Application"
	ManagedIdentity = "ManagedIdentity"
	Key = "Key"


class SystemData(AzModel):
	"""Metadata pertaining to creation and last modification of the resource."""

	created_by: Optional[str] = Field(alias="createdBy", default=None)
	created_by_type: Optional[CreatedByType] = Field(alias="createdByType", default=None)
	created_at: Optional[datetime] = Field(alias="createdAt", default=None)
	last_modified_by: Optional[str] = Field(alias="lastModifiedBy", default=None)
	last_modified_by_type: Optional[CreatedByType] = Field(alias="lastModifiedByType", default=None)
	last_modified_at: Optional[datetime] = Field(alias="lastModifiedAt", default=None)


class Resource(AzModel):
	"""Common fields that are returned in the response for all Azure Resource Manager resources"""

	rid: ReadOnly[str] = Field(alias="id", default=None)
	name: ReadOnly[str] = None
	type_: ReadOnly[str] = Field(alias="type", default=None)
	system_data: ReadOnly[SystemData] = Field(alias="systemData", default=None)


class TrackedResource(Resource):
	"""An Azure Resource Manager resource which has tags and a location"""

	location: str
	tags: Optional[Dict[str, str]] = None


class ProxyResource(Resource):
	"""An Azure Resource Manager resource which does not have tags or a location"""


class ErrorAdditionalInfo(AzModel):
	"""The resource management error additional info."""

	info_type: ReadOnly[str] = Field(alias="type", default=None)
	info: ReadOnly[Dict[str, Any]] = None


class ErrorDetail(AzModel):
	"""An Azure-specific error"""

	code: ReadOnly[str] = None
	message: ReadOnly[str] = None
	target: ReadOnly[str] = None
	details: List[ErrorDetail] = []
	additional_info: List[ErrorAdditionalInfo] = Field(alias="additionalInfo", default=[])


class ErrorResponse(AzModel):
	"""The container of an Azure error"""

	error: Optional[ErrorDetail] = None


ErrorDetail.model_rebuild()
