"""
OpenAPI code generator for Azure

Naming Conventions:
- OA* : OpenAPI things
- IR* : Intermediate Representation of things
- AZ* : Azure things, ready to be written out as Python
OA things are used to parse the OpenAPI spec.
IR things are used for reasoning about the Azure API.
AZ things know how to codegen themselves.
For example, AlertProcessingRulesList is an OA definition because it is present in the OpenAPI spec.
In the IR it is a definition which is also a page, because a pageable operation returns it.
Its AZ object is a model deriving from Page, which knows where its next link is.
"""
# pylint: disable=consider-using-f-string
from __future__ import annotations

import itertools
import json
import keyword
import logging
import re

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from textwrap import dedent, indent
from typing import Annotated, Any, ClassVar, Dict, List, Literal, Optional, Sequence, Tuple, Union

import click
import pydantic
import requests
from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, TypeAdapter

from azgen.core.client import DEFAULT_ENDPOINT

l = logging.getLogger(__name__)

API_VERSION = "api-version"
METHODS = ("get", "put", "post", "delete", "options", "head", "patch")
X_MS_ENUM = Path("x-ms-enum")  # named enums are shared between documents
RFC1123_T = "Rfc1123Datetime"  # sent and received as RFC 1123 strings

# names imported into generated modules, which definitions must not shadow
RESERVED_TYPENAMES = {
	"Any",
	"AzClient",
	"AzClientBuilder",
	"AzEnum",
	"AzModel",
	"ClassVar",
	"Client",
	"ClientBuilder",
	"Dict",
	"Field",
	"List",
	"Optional",
	"Page",
	"ReadOnly",
	"Rfc1123Datetime",
	"SubClient",
	"Union",
	"datetime",
}
# attributes of AzModel which fields must not shadow
RESERVED_FIELDNAMES = {
	"construct",
	"continuation",
	"copy",
	"dict",
	"from_orm",
	"item_field",
	"json",
	"next_link_field",
	"page_items",
	"parse_file",
	"parse_obj",
	"parse_raw",
	"schema",
	"schema_json",
	"to_dict",
	"to_json",
	"update_forward_refs",
	"validate",
}
# attributes of Client and SubClient which accessors must not shadow
RESERVED_METHODS = {"client", "credential", "endpoint", "pipeline", "scopes", "send", "token"}
# attributes of Operation which setters must not shadow
RESERVED_SETTERS = {
	"add_header",
	"add_param",
	"api_version",
	"body",
	"client",
	"collect",
	"context",
	"headers",
	"http_method",
	"items",
	"next_url",
	"operation_id",
	"pages",
	"params",
	"path_params",
	"path_template",
	"responses",
	"send",
	"to_request",
	"unencoded",
	"url",
	"with_body",
}


def mk_typename(typename: str) -> str:
	"""Make a name into a Python class name"""
	parts = [p for p in re.split(r"[^0-9a-zA-Z]+", typename) if p]
	name = "".join(p[0].upper() + p[1:] for p in parts)
	if not name or name[0].isdigit():
		name = "T" + name
	if name in RESERVED_TYPENAMES or keyword.iskeyword(name):
		name += "_"
	return name


def snake_case(s: str) -> str:
	"""camelCase and PascalCase to snake_case"""
	s = re.sub(r"[^0-9a-zA-Z]+", "_", s)
	s = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", s)
	s = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s)
	return s.strip("_").lower()


def _safe_identifier(name: str, reserved: Union[set, frozenset] = frozenset()) -> str:
	if not name:
		name = "field"
	if name[0].isdigit():
		name = "n" + name
	if keyword.iskeyword(name) or name in reserved or name.startswith("model_"):
		name += "_"
	return name


def mk_fieldname(name: str) -> str:
	"""Make a JSON property name into a Python field name"""
	field = snake_case(name)
	field = {"id": "rid", "type": "type_"}.get(field, field)
	return _safe_identifier(field, RESERVED_FIELDNAMES)


def mk_argname(name: str) -> str:
	"""Make a parameter name into a Python argument name"""
	return _safe_identifier(snake_case(name), {"self"})


def mk_membername(value: str) -> str:
	"""Make an enum value into a member name"""
	parts = [p for p in re.split(r"[^0-9a-zA-Z]+", value) if p]
	name = "".join(p[0].upper() + p[1:] for p in parts) or "Empty"
	if name[0].isdigit():
		name = "V" + name
	if keyword.iskeyword(name) or name == "UnknownValue":
		name += "_"
	return name


def split_operation_id(operation_id: str) -> Tuple[Optional[str], str]:
	"""Split an operationId into its group and name. Operations without a group belong to the Client"""
	if "_" not in operation_id:
		return None, operation_id
	group, name = operation_id.split("_", 1)
	return group, name


def dedupe(name: str, seen: set) -> str:
	"""Make a name unique by adding underscores"""
	while name in seen:
		name += "_"
	seen.add(name)
	return name


class PathLookupError(Exception):
	"""Could not look up an OpenAPI reference"""

	def __init__(self, object_path: str, segment: str):
		self.object_path = object_path
		super().__init__(f"Error while looking up path={object_path} segment={segment}")


class LoadError(Exception):
	"""Could not deserialise part of an OpenAPI document"""

	def __init__(self, path, obj):
		self.path = path
		self.obj = obj
		super().__init__(f"Error deserialising {path=} {obj=}")


class OARef(BaseModel):
	"""An OpenAPI reference"""

	model_config = ConfigDict(populate_by_name=True)

	ref: str = Field(alias="$ref")
	description: Optional[str] = None
	readOnly: bool = False

	@property
	def name(self) -> str:
		"""The name of this Definition"""
		return self.ref.split("/")[-1]


class OAMSEnum(BaseModel):
	"""MS Enum extension"""

	name: Optional[str] = None
	modelAsString: bool = True


class OAEnum(BaseModel):
	"""An OpenAPI string enum"""

	model_config = ConfigDict(populate_by_name=True)

	t: str = Field(alias="type", default="string")
	description: Optional[str] = None
	enum: List[Any]
	readOnly: bool = False
	ms_enum: Optional[OAMSEnum] = Field(alias="x-ms-enum", default=None)


class OADef(BaseModel):
	"""An OpenAPI definition"""

	model_config = ConfigDict(populate_by_name=True)

	class Array(BaseModel):
		"""An Array field of an OpenAPI definition"""

		model_config = ConfigDict(populate_by_name=True)

		t: Literal["array"] = Field(alias="type", default="array")
		items: Optional[OAObj] = None
		description: Optional[str] = None
		readOnly: bool = False

	class Property(BaseModel):
		"""A normal field of an OpenAPI definition"""

		model_config = ConfigDict(populate_by_name=True)

		t: Optional[str] = Field(alias="type", default=None)
		format: Optional[str] = None
		description: Optional[str] = None
		readOnly: bool = False
		additionalProperties: Union[bool, OAObj, None] = None

	properties: Dict[str, OAObj] = {}
	t: Optional[str] = Field(alias="type", default=None)
	description: Optional[str] = None
	readOnly: bool = False

	allOf: List[OAObj] = []
	required: List[str] = []


def schema_kind(v: Any) -> str:
	"""Classify a JSON schema so it is parsed into the right OA object"""
	if isinstance(v, dict):
		if "$ref" in v:
			return "ref"
		if "enum" in v and v.get("type", "string") == "string":
			return "enum"
		if v.get("type") == "array":
			return "array"
		if "properties" in v or "allOf" in v:
			return "def"
		return "property"
	return {OARef: "ref", OAEnum: "enum", OADef.Array: "array", OADef: "def"}.get(type(v), "property")


OAObj = Annotated[
	Union[
		Annotated[OARef, Tag("ref")],
		Annotated[OAEnum, Tag("enum")],
		Annotated[OADef.Array, Tag("array")],
		Annotated[OADef, Tag("def")],
		Annotated[OADef.Property, Tag("property")],
	],
	Discriminator(schema_kind),
]


class OAParam(BaseModel):
	"""A Param for an OpenAPI Operation"""

	model_config = ConfigDict(populate_by_name=True)

	name: str
	in_component: str = Field(alias="in")
	required: bool = False
	t: Optional[str] = Field(alias="type", default=None)
	format: Optional[str] = None
	description: Optional[str] = None
	oa_schema: Optional[OAObj] = Field(alias="schema", default=None)
	items: Optional[OAObj] = None
	skip_url_encoding: bool = Field(alias="x-ms-skip-url-encoding", default=False)


class OAResponse(BaseModel):
	"""A response for an OpenAPI Operation"""

	model_config = ConfigDict(populate_by_name=True)

	description: Optional[str] = None
	oa_schema: Optional[OAObj] = Field(alias="schema", default=None)


class OAMSPageable(BaseModel):
	"""MS Pageable extension"""

	nextLinkName: Optional[str] = None
	itemName: str = "value"


class OAOp(BaseModel):
	"""An OpenAPI Operation"""

	model_config = ConfigDict(populate_by_name=True)

	tags: List[str] = []
	operationId: str
	description: Optional[str] = None
	summary: Optional[str] = None
	parameters: List[Union[OARef, OAParam]] = []
	responses: Dict[str, OAResponse] = {}
	pageable: Optional[OAMSPageable] = Field(alias="x-ms-pageable", default=None)


class OAPath(BaseModel):
	"""An OpenAPI Path item"""

	parameters: List[Union[OARef, OAParam]] = []

	get: Optional[OAOp] = None
	put: Optional[OAOp] = None
	post: Optional[OAOp] = None
	delete: Optional[OAOp] = None
	options: Optional[OAOp] = None
	head: Optional[OAOp] = None
	patch: Optional[OAOp] = None

	def items(self) -> Sequence[Tuple[str, OAOp]]:
		return [(k, getattr(self, k)) for k in METHODS if getattr(self, k) is not None]


OADef.Array.model_rebuild()
OADef.Property.model_rebuild()
OADef.model_rebuild()
OAParam.model_rebuild()
OAResponse.model_rebuild()


class IR_T(BaseModel):
	"""
	An IR Type descriptor

	Strings are Python type expressions, either builtins or the names of generated definitions
	"""

	t: Union[IR_List, IR_Dict, str]
	readonly: bool = False
	required: bool = True


class IR_List(BaseModel):
	"""An IR descriptor for a List type"""

	items: IR_T


class IR_Dict(BaseModel):
	"""An IR descriptor for a Dict type, which always has str keys"""

	values: IR_T


class IRPage(BaseModel):
	"""Where a page keeps its items and the link to the next page. These are the JSON names"""

	next_link: Optional[str]
	items: str = "value"


class IRDef(BaseModel):
	"""An IR Definition"""

	name: str
	bases: List[str] = []
	properties: Dict[str, IR_T] = {}
	description: Optional[str] = None
	src: Optional[Path] = None
	page: Optional[IRPage] = None


class IR_Enum(BaseModel):
	"""An IR descriptor for an Enum"""

	name: str
	values: List[str]
	description: Optional[str] = None


class IRAlias(BaseModel):
	"""A definition which is only another name for a type, like a list of strings"""

	name: str
	t: IR_T
	description: Optional[str] = None


IRNamed = Union[IRDef, IR_Enum, IRAlias]


class ParamPosition(str, Enum):
	"""Where a parameter goes in the request"""

	path = "path"
	query = "query"
	header = "header"
	body = "body"


class IRParam(BaseModel):
	"""An IR Parameter"""

	name: str
	position: ParamPosition
	t: IR_T
	required: bool
	unencoded: bool = False
	description: Optional[str] = None


class IROp(BaseModel):
	"""An IR Operation"""

	operation_id: str
	group: Optional[str]
	name: str
	description: Optional[str]

	path: str
	method: str
	apiv: Optional[str]
	params: List[IRParam] = []
	responses: Dict[int, Optional[IR_T]]
	pageable: bool = False


IR_T.model_rebuild()
IR_List.model_rebuild()
IR_Dict.model_rebuild()


class Reader:
	"""Read Microsoft OpenAPI specifications"""

	def __init__(self, root: str, path: Path, openapi: dict, reader_cache: Dict[Path, Reader]):
		self.root = root
		self.path = path
		self.doc = openapi
		self.reader_cache = reader_cache

		self.reader_cache[path] = self

	@classmethod
	def load(cls, root: str, path: Path, reader_cache: Optional[Dict[Path, Reader]] = None) -> Reader:
		"""Load from a root uri and a path within it"""
		return cls._load_file(root, path, {} if reader_cache is None else reader_cache)

	@property
	def paths(self) -> dict:
		"""Get API paths (standard and ms xtended)"""
		paths = itertools.chain(self.doc.get("paths", {}).items(), self.doc.get("x-ms-paths", {}).items())
		return {k: v for k, v in paths if k.startswith("/")}

	@property
	def definitions(self) -> dict:
		"""The OpenAPI definition in this doc"""
		return self.doc.get("definitions", {})

	@property
	def apiv(self) -> str:
		"""Azure API version"""
		return self.doc["info"]["version"]

	@property
	def title(self) -> Optional[str]:
		return self.doc.get("info", {}).get("title")

	@property
	def endpoint(self) -> Optional[str]:
		"""The endpoint from the host of the document, if it has one"""
		host = self.doc.get("host")
		if not host:
			return None
		scheme = (self.doc.get("schemes") or ["https"])[0]
		return f"{scheme}://{host}"

	@staticmethod
	def classify_relative(relative: str) -> Tuple[Optional[Path], str, str]:
		"""Decompose an OpenAPI reference into its filepath, item type, and path inside that document"""
		file_path, object_path = relative.split("#")
		oa_type = object_path.split("/")[1]
		return Path(file_path) if file_path else None, oa_type, object_path

	@staticmethod
	def resolve_path(path: Path) -> Path:
		parts: List[str] = []
		for part in path.parts:
			if part == "..":
				if parts:
					parts.pop()
			elif part != ".":
				parts.append(part)
		return Path(*parts)

	def load_relative(self, relative: str) -> Tuple[Reader, dict]:
		"""Load an object from a relative path"""
		file_path, _, object_path = self.classify_relative(relative)

		if file_path:
			tgt = self.resolve_path(self.path.parent / file_path)
			if tgt in self.reader_cache:
				reader = self.reader_cache[tgt]
			else:
				reader = self._load_file(self.root, tgt, self.reader_cache)
		else:
			reader = self

		return reader, self._get_from_object_at_path(reader.doc, object_path)

	@staticmethod
	def _get_from_object_at_path(file: dict, object_path: str) -> dict:
		"""Load an object from a path in a different file"""
		try:
			o = file
			for segment in object_path.split("/"):
				if segment:  # escape empty segments
					o = o[segment]
			return o
		except KeyError as e:
			raise PathLookupError(object_path, e.args[0])
		except TypeError:
			raise PathLookupError(object_path, "???")

	@staticmethod
	def _load_file(root: str, file_path: Path, reader_cache: Dict[Path, Reader]) -> Reader:
		"""Load the contents of a file"""
		l.info(f"loading openapi file={file_path}")
		if root.startswith("https://") or root.startswith("http://"):
			res = requests.get(root + file_path.as_posix(), timeout=60)
			res.raise_for_status()
			content = res.content.decode("utf-8")
		elif root.startswith("file://"):
			file_root = root.split("://")[1]
			with (Path(file_root) / file_path).open(mode="r", encoding="utf-8") as fp:
				content = fp.read()
		else:
			scheme = root.split("://")[0]
			raise ValueError(f"unknown uri scheme scheme={scheme}")
		loaded = json.loads(content)

		return Reader(root, file_path, loaded, reader_cache)


class RefCache:
	"""
	The Python names given to definitions

	A name is claimed before its definition is transformed,
	so recursive definitions can reference themselves.
	"""

	@dataclass(frozen=True)
	class Ref:
		path: Path
		object_path: str

	def __init__(self):
		self.cache: Dict[RefCache.Ref, str] = {}
		self.taken: Dict[str, RefCache.Ref] = {}

	def __getitem__(self, ref: Ref) -> Optional[str]:
		return self.cache.get(ref)

	def __contains__(self, ref: Ref) -> bool:
		return ref in self.cache

	def claim(self, ref: Ref, name: str) -> str:
		"""Claim a name for a definition. Definitions from different places with the same name are numbered"""
		candidate = name
		i = 1
		while candidate in self.taken and self.taken[candidate] != ref:
			i += 1
			candidate = f"{name}{i}"
		self.taken[candidate] = ref
		self.cache[ref] = candidate
		return candidate


class JSONSchemaSubparser:
	"""Transform JSONSchema items into the IR, registering every named type it finds"""

	oaparser: ClassVar[TypeAdapter] = TypeAdapter(OAObj)

	def __init__(self, openapi: Reader, refcache: RefCache, definitions: Dict[str, IRNamed]):
		self.openapi = openapi
		self.refcache = refcache
		self.definitions = definitions

	@staticmethod
	def _is_full_inherit(obj: OADef) -> bool:
		return not obj.properties and len(obj.allOf) == 1 and isinstance(obj.allOf[0], OARef)

	def resolve_reference(self, ref: OARef) -> str:
		"""Transform the definition a reference points to, returning its Python name"""
		reader, resolved = self.openapi.load_relative(ref.ref)
		_, _, object_path = Reader.classify_relative(ref.ref)
		cache_ref = RefCache.Ref(reader.path, object_path)
		if cache_ref in self.refcache:
			return self.refcache[cache_ref]

		name = self.refcache.claim(cache_ref, mk_typename(ref.name))
		try:
			loaded = self.oaparser.validate_python(resolved)
		except pydantic.ValidationError as e:
			raise LoadError(reader.path, object_path) from e

		JSONSchemaSubparser(reader, self.refcache, self.definitions).transform_definition(name, loaded)
		return name

	def _claim_inline(self, name: str, key: str, path: Optional[Path] = None) -> Tuple[str, bool]:
		"""Claim a name for an inline definition. Returns whether it was already claimed"""
		cache_ref = RefCache.Ref(self.openapi.path if path is None else path, key)
		if cache_ref in self.refcache:
			return self.refcache[cache_ref], True
		return self.refcache.claim(cache_ref, name), False

	def transform_definition(self, name: str, obj: OAObj) -> None:
		"""Transform a named OpenAPI definition to IR"""
		l.info(f"transform def {name}")
		if isinstance(obj, OAEnum):
			self.definitions[name] = IR_Enum(name=name, values=[str(v) for v in obj.enum], description=obj.description)
		elif isinstance(obj, OADef) and (obj.properties or obj.allOf):
			self.definitions[name] = self.ir_def(name, obj)
		else:
			self.definitions[name] = IRAlias(name=name, t=self.transform(name, obj, True, name), description=obj.description)

	def ir_def(self, name: str, obj: OADef) -> IRDef:
		"""Transform an OpenAPI object definition to IR"""
		bases = []
		required = set(obj.required)
		properties: Dict[str, IR_T] = {}
		for parent in obj.allOf:
			if isinstance(parent, OARef):
				bases.append(self.resolve_reference(parent))
			elif isinstance(parent, OADef):
				# inline parents are merged in
				required.update(parent.required)
				properties.update({n: self.transform(n, e, n in required, name) for n, e in parent.properties.items()})

		properties.update({n: self.transform(n, e, n in required, name) for n, e in obj.properties.items()})
		return IRDef(name=name, bases=bases, properties=properties, description=obj.description, src=self.openapi.path)

	def transform(self, name: str, obj: OAObj, required: bool, parent: str) -> IR_T:
		"""
		Transform a JSONSchema item to an IR type

		Inline enums and objects become definitions named after their parent and the property
		"""
		if isinstance(obj, OARef):
			return IR_T(t=self.resolve_reference(obj), required=required, readonly=obj.readOnly)

		elif isinstance(obj, OAEnum):
			if obj.ms_enum and obj.ms_enum.name:
				enum_name, done = self._claim_inline(mk_typename(obj.ms_enum.name), obj.ms_enum.name, X_MS_ENUM)
			else:
				enum_name, done = self._claim_inline(parent + mk_typename(name), f"inline/{parent}/{name}")
			if not done:
				self.definitions[enum_name] = IR_Enum(name=enum_name, values=[str(v) for v in obj.enum], description=obj.description)
			return IR_T(t=enum_name, required=required, readonly=obj.readOnly)

		elif isinstance(obj, OADef.Array):
			items = self.transform(name, obj.items, True, parent) if obj.items is not None else IR_T(t="Any")
			return IR_T(t=IR_List(items=items), required=required, readonly=obj.readOnly)

		elif isinstance(obj, OADef.Property):
			if isinstance(obj.additionalProperties, bool) or obj.additionalProperties is None:
				t: Union[IR_Dict, str] = self.resolve_type(obj.t, obj.format)
			else:
				t = IR_Dict(values=self.transform(name, obj.additionalProperties, True, parent))
			return IR_T(t=t, required=required, readonly=obj.readOnly)

		elif isinstance(obj, OADef):
			if self._is_full_inherit(obj):
				return IR_T(t=self.resolve_reference(obj.allOf[0]), required=required, readonly=obj.readOnly)
			def_name, done = self._claim_inline(parent + mk_typename(name), f"inline/{parent}/{name}")
			if not done:
				self.definitions[def_name] = self.ir_def(def_name, obj)
			return IR_T(t=def_name, required=required, readonly=obj.readOnly)

		else:
			raise TypeError(f"unsupported OpenAPI type {type(obj)}")

	@staticmethod
	def resolve_type(t: Optional[str], fmt: Optional[str] = None) -> str:
		"""Resolve OpenAPI types to Python types"""
		if t == "string" and fmt == "date-time":
			return "datetime"
		if t == "string" and fmt == "date-time-rfc1123":
			return RFC1123_T
		return {
			"string": "str",
			"number": "float",
			"integer": "int",
			"boolean": "bool",
			"object": "Dict[str, Any]",
			"file": "bytes",
		}.get(t or "", "Any")


class IRTransformer:
	"""Transform OpenAPI documents into the IR. One transformer collects everything for one package"""

	def __init__(self, refcache: Optional[RefCache] = None):
		self.refcache = refcache or RefCache()
		self.definitions: Dict[str, IRNamed] = {}
		self.ops: List[IROp] = []
		self.readers: List[Reader] = []

	def subparser(self, reader: Reader) -> JSONSchemaSubparser:
		return JSONSchemaSubparser(reader, self.refcache, self.definitions)

	def transform(self, reader: Reader) -> None:
		"""Transform all the definitions and operations of a document"""
		self.readers.append(reader)
		self.transform_definitions(reader)
		self.ops.extend(self.transform_paths(reader))

	def transform_definitions(self, reader: Reader) -> None:
		"""Transform the definitions in a document, and everything they reference"""
		jsp = self.subparser(reader)
		for name in reader.definitions:
			jsp.resolve_reference(OARef(ref=f"#/definitions/{name}"))

	def transform_paths(self, reader: Reader) -> List[IROp]:
		"""Transform OpenAPI Paths into IR Operations"""
		parser = TypeAdapter(Dict[str, OAPath])
		try:
			parsed = parser.validate_python(reader.paths)
		except pydantic.ValidationError as e:
			raise LoadError(reader.path, "paths") from e

		ops = []
		for path, path_item in parsed.items():
			for method, op in path_item.items():
				ops.append(self.oa2ir_op(reader, path, method, path_item.parameters + op.parameters, op))
		return ops

	def oa2ir_op(self, reader: Reader, path: str, method: str, parameters: List[Union[OARef, OAParam]], op: OAOp) -> IROp:
		"""Transform an OpenAPI Operation to IR"""
		l.info(f"transform op {op.operationId}")
		group, name = split_operation_id(op.operationId)
		typename = mk_typename(op.operationId)

		apiv = None
		params = []
		for param_reader, p in self.resolve_oaparam_refs(reader, parameters):
			if p.in_component == "query" and p.name == API_VERSION:
				apiv = reader.apiv
				continue
			if p.in_component not in ParamPosition.__members__:
				l.warning(f"skipping unsupported parameter op={op.operationId} param={p.name} in={p.in_component}")
				continue
			params.append(self.paramOA2IR(self.subparser(param_reader), typename, p))

		jsp = self.subparser(reader)
		responses: Dict[int, Optional[IR_T]] = {}
		for status, response in op.responses.items():
			if not status.isdigit():
				continue  # the default response is the error envelope
			responses[int(status)] = None if response.oa_schema is None else jsp.transform("response", response.oa_schema, True, typename)
		if not responses:
			responses[200] = None

		if op.pageable is not None:
			self.mark_page(responses, op.pageable)

		return IROp(
			operation_id=op.operationId,
			group=group,
			name=name,
			description=op.description or op.summary,
			path=path,
			method=method,
			apiv=apiv,
			params=params,
			responses=responses,
			pageable=op.pageable is not None,
		)

	@staticmethod
	def resolve_oaparam_refs(reader: Reader, params: List[Union[OARef, OAParam]]) -> List[Tuple[Reader, OAParam]]:
		"""
		Resolve OpenAPI parameters which are references to the definition that they reference

		Each comes with the reader for its document, since its schema is relative to that document.
		Operation parameters override path parameters with the same name.
		"""
		resolved: Dict[Tuple[str, str], Tuple[Reader, OAParam]] = {}
		for param in params:
			if isinstance(param, OAParam):
				param_reader, p = reader, param
			else:
				param_reader, relative_param = reader.load_relative(param.ref)
				p = OAParam.model_validate(relative_param)
			resolved[(p.name, p.in_component)] = (param_reader, p)
		return list(resolved.values())

	@staticmethod
	def paramOA2IR(jsp: JSONSchemaSubparser, parent: str, oaparam: OAParam) -> IRParam:
		"""
		Convert an OpenAPI Parameter to IR Parameter

		If the param belongs in the body, it will have a schema and nothing else
		Otherwise, it will always have a valid type
		"""
		position = ParamPosition(oaparam.in_component)
		required = oaparam.required or position is ParamPosition.path
		if oaparam.oa_schema is not None:
			t = jsp.transform(oaparam.name, oaparam.oa_schema, required, parent)
		elif oaparam.t == "array":
			items = jsp.transform(oaparam.name, oaparam.items, True, parent) if oaparam.items is not None else IR_T(t="str")
			t = IR_T(t=IR_List(items=items), required=required)
		else:
			t = IR_T(t=JSONSchemaSubparser.resolve_type(oaparam.t, oaparam.format), required=required)

		return IRParam(
			name=oaparam.name,
			position=position,
			t=t,
			required=required,
			unencoded=oaparam.skip_url_encoding,
			description=oaparam.description,
		)

	def mark_page(self, responses: Dict[int, Optional[IR_T]], pageable: OAMSPageable) -> None:
		"""Mark the definitions returned by a pageable operation as pages"""
		for ir_t in responses.values():
			if ir_t is None or not isinstance(ir_t.t, str):
				continue
			definition = self.definitions.get(ir_t.t)
			if isinstance(definition, IRDef):
				self.definitions[ir_t.t] = definition.model_copy(update={"page": IRPage(next_link=pageable.nextLinkName, items=pageable.itemName)})


def resolve_ir_t_str(ir_t: Optional[IR_T]) -> str:
	"""Resolve the IR type to the stringified Python type"""
	if ir_t is None:
		return "None"

	declared_type = ir_t.t
	if isinstance(declared_type, IR_List):
		return "List[%s]" % resolve_ir_t_str(declared_type.items)
	elif isinstance(declared_type, IR_Dict):
		return "Dict[str, %s]" % resolve_ir_t_str(declared_type.values)
	elif isinstance(declared_type, str):
		return declared_type
	else:
		raise TypeError(f"Cannot handle {type(declared_type)}")


def resolve_field_t_str(ir_t: IR_T) -> str:
	"""Resolve the IR type of a field, which may be read-only or optional"""
	t = resolve_ir_t_str(ir_t)
	if ir_t.readonly:
		return "ReadOnly[%s]" % t
	elif not ir_t.required:
		return "Optional[%s]" % t
	return t


class CodeGenable(ABC):
	"""All objects which can be generated into Python code"""

	@abstractmethod
	def codegen(self) -> str:
		"""Dump this object to Python code"""

	@staticmethod
	def quote(s: str) -> str:
		"""A string literal"""
		return json.dumps(s)

	@staticmethod
	def docstring(s: Optional[str]) -> str:
		"""A docstring, escaped so any description is safe inside it"""
		s = (s or "").strip().replace("\\", "\\\\").replace('"', '\\"')
		return '"""%s"""' % s

	@staticmethod
	def indent(i: int, s: str) -> str:
		"""Indent this block
		:param i: number of indents
		:param s: content
		:return:
		"""
		return indent(s, "\t" * i)


class AZField(BaseModel, CodeGenable):
	"""An Azure field"""

	name: str
	alias: Optional[str] = None
	t: str
	required: bool

	def codegen(self) -> str:
		if self.alias:
			default = "" if self.required else ", default=None"
			return f"{self.name}: {self.t} = Field(alias={self.quote(self.alias)}{default})"
		if self.required:
			return f"{self.name}: {self.t}"
		return f"{self.name}: {self.t} = None"


class AZDef(BaseModel, CodeGenable):
	"""An Azure Definition"""

	name: str
	description: Optional[str]
	bases: List[str]
	fields: List[AZField]
	next_link_field: Optional[str] = None
	item_field: Optional[str] = None

	@property
	def is_page(self) -> bool:
		return self.item_field is not None

	def codegen(self) -> str:
		body = [self.docstring(self.description or self.name), ""]
		if self.is_page:
			next_link = "None" if self.next_link_field is None else self.quote(self.next_link_field)
			body.append(f"next_link_field: ClassVar[Optional[str]] = {next_link}")
			body.append(f"item_field: ClassVar[str] = {self.quote(self.item_field or 'value')}")
			body.append("")
		body.extend(field.codegen() for field in self.fields)

		return "class {name}({bases}):\n{body}\n".format(name=self.name, bases=", ".join(self.bases), body=self.indent(1, "\n".join(body).rstrip()))


class AZEnum(BaseModel, CodeGenable):
	"""An Azure enum, which keeps values it does not know"""

	name: str
	description: Optional[str]
	values: List[str]

	def codegen(self) -> str:
		body = [self.docstring(self.description or self.name)]
		if self.values:
			body.append("")
		seen: set = set()
		for value in self.values:
			body.append(f"{dedupe(mk_membername(value), seen)} = {self.quote(value)}")
		return "class {name}(AzEnum):\n{body}\n".format(name=self.name, body=self.indent(1, "\n".join(body)))


class AZAlias(BaseModel, CodeGenable):
	"""An alias to another type. Useful for definitions like `Scopes` which are a `List[str]`"""

	name: str
	alias: str

	def codegen(self) -> str:
		return f"{self.name} = {self.alias}"


class AZParam(BaseModel):
	"""A parameter of an operation, with the name of its Python argument"""

	name: str
	arg: str
	t: str
	position: ParamPosition
	required: bool
	description: Optional[str] = None


class AZOp(BaseModel, CodeGenable):
	"""An OpenAPI operation ready for codegen"""

	cls_name: str
	method_name: str
	operation_id: str
	description: Optional[str] = None
	path: str
	http_method: str
	apiv: Optional[str]
	responses: Dict[int, str]
	params: List[AZParam] = []
	unencoded: List[str] = []
	pageable: bool = False

	@property
	def required_params(self) -> List[AZParam]:
		order = list(ParamPosition)
		return sorted([p for p in self.params if p.required], key=lambda p: order.index(p.position))

	@property
	def optional_params(self) -> List[AZParam]:
		return [p for p in self.params if not p.required]

	@property
	def ret_t(self) -> str:
		"""The type `send` returns, or that `pages` yields"""
		ts = list(dict.fromkeys(self.responses.values()))
		if len(self.responses) == 1:
			return ts[0]
		non_none = [t for t in ts if t != "None"]
		if not non_none:
			inner = "None"
		elif len(non_none) == 1:
			inner = non_none[0]
		else:
			inner = "Union[%s]" % ", ".join(non_none)
		return "ops.Outcome[%s]" % inner

	@staticmethod
	def wire_value(p: AZParam, expr: str) -> str:
		"""The expression which sends a parameter value. RFC 1123 dates are formatted here, as `fmt_param` sends ISO 8601"""
		if p.t == RFC1123_T and p.position is not ParamPosition.body:
			return f"format_rfc1123({expr})"
		return expr

	def _setter(self, p: AZParam, name: str) -> str:
		value = self.wire_value(p, "value")
		if p.position is ParamPosition.body:
			call = f"self.with_body({value})"
		elif p.position is ParamPosition.header:
			call = f"self.add_header({self.quote(p.name)}, {value})"
		else:
			call = f"self.add_param({self.quote(p.name)}, {value})"
		lines = [f"def {name}(self, value: {p.t}) -> {self.cls_name}:"]
		if p.description:
			lines.append(self.indent(1, self.docstring(p.description)))
		lines.append(self.indent(1, f"return {call}"))
		return "\n".join(lines)

	def codegen(self) -> str:
		"""The Operation class"""
		base = "ops.PagedOperation" if self.pageable else "ops.Operation"
		responses = ", ".join(f"{status}: {t}" for status, t in self.responses.items())

		body = [
			self.docstring(self.description or self.operation_id),
			"",
			f"operation_id = {self.quote(self.operation_id)}",
			f"http_method = {self.quote(self.http_method.upper())}",
			f"path_template = {self.quote(self.path)}",
			f"api_version = {'None' if self.apiv is None else self.quote(self.apiv)}",
			f"responses = {{{responses}}}",
		]
		if self.unencoded:
			body.append("unencoded = frozenset({%s})" % ", ".join(self.quote(p) for p in self.unencoded))

		seen = set(RESERVED_SETTERS)
		for p in self.optional_params:
			body.append("")
			body.append(self._setter(p, dedupe(_safe_identifier(snake_case(p.name)), seen)))

		return "class {name}({base}[{ret_t}]):\n{body}\n".format(name=self.cls_name, base=base, ret_t=self.ret_t, body=self.indent(1, "\n".join(body)))

	def codegen_accessor(self, client_expr: str) -> str:
		"""The method on a client which makes this operation"""
		required = self.required_params
		args = ["self"] + [f"{p.arg}: {p.t}" for p in required]

		kwargs = []
		for position, kwarg in ((ParamPosition.path, "path_params"), (ParamPosition.query, "params"), (ParamPosition.header, "headers")):
			ps = [p for p in required if p.position is position]
			if ps:
				kwargs.append("%s={%s}" % (kwarg, ", ".join(f"{self.quote(p.name)}: {self.wire_value(p, p.arg)}" for p in ps)))
		body_params = [p for p in required if p.position is ParamPosition.body]
		if body_params:
			kwargs.append(f"body={body_params[0].arg}")

		if kwargs:
			call = "return {cls}(\n\t{client},\n{kwargs},\n)".format(cls=self.cls_name, client=client_expr, kwargs=self.indent(1, ",\n".join(kwargs)))
		else:
			call = f"return {self.cls_name}({client_expr})"

		return "def {name}({args}) -> {cls}:\n{doc}\n{call}".format(
			name=self.method_name,
			args=", ".join(args),
			cls=self.cls_name,
			doc=self.indent(1, self.docstring(self.description or self.operation_id)),
			call=self.indent(1, call),
		)


class AZOps(BaseModel, CodeGenable):
	"""All the operations of one group, which share a sub-client"""

	name: str
	ops: List[AZOp]

	@property
	def cls_name(self) -> str:
		return f"{self.name}Client"

	@property
	def accessor_name(self) -> str:
		return f"{snake_case(self.name)}_client"

	def codegen(self) -> str:
		body = [self.docstring(f"Operations for {self.name}")]
		for op in self.ops:
			body.append("")
			body.append(op.codegen_accessor("self.client"))
		return "class {name}(SubClient):\n{body}\n".format(name=self.cls_name, body=self.indent(1, "\n".join(body)))


class AZClient(BaseModel, CodeGenable):
	"""The Client and ClientBuilder of a package"""

	title: str
	package: str
	version: str
	endpoint: str
	groups: List[AZOps]
	ops: List[AZOp] = []

	def codegen(self) -> str:
		body = [self.docstring(f"Client for {self.title} {self.version}")]
		for group in self.groups:
			body.append("")
			body.append(f"def {group.accessor_name}(self) -> {group.cls_name}:\n\treturn {group.cls_name}(self)")
		for op in self.ops:
			body.append("")
			body.append(op.codegen_accessor("self"))

		builder = [
			self.docstring(f"Configure a Client for {self.title} {self.version}"),
			"",
			"client_cls = Client",
			f"default_endpoint = {self.quote(self.endpoint)}",
			f"package = {self.quote(self.package)}",
			f"version = {self.quote(self.version)}",
		]
		return "class Client(AzClient):\n{client}\n\n\nclass ClientBuilder(AzClientBuilder):\n{builder}\n".format(
			client=self.indent(1, "\n".join(body)),
			builder=self.indent(1, "\n".join(builder)),
		)


def order_definitions(definitions: Dict[str, IRNamed]) -> List[IRNamed]:
	"""
	Order definitions so they can be written out

	Enums come first, then classes after their bases, then aliases after the aliases they use.
	Other references between classes are resolved when the models are rebuilt.
	"""
	enums = [d for d in definitions.values() if isinstance(d, IR_Enum)]
	classes: List[IRNamed] = []
	aliases: List[IRNamed] = []
	seen: set = set()

	def visit(d: IRNamed, out: List[IRNamed]):
		if d.name in seen:
			return
		seen.add(d.name)
		if isinstance(d, IRDef):
			deps = d.bases
		else:
			deps = re.findall(r"\w+", resolve_ir_t_str(d.t))
		for dep in deps:
			dep_d = definitions.get(dep)
			if dep_d is not None and type(dep_d) is type(d):  # pylint: disable=unidiomatic-typecheck
				visit(dep_d, out)
		out.append(d)

	for d in definitions.values():
		if isinstance(d, IRDef):
			visit(d, classes)
	for d in definitions.values():
		if isinstance(d, IRAlias):
			visit(d, aliases)
	return enums + classes + aliases


def defIR2AZ(irdef: IRDef, definitions: Dict[str, IRNamed]) -> AZDef:
	"""Convert IR Defs to AZ Defs"""
	bases = [b for b in irdef.bases if isinstance(definitions.get(b), IRDef)]
	if irdef.page:
		bases.append("Page")
	elif not bases:
		bases.append("AzModel")

	seen: set = set()
	fields = []
	for json_name, ir_t in irdef.properties.items():
		name = dedupe(mk_fieldname(json_name), seen)
		fields.append(AZField(name=name, alias=json_name if name != json_name else None, t=resolve_field_t_str(ir_t), required=ir_t.required and not ir_t.readonly))

	next_link_field = item_field = None
	if irdef.page:
		item_field = mk_fieldname(irdef.page.items)
		if irdef.page.next_link:
			next_link_field = mk_fieldname(irdef.page.next_link)
			if irdef.page.next_link not in irdef.properties:
				fields.append(AZField(name=dedupe(next_link_field, seen), alias=irdef.page.next_link, t="Optional[str]", required=False))

	return AZDef(name=irdef.name, description=irdef.description, bases=bases, fields=fields, next_link_field=next_link_field, item_field=item_field)


def opIR2AZ(op: IROp, taken: set) -> AZOp:
	"""Convert IR Ops to AZ Ops"""
	cls_name = mk_typename(op.operation_id)
	if cls_name in taken:
		cls_name += "Op"
	cls_name = dedupe(cls_name, taken)

	arg_names: set = {"self"}
	params = [
		AZParam(
			name=p.name,
			arg=dedupe(mk_argname(p.name), arg_names),
			t=resolve_ir_t_str(p.t),
			position=p.position,
			required=p.required,
			description=p.description,
		)
		for p in op.params
	]

	return AZOp(
		cls_name=cls_name,
		method_name=_safe_identifier(snake_case(op.name), RESERVED_METHODS),
		operation_id=op.operation_id,
		description=op.description,
		path=op.path,
		http_method=op.method,
		apiv=op.apiv,
		responses={status: resolve_ir_t_str(t) for status, t in op.responses.items()},
		params=params,
		unencoded=[p.name for p in op.params if p.unencoded],
		pageable=op.pageable,
	)


MODELS_HEADER = dedent(
	'''\
	# pylint: disable
	# flake8: noqa
	"""Models for {title} {version}"""
	from __future__ import annotations

	from datetime import datetime
	from typing import Any, ClassVar, Dict, List, Optional, Union

	from pydantic import Field

	from azgen.core.enums import AzEnum
	from azgen.core.models import AzModel, Page, ReadOnly, Rfc1123Datetime
	'''
)

OPERATIONS_HEADER = dedent(
	'''\
	# pylint: disable
	# flake8: noqa
	"""Operations for {title} {version}"""
	from __future__ import annotations

	from datetime import datetime
	from typing import Any, Dict, List, Optional, Union

	from azgen.core import ops
	from azgen.core.models import format_rfc1123

	from .models import *
	'''
)

CLIENT_HEADER = dedent(
	'''\
	# pylint: disable
	# flake8: noqa
	"""Client for {title} {version}"""
	from __future__ import annotations

	from datetime import datetime
	from typing import Any, Dict, List, Optional, Union

	from azgen.core.client import Client as AzClient
	from azgen.core.client import ClientBuilder as AzClientBuilder
	from azgen.core.client import SubClient
	from azgen.core.models import format_rfc1123

	from .models import *
	from .operations import *
	'''
)

INIT = dedent(
	'''\
	# flake8: noqa
	"""{title} {version}"""
	from .models import *
	from .operations import *
	from .client import *
	'''
)


def codegen(transformer: IRTransformer, package: str) -> Dict[str, str]:
	"""Generate the modules of a package, by their filenames"""
	reader = transformer.readers[0]
	title = reader.title or package
	version = reader.apiv

	definitions = transformer.definitions
	ordered = order_definitions(definitions)
	models: List[CodeGenable] = []
	for d in ordered:
		if isinstance(d, IR_Enum):
			models.append(AZEnum(name=d.name, description=d.description, values=d.values))
		elif isinstance(d, IRDef):
			models.append(defIR2AZ(d, definitions))
		else:
			models.append(AZAlias(name=d.name, alias=resolve_ir_t_str(d.t)))
	rebuilds = [f"{d.name}.model_rebuild()" for d in ordered if isinstance(d, IRDef)]

	taken = set(definitions.keys())
	az_ops = [opIR2AZ(op, taken) for op in transformer.ops]
	groups: Dict[str, List[AZOp]] = {}
	ungrouped: List[AZOp] = []
	for ir_op, az_op in zip(transformer.ops, az_ops):
		if ir_op.group is None:
			ungrouped.append(az_op)
		else:
			groups.setdefault(mk_typename(ir_op.group), []).append(az_op)
	az_groups = [AZOps(name=name, ops=group_ops) for name, group_ops in groups.items()]
	client = AZClient(
		title=title,
		package=package,
		version=version,
		endpoint=reader.endpoint or DEFAULT_ENDPOINT,
		groups=az_groups,
		ops=ungrouped,
	)

	fmt = {"title": title, "version": version}
	return {
		"models.py": "\n\n".join([MODELS_HEADER.format(**fmt)] + [cg.codegen() for cg in models] + ["\n".join(rebuilds)]) + "\n",
		"operations.py": "\n\n".join([OPERATIONS_HEADER.format(**fmt)] + [op.codegen() for op in az_ops]),
		"client.py": "\n\n".join([CLIENT_HEADER.format(**fmt)] + [g.codegen() for g in az_groups] + [client.codegen()]),
		"__init__.py": INIT.format(**fmt),
	}


def package_name(version: str) -> str:
	"""The module name for an API version, like `package_2021_08` or `package_preview_2021_08`"""
	m = re.match(r"^(\d{4})-(\d{2})-\d{2}(?:-(\w+))?$", version)
	if m:
		year, month, label = m.groups()
		return "_".join(["package"] + ([label] if label else []) + [year, month])
	return "package_" + re.sub(r"\W", "_", version)


def path2module(p: Path) -> Path:
	"""
	Convert the filepath of the Azure OpenAPI spec to a module name

	:param p: the path within the azure openapi repo
	:return: a valid module name with extraneous pieces removed
	"""
	parts = p.parts
	if len(parts) < 6 or parts[0] != "specification":
		raise ValueError(f"not a path to an Azure OpenAPI spec path={p}")

	def category_shortcode(s: str):
		return {
			"resource-manager": "mgmt",
			"data-plane": "svc",
		}.get(s, s)

	return Path(
		category_shortcode(parts[2]),
		parts[1].replace("-", "_"),
		package_name(parts[-2]),
	)


def main(openapi_root: str, openapi_file: str, output_dir: Union[str, Path]) -> Path:
	"""Generate a package from OpenAPI files. Several files are separated by commas"""
	files = [Path(f) for f in openapi_file.split(",")]
	reader_cache: Dict[Path, Reader] = {}

	transformer = IRTransformer()
	for file in files:
		transformer.transform(Reader.load(openapi_root, file, reader_cache))

	module = path2module(files[0])
	package_dir = Path(output_dir) / module
	package_dir.mkdir(exist_ok=True, parents=True)
	for name, content in codegen(transformer, f"azgen-{module.parts[1]}").items():
		output_file = package_dir / name
		l.info(f"writing out openapi={files[0]} file={output_file}")
		with open(output_file, mode="w", encoding="utf-8") as f:
			f.write(content)
	return package_dir


@click.command()
@click.argument("openapi_root")
@click.argument("openapi_file")
@click.argument("output_dir", type=click.Path())
def cli(openapi_root: str, openapi_file: str, output_dir: str):
	"""Generate a package from OPENAPI_FILE under OPENAPI_ROOT into OUTPUT_DIR"""
	logging.basicConfig(level=logging.INFO)
	package_dir = main(openapi_root, openapi_file, output_dir)
	click.echo(package_dir)


if __name__ == "__main__":
	cli()  # pylint: disable=no-value-for-parameter
