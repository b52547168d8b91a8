"""Conftest"""
import copy
import importlib
import sys
from pathlib import Path

import pytest

from azgen.codegen.openapi import IRTransformer, Reader

API_VERSION_PARAM = {"$ref": "#/parameters/ApiVersionParameter"}

WIDGETS_OPENAPI = {
	"swagger": "2.0",
	"info": {"title": "WidgetsManagementClient", "version": "2024-01-01"},
	"host": "management.azure.com",
	"schemes": ["https"],
	"paths": {
		"/subscriptions/{subscriptionId}/providers/Test.Widgets/widgets": {
			"get": {
				"operationId": "Widgets_List",
				"description": "List widgets in a subscription",
				"parameters": [
					{"$ref": "#/parameters/SubscriptionIdParameter"},
					API_VERSION_PARAM,
					{"name": "$filter", "in": "query", "required": False, "type": "string", "description": "Filter widgets"},
				],
				"responses": {
					"200": {"description": "OK", "schema": {"$ref": "#/definitions/WidgetList"}},
					"default": {"description": "Error", "schema": {"$ref": "#/definitions/ErrorResponse"}},
				},
				"x-ms-pageable": {"nextLinkName": "nextLink"},
			}
		},
		"/subscriptions/{subscriptionId}/providers/Test.Widgets/widgets/{widgetName}": {
			"parameters": [
				{"$ref": "#/parameters/SubscriptionIdParameter"},
				{"name": "widgetName", "in": "path", "required": True, "type": "string"},
			],
			"get": {
				"operationId": "Widgets_Get",
				"description": "Get a widget",
				"parameters": [
					API_VERSION_PARAM,
					{"name": "x-ms-client-request-id", "in": "header", "required": False, "type": "string"},
					{"name": "If-Modified-Since", "in": "header", "required": False, "type": "string", "format": "date-time-rfc1123"},
				],
				"responses": {"200": {"description": "OK", "schema": {"$ref": "#/definitions/Widget"}}},
			},
			"put": {
				"operationId": "Widgets_CreateOrUpdate",
				"parameters": [
					API_VERSION_PARAM,
					{"name": "widget", "in": "body", "required": True, "schema": {"$ref": "#/definitions/Widget"}},
				],
				"responses": {
					"200": {"description": "Updated", "schema": {"$ref": "#/definitions/Widget"}},
					"201": {"description": "Created", "schema": {"$ref": "#/definitions/Widget"}},
				},
			},
			"delete": {
				"operationId": "Widgets_Delete",
				"parameters": [API_VERSION_PARAM],
				"responses": {"200": {"description": "Deleted"}, "204": {"description": "No Content"}},
			},
		},
		"/providers/Test.Widgets/operations": {
			"get": {
				"operationId": "Operations_List",
				"parameters": [API_VERSION_PARAM],
				"responses": {"200": {"description": "OK", "schema": {"$ref": "#/definitions/OperationsList"}}},
				"x-ms-pageable": {"nextLinkName": None},
			}
		},
		"/providers/Test.Widgets/status": {
			"get": {
				"operationId": "GetStatus",
				"parameters": [API_VERSION_PARAM],
				"responses": {"200": {"description": "OK", "schema": {"type": "object", "properties": {"healthy": {"type": "boolean"}}}}},
			}
		},
	},
	"definitions": {
		"Resource": {
			"type": "object",
			"description": "An Azure resource",
			"properties": {
				"id": {"type": "string", "readOnly": True},
				"name": {"type": "string", "readOnly": True},
				"type": {"type": "string", "readOnly": True},
			},
		},
		"Widget": {
			"type": "object",
			"description": "A widget",
			"allOf": [{"$ref": "#/definitions/Resource"}],
			"required": ["location"],
			"properties": {
				"location": {"type": "string"},
				"tags": {"type": "object", "additionalProperties": {"type": "string"}},
				"properties": {"$ref": "#/definitions/WidgetProperties", "x-ms-client-flatten": True},
			},
		},
		"WidgetProperties": {
			"type": "object",
			"properties": {
				"size": {"type": "integer", "format": "int32"},
				"shape": {"type": "string", "enum": ["Round", "Square"], "x-ms-enum": {"name": "Shape", "modelAsString": True}},
				"colour": {"type": "string", "enum": ["Red", "Blue"]},
				"createdAt": {"type": "string", "format": "date-time", "readOnly": True},
				"lastModified": {"type": "string", "format": "date-time-rfc1123"},
				"labels": {"$ref": "#/definitions/Labels"},
				"parts": {"type": "array", "items": {"type": "object", "properties": {"partId": {"type": "string"}}}},
			},
		},
		"WidgetList": {
			"type": "object",
			"properties": {
				"value": {"type": "array", "items": {"$ref": "#/definitions/Widget"}},
				"nextLink": {"type": "string"},
			},
		},
		"Operation": {"type": "object", "properties": {"name": {"type": "string"}}},
		"OperationsList": {"type": "object", "properties": {"value": {"type": "array", "items": {"$ref": "#/definitions/Operation"}}}},
		"Labels": {"type": "array", "items": {"type": "string"}},
		"ErrorResponse": {
			"type": "object",
			"properties": {"error": {"type": "object", "properties": {"code": {"type": "string"}, "message": {"type": "string"}}}},
		},
	},
	"parameters": {
		"SubscriptionIdParameter": {"name": "subscriptionId", "in": "path", "required": True, "type": "string"},
		"ApiVersionParameter": {"name": "api-version", "in": "query", "required": True, "type": "string"},
	},
}


@pytest.fixture
def widgets_reader() -> Reader:
	"""Fixture: a Reader over the Widgets document"""
	return Reader("file:///", Path("widgets.json"), copy.deepcopy(WIDGETS_OPENAPI), {})


@pytest.fixture
def widgets_transformer(widgets_reader) -> IRTransformer:
	"""Fixture: the IR of the Widgets document"""
	transformer = IRTransformer()
	transformer.transform(widgets_reader)
	return transformer


@pytest.fixture
def import_generated(tmp_path, monkeypatch):
	"""Fixture: write generated modules into a package and import it"""
	imported = []

	def do_import(name: str, files):
		package_dir = tmp_path / name
		package_dir.mkdir()
		for filename, content in files.items():
			(package_dir / filename).write_text(content, encoding="utf-8")
		monkeypatch.syspath_prepend(str(tmp_path))
		imported.append(name)
		return importlib.import_module(name)

	yield do_import

	for name in imported:
		for module in [m for m in sys.modules if m == name or m.startswith(name + ".")]:
			del sys.modules[module]
