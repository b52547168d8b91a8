import ast
import importlib
from pathlib import Path

import pytest

from azgen.codegen import openapi
from azgen.codegen.openapi import IRTransformer, Reader

ROOT = "https://raw.githubusercontent.com/Azure/azure-rest-api-specs/main/"


class TestLoading:
	@pytest.mark.integration
	def test_load_url(self):
		path = Path("specification/authorization/resource-manager/Microsoft.Authorization/stable/2022-04-01/authorization-RoleAssignmentsCalls.json")

		reader = Reader(root=ROOT, path=path, openapi={}, reader_cache={})

		_, r = reader.load_relative("../../../../../common-types/resource-management/v2/types.json#/parameters/SubscriptionIdParameter")
		assert r is not None
		assert r["name"] == "subscriptionId"

	@pytest.mark.integration
	def test_transform_remote(self):
		path = Path("specification/alertsmanagement/resource-manager/Microsoft.AlertsManagement/stable/2021-08-08/AlertProcessingRules.json")
		transformer = IRTransformer()
		transformer.transform(Reader.load(ROOT, path))

		assert "AlertProcessingRule" in transformer.definitions
		assert {op.operation_id for op in transformer.ops} >= {"AlertProcessingRules_ListBySubscription", "AlertProcessingRules_CreateOrUpdate"}


class TestScript:
	def assert_parses(self, output):
		assert len(output) > 0
		parsed = ast.parse(output)
		assert isinstance(parsed, ast.Module)
		assert len(parsed.body) > 0

	@pytest.mark.integration
	@pytest.mark.parametrize(
		"spec_path",
		[
			"specification/alertsmanagement/resource-manager/Microsoft.AlertsManagement/stable/2021-08-08/AlertProcessingRules.json",
			"specification/applicationinsights/resource-manager/Microsoft.Insights/stable/2023-06-01/workbooks_API.json",
			"specification/portal/resource-manager/Microsoft.Portal/preview/2020-09-01-preview/portal.json",
			",".join(
				[
					"specification/authorization/resource-manager/Microsoft.Authorization/stable/2022-04-01/authorization-RoleAssignmentsCalls.json",
					"specification/authorization/resource-manager/Microsoft.Authorization/stable/2022-04-01/authorization-RoleDefinitionsCalls.json",
				]
			),
		],
	)
	def test_run(self, spec_path, tmp_path, monkeypatch):
		"""Test running the script, and importing what it generates"""
		package_dir = openapi.main(ROOT, spec_path, tmp_path)

		for p in package_dir.iterdir():
			self.assert_parses(p.read_text(encoding="utf-8"))

		monkeypatch.syspath_prepend(str(tmp_path))
		module = ".".join(package_dir.relative_to(tmp_path).parts)
		pkg = importlib.import_module(module)
		assert issubclass(pkg.ClientBuilder, pkg.AzClientBuilder)
