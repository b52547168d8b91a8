import datetime
import json
from typing import Optional
from uuid import UUID

from azgen.core.enums import AzEnum
from azgen.core.models import AzModel
from azgen.core.ops import Ok200
from azgen.test.inspect import MyEncoder, print_output


class Colour(AzEnum):
	Red = "Red"


class Widget(AzModel):
	name: Optional[str] = None
	colour: Optional[Colour] = None


class TestMyEncoder:
	def test_model(self):
		assert json.loads(json.dumps(Widget(name="w0", colour=Colour("Mauve")), cls=MyEncoder)) == {"name": "w0", "colour": "Mauve"}

	def test_outcome(self):
		encoded = json.loads(json.dumps(Ok200(value=Widget(name="w0")), cls=MyEncoder))
		assert encoded["status"] == 200
		assert encoded["value"] == {"name": "w0"}

	def test_scalars(self):
		o = [datetime.datetime(2024, 1, 2, 3, 4, 5), UUID(int=0), Colour.Red]
		assert json.loads(json.dumps(o, cls=MyEncoder)) == ["2024-01-02T03:04:05", "00000000-0000-0000-0000-000000000000", "Red"]


class TestPrintOutput:
	def test_silent_by_default(self, capsys, monkeypatch):
		monkeypatch.delenv("INTEGRATION_PRINT_OUTPUT", raising=False)
		print_output("widget", Widget(name="w0"))
		assert capsys.readouterr().out == ""

	def test_prints(self, capsys, monkeypatch):
		monkeypatch.setenv("INTEGRATION_PRINT_OUTPUT", "True")
		print_output("widget", Widget(name="w0"))
		assert capsys.readouterr().out.startswith("widget {")
