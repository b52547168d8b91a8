"""Tests for enums with an unknown fallback"""
from typing import List, Optional

import pytest
from hypothesis import given
from hypothesis.strategies import sampled_from, text

from azgen.core.enums import UNKNOWN_VALUE, AzEnum
from azgen.core.models import AzModel


class Colour(AzEnum):
	Red = "Red"
	Green = "Green"


class Paint(AzModel):
	colour: Optional[Colour] = None
	palette: List[Colour] = []


class TestAzEnum:
	def test_known(self):
		assert Colour("Red") is Colour.Red
		assert not Colour.Red.is_unknown

	def test_unknown(self):
		c = Colour("Mauve")
		assert c.name == UNKNOWN_VALUE
		assert c.value == "Mauve"
		assert c.is_unknown

	def test_unknown_equality(self):
		assert Colour("Mauve") == Colour("Mauve")
		assert Colour("Mauve") != Colour("Teal")
		assert Colour("Mauve") == "Mauve"

	def test_unknown_is_the_same_member(self):
		assert Colour("Mauve") is Colour("Mauve")
		assert Paint.model_validate({"colour": "Mauve"}).colour is Colour("Mauve")

	def test_unknown_is_per_enum(self):
		class Hue(AzEnum):
			Red = "Red"

		assert Hue("Mauve") is not Colour("Mauve")
		assert isinstance(Hue("Mauve"), Hue)

	def test_str(self):
		assert str(Colour.Green) == "Green"
		assert str(Colour("Mauve")) == "Mauve"

	def test_non_string_is_rejected(self):
		with pytest.raises(ValueError):
			Colour(3)

	def test_case_is_preserved(self):
		"""Values are case-sensitive, so a differently-cased value is unknown but kept as sent"""
		c = Colour("red")
		assert c.is_unknown
		assert c.value == "red"


class TestAzEnumInModels:
	def test_deserialise_known(self):
		assert Paint.model_validate_json('{"colour": "Green"}').colour is Colour.Green

	def test_deserialise_unknown(self):
		paint = Paint.model_validate_json('{"colour": "Mauve", "palette": ["Red", "Ochre"]}')
		assert paint.colour is not None and paint.colour.is_unknown
		assert paint.palette[0] is Colour.Red
		assert paint.palette[1].is_unknown

	def test_reserialise_unknown(self):
		paint = Paint.model_validate_json('{"colour": "Mauve"}')
		assert paint.to_json() == '{"colour":"Mauve","palette":[]}'

	@given(text(min_size=1))
	def test_roundtrip_any_string(self, s: str):
		paint = Paint.model_validate({"colour": s})
		assert paint.to_dict()["colour"] == s
		assert Paint.model_validate_json(paint.to_json()) == paint

	@given(sampled_from(list(Colour)))
	def test_roundtrip_known(self, c: Colour):
		assert Paint.model_validate_json(Paint(colour=c).to_json()).colour is c
