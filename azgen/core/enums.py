"""Enums that tolerate values the API adds after a package was generated"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

UNKNOWN_VALUE = "UnknownValue"

# pseudo-members by enum and value, so the same unknown value is always the same member
_unknown_members: Dict[Tuple[type, str], AzEnum] = {}


class AzEnum(str, Enum):
	"""
	A string enum with a fallback for unknown values

	Values that aren't known members become a pseudo-member named `UnknownValue`
	which carries the raw value, so it serialises back to exactly what the API sent.

	>>> class Colour(AzEnum):
	... 	Red = "Red"
	>>> Colour("Red") is Colour.Red
	True
	>>> Colour("Mauve").name, Colour("Mauve").value
	('UnknownValue', 'Mauve')
	>>> Colour("Mauve") is Colour("Mauve")
	True
	"""

	@classmethod
	def _missing_(cls, value):
		if not isinstance(value, str):
			return None
		member = _unknown_members.get((cls, value))
		if member is None:
			member = str.__new__(cls, value)
			member._name_ = UNKNOWN_VALUE
			member._value_ = value
			member = _unknown_members.setdefault((cls, value), member)
		return member

	@property
	def is_unknown(self) -> bool:
		"""Whether this value was not known when the package was generated"""
		return self._name_ == UNKNOWN_VALUE

	def __str__(self) -> str:
		return self.value
