"""
Enumeration base class.

Subclass it exactly like enum.Enum; it adds values() and a plain-value str().

Example:
    class Colour(Enumeration):
        RED = "red"
        GREEN = "green"

    Colour.values()   -> ["red", "green"]
    str(Colour.RED)   -> "red"
"""

from enum import Enum
from typing import Any, List


class Enumeration(Enum):
    """Enum with a values() listing and str() returning the member value."""

    @classmethod
    def values(cls) -> List[Any]:
        """All member values in definition order (aliases excluded)."""
        return [member.value for member in cls]

    def __str__(self) -> str:
        return str(self.value)
