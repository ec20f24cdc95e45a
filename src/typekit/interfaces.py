"""
Small capability interfaces shared by the helpers.

    Arrayable:  can describe itself as a plain dict
    Comparable: can order itself against another object of the same kind
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class Arrayable(ABC):
    """Enforces the ability to be converted to a plain dict representing the object."""

    @abstractmethod
    def to_array(self) -> Dict[str, Any]:
        raise NotImplementedError


class Comparable(ABC):
    """
    Objects that can be compared with compare_to().

    compare_to(other) returns -1 if self is lower than other,
    0 if they are the same and 1 if self is higher.
    Rich comparison operators are derived from it.
    """

    @abstractmethod
    def compare_to(self, other: Any) -> int:
        raise NotImplementedError

    def _compare(self, other: Any) -> Any:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other)

    def __eq__(self, other: Any) -> bool:
        result = self._compare(other)
        return result if result is NotImplemented else result == 0

    def __lt__(self, other: Any) -> bool:
        result = self._compare(other)
        return result if result is NotImplemented else result < 0

    def __le__(self, other: Any) -> bool:
        result = self._compare(other)
        return result if result is NotImplemented else result <= 0

    def __gt__(self, other: Any) -> bool:
        result = self._compare(other)
        return result if result is NotImplemented else result > 0

    def __ge__(self, other: Any) -> bool:
        result = self._compare(other)
        return result if result is NotImplemented else result >= 0

    def __hash__(self) -> int:
        return hash((type(self).__name__, str(self)))
