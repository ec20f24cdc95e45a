"""
Element Kinds for Typed Collections

Every TypedCollection declares exactly one element kind. The set of kinds is
closed:

    - INTEGER    whole numbers (numeric input is coerced to int)
    - STRING     text
    - ObjectKind instances of one named class

A kind knows how to check a value and how to coerce it into the stored form.
It does NOT know anything about collections.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Optional

from .errors import TypeMismatchError


class KindTag(Enum):
    """Tag identifying which branch of the closed kind variant is in use."""

    INTEGER = "int"
    STRING = "string"
    OBJECT = "object"


def is_numeric(value: Any) -> bool:
    """
    Check if a value is numeric.

    Ints, floats and strings holding a number count as numeric.
    Booleans do not, even though bool subclasses int.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, str):
        try:
            return math.isfinite(float(value.strip()))
        except ValueError:
            return False
    return False


class ElementKind(ABC):
    """
    Base class for all element kinds.

    Subclasses must provide:
        tag: KindTag of the branch
        name: human readable kind name (used in error messages)
        matches(value): whether the value is acceptable
        coerce(value): value in stored form, or TypeMismatchError
    """

    tag: KindTag
    name: str

    @abstractmethod
    def matches(self, value: Any) -> bool:
        raise NotImplementedError

    @abstractmethod
    def coerce(self, value: Any) -> Any:
        raise NotImplementedError

    @abstractmethod
    def is_textual(self) -> bool:
        """Whether elements of this kind have a defined textual representation."""
        raise NotImplementedError

    def _mismatch(self, value: Any) -> TypeMismatchError:
        return TypeMismatchError(
            f"Expected element of kind '{self.name}', got {type(value).__name__}: {value!r}"
        )


@dataclass(frozen=True)
class IntegerKind(ElementKind):
    """Whole numbers. Floats and numeric strings are truncated to int."""

    tag: KindTag = KindTag.INTEGER
    name: str = "int"

    def matches(self, value: Any) -> bool:
        return is_numeric(value)

    def coerce(self, value: Any) -> int:
        if not self.matches(value):
            raise self._mismatch(value)
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            text = value.strip()
            try:
                return int(text)
            except ValueError:
                return int(float(text))
        return int(value)

    def is_textual(self) -> bool:
        return True


@dataclass(frozen=True)
class StringKind(ElementKind):
    """Text values, no implicit conversion."""

    tag: KindTag = KindTag.STRING
    name: str = "string"

    def matches(self, value: Any) -> bool:
        return isinstance(value, str)

    def coerce(self, value: Any) -> str:
        if not self.matches(value):
            raise self._mismatch(value)
        return value

    def is_textual(self) -> bool:
        return True


@dataclass(frozen=True)
class ObjectKind(ElementKind):
    """
    Instances of a single class.

    Properties:
        name: kind identifier, usually the class name
        type: the class every element must be an instance of
        builder: optional callable building an element from a raw record;
                 when omitted, mappings are passed as keyword arguments
                 and sequences as positional arguments

    Example:
        ObjectKind("Employee", Employee)
    """

    name: str
    type: type
    builder: Optional[Callable[[Any], Any]] = None
    tag: KindTag = KindTag.OBJECT

    def matches(self, value: Any) -> bool:
        return isinstance(value, self.type)

    def coerce(self, value: Any) -> Any:
        if not self.matches(value):
            raise self._mismatch(value)
        return value

    def is_textual(self) -> bool:
        return self.type.__str__ is not object.__str__

    def build(self, record: Any) -> Any:
        """Construct an element from a raw record (mapping or sequence)."""
        if self.builder is not None:
            element = self.builder(record)
        elif isinstance(record, Mapping):
            element = self.type(**record)
        else:
            element = self.type(*record)
        return self.coerce(element)


INTEGER = IntegerKind()
STRING = StringKind()
