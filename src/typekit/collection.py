"""
Typed Collections

A TypedCollection is an ordered, mutable container whose elements all satisfy
one declared ElementKind. Elements are stored under integer keys in insertion
order.

KEY RULES:
    - Construction validates every element and fails as a whole.
    - Structural mutations (append aside) re-index keys to 0..n-1.
    - filter(), and slice()/reverse() with preserve_keys=True, keep the
      source keys. values() re-indexes.
    - at() and index_exists() address positions; [key] addresses keys.

Example:
    >>> c = IntCollection([3, 1, 2])
    >>> c.insert(-1, 4)
    >>> c.to_list()
    [3, 1, 2, 4]
"""

from __future__ import annotations

from enum import Enum
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
)

from .config import get_settings
from .errors import InvalidArgumentError, OutOfRangeError
from .kinds import INTEGER, STRING, ElementKind


T = TypeVar("T")
R = TypeVar("R")


class FilterMode(Enum):
    """What a filter() predicate receives."""

    VALUE = "value"  # predicate(value)
    KEY = "key"      # predicate(key)
    BOTH = "both"    # predicate(value, key)


def _slice_bounds(count: int, offset: int, length: Optional[int]) -> Tuple[int, int]:
    """
    Translate an (offset, length) pair into [start, stop) positions.

    A negative offset counts from the end. A negative length stops that many
    elements before the end. Both are clamped to the collection.
    """
    start = offset if offset >= 0 else max(count + offset, 0)
    start = min(start, count)
    if length is None:
        stop = count
    elif length >= 0:
        stop = min(start + length, count)
    else:
        stop = max(count + length, start)
    return start, stop


class TypedCollection(Generic[T]):
    """
    Ordered collection restricted to a single element kind.

    Args:
        items: iterable of elements, or a mapping of key -> element
        kind: ElementKind every element must satisfy
              (subclasses supply default_kind instead)

    Raises:
        TypeMismatchError: if any element does not satisfy the kind
        InvalidArgumentError: if no kind is given, or items is a bare string
    """

    default_kind: Optional[ElementKind] = None

    def __init__(self, items: Iterable[T] = (), kind: Optional[ElementKind] = None):
        kind = kind or self.default_kind
        if kind is None:
            raise InvalidArgumentError(f"{type(self).__name__} requires an element kind")
        self._kind: ElementKind = kind
        self._data: Dict[Hashable, T] = self._validated(items)

    # ------------------------------------------------------------------
    # internals

    def _validated(self, items: Any) -> Dict[Hashable, T]:
        if isinstance(items, (str, bytes)):
            raise InvalidArgumentError("Collection items must be an iterable of elements, not a string")
        if isinstance(items, TypedCollection):
            pairs = items.items()
        elif isinstance(items, Mapping):
            pairs = items.items()
        else:
            pairs = enumerate(items)
        return {key: self._kind.coerce(value) for key, value in pairs}

    def _derive(self, items: Any) -> "TypedCollection[T]":
        return type(self)(items, kind=self._kind)

    def _reindex(self, values: List[T]) -> None:
        self._data = dict(enumerate(values))

    def _next_key(self) -> int:
        int_keys = [k for k in self._data if isinstance(k, int)]
        return max(int_keys) + 1 if int_keys else 0

    # ------------------------------------------------------------------
    # container protocol

    @property
    def kind(self) -> ElementKind:
        return self._kind

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data.values())

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __getitem__(self, key: Hashable) -> T:
        try:
            return self._data[key]
        except KeyError:
            raise OutOfRangeError(f"Key {key!r} does not exist in collection") from None

    def __setitem__(self, key: Hashable, value: T) -> None:
        """Replace the element under an existing key. Use append() to add."""
        if key not in self._data:
            raise OutOfRangeError(f"Key {key!r} does not exist in collection")
        self._data[key] = self._kind.coerce(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedCollection):
            return NotImplemented
        return self._kind == other._kind and list(self._data.items()) == list(other._data.items())

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r}, kind={self._kind.name!r})"

    def __str__(self) -> str:
        return get_settings().glue.join(str(v) for v in self._data.values())

    def items(self) -> List[Tuple[Hashable, T]]:
        """(key, element) pairs in order."""
        return list(self._data.items())

    def to_list(self) -> List[T]:
        return list(self._data.values())

    def to_dict(self) -> Dict[Hashable, T]:
        return dict(self._data)

    # ------------------------------------------------------------------
    # element access

    def append(self, element: T) -> None:
        self._data[self._next_key()] = self._kind.coerce(element)

    def at(self, index: int) -> T:
        """
        Return the element at a position.

        Raises:
            InvalidArgumentError: if index is not a non-negative integer
            OutOfRangeError: if index >= len(self)
        """
        if not isinstance(index, int) or isinstance(index, bool):
            raise InvalidArgumentError("Index must be a non-negative integer")
        if not self.index_exists(index):
            raise OutOfRangeError("Index out of bounds of collection")
        return self.to_list()[index]

    def index_exists(self, index: int) -> bool:
        if index < 0:
            raise InvalidArgumentError("Index must be a non-negative integer")
        return index < len(self._data)

    def first(self) -> Optional[T]:
        for value in self._data.values():
            return value
        return None

    def last(self) -> Optional[T]:
        if not self._data:
            return None
        return next(reversed(self._data.values()))

    def keys(self) -> List[Hashable]:
        return list(self._data.keys())

    def values(self) -> "TypedCollection[T]":
        """New collection with the same elements under keys 0..n-1."""
        return self._derive(self.to_list())

    def contains(self, value: Any) -> bool:
        return value in self._data.values()

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """First element for which predicate returns true, or None."""
        for element in self._data.values():
            if predicate(element):
                return element
        return None

    def find_index(self, predicate: Callable[[T], bool]) -> Optional[Hashable]:
        """Key of the first element for which predicate returns true, or None."""
        for key, element in self._data.items():
            if predicate(element):
                return key
        return None

    def column(self, key: Hashable) -> List[Any]:
        """
        Pull one field out of every element.

        Mapping elements are read by key, other elements by attribute.
        Elements lacking the field are skipped.
        """
        result = []
        for element in self._data.values():
            if isinstance(element, Mapping):
                if key in element:
                    result.append(element[key])
            elif isinstance(key, str) and hasattr(element, key):
                result.append(getattr(element, key))
        return result

    # ------------------------------------------------------------------
    # structural mutation

    def insert(self, index: int, element: T) -> None:
        """
        Insert element right after position `index`.

        A negative index counts from the end, so -1 appends. The normalized
        position is clamped to the collection: anything before the first
        element inserts at the front.
        """
        value = self._kind.coerce(element)
        values = self.to_list()
        if index < 0:
            index = len(values) + index
        values.insert(min(max(index + 1, 0), len(values)), value)
        self._reindex(values)

    def remove(self, index: int) -> None:
        """
        Remove the element at position `index`.

        A negative index counts from the end (-1 is the last element). The
        normalized index is clamped to 0; an index past the end removes nothing.
        """
        values = self.to_list()
        if index < 0:
            index = len(values) + index
        index = max(0, index)
        if index < len(values):
            del values[index]
        self._reindex(values)

    def splice(self, offset: int, length: Optional[int] = None, replacement: Any = None) -> "TypedCollection[T]":
        """
        Remove a range in place, optionally replacing it.

        Args:
            offset: start position (negative counts from the end)
            length: number of elements to remove; None removes to the end
            replacement: a single element or an iterable of elements

        Returns:
            New collection holding the removed elements
        """
        if replacement is None:
            incoming = []
        elif self._kind.matches(replacement) or not isinstance(replacement, Iterable):
            incoming = [replacement]
        else:
            incoming = list(replacement)
        incoming = [self._kind.coerce(v) for v in incoming]

        values = self.to_list()
        start, stop = _slice_bounds(len(values), offset, length)
        removed = values[start:stop]
        values[start:stop] = incoming
        self._reindex(values)
        return self._derive(removed)

    def merge(self, other: Iterable[T]) -> "TypedCollection[T]":
        """Append all elements of `other` in order. Returns self."""
        if isinstance(other, (str, bytes)):
            raise InvalidArgumentError("Cannot merge a string; wrap it in a collection or list")
        incoming = [self._kind.coerce(v) for v in other]
        self._reindex(self.to_list() + incoming)
        return self

    def unique(self) -> "TypedCollection[T]":
        """Keep the first occurrence of each distinct value. Returns self."""
        seen: List[T] = []
        for value in self._data.values():
            if value not in seen:
                seen.append(value)
        self._reindex(seen)
        return self

    def sort(self, key: Optional[Callable[[T], Any]] = None, reverse: bool = False) -> bool:
        self._reindex(sorted(self._data.values(), key=key, reverse=reverse))
        return True

    def each(self, action: Callable[[T], Any]) -> None:
        """
        Apply action to every element in order.

        Mutable elements can be changed in place by the action. Its return
        value is ignored.
        """
        for value in list(self._data.values()):
            action(value)

    def walk(self, callback: Callable[..., Any], user_data: Any = None) -> bool:
        """Call callback(value, key[, user_data]) for every element."""
        for key, value in list(self._data.items()):
            if user_data is None:
                callback(value, key)
            else:
                callback(value, key, user_data)
        return True

    # ------------------------------------------------------------------
    # derived collections

    def slice(self, offset: int, length: Optional[int] = None, preserve_keys: bool = False) -> "TypedCollection[T]":
        start, stop = _slice_bounds(len(self._data), offset, length)
        pairs = self.items()[start:stop]
        if preserve_keys:
            return self._derive(dict(pairs))
        return self._derive([value for _, value in pairs])

    def reverse(self, preserve_keys: bool = False) -> "TypedCollection[T]":
        pairs = self.items()[::-1]
        if preserve_keys:
            return self._derive(dict(pairs))
        return self._derive([value for _, value in pairs])

    def filter(self, predicate: Optional[Callable[..., bool]] = None, mode: FilterMode = FilterMode.VALUE) -> "TypedCollection[T]":
        """
        Keep the elements for which predicate returns true. Keys are preserved.

        Args:
            predicate: test function; None keeps truthy elements
            mode: FilterMode.VALUE -> predicate(value)
                  FilterMode.KEY   -> predicate(key)
                  FilterMode.BOTH  -> predicate(value, key)
        """
        if not isinstance(mode, FilterMode):
            raise InvalidArgumentError(f"Unsupported filter mode: {mode!r}")
        if predicate is None:
            predicate = (lambda value, key: bool(value)) if mode is FilterMode.BOTH else bool

        if mode is FilterMode.KEY:
            kept = {k: v for k, v in self._data.items() if predicate(k)}
        elif mode is FilterMode.BOTH:
            kept = {k: v for k, v in self._data.items() if predicate(v, k)}
        else:
            kept = {k: v for k, v in self._data.items() if predicate(v)}
        return self._derive(kept)

    def map(self, mapper: Callable[[T], R]) -> List[R]:
        """Results of mapper(element) in order. The result is not kind-checked."""
        return [mapper(value) for value in self._data.values()]

    def implode(self, glue: str) -> str:
        """Join elements with glue. Empty string if the kind has no textual form."""
        if not self._kind.is_textual():
            return ""
        return glue.join(str(v) for v in self._data.values())


class IntCollection(TypedCollection[int]):
    """Collection of integers. Numeric input (e.g. "3", 3.0) is stored as int."""

    default_kind = INTEGER


class StringCollection(TypedCollection[str]):
    """Collection of strings."""

    default_kind = STRING
