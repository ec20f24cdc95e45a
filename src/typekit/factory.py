"""
Collection Factory

Builds typed collections from raw, untyped records (e.g. database rows).

Collection constructors are looked up in an explicit registry keyed by name.
The default factory knows "int" and "string"; object collections are added
with register_object_collection().

Dispatch per record (on the record's first field):
    - INTEGER kind and numeric field   -> append the field as int
    - STRING kind and string field     -> append the field
    - OBJECT kind and mapping/sequence -> build the object from the whole record
    - anything else                    -> InvalidArgumentError
"""

import logging
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence, Union

from .collection import IntCollection, StringCollection, TypedCollection
from .errors import InvalidArgumentError
from .kinds import KindTag, ObjectKind, is_numeric


logger = logging.getLogger(__name__)

CollectionConstructor = Callable[[], TypedCollection]


def _first_field(record: Any) -> Any:
    if isinstance(record, Mapping):
        for value in record.values():
            return value
        raise InvalidArgumentError("Cannot build a collection element from an empty record")
    if isinstance(record, Sequence) and not isinstance(record, (str, bytes)):
        if not record:
            raise InvalidArgumentError("Cannot build a collection element from an empty record")
        return record[0]
    raise InvalidArgumentError(f"Records must be mappings or sequences, got {type(record).__name__}")


class CollectionFactory:
    """
    Registry of collection constructors plus the record-to-collection builder.

    Example:
        factory = CollectionFactory()
        factory.register("int", IntCollection)
        factory.create_from_array("int", [[1], [2], [3]])   # IntCollection([1, 2, 3])
    """

    def __init__(self):
        self._registry: Dict[str, CollectionConstructor] = {}

    def register(self, name: str, constructor: CollectionConstructor) -> None:
        """Register a zero-argument callable returning an empty collection."""
        self._registry[name] = constructor
        logger.debug("Registered collection constructor %r as %r", constructor, name)

    def register_object_collection(self, name: str, element_type: type,
                                   builder: Optional[Callable[[Any], Any]] = None) -> ObjectKind:
        """
        Register a collection of `element_type` objects under `name`.

        Returns:
            The ObjectKind used by collections built under this name
        """
        kind = ObjectKind(name=name, type=element_type, builder=builder)
        self.register(name, lambda: TypedCollection(kind=kind))
        return kind

    def is_registered(self, target: Union[str, CollectionConstructor]) -> bool:
        return self._resolve(target) is not None

    def names(self):
        return sorted(self._registry)

    def _resolve(self, target: Union[str, CollectionConstructor]) -> Optional[CollectionConstructor]:
        if isinstance(target, str):
            return self._registry.get(target)
        for constructor in self._registry.values():
            if constructor is target:
                return constructor
        return None

    def create_from_array(self, target: Union[str, CollectionConstructor],
                          records: Optional[Iterable[Any]] = None) -> TypedCollection:
        """
        Build a collection of the registered kind `target` from raw records.

        Args:
            target: registered name, or a registered constructor
            records: iterable of mappings/sequences; None gives an empty collection

        Returns:
            Populated TypedCollection

        Raises:
            InvalidArgumentError: unknown target, or a record that does not fit the kind
        """
        constructor = self._resolve(target)
        if constructor is None:
            raise InvalidArgumentError(
                f"{target!r} does not designate a registered collection kind "
                f"(known: {', '.join(self.names()) or 'none'})"
            )

        collection = constructor()
        if records is None:
            return collection

        kind = collection.kind
        for record in records:
            first = _first_field(record)
            if kind.tag is KindTag.INTEGER and is_numeric(first):
                collection.append(first)
            elif kind.tag is KindTag.STRING and isinstance(first, str):
                collection.append(first)
            elif kind.tag is KindTag.OBJECT and isinstance(kind, ObjectKind):
                try:
                    element = kind.build(record)
                except TypeError as e:
                    raise InvalidArgumentError(f"Cannot build {kind.name} from record {record!r}: {e}") from e
                collection.append(element)
            else:
                raise InvalidArgumentError(
                    "Target should point at a collection of objects, strings or integers. "
                    f"{target!r}: {kind.name} cannot hold {first!r}"
                )

        logger.debug("Created %s collection with %d elements", kind.name, len(collection))
        return collection


default_factory = CollectionFactory()
default_factory.register("int", IntCollection)
default_factory.register("string", StringCollection)


def create_from_array(target: Union[str, CollectionConstructor],
                      records: Optional[Iterable[Any]] = None) -> TypedCollection:
    """Build a collection through the default factory."""
    return default_factory.create_from_array(target, records)


def register_object_collection(name: str, element_type: type,
                               builder: Optional[Callable[[Any], Any]] = None) -> ObjectKind:
    """Register an object collection on the default factory."""
    return default_factory.register_object_collection(name, element_type, builder)


__all__ = [
    "CollectionFactory",
    "default_factory",
    "create_from_array",
    "register_object_collection",
]
