"""
typekit: Typed Collections and Small Value Helpers

The core of the package is TypedCollection: an ordered container restricted
to a single element kind (INTEGER, STRING or an ObjectKind), with slice,
splice, filter, map and index-normalizing insert/remove operations.

Around it sit a few small helpers:
    - CollectionFactory: builds collections from raw records
    - Date / DateTime:   comparable date wrappers
    - strings:           case conversion and slugs
    - Enumeration:       Enum with values()
    - arrays.to_flat:    flatten a mapping to strings

Nothing here performs I/O except loading an optional YAML settings file.
"""

from .collection import FilterMode, IntCollection, StringCollection, TypedCollection
from .errors import InvalidArgumentError, OutOfRangeError, TypeMismatchError, TypekitError
from .factory import CollectionFactory, create_from_array, default_factory, register_object_collection
from .kinds import INTEGER, STRING, ElementKind, KindTag, ObjectKind

__version__ = "0.1.0"

__all__ = [
    "TypedCollection",
    "IntCollection",
    "StringCollection",
    "FilterMode",
    "ElementKind",
    "KindTag",
    "ObjectKind",
    "INTEGER",
    "STRING",
    "CollectionFactory",
    "default_factory",
    "create_from_array",
    "register_object_collection",
    "TypekitError",
    "TypeMismatchError",
    "InvalidArgumentError",
    "OutOfRangeError",
]
