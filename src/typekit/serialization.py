"""
Serialization helpers for typed collections.

Provides lossless JSON/YAML round-trip via an intermediate dict representation:

    {"kind": "int", "name": "int", "keys": [0, 1], "items": [1, 2]}

Collections are rebuilt through a CollectionFactory, so object collections
must be registered under their kind name before they can be loaded.
"""
from __future__ import annotations

import dataclasses
import json
from typing import Any, Dict, Optional

import yaml

from typekit.collection import TypedCollection
from typekit.errors import InvalidArgumentError
from typekit.factory import CollectionFactory, default_factory
from typekit.interfaces import Arrayable
from typekit.kinds import KindTag


def element_to_dict(element: Any) -> Any:
    if isinstance(element, (int, str)):
        return element
    if isinstance(element, Arrayable):
        return element.to_array()
    if dataclasses.is_dataclass(element) and not isinstance(element, type):
        return dataclasses.asdict(element)
    raise TypeError(f"Unsupported element type: {type(element)}")


def collection_to_dict(c: TypedCollection) -> Dict[str, Any]:
    return {
        "kind": c.kind.tag.value,
        "name": c.kind.name,
        "keys": c.keys(),
        "items": [element_to_dict(v) for v in c],
    }


def collection_from_dict(d: Dict[str, Any], factory: Optional[CollectionFactory] = None) -> TypedCollection:
    factory = factory or default_factory
    tag = KindTag(d["kind"])
    items = d.get("items", [])

    if tag is KindTag.OBJECT:
        records = items
    else:
        records = [[v] for v in items]
    c = factory.create_from_array(d["name"], records)
    if c.kind.tag is not tag:
        raise InvalidArgumentError(f"'{d['name']}' is registered as {c.kind.tag.value}, document says {tag.value}")

    keys = d.get("keys")
    if keys is not None and keys != c.keys():
        if len(keys) != len(c):
            raise InvalidArgumentError(f"Got {len(keys)} keys for {len(c)} items")
        c = type(c)(dict(zip(keys, c.to_list())), kind=c.kind)
    return c


def collection_to_json(c: TypedCollection) -> str:
    return json.dumps(collection_to_dict(c), sort_keys=True)


def collection_from_json(s: str, factory: Optional[CollectionFactory] = None) -> TypedCollection:
    d = json.loads(s)
    return collection_from_dict(d, factory)


def collection_to_yaml(c: TypedCollection) -> str:
    return yaml.safe_dump(collection_to_dict(c))


def collection_from_yaml(s: str, factory: Optional[CollectionFactory] = None) -> TypedCollection:
    d = yaml.safe_load(s)
    return collection_from_dict(d, factory)
