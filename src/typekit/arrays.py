"""
Array helpers.
"""

import json
from typing import Any, Dict, Hashable, Mapping, Optional

from .interfaces import Arrayable


def _scalar_to_string(element: Any) -> str:
    # True -> "1", False -> "", 2.0 -> "2"
    if isinstance(element, bool):
        return "1" if element else ""
    if isinstance(element, float) and element.is_integer():
        return str(int(element))
    return str(element)


def _flatten_value(element: Any) -> Optional[str]:
    if isinstance(element, (str, int, float)):
        return _scalar_to_string(element)
    if isinstance(element, Arrayable):
        return json.dumps(element.to_array(), sort_keys=True, default=str)
    return None


def to_flat(data: Mapping[Hashable, Any]) -> Dict[Hashable, str]:
    """
    Convert an associative mapping into a flat mapping of strings.

    Scalars become their string form: True is "1", False is "" (and so
    dropped), and whole floats lose their fraction ("2.0" becomes "2").
    Arrayable objects become a JSON string of to_array(). None, empty
    strings and anything else are dropped. Keys are kept.
    """
    flat = {}
    for key, element in data.items():
        value = _flatten_value(element)
        if value:
            flat[key] = value
    return flat
