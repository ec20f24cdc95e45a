"""
String helpers: case conversion, slugs and shortening.
"""

import re
from typing import Optional

from .config import get_settings


_UPPER_RE = re.compile(r"([A-Z])")
_SNAKE_RE = re.compile(r"_([a-z])")

# Polish diacritics -> ASCII. Applied after lower-casing.
_POLISH_TABLE = str.maketrans({
    "ś": "s",
    "ć": "c",
    "ó": "o",
    "ń": "n",
    "ł": "l",
    "ę": "e",
    "ą": "a",
    "ź": "z",
    "ż": "z",
})


def to_snake_case(text: str) -> str:
    """
    Convert camelCase / PascalCase to snake_case.

    Example:
        to_snake_case("HelloBigWorld") -> "hello_big_world"
    """
    if not text:
        return text
    text = text[0].lower() + text[1:]
    return _UPPER_RE.sub(lambda m: "_" + m.group(1).lower(), text)


def to_camel_case(text: str, capitalise_first: bool = False) -> str:
    """
    Convert snake_case to camelCase (or PascalCase with capitalise_first).

    Example:
        to_camel_case("hello_big_world") -> "helloBigWorld"
    """
    if not text:
        return text
    if capitalise_first:
        text = text[0].upper() + text[1:]
    return _SNAKE_RE.sub(lambda m: m.group(1).upper(), text)


def strip_polish(text: str) -> str:
    """
    Turn free text into a URL slug, transliterating Polish characters.

    Example:
        strip_polish("Zażółć gęślą jaźń") -> "zazolc-gesla-jazn"
    """
    text = text.lower()
    text = text.replace("/", "")
    text = text.translate(_POLISH_TABLE)
    text = re.sub(r"[ ]+", " ", text)
    text = re.sub(r"[_]+", "-", text)
    text = re.sub(r"[^\-a-z0-9\s]+", "", text)
    text = text.replace(" ", "-")
    text = re.sub(r"-{2,}", "-", text)
    return text.strip("-")


def shorten_text(text: str, length: Optional[int] = None) -> str:
    """
    Truncate long text and append an ellipsis.

    Text longer than settings.shorten_threshold is cut to `length`
    (settings.shorten_length by default). HTML non-breaking spaces are removed.
    """
    settings = get_settings()
    if length is None:
        length = settings.shorten_length
    text = text.replace("&nbsp;", "")
    if len(text) > settings.shorten_threshold:
        return text[:length] + "..."
    return text


def to_delimited_lower_case(text: str, delimiter: str = "-") -> str:
    """Lower-case text, replacing everything but [a-z0-9 ] with the delimiter."""
    return re.sub(r"[^a-z0-9 ]", delimiter, text.lower())


__all__ = [
    "to_snake_case",
    "to_camel_case",
    "strip_polish",
    "shorten_text",
    "to_delimited_lower_case",
]
