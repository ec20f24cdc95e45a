"""
Library settings.

Defaults cover every value the helpers need. Overrides can be loaded from a
YAML file, either passed explicitly or named by the TYPEKIT_SETTINGS
environment variable.

Example settings.yaml:

    glue: ";"
    date_formats: ["%Y-%m-%d", "%d.%m.%Y"]
    shorten_length: 80
"""

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional, Tuple

import yaml

from .errors import InvalidArgumentError


logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "TYPEKIT_SETTINGS"


@dataclass(frozen=True)
class Settings:
    """
    Process-wide defaults.

    Properties:
        glue: separator used by str(collection)
        date_formats: strptime formats tried, in order, by Date.parse
        datetime_formats: strptime formats tried, in order, by DateTime.parse
        shorten_length: characters kept by strings.shorten_text
        shorten_threshold: length above which shorten_text truncates
    """

    glue: str = ","
    date_formats: Tuple[str, ...] = ("%Y-%m-%d", "%d/%m/%Y")
    datetime_formats: Tuple[str, ...] = ("%Y-%m-%d %H:%M:%S", "%d/%m/%Y %H:%M:%S")
    shorten_length: int = 100
    shorten_threshold: int = 50


def settings_from_dict(d: Optional[Dict[str, Any]], base: Optional[Settings] = None) -> Settings:
    """
    Build Settings from a plain dict, starting from `base` (defaults if None).

    Raises:
        InvalidArgumentError: on unknown keys or a non-mapping document
    """
    base = base or Settings()
    if d is None:
        return base
    if not isinstance(d, dict):
        raise InvalidArgumentError(f"Settings document must be a mapping, got {type(d).__name__}")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(d) - known)
    if unknown:
        raise InvalidArgumentError(f"Unknown settings keys: {unknown}")

    values = dict(d)
    for key in ("date_formats", "datetime_formats"):
        if key in values:
            formats = values[key]
            if isinstance(formats, str):
                formats = [formats]
            values[key] = tuple(formats)
    return replace(base, **values)


def load_settings(path: Optional[str] = None) -> Settings:
    """
    Load settings from a YAML file.

    Args:
        path: YAML file; falls back to $TYPEKIT_SETTINGS, then to defaults

    Raises:
        FileNotFoundError: If the file doesn't exist
        InvalidArgumentError: If the document is malformed
    """
    path = path or os.environ.get(SETTINGS_ENV_VAR)
    if not path:
        return Settings()

    with open(path, "r", encoding="utf-8") as fh:
        document = yaml.safe_load(fh)
    logger.debug("Loaded typekit settings from %s", path)
    return settings_from_dict(document)


_current: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the active settings, loading them on first use."""
    global _current
    if _current is None:
        _current = load_settings()
    return _current


def configure(settings: Optional[Settings] = None) -> Settings:
    """Replace the active settings. Passing None resets to the loaded defaults."""
    global _current
    _current = settings
    return get_settings()
