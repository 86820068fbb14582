"""Readers for JSON and YAML locale files.

Both accept nested mappings and flatten them into dotted keys::

    Mailbox:
      Notification: "Hola {0}, tienes {1} emails"

becomes ``{"Mailbox.Notification": "Hola {0}, tienes {1} emails"}``.
"""

import json
from typing import Any, BinaryIO, Dict, Optional

import yaml

from portable_i18n.readers.base import LocaleReader


def flatten(data: Dict[str, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten nested mappings into ``namespace.key`` entries.

    Args:
        data: Parsed document.
        prefix: Key prefix of the current nesting level.

    Returns:
        Flat mapping with string values.
    """
    result: Dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            result.update(flatten(value, full_key))
        elif value is None:
            result[full_key] = ""
        else:
            result[full_key] = str(value)
    return result


def _as_translations(data: Any, source: str) -> Optional[Dict[str, str]]:
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ValueError(f"{source} locale document must be a mapping, got {type(data).__name__}")
    return flatten(data)


class JsonKvpReader(LocaleReader):
    """Parses JSON objects into flat translations."""

    def read(self, stream: BinaryIO) -> Optional[Dict[str, str]]:
        text = self.decode(stream)
        if not text.strip():
            return None
        return _as_translations(json.loads(text), "JSON")


class YamlKvpReader(LocaleReader):
    """Parses YAML mappings into flat translations."""

    def read(self, stream: BinaryIO) -> Optional[Dict[str, str]]:
        return _as_translations(yaml.safe_load(self.decode(stream)), "YAML")
