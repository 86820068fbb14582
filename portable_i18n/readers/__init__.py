"""Locale readers: parse raw locale streams into flat translations."""

from portable_i18n.readers.base import LocaleReader
from portable_i18n.readers.registry import ReaderRegistry
from portable_i18n.readers.structured import JsonKvpReader, YamlKvpReader
from portable_i18n.readers.text import TextKvpReader

__all__ = [
    "LocaleReader",
    "ReaderRegistry",
    "TextKvpReader",
    "JsonKvpReader",
    "YamlKvpReader",
]
