"""Portable i18n - locale resolution and key-based translations.

Resolves which translation set to load for an application and serves
key-based string lookups against it.

Main components:
- providers: LocaleProvider and its directory, package and memory variants
- readers: LocaleReader, ReaderRegistry and the txt/json/yaml readers
- resolvers: LocaleResolver fallback chain
- store: TranslationStore lookups, formatting and enum helpers
- translator: I18N facade with change notifications
- section: I18NSection scoped lookups
- current: process-wide instance registry for the composition root
"""

from portable_i18n import current
from portable_i18n.culture import Culture, current_culture
from portable_i18n.exceptions import (
    ArgumentError,
    ConfigError,
    FormatArgumentsError,
    I18NError,
    InstanceDisposedError,
    KeyNotFoundError,
    LocaleNotAvailableError,
    NoLocalesAvailableError,
    ReaderFailureError,
)
from portable_i18n.factory import create_i18n
from portable_i18n.models import EnumMembers, Language, PropertyName
from portable_i18n.providers import (
    DirectoryLocaleProvider,
    LocaleProvider,
    MemoryLocaleProvider,
    PackageResourceProvider,
)
from portable_i18n.readers import (
    JsonKvpReader,
    LocaleReader,
    ReaderRegistry,
    TextKvpReader,
    YamlKvpReader,
)
from portable_i18n.resolvers import LocaleResolver
from portable_i18n.section import I18NSection
from portable_i18n.settings import I18NSettings
from portable_i18n.translator import I18N

__all__ = [
    "I18N",
    "I18NSection",
    "I18NSettings",
    "create_i18n",
    "current",
    "Culture",
    "current_culture",
    "EnumMembers",
    "Language",
    "PropertyName",
    "LocaleProvider",
    "DirectoryLocaleProvider",
    "PackageResourceProvider",
    "MemoryLocaleProvider",
    "LocaleReader",
    "ReaderRegistry",
    "TextKvpReader",
    "JsonKvpReader",
    "YamlKvpReader",
    "LocaleResolver",
    "I18NError",
    "ConfigError",
    "NoLocalesAvailableError",
    "LocaleNotAvailableError",
    "ReaderFailureError",
    "KeyNotFoundError",
    "ArgumentError",
    "FormatArgumentsError",
    "InstanceDisposedError",
]
