"""Locale providers: discover locales and open their raw content."""

from portable_i18n.providers.base import LocaleProvider
from portable_i18n.providers.files import DirectoryLocaleProvider, PackageResourceProvider
from portable_i18n.providers.memory import MemoryLocaleProvider

__all__ = [
    "LocaleProvider",
    "DirectoryLocaleProvider",
    "PackageResourceProvider",
    "MemoryLocaleProvider",
]
