"""Locale provider interface.

A provider knows where locale data lives: it discovers which locales exist
and opens the raw content of one of them.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Dict, Iterable, List, Optional, Tuple

from portable_i18n.exceptions import ConfigError, LocaleNotAvailableError, NoLocalesAvailableError
from portable_i18n.logging import get_module_logger

logger = get_module_logger()


class LocaleProvider(ABC):
    """Abstract base for locale providers.

    Subclasses implement ``_scan`` and ``_open``; discovery bookkeeping
    (ordering, duplicate detection, empty results) lives here.

    Attributes:
        known_extensions: Extensions that have a reader; other files are ignored.
    """

    def __init__(self) -> None:
        self.known_extensions: Tuple[str, ...] = ()
        self._locales: Dict[str, str] = {}

    def init(self, known_extensions: Iterable[str]) -> "LocaleProvider":
        """Prepare the provider for discovery.

        Args:
            known_extensions: File extensions the reader registry can parse.

        Returns:
            The provider itself.
        """
        self.known_extensions = tuple(known_extensions)
        return self

    def discover(self) -> List[Tuple[str, str]]:
        """Enumerate available locales in provider order.

        Returns:
            ``(locale, extension)`` pairs.

        Raises:
            NoLocalesAvailableError: If no locale is found.
            ConfigError: If two files provide the same locale.
        """
        found: Dict[str, str] = {}
        for locale, extension in self._scan():
            if extension not in self.known_extensions:
                continue
            if locale in found:
                raise ConfigError(
                    f"Locale '{locale}' is provided twice ({found[locale]} and {extension})"
                )
            found[locale] = extension

        if not found:
            raise NoLocalesAvailableError(f"No locales have been found in {self.describe()}")

        self._locales = found
        logger.info(
            "discovered_locales",
            provider=type(self).__name__,
            locales=list(found),
        )
        return list(found.items())

    def open_stream(self, locale: str) -> BinaryIO:
        """Open the raw content of a discovered locale.

        Raises:
            LocaleNotAvailableError: If the locale was not discovered.
        """
        extension = self._locales.get(locale)
        if extension is None:
            raise LocaleNotAvailableError(locale)
        return self._open(locale, extension)

    def extension_of(self, locale: str) -> Optional[str]:
        return self._locales.get(locale)

    def dispose(self) -> None:
        """Release discovery state."""
        self._locales = {}

    def describe(self) -> str:
        return type(self).__name__

    @abstractmethod
    def _scan(self) -> Iterable[Tuple[str, str]]:
        """Yield ``(locale, extension)`` for every candidate file."""
        pass

    @abstractmethod
    def _open(self, locale: str, extension: str) -> BinaryIO:
        """Open one locale file as a binary stream."""
        pass
