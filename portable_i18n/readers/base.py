"""Locale reader interface.

Defines the contract for parsing a raw locale stream into translations.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Dict, Optional


class LocaleReader(ABC):
    """Abstract base for locale readers.

    Implementations parse one file format into a flat key -> translation
    mapping. Parse errors must propagate; the caller wraps them with the
    locale and extension being loaded.
    """

    @abstractmethod
    def read(self, stream: BinaryIO) -> Optional[Dict[str, str]]:
        """Parse a locale stream.

        Args:
            stream: Binary stream with the raw locale content.

        Returns:
            Flat mapping of translation keys to templates. None is treated
            as an empty mapping.
        """
        pass

    @staticmethod
    def decode(stream: BinaryIO) -> str:
        """Read the whole stream as UTF-8 text, tolerating a BOM."""
        raw = stream.read()
        if isinstance(raw, str):
            return raw.lstrip("\ufeff")
        return raw.decode("utf-8-sig")

    def __repr__(self) -> str:
        return type(self).__name__
