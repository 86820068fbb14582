"""Registry binding file extensions to locale readers."""

from typing import List, Optional

from portable_i18n.exceptions import ConfigError
from portable_i18n.logging import get_module_logger
from portable_i18n.models import ReaderBinding
from portable_i18n.readers.base import LocaleReader
from portable_i18n.readers.text import TextKvpReader

logger = get_module_logger()

DEFAULT_EXTENSION = ".txt"


class ReaderRegistry:
    """Ordered set of reader bindings.

    Each extension maps to exactly one reader and each reader instance is
    bound to exactly one extension.
    """

    def __init__(self) -> None:
        self._bindings: List[ReaderBinding] = []

    def register(self, reader: Optional[LocaleReader], extension: Optional[str]) -> ReaderBinding:
        """Bind a reader to a file extension.

        Args:
            reader: Reader instance parsing the format.
            extension: File extension including its dot (e.g. ".json").

        Returns:
            The new binding.

        Raises:
            ConfigError: If the reader or extension is invalid or already registered.
        """
        if reader is None:
            raise ConfigError("Reader cannot be None")

        if not extension:
            raise ConfigError("Reader extension is needed")

        if not extension.startswith("."):
            raise ConfigError("Reader extension must start with a dot ('.')")

        if len(extension) < 2:
            raise ConfigError("Reader extension must have at least one character after the dot")

        if extension.count(".") > 1:
            raise ConfigError("Reader extension can contain just one dot ('.')")

        if any(b.extension == extension for b in self._bindings):
            raise ConfigError(f"Extension '{extension}' is already registered")

        if any(b.reader is reader for b in self._bindings):
            raise ConfigError(f"Reader {reader!r} is already registered")

        binding = ReaderBinding(extension=extension, reader=reader)
        self._bindings.append(binding)
        logger.debug("registered_locale_reader", reader=repr(reader), extension=extension)
        return binding

    def ensure_default(self) -> None:
        """Put a TextKvpReader for ".txt" first unless ".txt" is already bound.

        A custom reader registered for ".txt" is kept as is.
        """
        if any(b.extension == DEFAULT_EXTENSION for b in self._bindings):
            return

        self._bindings.insert(0, ReaderBinding(extension=DEFAULT_EXTENSION, reader=TextKvpReader()))
        logger.debug("registered_default_reader", extension=DEFAULT_EXTENSION)

    def get(self, extension: str) -> LocaleReader:
        """Return the reader bound to an extension (exact, case-sensitive).

        Raises:
            ConfigError: If no reader handles the extension.
        """
        for binding in self._bindings:
            if binding.extension == extension:
                return binding.reader
        raise ConfigError(f"No locale reader registered for extension '{extension}'")

    @property
    def extensions(self) -> List[str]:
        return [b.extension for b in self._bindings]

    @property
    def bindings(self) -> List[ReaderBinding]:
        return list(self._bindings)

    def clear(self) -> None:
        self._bindings.clear()

    def __len__(self) -> int:
        return len(self._bindings)
