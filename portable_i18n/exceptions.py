"""Custom exceptions for the i18n system.

Provides specialized exceptions for reader registration, locale discovery,
locale loading and key lookup problems.
"""

from typing import Optional


class I18NError(Exception):
    """Base exception for all i18n errors.

    All i18n exceptions inherit from this base class for easier exception
    handling in application code.

    Example:
        try:
            i18n.init()
        except I18NError as e:
            logger.error("i18n_init_failed", error=str(e))
    """

    pass


class ConfigError(I18NError):
    """Raised when a reader or extension registration is invalid.

    Example:
        >>> i18n.add_locale_reader(JsonKvpReader(), "json")
        Traceback (most recent call last):
        ...
        ConfigError: Reader extension must start with a dot ('.')
    """

    pass


class NoLocalesAvailableError(I18NError):
    """Raised when a provider discovers no locales at all."""

    pass


class LocaleNotAvailableError(I18NError, LookupError):
    """Raised when a requested locale is not among the discovered locales.

    Example:
        >>> i18n.locale = "fr"
        Traceback (most recent call last):
        ...
        LocaleNotAvailableError: Locale 'fr' is not available
    """

    def __init__(self, locale: Optional[str]):
        self.locale = locale
        super().__init__(f"Locale '{locale}' is not available")


class ReaderFailureError(I18NError):
    """Raised when a reader fails to parse a locale stream.

    The original exception is kept as ``__cause__``.
    """

    def __init__(self, reader: str, locale: str, extension: str):
        self.reader = reader
        self.locale = locale
        self.extension = extension
        super().__init__(
            "The locale reader raised an exception while parsing.\n"
            f"Reader: {reader}.\n"
            f"Locale: {locale}{extension}"
        )


class KeyNotFoundError(I18NError, KeyError):
    """Raised on a missing key when throw_when_key_not_found is enabled."""

    def __init__(self, key: str, locale: Optional[str]):
        self.key = key
        self.locale = locale
        super().__init__(
            f"[I18N] key '{key}' not found in the current language '{locale}'"
        )

    def __str__(self) -> str:
        return str(self.args[0])


class ArgumentError(I18NError, ValueError):
    """Raised when a required argument is empty or missing."""

    pass


class FormatArgumentsError(I18NError, ValueError):
    """Raised when format arguments do not match a template's placeholders."""

    def __init__(self, key: str, expected: int, given: int):
        self.key = key
        self.expected = expected
        self.given = given
        super().__init__(
            f"Translation '{key}' expects {expected} format argument(s), got {given}"
        )


class InstanceDisposedError(I18NError):
    """Raised when a disposed I18N instance is used again."""

    pass
