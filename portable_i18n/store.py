"""Translation store for the active locale.

Holds exactly one flat key -> template mapping at a time and serves lookups,
positional formatting and enumeration batch translations against it.
"""

from enum import Enum
from string import Formatter
from typing import Any, BinaryIO, Dict, List, Optional, Tuple, Type, Union

from portable_i18n.exceptions import FormatArgumentsError, KeyNotFoundError, ReaderFailureError
from portable_i18n.logging import get_module_logger
from portable_i18n.models import EnumMembers
from portable_i18n.readers.base import LocaleReader
from portable_i18n.settings import I18NSettings

logger = get_module_logger()

EnumLike = Union[EnumMembers, Type[Enum]]

_formatter = Formatter()


def count_positional_fields(template: str) -> int:
    """Count the positional arguments a ``{0}``-style template consumes.

    Automatic fields (``{}``) count one each; numbered fields count up to
    the highest index. Nested fields inside format specs are included.

    Raises:
        ValueError: If the template is malformed (e.g. an unmatched brace).
    """
    auto = 0
    highest = -1
    for _, field_name, format_spec, _ in _formatter.parse(template):
        if field_name is None:
            continue
        head = field_name.split(".", 1)[0].split("[", 1)[0]
        if head == "":
            auto += 1
        elif head.isdigit():
            highest = max(highest, int(head))
        if format_spec:
            nested = count_positional_fields(format_spec)
            highest = max(highest, nested - 1)
    return max(auto, highest + 1)


def _as_members(enum_type: EnumLike) -> EnumMembers:
    if isinstance(enum_type, EnumMembers):
        return enum_type
    return EnumMembers.from_enum(enum_type)


class TranslationStore:
    """Active translations plus the lookup policy.

    The policy (not-found symbol, throw flag) is read from the shared
    settings object on every lookup, so changes apply immediately.

    Attributes:
        settings: Settings holding the not-found policy.
        locale: Locale of the active translations, or None when unloaded.
        translations: Active key -> template mapping.
    """

    def __init__(self, settings: I18NSettings):
        self.settings = settings
        self.locale: Optional[str] = None
        self.translations: Dict[str, str] = {}

    @staticmethod
    def load(reader: LocaleReader, stream: BinaryIO, locale: str, extension: str) -> Dict[str, str]:
        """Parse a locale stream with its reader.

        Args:
            reader: Reader bound to the locale's extension.
            stream: Raw locale content.
            locale: Locale being loaded (for error context).
            extension: File extension being loaded (for error context).

        Returns:
            Parsed translations; an empty dict when the reader returns None.

        Raises:
            ReaderFailureError: If the reader raises while parsing.
        """
        try:
            translations = reader.read(stream)
        except Exception as e:
            logger.error(
                "locale_reader_failed",
                reader=type(reader).__name__,
                locale=locale,
                extension=extension,
                error=str(e),
            )
            raise ReaderFailureError(type(reader).__name__, locale, extension) from e

        return dict(translations) if translations else {}

    def swap(self, locale: Optional[str], translations: Dict[str, str]) -> None:
        """Replace the active translations with a fully built mapping."""
        self.translations = translations
        self.locale = locale

    def clear(self) -> None:
        self.swap(None, {})

    def __contains__(self, key: str) -> bool:
        return key in self.translations

    def _format(self, key: str, template: str, args: Tuple[Any, ...]) -> str:
        if not args:
            return template
        expected = count_positional_fields(template)
        if expected != len(args):
            raise FormatArgumentsError(key, expected, len(args))
        return template.format(*args)

    def translate(self, key: str, *args: Any) -> str:
        """Translate a key, formatting the template with ``args`` if any.

        Returns:
            The translation, or ``<symbol><key><symbol>`` when the key is
            missing and throwing is disabled.

        Raises:
            KeyNotFoundError: If the key is missing and throwing is enabled.
            FormatArgumentsError: If ``args`` do not match the placeholders.
        """
        translations = self.translations
        if key in translations:
            return self._format(key, translations[key], args)

        if self.settings.throw_when_key_not_found:
            raise KeyNotFoundError(key, self.locale)

        symbol = self.settings.not_found_symbol
        return f"{symbol}{key}{symbol}"

    def translate_or_none(self, key: str, *args: Any) -> Optional[str]:
        """Translate a key, returning None when it is missing."""
        translations = self.translations
        if key not in translations:
            return None
        return self._format(key, translations[key], args)

    def _enum_keys(self, enum_type: EnumLike, section: Optional[str]) -> List[Tuple[Any, str]]:
        members = _as_members(enum_type)
        prefix = section or members.type_name
        return [(value, f"{prefix}.{name}") for value, name in members]

    def translate_enum_to_list(self, enum_type: EnumLike, section: Optional[str] = None) -> List[str]:
        """Translate every member of an enumeration, in declaration order.

        Args:
            enum_type: Enum class or EnumMembers.
            section: Key prefix replacing the enumeration type name.
        """
        return [self.translate(key) for _, key in self._enum_keys(enum_type, section)]

    def translate_enum_to_dict(self, enum_type: EnumLike, section: Optional[str] = None) -> Dict[Any, str]:
        """Map every member of an enumeration to its translation."""
        return {value: self.translate(key) for value, key in self._enum_keys(enum_type, section)}

    def translate_enum_to_tuple_list(
        self, enum_type: EnumLike, section: Optional[str] = None
    ) -> List[Tuple[Any, str]]:
        """Pair every member of an enumeration with its translation."""
        return [(value, self.translate(key)) for value, key in self._enum_keys(enum_type, section)]
