"""Core data structures for the i18n system."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator, Tuple, Type

if TYPE_CHECKING:
    from portable_i18n.readers.base import LocaleReader


class PropertyName(str, Enum):
    """Property tokens sent to observers after a locale change.

    Observers receive them in declaration order.
    """

    LOCALE = "Locale"
    LANGUAGE = "Language"
    ITEMS = "Item[]"


@dataclass(frozen=True)
class Language:
    """A discovered locale together with its human-readable name.

    Attributes:
        locale: Locale identifier (e.g. "es" or "es-ES").
        display_name: Name shown to users (e.g. "Español").
    """

    locale: str
    display_name: str = ""

    def __str__(self) -> str:
        return self.display_name


@dataclass(frozen=True)
class ReaderBinding:
    """A locale reader bound to the file extension it parses."""

    extension: str
    reader: "LocaleReader"


@dataclass(frozen=True)
class EnumMembers:
    """Ordered members of an enumeration used for batch translations.

    Keys are built as ``<type_name>.<member name>`` unless a section is
    given to the translate helpers.

    Attributes:
        type_name: Name of the enumeration type (e.g. "Animals").
        members: ``(value, name)`` pairs in declaration order.
    """

    type_name: str
    members: Tuple[Tuple[Any, str], ...]

    @classmethod
    def from_enum(cls, enum_type: Type[Enum]) -> "EnumMembers":
        """Build members from a Python Enum class, in declaration order.

        Aliases are skipped, as iterating the Enum does.
        """
        return cls(
            type_name=enum_type.__name__,
            members=tuple((member, member.name) for member in enum_type),
        )

    def __iter__(self) -> Iterator[Tuple[Any, str]]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)
