"""Host culture detection.

Reads the culture the process runs under and exposes the two forms locale
resolution needs: the full tag ("es-ES") and the language only ("es").
"""

import locale
import os
from typing import Optional

from babel import Locale as BabelLocale
from babel import UnknownLocaleError

from portable_i18n.logging import get_module_logger

logger = get_module_logger()

CULTURE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG", "LANGUAGE")


def normalize_tag(raw: Optional[str]) -> str:
    """Convert POSIX or BCP 47 forms to a culture tag.

    "es_ES.UTF-8" -> "es-ES", "pt_br" -> "pt-BR", "C"/"POSIX" -> "".
    """
    if not raw:
        return ""
    tag = raw.split(":")[0].split(".")[0].split("@")[0].strip()
    if tag.upper() in ("C", "POSIX"):
        return ""
    parts = tag.replace("_", "-").split("-")
    language = parts[0].lower()
    rest = [p.upper() if len(p) == 2 else p for p in parts[1:] if p]
    return "-".join([language] + rest)


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


class Culture:
    """A culture tag such as "es-ES".

    Attributes:
        name: Normalized tag; "" is the invariant culture.
        two_letter_language: Language part of the tag (e.g. "es").
    """

    def __init__(self, name: str = ""):
        self.name = normalize_tag(name)
        self.two_letter_language = self.name.split("-")[0] if self.name else ""

    @classmethod
    def parse(cls, raw: Optional[str]) -> "Culture":
        return cls(raw or "")

    @property
    def native_name(self) -> Optional[str]:
        """Culture name in its own language, first letter capitalized.

        Returns:
            "Español" for "es", or None when Babel does not know the culture.
        """
        return native_name(self.name)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Culture):
            return self.name == other.name
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Culture({self.name!r})"


def native_name(tag: str) -> Optional[str]:
    """Look up the native display name of a culture tag with Babel."""
    if not tag:
        return None
    try:
        parsed = BabelLocale.parse(tag, sep="-")
    except (UnknownLocaleError, ValueError):
        logger.debug("unknown_culture", culture=tag)
        return None
    name = parsed.get_display_name(parsed)
    return capitalize_first(name) if name else None


def current_culture() -> Culture:
    """Detect the culture of the running process.

    Environment variables win over ``locale.getlocale()``; the invariant
    culture is returned when nothing is set.
    """
    for var in CULTURE_ENV_VARS:
        value = normalize_tag(os.environ.get(var))
        if value:
            return Culture(value)

    try:
        system_locale = locale.getlocale()[0]
    except ValueError:
        system_locale = None

    return Culture(system_locale or "")
