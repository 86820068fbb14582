"""Scoped translation accessor."""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from portable_i18n.translator import I18N


class I18NSection:
    """Translates keys relative to a section, e.g. ``Mailbox``.

    ``section.translate("Notification")`` is
    ``i18n.translate("Mailbox.Notification")``; the not-found policy is the
    facade's.
    """

    def __init__(self, i18n: "I18N", name: str):
        self.i18n = i18n
        self.name = name

    def _key(self, key: str) -> str:
        return f"{self.name}.{key}"

    def translate(self, key: str, *args: Any) -> str:
        return self.i18n.translate(self._key(key), *args)

    def translate_or_none(self, key: str, *args: Any) -> Optional[str]:
        return self.i18n.translate_or_none(self._key(key), *args)

    def __getitem__(self, key: str) -> str:
        return self.translate(key)

    def __repr__(self) -> str:
        return f"I18NSection({self.name!r})"
