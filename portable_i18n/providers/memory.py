"""In-memory locale provider.

Useful for tests and for hosts that fetch locale content themselves.

Example:
    provider = MemoryLocaleProvider({
        "en": (".txt", "one = one"),
        "es": (".txt", "one = uno"),
    })
"""

import io
from typing import BinaryIO, Dict, Iterable, Tuple, Union

from portable_i18n.providers.base import LocaleProvider


class MemoryLocaleProvider(LocaleProvider):
    """Serves locale content held in a dict, in insertion order."""

    def __init__(self, contents: Dict[str, Tuple[str, Union[str, bytes]]]):
        super().__init__()
        self.contents = dict(contents)

    def _scan(self) -> Iterable[Tuple[str, str]]:
        return [(locale, extension) for locale, (extension, _) in self.contents.items()]

    def _open(self, locale: str, extension: str) -> BinaryIO:
        raw = self.contents[locale][1]
        if isinstance(raw, str):
            raw = raw.encode("utf-8")
        return io.BytesIO(raw)

    def describe(self) -> str:
        return "memory"
