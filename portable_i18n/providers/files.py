"""Providers reading locale files from a folder.

Locale files are named ``<locale><extension>`` (``en.txt``, ``es-ES.json``)
and live directly inside the resources folder.
"""

from importlib import resources
from pathlib import Path
from types import ModuleType
from typing import BinaryIO, Iterable, Tuple, Union

from portable_i18n.providers.base import LocaleProvider

DEFAULT_FOLDER = "Locales"


def split_locale_file(name: str) -> Tuple[str, str]:
    """Split "es-ES.txt" into ("es-ES", ".txt").

    Only the last dot separates the extension.
    """
    stem, dot, suffix = name.rpartition(".")
    if not dot or not stem:
        return name, ""
    return stem, f".{suffix}"


class DirectoryLocaleProvider(LocaleProvider):
    """Discovers locale files in a filesystem folder.

    Attributes:
        path: Folder holding the locale files (``root / folder``).
    """

    def __init__(self, root: Union[str, Path], folder: str = DEFAULT_FOLDER):
        super().__init__()
        self.path = Path(root) / folder if folder else Path(root)

    def _scan(self) -> Iterable[Tuple[str, str]]:
        if not self.path.is_dir():
            return []
        return [
            split_locale_file(entry.name)
            for entry in sorted(self.path.iterdir(), key=lambda p: p.name)
            if entry.is_file()
        ]

    def _open(self, locale: str, extension: str) -> BinaryIO:
        return open(self.path / f"{locale}{extension}", "rb")

    def describe(self) -> str:
        return str(self.path)


class PackageResourceProvider(LocaleProvider):
    """Discovers locale files shipped as package data.

    Example:
        provider = PackageResourceProvider("myapp", folder="Locales")
    """

    def __init__(self, package: Union[str, ModuleType], folder: str = DEFAULT_FOLDER):
        super().__init__()
        self.package = package
        self.folder = folder

    def _root(self):
        root = resources.files(self.package)
        return root / self.folder if self.folder else root

    def _scan(self) -> Iterable[Tuple[str, str]]:
        root = self._root()
        if not root.is_dir():
            return []
        return [
            split_locale_file(entry.name)
            for entry in sorted(root.iterdir(), key=lambda p: p.name)
            if entry.is_file()
        ]

    def _open(self, locale: str, extension: str) -> BinaryIO:
        return (self._root() / f"{locale}{extension}").open("rb")

    def describe(self) -> str:
        name = self.package if isinstance(self.package, str) else self.package.__name__
        return f"{name}/{self.folder}"
