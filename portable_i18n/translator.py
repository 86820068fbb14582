"""I18N facade: locale switching, translation and change notifications.

Ties the provider, the reader registry, the locale resolver and the
translation store together behind one object.

Usage:
    i18n = (
        I18N(DirectoryLocaleProvider("assets"))
        .set_fallback_locale("en")
        .set_not_found_symbol("##")
        .init()
    )

    i18n.translate("Mailbox.Notification", "Marta", 56)
    i18n.locale = "es"
    i18n["one"]  # "uno"
"""

import os
import threading
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from portable_i18n.culture import Culture, current_culture, native_name
from portable_i18n.exceptions import ArgumentError, InstanceDisposedError
from portable_i18n.logging import I18NLog, get_module_logger
from portable_i18n.models import Language, PropertyName
from portable_i18n.notifier import PropertyChangedHandler, PropertyChangedNotifier
from portable_i18n.providers.base import LocaleProvider
from portable_i18n.providers.files import DirectoryLocaleProvider, PackageResourceProvider
from portable_i18n.readers.base import LocaleReader
from portable_i18n.readers.registry import ReaderRegistry
from portable_i18n.resolvers import LocaleResolver
from portable_i18n.section import I18NSection
from portable_i18n.settings import I18NSettings, get_settings
from portable_i18n.store import EnumLike, TranslationStore

logger = get_module_logger()

Host = Union[str, ModuleType, os.PathLike]


class I18N:
    """Translation facade for one application.

    Attributes:
        settings: Private copy of the settings this instance runs with.
    """

    def __init__(
        self,
        provider: Optional[LocaleProvider] = None,
        settings: Optional[I18NSettings] = None,
        culture: Optional[Union[Culture, str]] = None,
    ):
        """Initialize the facade. Nothing is loaded until ``init()``.

        Args:
            provider: Where locales live. When omitted, ``init()`` builds a
                provider over the resources folder.
            settings: Configuration; defaults to the environment settings.
            culture: Culture override; defaults to settings.culture, then the
                host culture.
        """
        self.settings = (settings or get_settings()).model_copy()
        self._provider = provider
        self._owns_provider = provider is None
        self._host: Optional[Host] = None
        self._culture = Culture(culture) if isinstance(culture, str) else culture
        self._readers = ReaderRegistry()
        self._store = TranslationStore(self.settings)
        self._notifier = PropertyChangedNotifier(self)
        self._log = I18NLog(logger)
        self._resolver = LocaleResolver(self._log)
        self._locales: List[str] = []
        self._extensions: Dict[str, str] = {}
        self._lock = threading.RLock()
        self._disposed = False

    # Fluent API

    def set_not_found_symbol(self, symbol: Optional[str]) -> "I18N":
        """Set the symbol wrapping missing keys ("##" gives "##key##").

        Empty symbols are ignored.
        """
        if symbol:
            self.settings.not_found_symbol = symbol
        return self

    def set_logger(self, output: Optional[Callable[[str], None]]) -> "I18N":
        """Send ``[I18N]``-prefixed trace lines to ``output``; None disables it."""
        self._log.callback = output
        return self

    def set_throw_when_key_not_found(self, enabled: bool) -> "I18N":
        """Raise KeyNotFoundError on missing keys instead of wrapping them."""
        self.settings.throw_when_key_not_found = enabled
        return self

    def set_fallback_locale(self, locale: Optional[str]) -> "I18N":
        """Set the locale loaded when the current culture is not supported."""
        self.settings.fallback_locale = locale
        return self

    def set_resources_folder(self, folder_name: str) -> "I18N":
        """Set the folder the default provider reads locale files from."""
        self.settings.resources_folder = folder_name
        return self

    def add_locale_reader(self, reader: LocaleReader, extension: str) -> "I18N":
        """Parse files with ``extension`` using ``reader``.

        Raises:
            ConfigError: If the reader or extension is invalid or already registered.
        """
        self._check_alive()
        self._readers.register(reader, extension)
        return self

    def init(self, host: Optional[Host] = None) -> "I18N":
        """Discover locales and load the one matching the current culture.

        Can be called again to re-discover and reload, e.g. after changing
        the fallback locale.

        Args:
            host: Where the default provider looks when no provider was
                given: a package name or module (package data) or a path
                (filesystem). Defaults to the working directory.

        Returns:
            The facade itself.

        Raises:
            NoLocalesAvailableError: If no locale is discovered.
            ReaderFailureError: If the selected locale cannot be parsed.
        """
        self._check_alive()
        with self._lock:
            self._readers.ensure_default()

            provider = self._prepare_provider(host)
            try:
                extensions = dict(provider.discover())
                locales = list(extensions)

                culture = self.culture
                locale = self._resolver.resolve(
                    locales,
                    culture.name,
                    culture.two_letter_language,
                    fallback=self.settings.fallback_locale,
                )
                self._load_locale(provider, locale, extensions[locale])
            except Exception:
                if provider is not self._provider:
                    provider.dispose()
                raise

            # Commit only once the selected locale has loaded.
            if provider is not self._provider:
                if self._provider is not None:
                    self._provider.dispose()
                self._provider = provider
            if host is not None:
                self._host = host
            self._locales = locales
            self._extensions = extensions

        self._notify_locale_changed()
        return self

    # Load stuff

    def _prepare_provider(self, host: Optional[Host]) -> LocaleProvider:
        provider = self._provider
        if self._owns_provider:
            provider = self._build_provider(host if host is not None else self._host)
        return provider.init(self._readers.extensions)

    def _build_provider(self, host: Optional[Host]) -> LocaleProvider:
        folder = self.settings.resources_folder
        if host is None:
            return DirectoryLocaleProvider(Path.cwd(), folder)
        if isinstance(host, (str, ModuleType)):
            return PackageResourceProvider(host, folder)
        return DirectoryLocaleProvider(host, folder)

    def _load_locale(self, provider: LocaleProvider, locale: str, extension: str) -> None:
        reader = self._readers.get(extension)

        with provider.open_stream(locale) as stream:
            translations = TranslationStore.load(reader, stream, locale, extension)

        self._store.swap(locale, translations)
        self._log_translations()
        logger.info("locale_loaded", locale=locale, extension=extension, key_count=len(translations))

    def _switch_locale(self, locale: Optional[str]) -> None:
        if not locale:
            raise ArgumentError("Locale cannot be empty")

        with self._lock:
            target = self._resolver.resolve(self._locales, None, None, requested=locale)
            self._load_locale(self._provider, target, self._extensions[target])

        self._notify_locale_changed()

    def _notify_locale_changed(self) -> None:
        for name in PropertyName:
            self._notifier.notify(name)

    # Properties

    @property
    def culture(self) -> Culture:
        """Culture used to pick the initial locale."""
        if self._culture is not None:
            return self._culture
        if self.settings.culture:
            return Culture(self.settings.culture)
        return current_culture()

    @property
    def locale(self) -> Optional[str]:
        """The loaded locale ("en", "es-ES"), if any."""
        return self._store.locale

    @locale.setter
    def locale(self, value: str) -> None:
        self._check_alive()
        if value == self._store.locale:
            self._log(f"{value} is the current locale. No actions will be taken")
            return
        self._switch_locale(value)

    @property
    def language(self) -> Optional[Language]:
        """The loaded language, if any."""
        languages = self.languages
        if not languages:
            return None
        return next((lang for lang in languages if lang.locale == self._store.locale), None)

    @language.setter
    def language(self, value: Language) -> None:
        self._check_alive()
        if value is None:
            raise ArgumentError("Language cannot be None")
        if value.locale == self._store.locale:
            self._log(f"{value.display_name or value.locale} is the current language. No actions will be taken")
            return
        self._switch_locale(value.locale)

    @property
    def languages(self) -> Optional[List[Language]]:
        """Discovered languages with display names, None once disposed.

        A language is named by translating its own locale id, else by its
        native culture name.
        """
        if self._disposed:
            return None
        return [
            Language(
                locale=locale,
                display_name=self._store.translate_or_none(locale) or native_name(locale) or locale,
            )
            for locale in self._locales
        ]

    @property
    def available_locales(self) -> List[str]:
        return list(self._locales)

    def get_default_locale(self) -> Optional[str]:
        """Return the discovered locale matching the current culture, if any."""
        culture = self.culture
        return LocaleResolver.default_locale(self._locales, culture.name, culture.two_letter_language)

    # Translations

    def __getitem__(self, key: str) -> str:
        return self.translate(key)

    def translate(self, key: str, *args: Any) -> str:
        """Translate a key, formatting it with ``args`` (``{0}`` placeholders).

        Returns:
            The translation, or the key wrapped in the not-found symbol.

        Raises:
            KeyNotFoundError: If the key is missing and throwing is enabled.
            FormatArgumentsError: If ``args`` do not match the placeholders.
        """
        self._check_alive()
        return self._store.translate(key, *args)

    def translate_or_none(self, key: str, *args: Any) -> Optional[str]:
        """Translate a key, returning None when it is missing."""
        self._check_alive()
        return self._store.translate_or_none(key, *args)

    def get_section(self, section: str) -> I18NSection:
        """Return an accessor translating keys under ``section``.

        Raises:
            ArgumentError: If ``section`` is empty.
        """
        if not section:
            raise ArgumentError("Section name cannot be empty")
        return I18NSection(self, section)

    def translate_enum_to_dict(self, enum_type: EnumLike, section: Optional[str] = None) -> Dict[Any, str]:
        """Map each enumeration member to the translation of ``<prefix>.<name>``."""
        self._check_alive()
        return self._store.translate_enum_to_dict(enum_type, section)

    def translate_enum_to_list(self, enum_type: EnumLike, section: Optional[str] = None) -> List[str]:
        """Translate each enumeration member, in declaration order."""
        self._check_alive()
        return self._store.translate_enum_to_list(enum_type, section)

    def translate_enum_to_tuple_list(
        self, enum_type: EnumLike, section: Optional[str] = None
    ) -> List[Tuple[Any, str]]:
        """Pair each enumeration member with its translation."""
        self._check_alive()
        return self._store.translate_enum_to_tuple_list(enum_type, section)

    # Notifications

    def subscribe(
        self,
        handler: PropertyChangedHandler,
        property_name: Optional[Union[PropertyName, str]] = None,
    ) -> PropertyChangedHandler:
        """Call ``handler(i18n, property_name)`` after locale changes."""
        self._check_alive()
        return self._notifier.subscribe(handler, property_name)

    def unsubscribe(self, handler: PropertyChangedHandler) -> None:
        self._notifier.unsubscribe(handler)

    # Logging

    def _log_translations(self) -> None:
        self._log("========== I18N translations ==========")
        for key, value in self._store.translations.items():
            self._log(f"{key} = {value}")
        self._log("====== I18N end of translations =======")

    # Cleanup

    def _check_alive(self) -> None:
        if self._disposed:
            raise InstanceDisposedError("This I18N instance has been disposed, create a new one")

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Release everything; the instance cannot be used afterwards."""
        if self._disposed:
            return

        with self._lock:
            self._notifier.clear()
            self._store.clear()
            self._locales = []
            self._extensions = {}
            self._readers.clear()
            if self._provider is not None:
                self._provider.dispose()
                self._provider = None
            self._disposed = True

        self._log("Disposed")
        logger.info("i18n_disposed")
        self._log.callback = None

    def __repr__(self) -> str:
        state = "disposed" if self._disposed else self._store.locale
        return f"I18N(locale={state!r})"
