"""Factory functions for creating i18n components.

Provides a convenience function building a ready-to-use I18N facade with the
application's default configuration.
"""

from typing import Iterable, Optional, Tuple, Union

from portable_i18n.culture import Culture
from portable_i18n.logging import configure_logging, get_module_logger
from portable_i18n.providers.base import LocaleProvider
from portable_i18n.readers.base import LocaleReader
from portable_i18n.settings import I18NSettings
from portable_i18n.translator import I18N, Host

logger = get_module_logger()


def create_i18n(
    provider: Optional[LocaleProvider] = None,
    settings: Optional[I18NSettings] = None,
    culture: Optional[Union[Culture, str]] = None,
    host: Optional[Host] = None,
    readers: Optional[Iterable[Tuple[LocaleReader, str]]] = None,
    init: bool = True,
    configure_logs: bool = False,
) -> I18N:
    """Create and configure an I18N instance.

    Args:
        provider: Locale provider (default: built from ``host`` on init)
        settings: Configuration (default: loaded from the environment)
        culture: Culture override (default: host culture)
        host: Package name, module or path holding the resources folder
        readers: Extra ``(reader, extension)`` bindings
        init: Whether to discover and load immediately (default: True)
        configure_logs: Whether to configure structlog output (default: False)

    Returns:
        I18N: Configured facade

    Usage:
        # Locale files in ./Locales, culture from the environment
        i18n = create_i18n()

        # Package data with YAML support
        i18n = create_i18n(host="myapp", readers=[(YamlKvpReader(), ".yml")])

        # Lazy initialization
        i18n = create_i18n(init=False)
        i18n.set_fallback_locale("en").init()
    """
    if configure_logs:
        configure_logging(
            log_level=settings.LOG_LEVEL if settings else None,
            is_production=settings.is_production if settings else None,
        )

    i18n = I18N(provider=provider, settings=settings, culture=culture)
    for reader, extension in readers or ():
        i18n.add_locale_reader(reader, extension)

    if init:
        i18n.init(host)
        logger.info(
            "i18n_created_with_init",
            locale=i18n.locale,
            locale_count=len(i18n.available_locales),
        )
    else:
        logger.info("i18n_created_lazy")

    return i18n
