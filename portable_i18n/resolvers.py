"""Locale resolution logic for choosing the locale to load.

Provides the fallback chain that picks one locale out of the discovered
ones, based on an explicit request, the host culture and a configured
fallback.
"""

from typing import Callable, Optional, Sequence

from portable_i18n.exceptions import LocaleNotAvailableError, NoLocalesAvailableError
from portable_i18n.logging import get_module_logger

logger = get_module_logger()


class LocaleResolver:
    """Resolves the locale to activate.

    Implements fallback chain, in strict priority order:
    1. Explicitly requested locale (must be available)
    2. Exact current culture match (e.g. "es-ES")
    3. Current culture language match (e.g. "es")
    4. Configured fallback locale, if available
    5. First available locale
    """

    def __init__(self, log: Optional[Callable[[str], None]] = None):
        """Initialize locale resolver.

        Args:
            log: Optional trace sink receiving one line per decision.
        """
        self.log = log or (lambda message: None)

    @staticmethod
    def default_locale(
        available: Sequence[str],
        current_culture_full: Optional[str],
        current_culture_lang: Optional[str],
    ) -> Optional[str]:
        """Find the locale matching the current culture.

        Args:
            available: Discovered locales in provider order.
            current_culture_full: Culture tag (e.g. "es-ES").
            current_culture_lang: Two-letter language (e.g. "es").

        Returns:
            The exact culture match, else the language match, else None.
        """
        if current_culture_full and current_culture_full in available:
            return current_culture_full
        if current_culture_lang and current_culture_lang in available:
            return current_culture_lang
        return None

    def resolve(
        self,
        available: Sequence[str],
        current_culture_full: Optional[str],
        current_culture_lang: Optional[str],
        requested: Optional[str] = None,
        fallback: Optional[str] = None,
    ) -> str:
        """Pick the locale to load.

        Args:
            available: Discovered locales in provider order.
            current_culture_full: Culture tag (e.g. "pt-BR").
            current_culture_lang: Two-letter language (e.g. "pt").
            requested: Locale explicitly asked for, if any.
            fallback: Locale used when the culture has no match.

        Returns:
            Locale identifier.

        Raises:
            NoLocalesAvailableError: If nothing is available.
            LocaleNotAvailableError: If ``requested`` is not available.
        """
        if not available:
            raise NoLocalesAvailableError("No locales are available")

        if requested:
            if requested not in available:
                logger.warning("requested_locale_not_available", locale=requested)
                raise LocaleNotAvailableError(requested)
            return requested

        matching = self.default_locale(available, current_culture_full, current_culture_lang)
        if matching:
            logger.info("resolved_from_culture", locale=matching, culture=current_culture_full)
            self.log(f"Default locale from current culture: {matching}")
            return matching

        if fallback and fallback in available:
            logger.info("fallback_locale_used", locale=fallback, culture=current_culture_full)
            self.log(f"Loading fallback locale: {fallback}")
            return fallback

        first = available[0]
        logger.info("first_locale_used", locale=first, culture=current_culture_full)
        self.log(f"Loading first locale on the list: {first}")
        return first
