"""i18n configuration settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class I18NSettings(BaseSettings):
    """Configuration for an I18N instance.

    Every value can be set from the environment (or a ``.env`` file) and
    overridden afterwards through the fluent setters on ``I18N``.

    Environment Variables:
        I18N_NOT_FOUND_SYMBOL: Symbol wrapping untranslated keys (default: "?")
        I18N_THROW_WHEN_KEY_NOT_FOUND: Raise instead of wrapping (default: False)
        I18N_FALLBACK_LOCALE: Locale used when the culture has no match
        I18N_RESOURCES_FOLDER: Folder holding the locale files (default: "Locales")
        I18N_CULTURE: Culture override, e.g. "es-ES" (default: host culture)
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: "production" switches logs to JSON output

    Example:
        ```python
        from portable_i18n.settings import I18NSettings

        settings = I18NSettings(fallback_locale="en", not_found_symbol="##")
        i18n = I18N(settings=settings).init()
        ```
    """

    not_found_symbol: str = Field(
        default="?",
        alias="I18N_NOT_FOUND_SYMBOL",
        description="Symbol wrapping a key that has no translation",
    )
    throw_when_key_not_found: bool = Field(
        default=False,
        alias="I18N_THROW_WHEN_KEY_NOT_FOUND",
        description="Raise KeyNotFoundError instead of returning the wrapped key",
    )
    fallback_locale: Optional[str] = Field(
        default=None,
        alias="I18N_FALLBACK_LOCALE",
        description="Locale loaded when the current culture is not supported",
    )
    resources_folder: str = Field(
        default="Locales",
        alias="I18N_RESOURCES_FOLDER",
        description="Folder name holding the locale files",
    )
    culture: Optional[str] = Field(
        default=None,
        alias="I18N_CULTURE",
        description="Culture tag used instead of the host culture",
    )

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"


@lru_cache
def get_settings() -> I18NSettings:
    """Get process-wide settings loaded from the environment.

    Returns:
        I18NSettings: Cached settings instance.
    """
    return I18NSettings()
