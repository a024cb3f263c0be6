"""Configuration module - public API.

Centralized configuration for glossa using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation helper settings class

Example:
    ```python
    from glossa.configuration import settings

    default_language = settings.i18n.DEFAULT_LANGUAGE
    ```
"""

from glossa.configuration.i18n import I18nSettings
from glossa.configuration.settings import Settings

settings = Settings()

__all__ = ["Settings", "I18nSettings", "settings"]
