"""Translation helper settings."""

from typing import Optional

from pydantic import Field, field_validator

from glossa.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Defaults for translators and the process-wide dictionary store.

    Environment Variables:
        I18N_DEFAULT_LANGUAGE: Language of the process-wide store after a
            reset (default: pt_PT)
        I18N_TEST_MODE: Wrap unknown keys in brackets for instances built by
            the factories (default: False)
        I18N_TRANSLATIONS_DIR: Directory with YAML dictionaries used by
            create_from_directory()

    Example:
        ```python
        from glossa.configuration import settings

        language = settings.i18n.DEFAULT_LANGUAGE
        ```
    """

    DEFAULT_LANGUAGE: str = Field(default="pt_PT", alias="I18N_DEFAULT_LANGUAGE")
    TEST_MODE: bool = Field(default=False, alias="I18N_TEST_MODE")
    TRANSLATIONS_DIR: Optional[str] = Field(default=None, alias="I18N_TRANSLATIONS_DIR")

    @field_validator("DEFAULT_LANGUAGE", mode="before")
    @classmethod
    def validate_default_language(cls, v: Optional[str]) -> str:
        """Fall back to pt_PT when the variable is set but empty."""
        if not v:
            return "pt_PT"
        return v
