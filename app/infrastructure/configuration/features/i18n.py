"""Internationalization feature settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Locale negotiation and translation configuration.

    Environment Variables:
        I18N_LOCALES_DIR: Directory (inside the content store) holding locale
            message files (default: locales)
        I18N_DEFAULT_LOCALE: Locale used when no client preference matches
            (default: en-US)
        I18N_LANGUAGE_HEADER: Request header carrying language preferences
            (default: Accept-Language)
        I18N_QUERY_PARAM: Query parameter that overrides the header, empty
            string disables the override (default: lang)
        I18N_LOCALIZED_VIEWS: Propose locale-qualified template names
            (default: false)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        default_tag = settings.i18n.I18N_DEFAULT_LOCALE
        ```
    """

    I18N_LOCALES_DIR: str = Field(default="locales", alias="I18N_LOCALES_DIR")
    I18N_DEFAULT_LOCALE: str = Field(default="en-US", alias="I18N_DEFAULT_LOCALE")
    I18N_LANGUAGE_HEADER: str = Field(
        default="Accept-Language", alias="I18N_LANGUAGE_HEADER"
    )
    I18N_QUERY_PARAM: str = Field(default="lang", alias="I18N_QUERY_PARAM")
    I18N_LOCALIZED_VIEWS: bool = Field(default=False, alias="I18N_LOCALIZED_VIEWS")

    @field_validator("I18N_DEFAULT_LOCALE", "I18N_LANGUAGE_HEADER", mode="before")
    @classmethod
    def strip_value(cls, v: str) -> str:
        """Strip surrounding whitespace from header and locale values."""
        return v.strip() if isinstance(v, str) else v
