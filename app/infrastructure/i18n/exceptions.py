"""Exceptions for the i18n system.

Both errors are raised while the catalog is built at startup and are not
meant to be recovered from at request time.
"""

from typing import Optional


class I18nError(Exception):
    """Base exception for i18n configuration and loading errors."""

    pass


class ConfigError(I18nError):
    """Raised when the i18n system is misconfigured.

    Example:
        >>> load_catalog(store, default_locale="de-DE")
        Traceback (most recent call last):
        ...
        ConfigError: Default locale de-DE has no message file
    """

    pass


class CatalogLoadError(I18nError):
    """Raised when a locale message file cannot be read or parsed.

    Attributes:
        path: Store path of the offending file (or directory).
        reason: Human readable description of the failure.
    """

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"Failed to load locale file {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
