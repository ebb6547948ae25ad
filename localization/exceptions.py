"""
Custom Exception Classes for the localization layer

Configuration errors are raised while the locale registry is built and are
meant to abort application startup. Nothing in the per-request path raises:
unknown locales degrade to the fallback chain instead.
"""

from typing import Any

from fastapi import status


class LocalizationError(Exception):
    """Base exception class for all localization-related exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(LocalizationError):
    """Raised when the localization configuration cannot be used"""

    def __init__(self, message: str = "Invalid localization configuration", details: dict[str, Any] | None = None):
        super().__init__(message=message, details=details)


class SupportedLocalesNotDefined(ConfigurationError):
    """Raised when supported_locales is missing, empty or malformed"""

    def __init__(self, message: str = "Supported locales must be defined.", details: dict[str, Any] | None = None):
        super().__init__(message=message, details=details)


class UnsupportedDefaultLocale(ConfigurationError):
    """Raised when the default locale is not one of the supported locales"""

    def __init__(self, locale: str, supported: list[str] | None = None):
        super().__init__(
            message=f"Default locale '{locale}' is not in the supported_locales mapping.",
            details={"locale": locale, "supported": supported or []},
        )
