"""
Subdomain localization for FastAPI/Starlette applications.

Resolves the request locale (subdomain, host mapping, session, Accept-Language,
default), keeps it in a request-scoped resolver, and rewrites URLs to carry the
locale as the first host label.
"""

from localization.dependencies import (
    get_locale_registry,
    get_locale_resolver,
    get_url_localizer,
    localization,
    localize_url,
)
from localization.exceptions import (
    ConfigurationError,
    LocalizationError,
    SupportedLocalesNotDefined,
    UnsupportedDefaultLocale,
)
from localization.middleware.localization import LocalizationMiddleware
from localization.provider import setup_localization
from localization.registry import LocaleEntry, LocaleRegistry
from localization.resolver import LocaleResolver
from localization.urls import UrlLocalizer

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "LocaleEntry",
    "LocaleRegistry",
    "LocaleResolver",
    "LocalizationError",
    "LocalizationMiddleware",
    "SupportedLocalesNotDefined",
    "UnsupportedDefaultLocale",
    "UrlLocalizer",
    "get_locale_registry",
    "get_locale_resolver",
    "get_url_localizer",
    "localization",
    "localize_url",
    "setup_localization",
]
