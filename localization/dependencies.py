"""
FastAPI dependencies and helpers for route handlers and templates.

    @app.get("/")
    async def index(resolver: LocaleResolver = Depends(get_locale_resolver)):
        return {"locale": resolver.current_locale()}
"""

from __future__ import annotations

from typing import Any, Literal

from fastapi import Depends, Request

from localization.config import LocalizationSettings
from localization.config import settings as default_settings
from localization.registry import LocaleRegistry
from localization.resolver import LocaleResolver
from localization.urls import UrlLocalizer


def get_localization_settings(request: Request) -> LocalizationSettings:
    return getattr(request.app.state, "localization_settings", None) or default_settings


def get_locale_registry(request: Request) -> LocaleRegistry:
    registry = getattr(request.app.state, "locale_registry", None)
    if registry is None:
        registry = LocaleRegistry.from_settings(get_localization_settings(request))
        request.app.state.locale_registry = registry
    return registry


def get_locale_resolver(request: Request) -> LocaleResolver:
    """Return the resolver the middleware built for this request.

    Requests the middleware skipped (e.g. POST) get a fresh, uncommitted one.
    """
    resolver = getattr(request.state, "locale_resolver", None)
    if resolver is None:
        settings = get_localization_settings(request)
        resolver = LocaleResolver(
            get_locale_registry(request),
            request,
            use_accept_language_header=settings.use_accept_language_header,
            apply_time_locale=settings.apply_time_locale,
        )
        request.state.locale_resolver = resolver
    return resolver


def get_url_localizer(resolver: LocaleResolver = Depends(get_locale_resolver)) -> UrlLocalizer:
    return UrlLocalizer(resolver)


def localization(request: Request) -> LocaleResolver:
    """Shortcut to the request's resolver outside of dependency injection."""
    return get_locale_resolver(request)


def localize_url(
    request: Request,
    url: str | None = None,
    locale: str | Literal[False] | None = None,
    extra: dict[str, Any] | None = None,
) -> str:
    """Return ``url`` localized for ``locale`` (current locale by default)."""
    return UrlLocalizer(get_locale_resolver(request)).localize(url, locale, extra)
