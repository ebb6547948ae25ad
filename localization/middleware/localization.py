"""
Localization Middleware

Resolves the request locale from the host and keeps first-time visitors on
their preferred language:
  1. Leading subdomain label, when it is a supported locale (es.example.com)
  2. settings.hosts mapping of full host → locale
  3. Registry default locale (fallback)

A first visit to the default-locale host with no stored session preference
records the browser locale in the session and, when that locale is not the
default, answers with a 301 redirect to the localized host.

Requires Starlette's SessionMiddleware to run before it (register it AFTER
this middleware in create_app(); Starlette middleware is LIFO). Without a
session the redirect logic still runs but nothing is remembered.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse

from localization.config import LocalizationSettings
from localization.config import settings as default_settings
from localization.registry import LocaleRegistry
from localization.resolver import LocaleResolver
from localization.urls import UrlLocalizer

if TYPE_CHECKING:
    from collections.abc import Callable

    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class LocalizationMiddleware(BaseHTTPMiddleware):
    """Commit the request locale and redirect first-time visitors.

    Attributes set on request.state:
        locale_resolver (LocaleResolver): request-scoped resolver
        locale          (str):            committed locale code
    """

    def __init__(
        self,
        app: ASGIApp,
        registry: LocaleRegistry | None = None,
        settings: LocalizationSettings | None = None,
    ):
        super().__init__(app)
        self.settings = settings or default_settings
        self.registry = registry or LocaleRegistry.from_settings(self.settings)
        self.localized_methods = frozenset(m.upper() for m in self.settings.localized_methods)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Unsafe verbs are never redirected or re-localized
        if request.method not in self.localized_methods:
            return await call_next(request)

        resolver = self.make_resolver(request)
        request.state.locale_resolver = resolver

        current_locale = resolver.current_locale()
        host_locale = self.determine_locale(request)
        default_locale = self.registry.default_locale

        # First-time visitor on the default host
        if host_locale == default_locale and self.get_user_locale(request) is None:
            self.set_user_locale(request, current_locale)

            if current_locale != default_locale:
                redirection = UrlLocalizer(resolver).localize(locale=current_locale)
                logger.info("Redirecting first-time visitor to %s (%s)", redirection, current_locale)
                return RedirectResponse(redirection, status_code=301, headers={"Vary": "Accept-Language"})

        resolver.set_locale(host_locale)
        return await call_next(request)

    def make_resolver(self, request: Request) -> LocaleResolver:
        return LocaleResolver(
            self.registry,
            request,
            use_accept_language_header=self.settings.use_accept_language_header,
            apply_time_locale=self.settings.apply_time_locale,
        )

    def determine_locale(self, request: Request) -> str:
        """Return the locale implied by the request host."""
        host = request.url.hostname or ""

        subdomain = host.split(".")[0]
        if self.registry.is_supported(subdomain):
            return subdomain

        hosts = self.settings.hosts
        locale = hosts.get(host) if hosts else None
        return locale if self.registry.is_supported(locale) else self.registry.default_locale

    def get_user_locale(self, request: Request) -> str | None:
        if "session" not in request.scope:
            return None
        return request.session.get(self.settings.session_key) or None

    def set_user_locale(self, request: Request, locale: str) -> None:
        if "session" not in request.scope:
            logger.debug("No session installed, visitor locale %s not remembered", locale)
            return
        request.session[self.settings.session_key] = locale
