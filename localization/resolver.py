"""
Locale Resolver

Determines the current locale of one request. Precedence:
  1. explicit candidate passed to set_locale()
  2. first path segment of the request URL
  3. Accept-Language header (when enabled)
  4. registry default locale

A resolver holds per-request state and must never be shared between
requests; the middleware builds a fresh one for each request.
"""

from __future__ import annotations

import locale as _locale
import logging
from typing import TYPE_CHECKING, Any

from localization.context import set_active_locale
from localization.i18n.locale import best_match

if TYPE_CHECKING:
    from starlette.requests import Request

    from localization.registry import LocaleEntry, LocaleRegistry

logger = logging.getLogger(__name__)


class LocaleResolver:
    """Request-scoped locale resolution over a shared :class:`LocaleRegistry`."""

    def __init__(
        self,
        registry: LocaleRegistry,
        request: Request,
        use_accept_language_header: bool = True,
        apply_time_locale: bool = True,
    ):
        self.registry = registry
        self.request = request
        self.use_accept_language_header = use_accept_language_header
        self.apply_time_locale = apply_time_locale
        self.current: str | None = None

    @property
    def default_locale(self) -> str:
        return self.registry.default_locale

    def supported_codes(self) -> tuple[str, ...]:
        return self.registry.codes()

    def current_locale(self) -> str:
        """Return the committed locale, else the browser preference, else the default.

        Never commits anything; see :meth:`set_locale`.
        """
        if self.current:
            return self.current

        if self.use_accept_language_header:
            preferred = best_match(self.request.headers.get("accept-language"), self.registry.codes())
            if preferred is not None:
                return preferred

        return self.registry.default_locale

    def set_locale(self, candidate: Any = None) -> str:
        """Commit the active locale for the rest of the request and return it.

        A missing, empty or non-string candidate is replaced by the first
        segment of the request path. Unsupported codes fall back to
        :meth:`current_locale`.
        """
        if not candidate or not isinstance(candidate, str):
            candidate = self._first_path_segment()

        if self.registry.is_supported(candidate):
            self.current = candidate
        else:
            logger.debug("Locale %r is not supported, falling back", candidate)
            self.current = self.current_locale()

        self.request.state.locale = self.current
        set_active_locale(self.current)

        regional = self.registry.entry(self.current, "regional")
        if regional and self.apply_time_locale:
            self._apply_time_locale(regional)

        return self.current

    def current_entry(self, field: str, default: Any = None) -> Any:
        return self.registry.entry(self.current_locale(), field, default)

    def current_locale_entry(self) -> LocaleEntry | None:
        return self.registry.get(self.current_locale())

    def current_locale_name(self) -> str | None:
        return self.current_entry("name")

    def current_locale_native(self) -> str | None:
        return self.current_entry("native")

    def current_locale_script(self) -> str | None:
        return self.current_entry("script")

    def current_locale_regional(self) -> str | None:
        return self.current_entry("regional")

    def locale_direction(self, code: str | None = None) -> str:
        """Return "ltr" or "rtl" for ``code``, or for the current locale when omitted."""
        return self.registry.direction(code if code is not None else self.current_locale())

    def current_locale_direction(self) -> str:
        return self.locale_direction()

    def _first_path_segment(self) -> str | None:
        segments = [s for s in self.request.url.path.split("/") if s]
        return segments[0] if segments else None

    @staticmethod
    def _apply_time_locale(regional: str) -> None:
        # Process-wide; a missing system locale is not an error for the request
        try:
            _locale.setlocale(_locale.LC_TIME, f"{regional}.utf8")
        except _locale.Error:
            logger.debug("System locale %s.utf8 is not available, LC_TIME unchanged", regional)
