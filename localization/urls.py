"""
URL Localizer

Rewrites URLs so the locale lives in the first host label:

    localize("/foo?x=1", "es")  →  https://es.example.com/foo?x=1
    localize("/foo?x=1", "en")  →  https://example.com/foo?x=1   (default locale)

The host always comes from the current request; any host on the passed URL is
dropped. The root host is exactly the last two labels of the request host.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Literal
from urllib.parse import quote, urlsplit

from starlette.datastructures import URL

if TYPE_CHECKING:
    from starlette.requests import Request

    from localization.resolver import LocaleResolver

_NON_ALPHA = re.compile(r"[^A-Za-z]")

# RFC 3986 pchar sub-delims plus "/"; "?", "#" and "%" get escaped
_PATH_SAFE = "/:@!$&'()*+,;=~"


class UrlLocalizer:
    def __init__(self, resolver: LocaleResolver):
        self.resolver = resolver

    @property
    def request(self) -> Request:
        return self.resolver.request

    def localize(
        self,
        url: str | None = None,
        locale: str | Literal[False] | None = None,
        extra_params: dict[str, Any] | None = None,
    ) -> str:
        """Return an absolute URL for ``url`` on the host of ``locale``.

        Args:
            url: Path (and query) to localize. Scheme and host are ignored.
                Defaults to the current request path and query.
            locale: Target locale. ``None`` uses the current locale, ``False``
                (or an empty string) strips the locale label.
            extra_params: Merged into the query string.
        """
        if locale is None:
            locale = self.resolver.current_locale()

        path, query = self._path_and_query(url)

        label = f"{locale}." if locale and locale != self.resolver.default_locale else ""

        localized = URL(f"{self._scheme()}://{label}{self._root_host()}{path}" + (f"?{query}" if query else ""))
        if extra_params:
            localized = localized.include_query_params(**extra_params)
        return str(localized)

    def non_localized_url(self, url: str | None = None) -> str:
        return self.localize(url, False)

    def _path_and_query(self, url: str | None) -> tuple[str, str]:
        if not url:
            # Starlette decodes the scope path; re-escape it before joining
            return quote(self.request.url.path, safe=_PATH_SAFE), self.request.url.query

        parts = urlsplit(url)
        path = parts.path
        if path and not path.startswith("/"):
            path = "/" + path
        return path, parts.query

    def _scheme(self) -> str:
        return _NON_ALPHA.sub("", self.request.url.scheme) or "http"

    def _root_host(self) -> str:
        hostname = self.request.url.hostname or ""
        root = ".".join(hostname.split(".")[-2:])
        port = self.request.url.port
        return f"{root}:{port}" if port else root
