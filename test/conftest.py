"""
Pytest configuration and fixtures for localization tests
"""

import os
import sys

import pytest
from starlette.requests import Request

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from localization.config import LocalizationSettings  # noqa: E402
from localization.context import reset_active_locale  # noqa: E402
from localization.context import set_active_locale  # noqa: E402
from localization.registry import LocaleRegistry  # noqa: E402

SUPPORTED_LOCALES = {
    "en": {"name": "English", "native": "English", "script": "Latn"},
    "es": {"name": "Spanish", "native": "Español", "script": "Latn", "regional": "es_ES"},
    "ar": {"name": "Arabic", "native": "العربية", "script": "Arab"},
    "he": {"name": "Hebrew", "native": "עברית", "script": "Hebr", "dir": "ltr"},
}


def make_request(
    path: str = "/",
    host: str = "example.com",
    query: str = "",
    headers: dict[str, str] | None = None,
    scheme: str = "https",
    method: str = "GET",
) -> Request:
    """Build a bare Starlette request without running an app."""
    raw_headers = [(b"host", host.encode())]
    for name, value in (headers or {}).items():
        raw_headers.append((name.lower().encode(), value.encode()))
    scope = {
        "type": "http",
        "method": method,
        "scheme": scheme,
        "path": path,
        "root_path": "",
        "query_string": query.encode(),
        "headers": raw_headers,
        "server": (host.split(":")[0], 443 if scheme == "https" else 80),
    }
    return Request(scope)


@pytest.fixture
def supported_locales():
    return {code: dict(entry) for code, entry in SUPPORTED_LOCALES.items()}


@pytest.fixture
def registry(supported_locales):
    return LocaleRegistry(supported_locales, "en")


@pytest.fixture
def test_settings(supported_locales):
    return LocalizationSettings(
        supported_locales=supported_locales,
        default_locale="en",
        hosts={},
        apply_time_locale=False,
        secret_key="test-secret",
    )


@pytest.fixture(autouse=True)
def isolated_active_locale():
    """Keep the active-locale context variable from leaking between tests."""
    token = set_active_locale(None)
    yield
    reset_active_locale(token)
