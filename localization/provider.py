"""
Application wiring

Builds the locale registry once at startup and installs the middleware.
Configuration errors surface here, before the app serves any request.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from localization.config import settings as default_settings
from localization.middleware.localization import LocalizationMiddleware
from localization.registry import LocaleRegistry

if TYPE_CHECKING:
    from starlette.applications import Starlette

    from localization.config import LocalizationSettings

logger = logging.getLogger(__name__)


def setup_localization(app: Starlette, settings: LocalizationSettings | None = None) -> LocaleRegistry:
    """Register the localization middleware on ``app`` and return the registry.

    Raises:
        SupportedLocalesNotDefined, UnsupportedDefaultLocale: invalid configuration.
    """
    settings = settings or default_settings
    registry = LocaleRegistry.from_settings(settings)

    app.state.locale_registry = registry
    app.state.localization_settings = settings
    app.add_middleware(LocalizationMiddleware, registry=registry, settings=settings)

    logger.info(
        "Localization enabled: locales=%s default=%s",
        ",".join(registry.codes()),
        registry.default_locale,
    )
    return registry
