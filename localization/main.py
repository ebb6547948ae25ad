import logging

import uvicorn
from fastapi import Depends, FastAPI
from starlette.middleware.sessions import SessionMiddleware

from localization.config import LocalizationSettings
from localization.config import settings as default_settings
from localization.dependencies import get_locale_resolver, get_url_localizer
from localization.logging_config import setup_structured_logging
from localization.provider import setup_localization
from localization.resolver import LocaleResolver
from localization.urls import UrlLocalizer

logger = logging.getLogger(__name__)


def create_app(settings: LocalizationSettings | None = None) -> FastAPI:
    """Create the FastAPI application."""
    settings = settings or default_settings

    setup_structured_logging(settings.log_level, json_format=settings.log_json)

    app = FastAPI(
        title=settings.app_name,
        description="Subdomain-based locale resolution",
        debug=settings.debug,
        version=settings.app_version,
    )

    # Session must wrap localization, so it is added last
    setup_localization(app, settings)
    app.add_middleware(SessionMiddleware, secret_key=settings.secret_key)

    @app.get("/", tags=["Locale"])
    async def root(resolver: LocaleResolver = Depends(get_locale_resolver)):
        return {
            "locale": resolver.current_locale(),
            "direction": resolver.current_locale_direction(),
            "name": resolver.current_locale_name(),
            "native": resolver.current_locale_native(),
        }

    @app.get("/locales", tags=["Locale"])
    async def locales(
        resolver: LocaleResolver = Depends(get_locale_resolver),
        localizer: UrlLocalizer = Depends(get_url_localizer),
    ):
        """Language switcher: every supported locale with a link to this site on its host."""
        return [
            {**resolver.registry.info(code), "url": localizer.localize("/", code)}
            for code in resolver.supported_codes()
        ]

    if settings.debug:
        logger.info("Running in debug mode")

    return app


if __name__ == "__main__":
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
