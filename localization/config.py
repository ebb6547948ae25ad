from typing import Any

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


DEFAULT_SUPPORTED_LOCALES: dict[str, dict[str, Any]] = {
    "en": {"name": "English", "native": "English", "script": "Latn", "regional": "en_GB"},
    "es": {"name": "Spanish", "native": "Español", "script": "Latn", "regional": "es_ES"},
    "de": {"name": "German", "native": "Deutsch", "script": "Latn", "regional": "de_DE"},
    "ar": {"name": "Arabic", "native": "العربية", "script": "Arab", "regional": "ar_AE"},
}


class LocalizationSettings(BaseSettings):
    # Application settings
    app_name: str = "Localization Service"
    app_version: str = "1.0.0"
    debug: bool = False

    # Session signing key for SessionMiddleware
    secret_key: str = "change-me"

    # Locale settings
    default_locale: str = "en"
    supported_locales: dict[str, Any] = DEFAULT_SUPPORTED_LOCALES
    hosts: dict[str, str] = {}
    use_accept_language_header: bool = True
    session_key: str = "locale"
    localized_methods: list[str] = ["GET", "HEAD", "OPTIONS"]
    apply_time_locale: bool = True

    # Logging settings
    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = LocalizationSettings()
