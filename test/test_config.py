"""
Tests for localization settings
"""

import json

from localization.config import LocalizationSettings


class TestSettingsDefaults:
    def test_default_locale_is_en(self):
        assert LocalizationSettings.model_fields["default_locale"].default == "en"

    def test_accept_language_enabled_by_default(self):
        assert LocalizationSettings.model_fields["use_accept_language_header"].default is True

    def test_default_supported_locales(self):
        supported = LocalizationSettings.model_fields["supported_locales"].default
        assert "en" in supported
        assert supported["ar"]["script"] == "Arab"
        assert supported["de"]["regional"] == "de_DE"

    def test_localized_methods(self):
        assert LocalizationSettings.model_fields["localized_methods"].default == ["GET", "HEAD", "OPTIONS"]

    def test_session_key(self):
        assert LocalizationSettings.model_fields["session_key"].default == "locale"

    def test_hosts_empty(self):
        assert LocalizationSettings.model_fields["hosts"].default == {}


class TestSettingsFromEnvironment:
    def test_supported_locales_from_json(self, monkeypatch):
        locales = {"fr": {"name": "French", "native": "Français", "script": "Latn"}}
        monkeypatch.setenv("SUPPORTED_LOCALES", json.dumps(locales))
        monkeypatch.setenv("DEFAULT_LOCALE", "fr")

        settings = LocalizationSettings()

        assert settings.supported_locales == locales
        assert settings.default_locale == "fr"

    def test_hosts_from_json(self, monkeypatch):
        monkeypatch.setenv("HOSTS", '{"example.de": "de"}')
        assert LocalizationSettings().hosts == {"example.de": "de"}

    def test_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("use_accept_language_header", "false")
        assert LocalizationSettings().use_accept_language_header is False

    def test_registry_accepts_defaults(self):
        from localization.registry import LocaleRegistry

        registry = LocaleRegistry.from_settings(LocalizationSettings(_env_file=None))
        assert registry.default_locale in registry
