"""
Locale Registry

Holds the configured supported locales and the default locale. Built once at
startup and shared read-only by every request.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from localization.exceptions import SupportedLocalesNotDefined, UnsupportedDefaultLocale
from localization.i18n.locale import script_direction

if TYPE_CHECKING:
    from localization.config import LocalizationSettings

logger = logging.getLogger(__name__)


class LocaleEntry(BaseModel):
    """One supported locale.

    Unknown configuration keys are kept so they stay reachable through
    :meth:`LocaleRegistry.entry`.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str
    native: str
    script: str
    dir: Literal["ltr", "rtl"] | None = None
    regional: str | None = None

    @property
    def direction(self) -> str:
        """Explicit ``dir`` wins over the script-based guess."""
        return self.dir or script_direction(self.script)


class LocaleRegistry:
    """Supported locales keyed by code, in configuration order.

    Raises:
        SupportedLocalesNotDefined: ``supported_locales`` is not a non-empty
            mapping or one of its entries is malformed.
        UnsupportedDefaultLocale: ``default_locale`` is not a key of
            ``supported_locales``.
    """

    def __init__(self, supported_locales: Mapping[str, Any] | None, default_locale: str):
        if not isinstance(supported_locales, Mapping) or not supported_locales:
            raise SupportedLocalesNotDefined()

        locales: dict[str, LocaleEntry] = {}
        for code, entry in supported_locales.items():
            if not isinstance(code, str) or not code:
                raise SupportedLocalesNotDefined(details={"locale": code})
            try:
                locales[code] = entry if isinstance(entry, LocaleEntry) else LocaleEntry.model_validate(entry)
            except PydanticValidationError as e:
                raise SupportedLocalesNotDefined(
                    message=f"Locale '{code}' is not a valid locale definition.",
                    details={"locale": code, "errors": e.errors(include_url=False)},
                ) from e

        if default_locale not in locales:
            raise UnsupportedDefaultLocale(default_locale, list(locales))

        self._locales: Mapping[str, LocaleEntry] = MappingProxyType(locales)
        self._default_locale = default_locale
        logger.debug("Locale registry built: %s (default=%s)", ", ".join(locales), default_locale)

    @classmethod
    def from_settings(cls, settings: LocalizationSettings) -> LocaleRegistry:
        return cls(settings.supported_locales, settings.default_locale)

    @property
    def default_locale(self) -> str:
        return self._default_locale

    def locales(self) -> Mapping[str, LocaleEntry]:
        return self._locales

    def codes(self) -> tuple[str, ...]:
        return tuple(self._locales)

    def is_supported(self, code: Any) -> bool:
        return isinstance(code, str) and bool(code) and code in self._locales

    def get(self, code: str) -> LocaleEntry | None:
        return self._locales.get(code)

    def entry(self, code: str, field: str, default: Any = None) -> Any:
        """Return ``field`` of the locale ``code``, or ``default`` when either is missing."""
        locale_entry = self._locales.get(code)
        if locale_entry is None:
            return default
        value = getattr(locale_entry, field, None)
        return default if value is None else value

    def direction(self, code: str) -> str:
        locale_entry = self._locales.get(code)
        if locale_entry is None:
            return script_direction(None)
        return locale_entry.direction

    def info(self, code: str) -> dict[str, Any]:
        """Return a metadata dict describing the given locale.

        Returns:
            Dict with keys: ``code``, ``name``, ``native``, ``script``,
            ``dir`` (resolved direction) and ``regional``. Unknown codes fall
            back to the code itself as the name.
        """
        locale_entry = self._locales.get(code)
        if locale_entry is None:
            return {"code": code, "name": code, "native": code, "script": None, "dir": "ltr", "regional": None}
        return {
            "code": code,
            "name": locale_entry.name,
            "native": locale_entry.native,
            "script": locale_entry.script,
            "dir": locale_entry.direction,
            "regional": locale_entry.regional,
        }

    def __contains__(self, code: object) -> bool:
        return self.is_supported(code)

    def __iter__(self):
        return iter(self._locales)

    def __len__(self) -> int:
        return len(self._locales)
