"""
Locale helpers package

Provides script-based text direction and Accept-Language negotiation used by
the locale resolver.
"""

from .locale import (
    LTR,
    RTL,
    RTL_SCRIPTS,
    best_match,
    normalize_tag,
    parse_accept_language,
    script_direction,
)

__all__ = [
    "LTR",
    "RTL",
    "RTL_SCRIPTS",
    "best_match",
    "normalize_tag",
    "parse_accept_language",
    "script_direction",
]
