"""
Active locale for the current request context (sync/async safe).

The middleware commits the locale once per request; handlers, templates and
log records read it back with get_active_locale() without needing the request.
Each request/task sees its own value.
"""

from contextvars import ContextVar, Token

_active_locale: ContextVar[str | None] = ContextVar("active_locale", default=None)


def set_active_locale(code: str | None) -> Token:
    return _active_locale.set(code)


def get_active_locale(default: str | None = None) -> str | None:
    """Return the committed locale code, or ``default`` outside a localized request."""
    code = _active_locale.get()
    return code if code is not None else default


def reset_active_locale(token: Token) -> None:
    _active_locale.reset(token)
