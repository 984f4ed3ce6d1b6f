"""Request-scoped access to the active Translator.

The i18n middleware publishes the request's Translator here so code that
has no access to the request object can still reach it.
"""

from contextvars import ContextVar, Token
from typing import Optional

from infrastructure.i18n.models import Locale
from infrastructure.i18n.translator import Translator

_TRANSLATOR: ContextVar[Optional[Translator]] = ContextVar(
    "i18n_translator", default=None
)


def set_translator(translator: Optional[Translator]) -> Token:
    return _TRANSLATOR.set(translator)


def reset_translator(token: Token) -> None:
    _TRANSLATOR.reset(token)


def get_translator() -> Optional[Translator]:
    """Translator of the request being handled, None outside a request."""
    return _TRANSLATOR.get()


def current_locale() -> Optional[Locale]:
    """Locale of the request being handled, None outside a request."""
    translator = _TRANSLATOR.get()
    return translator.locale if translator else None
