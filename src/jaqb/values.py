"""Embedding of raw values into SQL text.

Values are wrapped in the configured quote delimiter and nothing else: embedded
delimiters are not escaped and no parameter binding happens. Every literal in a
rendered statement goes through :func:`quote`.
"""

import logging
import warnings
from typing import Any

from jaqb.errors import InjectionRiskWarning
from jaqb.settings import DEFAULT_SETTINGS, RenderSettings

logger = logging.getLogger(__name__)


def to_text(value: Any) -> str:
    match value:
        case bool(value):
            return "true" if value else "false"
        case None:
            return "null"
        case _:
            return str(value)


def quote(value: Any, settings: RenderSettings = DEFAULT_SETTINGS) -> str:
    text = to_text(value)
    if settings.quote in text:
        logger.debug("Unescaped quote delimiter in literal %r", text)
        if settings.warn_on_unescaped:
            warnings.warn(
                f"Literal {text!r} contains the quote delimiter and is not escaped",
                InjectionRiskWarning,
                stacklevel=2,
            )
    return f"{settings.quote}{text}{settings.quote}"
