"""Translate episode script markup into HTML fragments for a static site."""

from .errors import ConfigError, MalformedInput, ScriptTranslateError
from .inline import format_inline
from .parser import ParserState, ScriptParser, translate

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "MalformedInput",
    "ParserState",
    "ScriptParser",
    "ScriptTranslateError",
    "format_inline",
    "translate",
]
