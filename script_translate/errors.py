"""Exceptions raised while translating scripts."""

from __future__ import annotations


class ScriptTranslateError(RuntimeError):
    """Base class for everything this package raises on purpose."""


class MalformedInput(ScriptTranslateError):
    """Front matter is missing, unterminated, or carries no episode id."""


class ConfigError(ScriptTranslateError):
    pass
