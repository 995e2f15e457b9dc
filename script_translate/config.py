"""Load translator settings from `script_translate.yaml` (optional)."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError


DEFAULT_CONFIG_NAME = "script_translate.yaml"
DEFAULT_EXTENSIONS = ("md", "html", "txt", "markdown")


@dataclass(frozen=True)
class Config:
    source: Path | None = None
    destination: Path = Path("out")
    filter: str | None = None
    force: bool = False
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS

    def merged(self, **overrides: Any) -> "Config":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def path_pattern(self) -> re.Pattern[str] | None:
        return compile_filter(self.filter)


def compile_filter(pattern: str | None) -> re.Pattern[str] | None:
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigError(f"invalid filter regex {pattern!r}: {e}") from e


def _coerce(cfg: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in ("source", "destination"):
        if cfg.get(key) is not None:
            out[key] = Path(str(cfg[key]))
    if cfg.get("filter") is not None:
        out["filter"] = str(cfg["filter"])
        compile_filter(out["filter"])
    if cfg.get("force") is not None:
        out["force"] = bool(cfg["force"])
    exts = cfg.get("extensions")
    if exts is not None:
        if isinstance(exts, str):
            exts = [exts]
        if not isinstance(exts, list):
            raise ConfigError(f"'extensions' must be a list, got {type(exts).__name__}")
        out["extensions"] = tuple(str(e).lstrip(".") for e in exts)
    return out


def load_config(path: Path | None = None) -> Config:
    """Read settings from `path`.

    With no path, `script_translate.yaml` in the working directory is used
    when it exists; otherwise defaults apply. Unknown keys are ignored.
    """
    if path is None:
        path = Path(DEFAULT_CONFIG_NAME)
        if not path.is_file():
            return Config()
    elif not path.is_file():
        raise ConfigError(f"config file not found: {path}")

    try:
        cfg = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"cannot parse {path}: {e}") from e
    if not isinstance(cfg, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")
    return Config(**_coerce(cfg))
