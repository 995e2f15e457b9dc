"""
Translate a tree of scripts into a mirrored tree of HTML fragments.

    <source>/season-1/ep03.md  ->  <destination>/season-1/ep03.html

A destination newer than its source is left alone unless `force` is set.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .config import DEFAULT_EXTENSIONS, Config, compile_filter
from .errors import ScriptTranslateError
from .parser import translate


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Job:
    source: Path
    destination: Path
    skip: bool


@dataclass
class RunSummary:
    converted: int = 0
    skipped: int = 0
    failed: int = 0

    @property
    def ok(self) -> bool:
        return self.failed == 0


def destination_for(src: Path, source_root: Path, destination_root: Path) -> Path:
    rel = src.relative_to(source_root)
    return destination_root / rel.parent / f"{src.stem}.html"


def is_up_to_date(src: Path, dst: Path) -> bool:
    if not dst.exists():
        return False
    return dst.stat().st_mtime > src.stat().st_mtime


def discover(
    source: Path,
    destination: Path,
    *,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    path_filter: str | None = None,
    force: bool = False,
) -> Iterator[Job]:
    """Return jobs for every script file under `source`, in path order.

    `path_filter` is a regex searched in the source path; files that do not
    match are not yielded at all. An invalid regex raises ConfigError before
    anything is walked. When `destination` lies inside `source`, files under
    it are never picked up as scripts.
    """
    suffixes = {f".{e.lstrip('.').lower()}" for e in extensions}
    pattern = compile_filter(path_filter)
    excluded = destination.resolve()
    if excluded == source.resolve() or source.resolve() not in excluded.parents:
        excluded = None
    return _jobs(source, destination, suffixes, pattern, excluded, force)


def _jobs(
    source: Path,
    destination: Path,
    suffixes: set[str],
    pattern: re.Pattern[str] | None,
    excluded: Path | None,
    force: bool,
) -> Iterator[Job]:
    for src in sorted(source.rglob("*")):
        if not src.is_file() or src.suffix.lower() not in suffixes:
            continue
        if excluded is not None and excluded in src.resolve().parents:
            continue
        if pattern is not None and not pattern.search(src.as_posix()):
            continue
        dst = destination_for(src, source, destination)
        yield Job(source=src, destination=dst, skip=not force and is_up_to_date(src, dst))


def translate_file(path: Path, episode: str | None = None) -> str:
    with path.open("r", encoding="utf-8") as f:
        return translate(f, episode, name=str(path))


def write_output(path: Path, html: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")


def run(config: Config) -> RunSummary:
    if config.source is None:
        raise ValueError("config.source is required")
    summary = RunSummary()
    jobs = discover(
        config.source,
        config.destination,
        extensions=config.extensions,
        path_filter=config.filter,
        force=config.force,
    )
    for job in jobs:
        logger.info(f"processing {job.source} -> {job.destination}")
        if job.skip:
            logger.info(f"source not updated, skipping {job.source}")
            summary.skipped += 1
            continue
        try:
            html = translate_file(job.source)
            write_output(job.destination, html)
        except (ScriptTranslateError, OSError, UnicodeDecodeError) as e:
            logger.error(f"failed {job.source}: {e}")
            summary.failed += 1
            continue
        summary.converted += 1
        logger.info(f"finished {job.source}")

    logger.info(f"done: {summary.converted} converted, {summary.skipped} skipped, {summary.failed} failed")
    return summary
