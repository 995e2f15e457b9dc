"""
Front matter handling.

A script starts with a metadata block between two `---` lines. One of the
metadata lines starts with `episode` and carries the episode number used to
namespace image paths:

    ---
    title: Night market
    episode: 3
    ---

Metadata lines are copied to the output unchanged; the delimiters are not.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from .errors import MalformedInput


DELIMITER_RE = re.compile(r"^---")
EPISODE_RE = re.compile(r"^episode")
DIGITS_RE = re.compile(r"(\d+)")


@dataclass
class FrontMatter:
    episode_id: str
    lines: list[str] = field(default_factory=list)

    def to_html(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)


def extract_episode_id(line: str) -> str | None:
    m = DIGITS_RE.search(line)
    return m.group(1) if m else None


def read_front_matter(lines: Iterator[str], episode: str | None = None) -> FrontMatter:
    """Consume the front matter block from `lines` and return it.

    `lines` must already have their terminators removed. The iterator is left
    positioned on the first body line.

    `episode` is a fallback id for front matter without an `episode` line;
    it never replaces an id found in the block.

    Raises MalformedInput when a delimiter or the episode id is missing.
    """
    for line in lines:
        if DELIMITER_RE.match(line):
            break
    else:
        raise MalformedInput("front matter delimiter '---' not found")

    copied: list[str] = []
    episode_id = None
    for line in lines:
        if EPISODE_RE.match(line):
            episode_id = extract_episode_id(line)
            if episode_id is None:
                raise MalformedInput(f"episode line has no number: {line!r}")
            copied.append(line)
            break
        if episode is not None and DELIMITER_RE.match(line):
            return FrontMatter(episode_id=str(episode), lines=copied)
        copied.append(line)
    else:
        raise MalformedInput("front matter has no 'episode' line")

    for line in lines:
        if DELIMITER_RE.match(line):
            return FrontMatter(episode_id=episode_id, lines=copied)
        copied.append(line)
    raise MalformedInput("front matter is not closed by '---'")
