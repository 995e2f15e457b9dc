"""
Per-line shape rules.

Each body line of a script falls into exactly one category. The checks run in
a fixed order because several shapes share a prefix: a zone header, a zone
close and an event line all start with `--`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Union

from .inline import format_inline


logger = logging.getLogger(__name__)

TOGGLE_MARKER = "<>"
DEFAULT_IMAGE_EXT = ".png"

# Opaque template tokens, resolved later by the site generator.
IMAGE_ROOT = "{{site.baseurl}}{{page.resources_path}}{{page.resources_story_path}}"

ZONE_OPEN_RE = re.compile(r"^--\s*\(")
ZONE_CLOSE_RE = re.compile(r"^--\s*$")
EVENT_RE = re.compile(r"^--\s*[^(]")
NOTICE_RE = re.compile(r"^\[(.+)\]")
IMAGE_RE = re.compile(r"!(.+)!")
EXTENSION_RE = re.compile(r"\.[^\W\d_]+$")


def wrap_content(text: str) -> str:
    return f'<span class="content">{text}</span>'


@dataclass(frozen=True)
class Blank:
    def to_html(self) -> str:
        return '<div class="delimeter" />\n'


@dataclass(frozen=True)
class ModeToggle:
    def to_html(self) -> str:
        return ""


@dataclass(frozen=True)
class DirectCopy:
    text: str

    def to_html(self) -> str:
        return self.text + "\n"


@dataclass(frozen=True)
class ZoneOpen:
    header: str

    def to_html(self) -> str:
        return f'<div class="zone"><div class="header">{wrap_content(format_inline(self.header))}</div>\n'


@dataclass(frozen=True)
class ZoneClose:
    def to_html(self) -> str:
        return "</div>\n"


@dataclass(frozen=True)
class Event:
    text: str

    def to_html(self) -> str:
        return f'\n<div class="event">{wrap_content(format_inline(self.text))}</div>\n\n'


@dataclass(frozen=True)
class Notice:
    text: str

    def to_html(self) -> str:
        return f'\n<div class="notice">{wrap_content(format_inline(self.text))}</div>\n\n'


@dataclass(frozen=True)
class Image:
    name: str
    src: str

    def to_html(self) -> str:
        return f'\n<div class="image"><img src="{self.src}" /></div>\n\n'


@dataclass(frozen=True)
class Serif:
    speaker: str | None
    text: str

    def to_html(self) -> str:
        content = f'<div class="content">{format_inline(self.text)}</div>'
        if self.speaker is None:
            return f'<div class="serif">{content}</div>\n'
        return f'<div class="serif"><div class="name">{self.speaker}</div>{content}</div>\n'


LineClassification = Union[Blank, ModeToggle, DirectCopy, ZoneOpen, ZoneClose, Event, Notice, Image, Serif]


def image_path(episode_id: str) -> str:
    return f"{IMAGE_ROOT}/ep{episode_id}"


class LineClassifier:
    """Classify body lines of one document.

    The only thing a classifier remembers is the image path of the episode it
    was built for, so make a new one per document.
    """

    def __init__(self, episode_id: str):
        self.images_path = image_path(episode_id)

    def classify(self, line: str, *, direct_copy: bool = False, line_no: int = 0) -> LineClassification:
        """Return the category of `line` (terminator already removed)."""
        if line == "":
            return Blank()
        if line == TOGGLE_MARKER:
            return ModeToggle()
        if direct_copy:
            return DirectCopy(line)
        if ZONE_OPEN_RE.match(line):
            return ZoneOpen(self.zone_header(line, line_no))
        if ZONE_CLOSE_RE.match(line):
            return ZoneClose()
        if EVENT_RE.match(line):
            return Event(line[2:].strip())
        m = NOTICE_RE.match(line)
        if m:
            return Notice(m.group(1).strip())
        m = IMAGE_RE.fullmatch(line)
        if m and m.group(1).strip():
            name = m.group(1).strip()
            return Image(name, self.image_src(name))
        if line.startswith("!"):
            logger.warning(f"line {line_no}: unterminated image marker, rendered as dialogue: {line!r}")
        return self.serif(line)

    def zone_header(self, line: str, line_no: int = 0) -> str:
        start = line.index("(") + 1
        end = line.find(")", start)
        if end < 0:
            logger.warning(f"line {line_no}: zone header without closing ')': {line!r}")
            return line[start:]
        return line[start:end]

    def image_src(self, name: str) -> str:
        if not EXTENSION_RE.search(name):
            name = name + DEFAULT_IMAGE_EXT
        return f"{self.images_path}/{name}"

    @staticmethod
    def serif(line: str) -> Serif:
        speaker, sep, text = line.partition(":")
        if not sep or not text:
            return Serif(None, line)
        return Serif(speaker.strip(), text.strip())
