"""
Script to HTML translation.

`translate()` is the entry point: front matter first, then one classified
line at a time. Every document gets its own parser state and classifier.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .front_matter import read_front_matter
from .lines import LineClassifier, ModeToggle, ZoneClose, ZoneOpen


logger = logging.getLogger(__name__)


@dataclass
class ParserState:
    episode_id: str
    direct_copy: bool = False
    zone_depth: int = 0

    def __setattr__(self, name: str, value: object) -> None:
        if name == "episode_id" and "episode_id" in self.__dict__:
            raise AttributeError("episode_id is fixed once the front matter is read")
        super().__setattr__(name, value)


@dataclass
class ScriptParser:
    """Translate a single document. Not reusable across documents."""

    lines: Iterable[str]
    episode: str | None = None
    name: str = "<script>"
    state: ParserState | None = field(default=None, init=False)
    _line_no: int = field(default=0, init=False)

    def _numbered(self) -> Iterator[str]:
        # StringIO splits on "\n" only, like iterating a text file
        lines = io.StringIO(self.lines) if isinstance(self.lines, str) else self.lines
        for raw in lines:
            self._line_no += 1
            yield raw.rstrip("\r\n")

    def parse(self) -> str:
        if self.state is not None:
            raise RuntimeError("ScriptParser instances translate exactly one document")

        lines = self._numbered()
        front = read_front_matter(lines, self.episode)
        self.state = ParserState(episode_id=front.episode_id)
        logger.debug(f"{self.name}: episode {front.episode_id}, {len(front.lines)} front matter lines")

        out = [front.to_html()]
        classifier = LineClassifier(front.episode_id)
        for line in lines:
            item = classifier.classify(line, direct_copy=self.state.direct_copy, line_no=self._line_no)
            if isinstance(item, ModeToggle):
                self.state.direct_copy = not self.state.direct_copy
            elif isinstance(item, ZoneOpen):
                self.state.zone_depth += 1
            elif isinstance(item, ZoneClose):
                if self.state.zone_depth == 0:
                    logger.warning(f"{self.name}:{self._line_no}: zone close without an open zone")
                else:
                    self.state.zone_depth -= 1
            out.append(item.to_html())

        if self.state.zone_depth > 0:
            logger.warning(f"{self.name}: unclosed zone ({self.state.zone_depth} still open at end of input)")
        if self.state.direct_copy:
            logger.warning(f"{self.name}: direct copy mode '<>' still on at end of input")

        return "".join(out)


def translate(lines: Iterable[str], episode: str | None = None, *, name: str = "<script>") -> str:
    """Translate script lines into an HTML fragment.

    `lines` may be an open text file or any iterable of strings, with or
    without line terminators. `episode` is only used when the front matter
    has no `episode` line.

    Raises MalformedInput when the front matter is unusable; nothing is
    returned in that case.
    """
    return ScriptParser(lines, episode=episode, name=name).parse()
