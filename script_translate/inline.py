"""Inline span rewriting for dialogue, event, notice and zone-header text."""

from __future__ import annotations

import re


LINE_BREAK = "<br/>"

# Delimiters stay inside the tags: they are part of the rendered text.
EMPHASIS_RE = re.compile(r"\*(.+?)\*")
MINDS_RE = re.compile(r"\((.+?)\)")


def format_inline(text: str) -> str:
    """Rewrite `/`, `*...*` and `(...)` into HTML.

    Order matters: later rules see the output of earlier ones.
    """
    s = text.replace("/", LINE_BREAK)
    s = EMPHASIS_RE.sub(r"<em>*\1*</em>", s)
    s = MINDS_RE.sub(r'<span class="minds">(\1)</span>', s)
    return s
