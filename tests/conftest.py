import textwrap

import pytest


FRONT_MATTER = """\
---
layout: episode
title: Night market
episode: 3
story: harbor
---
"""


@pytest.fixture
def script():
    """Build a full script: standard front matter followed by `body`."""

    def _make(body: str = "") -> list[str]:
        text = FRONT_MATTER + textwrap.dedent(body)
        return text.splitlines(keepends=True)

    return _make
