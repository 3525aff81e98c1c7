"""Fixed-width text layout: word wrapping and horizontal centring."""

from __future__ import annotations

import textwrap


def wrap(text: str, max_width: int) -> list[str]:
    """Greedily pack whitespace-separated words into lines of at most *max_width*.

    Words are rejoined with single spaces, so runs of spaces, tabs and
    newlines never count against the width.  A single word longer than
    *max_width* is never split; it sits alone on its own line and
    overflows.  A width below 1 puts every word on its own line.
    """
    return textwrap.wrap(
        " ".join(text.split()),
        width=max(1, max_width),
        break_long_words=False,
        break_on_hyphens=False,
    )


def center_pad(line: str, inner_width: int) -> tuple[int, int]:
    """Return (left, right) padding that centres *line* in *inner_width*.

    Odd leftovers go to the right.  A line wider than the area gets no
    padding at all and is left to overflow rather than being truncated.
    """
    spare = inner_width - len(line)
    if spare <= 0:
        return 0, 0
    left = spare // 2
    return left, spare - left
