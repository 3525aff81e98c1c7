"""Bordered, vertically centred frame drawing for the terminal."""

from __future__ import annotations

from collections.abc import Sequence

import click

from teashop.application.dto import Frame
from teashop.application.ports import DisplaySink
from teashop.infrastructure.terminal import text_layout

TOP_LEFT, TOP_RIGHT = "╔", "╗"
BOTTOM_LEFT, BOTTOM_RIGHT = "╚", "╝"
HORIZONTAL, VERTICAL = "═", "║"
INPUT_CUE = "> "

# Columns taken by the two borders plus one space of margin on each side
WRAP_MARGIN = 4


class FrameRenderer:

    def __init__(self, width: int = 100, height: int = 30) -> None:
        self.width = width
        self.height = height

    def render(self, lines: Sequence[str], prompt: str | None = None) -> str:
        """Build the full text of a frame.

        Over-long lines are wrapped in place.  Content is centred vertically
        inside ``height - 2`` rows; when it does not fit, no padding is added
        and the frame simply grows taller.
        """
        content: list[str] = []
        for line in lines:
            if len(line) > self.width - WRAP_MARGIN:
                content.extend(text_layout.wrap(line, self.width - WRAP_MARGIN))
            else:
                content.append(line)

        inner_width = self.width - 2
        padding = max(0, (self.height - 2) - len(content))
        pad_top = padding // 2
        pad_bottom = padding - pad_top

        blank_row = VERTICAL + " " * inner_width + VERTICAL
        rows = [TOP_LEFT + HORIZONTAL * inner_width + TOP_RIGHT]
        rows.extend([blank_row] * pad_top)
        for line in content:
            left, right = text_layout.center_pad(line, inner_width)
            rows.append(VERTICAL + " " * left + line + " " * right + VERTICAL)
        rows.extend([blank_row] * pad_bottom)
        rows.append(BOTTOM_LEFT + HORIZONTAL * inner_width + BOTTOM_RIGHT)

        text = "\n".join(rows) + "\n"
        if prompt:
            text += prompt + "\n" + INPUT_CUE
        return text

    def draw_frame(self, lines: Sequence[str], prompt: str | None = None) -> None:
        click.clear()
        click.echo(self.render(lines, prompt), nl=False)


class TerminalDisplay(DisplaySink):

    def __init__(self, renderer: FrameRenderer) -> None:
        self._renderer = renderer

    def present(self, frame: Frame) -> None:
        self._renderer.draw_frame(frame.content_lines, frame.prompt)
