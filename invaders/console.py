"""Cursor-addressed drawing on a terminal stream."""

from __future__ import annotations

import sys
from typing import TextIO

from .entities import Point

HIDE_CURSOR = "\x1b[?25l"

# Exclusive bounds of the area blanked by clear_screen.
CLEAR_WIDTH = 80
CLEAR_HEIGHT = 25

# Coordinates of the border lines drawn by draw_border.
BORDER_RIGHT = 81
BORDER_BOTTOM = 26

VERTICAL = "│"
HORIZONTAL = "─"


class Console:
    """Writes text at zero-based (x, y) positions using ANSI escapes."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def setup(self) -> None:
        """Hide the cursor and draw the play-field border."""
        self.hide_cursor()
        self.draw_border()

    def hide_cursor(self) -> None:
        self._stream.write(HIDE_CURSOR)
        self._stream.flush()

    def move(self, point: Point) -> None:
        """Place the cursor at the given cell."""
        self._stream.write(f"\x1b[{point.y + 1};{point.x + 1}H")

    def write(self, point: Point, text: str) -> None:
        """Write text starting at the given cell."""
        self.move(point)
        self._stream.write(text)
        self._stream.flush()

    def clear_screen(self) -> None:
        """Blank the inside of the play field."""
        for y in range(1, CLEAR_HEIGHT):
            for x in range(1, CLEAR_WIDTH):
                self.write(Point(x, y), " ")

    def draw_border(self) -> None:
        """Draw the frame that marks the play-field size."""
        for y in range(1, BORDER_BOTTOM):
            self.write(Point(0, y), VERTICAL)
            self.write(Point(BORDER_RIGHT, y), VERTICAL)
        for x in range(1, BORDER_RIGHT):
            self.write(Point(x, 0), HORIZONTAL)
            self.write(Point(x, BORDER_BOTTOM), HORIZONTAL)