"""
Draw module grids as block characters, two pixel rows per terminal line.
"""

from __future__ import annotations

import io
import sys
from typing import Iterator, Optional, TextIO

from .matrix import Matrix

UPPER_HALF = "▀"
LOWER_HALF = "▄"
FULL_BLOCK = "█"

ANSI_WHITE_ON_BLACK = "\x1b[37;40m"
ANSI_BLACK_ON_WHITE = "\x1b[30;47m"
ANSI_RESET = "\x1b[0m"


class Renderer:
    """
    Terminal renderer for square barcodes.

    Plain mode maps each vertical pair of pixels to " ", "█", "▀" or "▄".

    Colour mode avoids "█" and "▀", which some fonts draw with a gap above
    them, so stacked lines show seams. "▄" has no gap below it, so every cell
    is drawn as "▄" or " " and the missing glyphs come from swapping the
    foreground and background colours.
    """

    def __init__(self, color: bool = False, invert: bool = False) -> None:
        self.color = color
        self.invert = invert

    def lines(self, matrix: Matrix[bool]) -> Iterator[str]:
        """Yield one terminal line (without newline) per pair of pixel rows."""
        width = matrix.size
        pixels = matrix.pixels

        for row in range(0, width - 1, 2):
            top = pixels[row * width:(row + 1) * width]
            bottom = pixels[(row + 1) * width:(row + 2) * width]
            yield "".join(self._cell(t, b) for t, b in zip(top, bottom))

        # An odd last pixel row sits above an empty one.
        if width % 2 == 1:
            last = pixels[(width - 1) * width:]
            yield "".join(self._cell(p, False) for p in last)

    def render(self, matrix: Matrix[bool], target: TextIO) -> None:
        for line in self.lines(matrix):
            target.write(line + "\n")

    def render_text(self, matrix: Matrix[bool]) -> str:
        buffer = io.StringIO()
        self.render(matrix, buffer)
        return buffer.getvalue()

    def print_stdout(self, matrix: Matrix[bool], out: Optional[TextIO] = None) -> None:
        target = out if out is not None else sys.stdout
        self.render(matrix, target)
        target.flush()

    def _cell(self, top: bool, bottom: bool) -> str:
        if self.invert:
            top, bottom = not top, not bottom
        if self.color:
            return self._color_cell(top, bottom)
        if top and bottom:
            return FULL_BLOCK
        if top:
            return UPPER_HALF
        if bottom:
            return LOWER_HALF
        return " "

    @staticmethod
    def _color_cell(top: bool, bottom: bool) -> str:
        if top and bottom:
            return ANSI_WHITE_ON_BLACK + " " + ANSI_RESET
        if top:
            return ANSI_WHITE_ON_BLACK + LOWER_HALF + ANSI_RESET
        if bottom:
            return ANSI_BLACK_ON_WHITE + LOWER_HALF + ANSI_RESET
        return ANSI_BLACK_ON_WHITE + " " + ANSI_RESET
