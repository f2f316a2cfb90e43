"""
Square pixel grid representing a 2D barcode.
"""

from __future__ import annotations

import math
from typing import Generic, Iterator, List, Sequence, TypeVar

T = TypeVar("T")


def _side(count: int) -> int:
    side = math.isqrt(count)
    if side * side != count:
        raise ValueError(f"pixel count {count} is not a perfect square")
    return side


class Matrix(Generic[T]):
    """
    A square grid stored as a flat, row-major list of pixels.
    """

    def __init__(self, pixels: Sequence[T]) -> None:
        self._size = _side(len(pixels))
        self._pixels: List[T] = list(pixels)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> "Matrix[T]":
        if any(len(row) != len(rows) for row in rows):
            raise ValueError("rows do not form a square grid")
        return cls([pixel for row in rows for pixel in row])

    @property
    def size(self) -> int:
        """Width and height of the grid in pixels."""
        return self._size

    @property
    def pixels(self) -> List[T]:
        return self._pixels

    def rows(self) -> Iterator[List[T]]:
        for start in range(0, len(self._pixels), self._size or 1):
            yield self._pixels[start:start + self._size]

    def surround(self, thickness: int, quiet: T) -> None:
        """
        Enlarge the grid by ``thickness`` pixels of ``quiet`` on every side,
        keeping the current content centred.
        """
        if thickness < 0:
            raise ValueError("thickness must not be negative")
        width = self._size
        out_width = width + thickness * 2

        out = [quiet] * (out_width * out_width)
        for row in range(width):
            for col in range(width):
                out_pos = (row + thickness) * out_width + col + thickness
                out[out_pos] = self._pixels[row * width + col]

        self._pixels = out
        self._size = out_width

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._pixels == other._pixels

    def __repr__(self) -> str:
        return f"Matrix(size={self._size})"
