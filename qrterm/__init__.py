"""
Render QR codes as block characters directly in a terminal.
"""

from __future__ import annotations

from typing import Iterator, Optional, TextIO, Union

from .errors import QrError
from .matrix import Matrix
from .qr import encode
from .render import Renderer
from .wifi import wifi_payload

__version__ = "0.1.0"
__all__ = [
    "Matrix",
    "QrError",
    "Renderer",
    "encode",
    "iter_lines",
    "print_qr",
    "render_text",
    "wifi_payload",
]

# The standard asks for 4 modules, but 1 scans fine and terminals are small.
DEFAULT_BORDER = 1


def _prepare(data: Union[str, bytes], border: int, error_correction: str) -> Matrix[bool]:
    matrix = encode(data, error_correction=error_correction)
    matrix.surround(border, False)
    return matrix


def render_text(
    data: Union[str, bytes],
    border: int = DEFAULT_BORDER,
    error_correction: str = "M",
    color: bool = False,
    invert: bool = False,
) -> str:
    """
    Render a QR code for ``data`` with a quiet zone of ``border`` modules.
    Returns the multi-line string that can be printed directly.
    """
    matrix = _prepare(data, border, error_correction)
    return Renderer(color=color, invert=invert).render_text(matrix)


def iter_lines(
    data: Union[str, bytes],
    border: int = DEFAULT_BORDER,
    error_correction: str = "M",
    color: bool = False,
    invert: bool = False,
) -> Iterator[str]:
    """
    Yield the rendered lines one at a time, without trailing newlines.
    Encoding happens when the first line is requested.
    """
    matrix = _prepare(data, border, error_correction)
    yield from Renderer(color=color, invert=invert).lines(matrix)


def print_qr(
    data: Union[str, bytes],
    border: int = DEFAULT_BORDER,
    error_correction: str = "M",
    color: bool = False,
    invert: bool = False,
    out: Optional[TextIO] = None,
) -> None:
    """
    Print ``data`` as a QR code to ``out`` (standard output by default).

    Raises :class:`QrError` if the data cannot be encoded; nothing is
    written in that case.
    """
    matrix = _prepare(data, border, error_correction)
    Renderer(color=color, invert=invert).print_stdout(matrix, out=out)
