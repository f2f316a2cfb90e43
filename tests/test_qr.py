"""
Tests for encoding and the public print_qr operation.
"""

from __future__ import annotations

import io

import pytest

from qrterm import QrError, encode, iter_lines, print_qr, render_text

RUST_URL = "https://rust-lang.org/"
TOO_LONG = "a" * 8000


def test_encode_returns_square_symbol():
    matrix = encode(RUST_URL)
    assert matrix.size == 25
    # finder pattern corner
    assert matrix.pixels[0] is True
    assert all(isinstance(p, bool) for p in matrix.pixels)


def test_encode_higher_error_correction_grows_symbol():
    assert encode(RUST_URL, error_correction="h").size > encode(RUST_URL, "L").size


def test_encode_unknown_error_correction():
    with pytest.raises(QrError):
        encode(RUST_URL, error_correction="X")


def test_encode_too_long():
    with pytest.raises(QrError, match="Cannot render QR code"):
        encode(TOO_LONG)


def test_print_qr_dimensions():
    out = io.StringIO()
    print_qr(RUST_URL, out=out)
    lines = out.getvalue().splitlines()

    size = encode(RUST_URL).size + 2
    assert len(lines) == (size + 1) // 2 == 14
    assert all(len(line) == size == 27 for line in lines)
    # quiet zone: first pixel row and last line are blank
    assert "█" not in lines[0] and "▀" not in lines[0]
    assert lines[-1] == " " * size
    assert all(line[0] == " " and line[-1] == " " for line in lines)


def test_print_qr_is_idempotent():
    first, second = io.StringIO(), io.StringIO()
    print_qr(RUST_URL, out=first)
    print_qr(RUST_URL, out=second)
    assert first.getvalue() == second.getvalue()


def test_print_qr_defaults_to_stdout(capsys):
    print_qr(RUST_URL)
    assert capsys.readouterr().out == render_text(RUST_URL)


def test_print_qr_too_long_writes_nothing(capsys):
    with pytest.raises(QrError):
        print_qr(TOO_LONG)
    assert capsys.readouterr().out == ""


def test_border_widens_output():
    lines = list(iter_lines(RUST_URL, border=4))
    assert len(lines[0]) == 25 + 8
    assert len(lines) == (25 + 8 + 1) // 2


def test_bytes_input():
    assert render_text(RUST_URL.encode()) == render_text(RUST_URL)


def test_encode_binary_over_capacity():
    # 2331 bytes is the largest version 40 symbol at level M
    encode(b"\xff" * 2331)
    with pytest.raises(QrError, match="does not fit in a version 40 symbol"):
        encode(b"\xff" * 2332)


def test_iter_lines_matches_render_text():
    lines = iter_lines(RUST_URL, invert=True)
    assert next(lines) == render_text(RUST_URL, invert=True).splitlines()[0]
    assert len(list(lines)) == 13


def test_iter_lines_raises_on_first_line():
    lines = iter_lines(TOO_LONG)
    with pytest.raises(QrError):
        next(lines)
