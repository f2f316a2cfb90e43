"""
Exception types raised by qrterm.
"""

from __future__ import annotations


class QrError(Exception):
    """The given data could not be encoded as a QR code."""
