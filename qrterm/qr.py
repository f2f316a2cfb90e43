"""
Thin wrapper around the ``qrcode`` package producing module grids.
"""

from __future__ import annotations

import logging
from typing import Union

import qrcode
from qrcode.constants import (
    ERROR_CORRECT_H,
    ERROR_CORRECT_L,
    ERROR_CORRECT_M,
    ERROR_CORRECT_Q,
)
from qrcode.exceptions import DataOverflowError

from .errors import QrError
from .matrix import Matrix

logger = logging.getLogger(__name__)

ERROR_CORRECTION_LEVELS = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}


def error_correction_level(name: str) -> int:
    try:
        return ERROR_CORRECTION_LEVELS[name.upper()]
    except KeyError:
        raise QrError(
            f"Unknown error correction level {name!r}, "
            f"expected one of {', '.join(ERROR_CORRECTION_LEVELS)}"
        ) from None


def encode(data: Union[str, bytes], error_correction: str = "M") -> Matrix[bool]:
    """
    Encode ``data`` and return the bare module grid (no quiet zone).
    ``True`` marks a dark module.
    """
    qr = qrcode.QRCode(
        error_correction=error_correction_level(error_correction),
        box_size=1,
        border=0,
    )
    qr.add_data(data)
    # Newer qrcode releases reject version 41 in the version setter with a
    # ValueError before DataOverflowError is raised.
    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError) as exc:
        raise QrError(
            "Cannot render QR code: data does not fit in a version 40 symbol"
        ) from exc

    logger.debug(
        "Encoded %d characters as version %d (level %s)",
        len(data),
        qr.version,
        error_correction.upper(),
    )
    return Matrix.from_rows(qr.get_matrix())
