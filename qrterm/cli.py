"""
Command-line entry point for printing QR codes in the terminal.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional

from . import DEFAULT_BORDER, print_qr
from .errors import QrError
from .qr import ERROR_CORRECTION_LEVELS
from .wifi import SECURITY_TYPES, wifi_payload

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qrterm",
        description="Print text as a QR code using block characters.",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to encode (default: read from standard input).",
    )
    parser.add_argument(
        "--border",
        type=int,
        default=DEFAULT_BORDER,
        help=f"Quiet zone width in modules (default: {DEFAULT_BORDER}).",
    )
    parser.add_argument(
        "--error-correction",
        choices=list(ERROR_CORRECTION_LEVELS),
        default="M",
        type=str.upper,
        help="Error correction level (default: M).",
    )
    parser.add_argument(
        "--color",
        action="store_true",
        help="Draw with ANSI colours instead of full and upper-half blocks.",
    )
    parser.add_argument(
        "--invert",
        action="store_true",
        help="Swap dark and light modules, for light-on-dark terminals.",
    )
    wifi = parser.add_argument_group("Wi-Fi")
    wifi.add_argument("--wifi", metavar="SSID", help="Encode a Wi-Fi join code for SSID.")
    wifi.add_argument("--password", default="", help="Wi-Fi password.")
    wifi.add_argument(
        "--security",
        default="WPA",
        help=f"Wi-Fi security, one of {', '.join(SECURITY_TYPES)} (default: WPA).",
    )
    wifi.add_argument("--hidden", action="store_true", help="The network is hidden.")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log encoder details.",
    )
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.border < 0:
        parser.error("--border must not be negative")

    try:
        if args.wifi is not None:
            data = wifi_payload(args.wifi, args.password, args.security, args.hidden)
        elif args.text:
            data = " ".join(args.text)
        else:
            data = sys.stdin.read().rstrip("\n")
        print_qr(
            data,
            border=args.border,
            error_correction=args.error_correction,
            color=args.color,
            invert=args.invert,
        )
    except (QrError, ValueError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
