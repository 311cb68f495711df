"""Command line entry point: print a QR code for some text to the terminal."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .builder import QRBuilder, QRCodeError
from .options import ECL, Mask
from .version import Version


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print a QR code to the terminal.")
    parser.add_argument("text", help="text to encode")
    parser.add_argument(
        "-e", "--ecl", choices=[level.name for level in ECL], help="error correction level"
    )
    parser.add_argument(
        "-v", "--version", type=int, choices=range(1, 41), metavar="1-40",
        help="symbol version",
    )
    parser.add_argument(
        "-m", "--mask", type=int, choices=range(8), metavar="0-7", help="mask pattern"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv``, print the code and return the exit status."""
    args = _parser().parse_args(argv)

    builder = QRBuilder(args.text)
    if args.ecl is not None:
        builder.ecl(ECL[args.ecl])
    if args.version is not None:
        builder.version(Version(args.version - 1))
    if args.mask is not None:
        builder.mask(Mask(args.mask))

    try:
        qr = builder.build()
    except QRCodeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    qr.print()
    return 0


if __name__ == "__main__":
    sys.exit(main())