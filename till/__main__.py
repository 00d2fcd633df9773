#!/usr/bin/env python3
"""
Print a receipt for a list of scans.

Usage:
    python -m till apple apple banana:3
    python -m till --currency RON --format "<pc> - <pn> - <qt>" apple:2 banana
    python -m till --prices prices.csv --json pen:914 apple:-1

Each scan is NAME or NAME:QUANTITY; a negative quantity takes items back out.
Settings not given on the command line come from TILL_* environment
variables (a .env file in the working directory is loaded first).
"""

import argparse
import json
import sys
from typing import List, Optional, Sequence, Tuple

from dotenv import load_dotenv
from pydantic import ValidationError

from till.cart import Cart
from till.config import TillSettings
from till.errors import TillError
from till.logging import get_logger
from till.services.pricing import CatalogPricer, CsvPricer, PriceLookup

logger = get_logger("till")

EXIT_OK = 0
EXIT_INVALID = 2


def parse_scan(scan: str) -> Tuple[str, int]:
    """Split "banana:3" into ("banana", 3); a bare name scans one unit."""
    name, sep, raw_quantity = scan.rpartition(":")
    if not sep:
        return scan, 1
    if not name:
        raise argparse.ArgumentTypeError(f"missing item name in {scan!r}")
    try:
        return name, int(raw_quantity)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid quantity in {scan!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="till", description="Scan items and print a receipt.")
    parser.add_argument("scans", nargs="*", type=parse_scan, metavar="SCAN",
                        help="NAME or NAME:QUANTITY, in scan order")
    parser.add_argument("--currency", help="Currency code (EUR, USD, RON, ...)")
    parser.add_argument("--format", dest="line_format",
                        help="Line format using <qt>, <pn>, <pc> (or {quantity}, {name}, {price})")
    parser.add_argument("--prices", dest="price_catalog", help="CSV price list with name,price columns")
    parser.add_argument("--consume", dest="consume_on_receipt", action="store_true", default=None,
                        help="Empty the cart once the receipt is printed")
    parser.add_argument("--json", action="store_true", help="Print the receipt as JSON")
    return parser


def load_settings(args: argparse.Namespace) -> TillSettings:
    """Environment settings, overridden by whatever was given on the command line."""
    settings = TillSettings.from_env()
    overrides = {
        key: value
        for key, value in (
            ("currency", args.currency),
            ("line_format", args.line_format),
            ("price_catalog", args.price_catalog),
            ("consume_on_receipt", args.consume_on_receipt),
        )
        if value is not None
    }
    if not overrides:
        return settings
    return TillSettings(**{**settings.model_dump(), **overrides})


def build_pricer(settings: TillSettings) -> PriceLookup:
    if settings.price_catalog:
        return CsvPricer(settings.price_catalog)
    return CatalogPricer()


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args)
        cart = Cart.from_settings(settings, build_pricer(settings))
        scans: List[Tuple[str, int]] = args.scans
        for name, quantity in scans:
            cart.add_item(name, quantity)
    except ValidationError as e:
        logger.error(f"Invalid settings: {e}")
        return EXIT_INVALID
    except (TillError, OSError) as e:
        logger.error(f"Cannot print receipt: {e}")
        return EXIT_INVALID

    if args.json:
        receipt = cart.generate_receipt()
        print(json.dumps(receipt.to_dict(), ensure_ascii=False, indent=2))
    else:
        cart.print_receipt()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
