"""
Receipt line formatting.

A line format is literal text with placeholders:

    <qt>  or {quantity}  - quantity scanned
    <pn>  or {name}      - item name
    <pc>  or {price}     - line total with currency symbol, 2 decimals

Each placeholder can be used any number of times (or not at all);
everything else is printed as-is:

    "<qt> - <pn> - <pc>"   ->  "3 - apple - €3.00"
    "<pn> | <pc>"          ->  "apple | €3.00"
    "{quantity} @ {price}" ->  "3 @ €3.00"

Text shaped like a placeholder (``<`` + two letters + ``>``, or a braced
identifier) that is not one of the above is rejected.
"""
import re
from functools import lru_cache
from typing import Optional, Tuple

from till.errors import InvalidTemplateError
from till.services.money import format_money

FIELD_QUANTITY = "quantity"
FIELD_NAME = "name"
FIELD_PRICE = "price"

PLACEHOLDERS = {
    "<qt>": FIELD_QUANTITY,
    "<pn>": FIELD_NAME,
    "<pc>": FIELD_PRICE,
    "{quantity}": FIELD_QUANTITY,
    "{name}": FIELD_NAME,
    "{price}": FIELD_PRICE,
}

DEFAULT_LINE_FORMAT = "<pn> - <qt> - <pc>"

_OPENERS = frozenset("<{")
_PLACEHOLDER_SHAPE = re.compile(r"<[A-Za-z]{2}>|\{[A-Za-z_][A-Za-z0-9_]*\}")

# (literal text, None) or (None, field name)
Piece = Tuple[Optional[str], Optional[str]]


@lru_cache(maxsize=64)
def _compile(template: str) -> Tuple[Piece, ...]:
    """Scan the template once, left to right, into literal and field pieces."""
    pieces = []
    literal_start = 0
    pos = 0
    end = len(template)

    while pos < end:
        if template[pos] in _OPENERS:
            match = _PLACEHOLDER_SHAPE.match(template, pos)
            if match is not None:
                token = match.group(0)
                field = PLACEHOLDERS.get(token)
                if field is None:
                    raise InvalidTemplateError(template, token, pos)
                if literal_start < pos:
                    pieces.append((template[literal_start:pos], None))
                pieces.append((None, field))
                pos = match.end()
                literal_start = pos
                continue
        pos += 1

    if literal_start < end:
        pieces.append((template[literal_start:], None))
    return tuple(pieces)


def validate_template(template: Optional[str]) -> None:
    """
    Check a line format without rendering it.

    Raises:
        InvalidTemplateError: If the template has an unrecognized placeholder
    """
    if template:
        _compile(template)


class LineFormatter:
    """Renders receipt lines for one currency symbol."""

    def __init__(self, currency_symbol: str):
        self.currency_symbol = currency_symbol

    def format_price(self, price: int) -> str:
        """Format a minor-unit amount, e.g. 200 -> "€2.00"."""
        return format_money(price, self.currency_symbol)

    def render(self, template: Optional[str], quantity: int, name: str, price: int) -> str:
        """
        Render one receipt line.

        Args:
            template: Line format, None/empty for the default layout
            quantity: Quantity scanned
            name: Item name
            price: Line total in minor units

        Returns:
            Rendered line

        Raises:
            InvalidTemplateError: If the template has an unrecognized placeholder
        """
        values = {
            FIELD_QUANTITY: str(quantity),
            FIELD_NAME: name,
            FIELD_PRICE: self.format_price(price),
        }
        if not template:
            return f"{values[FIELD_NAME]} - {values[FIELD_QUANTITY]} - {values[FIELD_PRICE]}"

        return "".join(
            literal if field is None else values[field]
            for literal, field in _compile(template)
        )
