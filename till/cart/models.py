"""Receipt models - integer minor units, Decimal only for display."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Tuple

from till.services.money import format_money, from_minor_units, multiply

BLANK_LINE = "[BLANK]"
TOTAL_LABEL = "TOTAL PRICE: "


@dataclass(frozen=True)
class ReceiptLine:
    """Single priced line on a receipt."""
    item_id: str
    quantity: int
    unit_price: int  # minor units
    text: str
    rendered: bool = True  # False when the line format could not be applied

    @property
    def line_total(self) -> int:
        """Total for all units, in minor units."""
        return multiply(self.unit_price, self.quantity)

    def to_dict(self) -> dict:
        return {
            "item_id": self.item_id,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "line_total": self.line_total,
            "text": self.text,
            "rendered": self.rendered,
        }


@dataclass(frozen=True)
class Receipt:
    """Generated receipt: ordered lines plus the grand total."""
    currency_symbol: str
    lines: Tuple[ReceiptLine, ...] = field(default_factory=tuple)
    total: int = 0  # minor units

    @property
    def total_amount(self) -> Decimal:
        """Grand total in major units, two fractional digits."""
        return from_minor_units(self.total)

    @property
    def total_line(self) -> str:
        return f"{TOTAL_LABEL}{format_money(self.total, self.currency_symbol)}"

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def to_lines(self) -> List[str]:
        """Every printed line, total last."""
        return [line.text for line in self.lines] + [self.total_line]

    def to_text(self) -> str:
        return "\n".join(self.to_lines())

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "currency_symbol": self.currency_symbol,
            "lines": [line.to_dict() for line in self.lines],
            "total": self.total,
            "total_formatted": format_money(self.total, self.currency_symbol),
        }
