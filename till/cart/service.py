"""Cart service: scanning, removal and receipt generation."""
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Union

from till.errors import (
    ERROR_NEW_ITEM_NON_POSITIVE,
    ERROR_REMOVAL_EXCEEDS_SCANNED,
    ERROR_REMOVE_NON_POSITIVE,
    InvalidQuantityError,
    InvalidTemplateError,
)
from till.logging import get_logger, sanitize_string_for_logging
from till.receipt.formatter import LineFormatter
from till.receipt.sinks import ReceiptSink, StreamSink
from till.services.currency import DEFAULT_CURRENCY, Currency, CurrencyResolver
from till.services.money import multiply
from till.services.pricing import PriceLookup
from .models import BLANK_LINE, Receipt, ReceiptLine

if TYPE_CHECKING:
    from till.config import TillSettings

logger = get_logger(__name__)


class Cart:
    """
    Items scanned for one transaction.

    Features:
    - Quantities accumulate per item; negative quantities remove
    - Receipt lines follow first-scan order
    - Custom line format and currency symbol per cart
    - Idempotent receipts by default, draining receipts on request
    """

    def __init__(
        self,
        pricer: PriceLookup,
        currency_symbol: str = "€",
        line_format: Optional[str] = None,
        consume_on_receipt: bool = False,
    ):
        """
        Initialize cart.

        Args:
            pricer: Price lookup used when the receipt is generated
            currency_symbol: Symbol printed before every amount
            line_format: Receipt line format, None for "<pn> - <qt> - <pc>"
            consume_on_receipt: Empty the cart once a receipt is generated
        """
        self.pricer = pricer
        self._currency_symbol = currency_symbol
        self.line_format = line_format or None
        self.consume_on_receipt = consume_on_receipt
        self._formatter = LineFormatter(currency_symbol)

        self._quantities: Dict[str, int] = {}
        # First-scan order; each id stored once, kept after it drops to zero
        self._order: Dict[str, None] = {}

    @classmethod
    def for_currency(
        cls,
        pricer: PriceLookup,
        currency: Union[str, Currency] = DEFAULT_CURRENCY,
        line_format: Optional[str] = None,
        resolver: Optional[CurrencyResolver] = None,
        consume_on_receipt: bool = False,
    ) -> "Cart":
        """Create a cart printing amounts in the given currency."""
        resolver = resolver or CurrencyResolver()
        return cls(
            pricer,
            currency_symbol=resolver.symbol(currency),
            line_format=line_format,
            consume_on_receipt=consume_on_receipt,
        )

    @classmethod
    def from_settings(
        cls,
        settings: "TillSettings",
        pricer: PriceLookup,
        resolver: Optional[CurrencyResolver] = None,
    ) -> "Cart":
        """Create a cart from register settings."""
        return cls.for_currency(
            pricer,
            currency=settings.currency,
            line_format=settings.line_format,
            resolver=resolver,
            consume_on_receipt=settings.consume_on_receipt,
        )

    @property
    def currency_symbol(self) -> str:
        return self._currency_symbol

    @property
    def items(self) -> Dict[str, int]:
        """Scanned items and quantities, in receipt order."""
        return {item_id: self._quantities[item_id] for item_id in self._pending_ids()}

    def quantity_of(self, item_id: str) -> int:
        return self._quantities.get(item_id, 0)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._quantities

    def __len__(self) -> int:
        return len(self._quantities)

    def add_item(self, item_id: str, quantity: int = 1) -> int:
        """
        Scan quantity units of an item.

        A negative quantity takes units back out. Reaching exactly zero
        drops the item from the receipt.

        Args:
            item_id: Item name as scanned
            quantity: Units moved to (or back from) the bagging area

        Returns:
            Quantity now in the cart (0 if the item was dropped)

        Raises:
            InvalidQuantityError: New item with quantity <= 0, or a removal
                below zero. The cart is left unchanged.
        """
        existing = self._quantities.get(item_id)

        if existing is None:
            if quantity <= 0:
                logger.warning(
                    f"Rejected quantity {quantity} for new item {sanitize_string_for_logging(item_id)}"
                )
                raise InvalidQuantityError(ERROR_NEW_ITEM_NON_POSITIVE, item_id, quantity)
            self._quantities[item_id] = quantity
            self._order.setdefault(item_id, None)
            return quantity

        new_quantity = existing + quantity
        if new_quantity < 0:
            logger.warning(
                f"Rejected removal of {-quantity} {sanitize_string_for_logging(item_id)}, only {existing} scanned"
            )
            raise InvalidQuantityError(ERROR_REMOVAL_EXCEEDS_SCANNED, item_id, quantity)

        if new_quantity == 0:
            del self._quantities[item_id]
        else:
            self._quantities[item_id] = new_quantity
        return new_quantity

    def remove_item(self, item_id: str, quantity: int = 1) -> int:
        """Take quantity units of an item back out of the cart."""
        if quantity <= 0:
            raise InvalidQuantityError(ERROR_REMOVE_NON_POSITIVE, item_id, quantity)
        return self.add_item(item_id, -quantity)

    def clear(self) -> None:
        """Empty the cart."""
        self._quantities.clear()
        self._order.clear()

    def _pending_ids(self) -> Iterator[str]:
        """Billed ids at their first-scan position."""
        for item_id in self._order:
            if item_id in self._quantities:
                yield item_id

    def _render_line(self, item_id: str, quantity: int, unit_price: int) -> ReceiptLine:
        line_total = multiply(unit_price, quantity)
        try:
            text = self._formatter.render(self.line_format, quantity, item_id, line_total)
        except InvalidTemplateError as e:
            logger.warning(
                f"Line for {sanitize_string_for_logging(item_id)} printed blank: {e}"
            )
            return ReceiptLine(item_id, quantity, unit_price, BLANK_LINE, rendered=False)
        return ReceiptLine(item_id, quantity, unit_price, text)

    def generate_receipt(self) -> Receipt:
        """
        Price and render every item still in the cart.

        Unknown items price at 0. A line whose format cannot be applied
        prints as "[BLANK]" and still counts towards the total.
        """
        lines: List[ReceiptLine] = []
        total = 0

        for item_id in self._pending_ids():
            quantity = self._quantities[item_id]
            unit_price = self.pricer.get_price(item_id) or 0
            line = self._render_line(item_id, quantity, unit_price)
            lines.append(line)
            total += line.line_total

        receipt = Receipt(currency_symbol=self.currency_symbol, lines=tuple(lines), total=total)
        logger.debug(f"Generated receipt: {len(lines)} lines, total {receipt.total_amount}")

        if self.consume_on_receipt:
            self.clear()
        return receipt

    def print_receipt(self, sink: Optional[ReceiptSink] = None) -> Receipt:
        """
        Generate the receipt and write it out, total line last.

        Args:
            sink: Destination for the lines, stdout by default

        Returns:
            The generated receipt
        """
        sink = sink or StreamSink()
        receipt = self.generate_receipt()
        for text in receipt.to_lines():
            sink.write_line(text)
        return receipt
