"""
Currency Symbol Service

Resolves a currency code into the symbol printed on receipts.
"""
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

from till.logging import get_logger, sanitize_string_for_logging

logger = get_logger(__name__)


class Currency(str, Enum):
    """Currencies the till is commonly configured with."""
    EUR = "EUR"
    USD = "USD"
    RON = "RON"
    GBP = "GBP"
    JPY = "JPY"


# Code -> display symbol. Symbols carry their own trailing space where needed.
# Codes missing from the table print as the code itself.
CURRENCY_SYMBOLS: Mapping[str, str] = MappingProxyType({
    Currency.EUR.value: "€",
    Currency.USD.value: "$",
    Currency.RON.value: "LEI ",
})

DEFAULT_CURRENCY = Currency.EUR.value


def normalize_currency(code: Union[str, Currency]) -> str:
    """Normalize a currency code ("ron " -> "RON")."""
    if isinstance(code, Currency):
        return code.value
    return str(code).strip().upper()


class CurrencyResolver:
    """Read-only lookup from currency code to receipt symbol."""

    def __init__(self, symbols: Optional[Mapping[str, str]] = None):
        """
        Initialize resolver.

        Args:
            symbols: Optional code -> symbol table; defaults to CURRENCY_SYMBOLS.
                The table is copied, later changes to the argument are not seen.
        """
        if symbols is None:
            self._symbols = CURRENCY_SYMBOLS
        else:
            self._symbols = MappingProxyType(
                {normalize_currency(code): symbol for code, symbol in symbols.items()}
            )

    @property
    def symbols(self) -> Mapping[str, str]:
        return self._symbols

    def symbol(self, code: Union[str, Currency]) -> str:
        """
        Get display symbol for a currency.

        Args:
            code: Currency code or Currency member

        Returns:
            The configured symbol, or the code itself when none is configured
        """
        normalized = normalize_currency(code)
        symbol = self._symbols.get(normalized)
        if symbol is None:
            logger.debug(f"No symbol for currency {sanitize_string_for_logging(normalized)}, printing code")
            return normalized
        return symbol
