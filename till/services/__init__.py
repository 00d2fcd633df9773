"""Collaborator services: money helpers, currency symbols, price lookup."""
from .currency import Currency, CurrencyResolver, CURRENCY_SYMBOLS
from .pricing import CatalogPricer, CsvPricer, PriceLookup

__all__ = [
    "Currency",
    "CurrencyResolver",
    "CURRENCY_SYMBOLS",
    "CatalogPricer",
    "CsvPricer",
    "PriceLookup",
]
