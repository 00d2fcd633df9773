"""
till - point-of-sale cart and receipt printing.

    from till import Cart, CatalogPricer

    cart = Cart.for_currency(CatalogPricer(), "RON", line_format="<pc> - <pn> - <qt>")
    cart.add_item("apple", 2)
    cart.print_receipt()
"""
from till.cart import Cart, Receipt, ReceiptLine
from till.config import TillSettings
from till.errors import InvalidQuantityError, InvalidTemplateError, PriceCatalogError, TillError
from till.receipt import LineFormatter, ListSink, StreamSink
from till.services import CatalogPricer, Currency, CurrencyResolver, CsvPricer

__version__ = "1.0.0"

__all__ = [
    "Cart",
    "Receipt",
    "ReceiptLine",
    "TillSettings",
    "TillError",
    "InvalidQuantityError",
    "InvalidTemplateError",
    "PriceCatalogError",
    "LineFormatter",
    "ListSink",
    "StreamSink",
    "CatalogPricer",
    "CsvPricer",
    "Currency",
    "CurrencyResolver",
]
