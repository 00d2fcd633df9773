"""Cart package: receipt models and the cart service."""
from .models import BLANK_LINE, Receipt, ReceiptLine
from .service import Cart

__all__ = [
    "BLANK_LINE",
    "Receipt",
    "ReceiptLine",
    "Cart",
]
