"""
Common Error Constants and Exceptions

Centralized error messages so the cart, the formatter and the CLI
report the same wording.
"""
from typing import Optional

# Quantity errors
ERROR_NEW_ITEM_NON_POSITIVE = "cannot add non-positive quantity for a new item"
ERROR_REMOVAL_EXCEEDS_SCANNED = "removal exceeds scanned quantity"
ERROR_REMOVE_NON_POSITIVE = "removal quantity must be positive"

# Template errors
ERROR_UNRECOGNIZED_PLACEHOLDER = "unrecognized placeholder"

# Price catalog errors
ERROR_CATALOG_MISSING_COLUMN = "price catalog is missing a required column"
ERROR_CATALOG_INVALID_PRICE = "price must be a non-negative integer in minor units"


class TillError(Exception):
    """Base error for the till package."""
    
    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.code = code


class InvalidQuantityError(TillError, ValueError):
    """An add or remove would leave an item with an illegal quantity."""
    
    def __init__(self, message: str, item_id: str, quantity: int) -> None:
        super().__init__(message, code="INVALID_QUANTITY")
        self.item_id = item_id
        self.quantity = quantity


class InvalidTemplateError(TillError, ValueError):
    """A line-format template contains a placeholder nobody knows."""
    
    def __init__(
        self,
        template: str,
        token: str,
        position: int,
        message: str = ERROR_UNRECOGNIZED_PLACEHOLDER,
    ) -> None:
        super().__init__(f"{message}: {token!r} at index {position}", code="INVALID_TEMPLATE")
        self.template = template
        self.token = token
        self.position = position


class PriceCatalogError(TillError):
    """Price catalog file could not be loaded."""
    
    def __init__(self, message: str, source: Optional[str] = None, row: Optional[int] = None) -> None:
        if source is not None:
            message = f"{message} ({source}" + (f", row {row})" if row is not None else ")")
        super().__init__(message, code="INVALID_CATALOG")
        self.source = source
        self.row = row


__all__ = [
    "ERROR_NEW_ITEM_NON_POSITIVE",
    "ERROR_REMOVAL_EXCEEDS_SCANNED",
    "ERROR_REMOVE_NON_POSITIVE",
    "ERROR_UNRECOGNIZED_PLACEHOLDER",
    "ERROR_CATALOG_MISSING_COLUMN",
    "ERROR_CATALOG_INVALID_PRICE",
    "TillError",
    "InvalidQuantityError",
    "InvalidTemplateError",
    "PriceCatalogError",
]
