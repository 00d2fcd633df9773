"""Till configuration - pydantic settings read from the environment."""
import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

from till.receipt.formatter import validate_template
from till.services.currency import DEFAULT_CURRENCY, normalize_currency

_TRUE_VALUES = {"1", "true", "yes", "on"}


class TillSettings(BaseModel):
    """Per-register receipt settings."""
    currency: str = DEFAULT_CURRENCY
    line_format: Optional[str] = None  # None -> "<pn> - <qt> - <pc>"
    consume_on_receipt: bool = False  # legacy: printing a receipt empties the cart
    price_catalog: Optional[str] = None  # CSV with name,price columns

    class Config:
        extra = "ignore"
        frozen = True

    @field_validator("currency", mode="before")
    @classmethod
    def normalize_currency_code(cls, v):
        code = normalize_currency(v or "")
        if not code:
            raise ValueError("currency must not be empty")
        return code

    @field_validator("line_format")
    @classmethod
    def check_line_format(cls, v):
        if not v:
            return None
        # InvalidTemplateError is a ValueError, pydantic reports it as a validation error
        validate_template(v)
        return v

    @field_validator("price_catalog", mode="before")
    @classmethod
    def empty_catalog_is_none(cls, v):
        return v or None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TillSettings":
        """
        Build settings from TILL_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ (tests)
        """
        env = os.environ if environ is None else environ
        return cls(
            currency=env.get("TILL_CURRENCY", DEFAULT_CURRENCY),
            line_format=env.get("TILL_LINE_FORMAT") or None,
            consume_on_receipt=env.get("TILL_CONSUME_ON_RECEIPT", "").strip().lower() in _TRUE_VALUES,
            price_catalog=env.get("TILL_PRICE_CATALOG") or None,
        )
