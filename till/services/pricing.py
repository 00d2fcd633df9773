"""
Price lookup collaborators.

A price lookup answers "how much does one unit of this item cost", in
integer minor units. Unknown items price at 0.
"""
import csv
import os
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Protocol, runtime_checkable

from till.errors import (
    ERROR_CATALOG_INVALID_PRICE,
    ERROR_CATALOG_MISSING_COLUMN,
    PriceCatalogError,
)
from till.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CATALOG: Mapping[str, int] = MappingProxyType({
    "apple": 100,
    "banana": 200,
})


@runtime_checkable
class PriceLookup(Protocol):
    """Anything that can price an item by name."""

    def get_price(self, item_id: str) -> Optional[int]:
        ...


class CatalogPricer:
    """In-memory price list."""

    def __init__(self, prices: Optional[Mapping[str, int]] = None):
        self.prices: Dict[str, int] = dict(DEFAULT_CATALOG if prices is None else prices)

    def get_price(self, item_id: str) -> int:
        """Unit price in minor units, 0 for unknown items."""
        return self.prices.get(item_id, 0)

    def __len__(self) -> int:
        return len(self.prices)


class CsvPricer(CatalogPricer):
    """
    Price list loaded from a CSV file.

    Expected columns: ``name`` and ``price`` (minor units). Header matching
    ignores case, surrounding whitespace and a UTF-8 BOM.
    """

    def __init__(self, csv_path: str):
        self.csv_path = csv_path
        super().__init__(self._load(csv_path))

    @staticmethod
    def _find_column(fieldnames, wanted: str, source: str) -> str:
        for fn in fieldnames or []:
            if fn.strip().lstrip("\ufeff").lower() == wanted:
                return fn
        raise PriceCatalogError(f"{ERROR_CATALOG_MISSING_COLUMN}: {wanted}", source=source)

    def _load(self, csv_path: str) -> Dict[str, int]:
        source = os.path.basename(csv_path)
        prices: Dict[str, int] = {}

        with open(csv_path, newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            name_col = self._find_column(reader.fieldnames, "name", source)
            price_col = self._find_column(reader.fieldnames, "price", source)

            # Header is row 1
            for row_number, row in enumerate(reader, start=2):
                name = (row.get(name_col) or "").strip()
                if not name:
                    continue
                raw_price = (row.get(price_col) or "").strip()
                try:
                    price = int(raw_price)
                except ValueError:
                    raise PriceCatalogError(ERROR_CATALOG_INVALID_PRICE, source=source, row=row_number) from None
                if price < 0:
                    raise PriceCatalogError(ERROR_CATALOG_INVALID_PRICE, source=source, row=row_number)
                prices[name] = price

        logger.info(f"Loaded {len(prices)} prices from {source}")
        return prices
