from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from returns.result import Result, Success

from order_entry.core.domain.model.errors import PlaceOrderError
from order_entry.core.ports.outbound.products import ProductAvailability


@dataclass
class InMemoryProductCatalog(ProductAvailability):
    stock_by_sku: Dict[str, int]

    def is_in_stock(self, sku: str) -> Result[bool, PlaceOrderError]:
        return Success(self.stock_by_sku.get(sku, 0) > 0)
