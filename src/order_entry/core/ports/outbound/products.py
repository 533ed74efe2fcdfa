from __future__ import annotations

from typing import Protocol

from returns.result import Result

from order_entry.core.domain.model.errors import PlaceOrderError


class ProductAvailability(Protocol):
    def is_in_stock(self, sku: str) -> Result[bool, PlaceOrderError]: ...
