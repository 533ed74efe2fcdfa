from __future__ import annotations

from typing import Protocol

from returns.result import Result

from order_entry.core.domain.model.errors import PlaceOrderError
from order_entry.core.domain.model.order import Order, OrderSummary


class PlaceOrderUseCase(Protocol):
    def place_order(self, order: Order) -> Result[OrderSummary, PlaceOrderError]: ...
