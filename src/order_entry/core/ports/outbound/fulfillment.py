from __future__ import annotations

from typing import Protocol

from returns.result import Result

from order_entry.core.domain.model.errors import PlaceOrderError
from order_entry.core.domain.model.order import Order, OrderConfirmation


class FulfillmentProvider(Protocol):
    def fulfill(self, order: Order) -> Result[OrderConfirmation, PlaceOrderError]: ...
