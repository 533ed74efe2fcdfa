from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from returns.result import Failure, Result, Success

from order_entry.core.domain.model.errors import FulfillmentError, PlaceOrderError
from order_entry.core.domain.model.order import Order, OrderConfirmation
from order_entry.core.ports.outbound.fulfillment import FulfillmentProvider


@dataclass
class InMemoryFulfillment(FulfillmentProvider):
    first_order_id: int = 1
    fail: bool = False
    fulfilled: List[Order] = field(default_factory=list)

    def fulfill(self, order: Order) -> Result[OrderConfirmation, PlaceOrderError]:
        if self.fail:
            return Failure(FulfillmentError(message="fulfillment service is down"))

        order_id = self.first_order_id + len(self.fulfilled)
        self.fulfilled.append(order)
        return Success(
            OrderConfirmation(
                order_id=order_id,
                order_number=f"ORD-{order_id:06d}",
                customer_id=order.customer_id,
            )
        )
