from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from returns.result import Failure, Result, Success

from order_entry.core.domain.model.errors import NotificationError, PlaceOrderError
from order_entry.core.ports.outbound.notifications import NotificationSender


@dataclass
class StdoutNotificationSender(NotificationSender):
    fail: bool = False
    sent: List[Tuple[int, int]] = field(default_factory=list)

    def send_order_confirmation(
        self, customer_id: int, order_id: int
    ) -> Result[None, PlaceOrderError]:
        if self.fail:
            return Failure(NotificationError(message="mail relay is down"))
        self.sent.append((customer_id, order_id))
        print(f"[mail] order_confirmation: customer={customer_id} order={order_id}")
        return Success(None)
