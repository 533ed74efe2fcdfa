from __future__ import annotations

from typing import Protocol

from returns.result import Result

from order_entry.core.domain.model.errors import PlaceOrderError


class NotificationSender(Protocol):
    def send_order_confirmation(
        self, customer_id: int, order_id: int
    ) -> Result[None, PlaceOrderError]: ...
