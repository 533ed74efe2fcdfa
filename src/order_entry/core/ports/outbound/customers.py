from __future__ import annotations

from typing import Protocol

from returns.result import Result

from order_entry.core.domain.model.errors import PlaceOrderError
from order_entry.core.domain.model.order import Customer


class CustomerDirectory(Protocol):
    def get(self, customer_id: int) -> Result[Customer | None, PlaceOrderError]:
        """Success(None) means the customer does not exist."""
        ...
