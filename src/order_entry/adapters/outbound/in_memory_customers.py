from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable

from returns.result import Result, Success

from order_entry.core.domain.model.errors import PlaceOrderError
from order_entry.core.domain.model.order import Customer
from order_entry.core.ports.outbound.customers import CustomerDirectory


@dataclass
class InMemoryCustomerDirectory(CustomerDirectory):
    _store: Dict[int, Customer] = field(default_factory=dict)

    @staticmethod
    def of(customers: Iterable[Customer]) -> "InMemoryCustomerDirectory":
        return InMemoryCustomerDirectory({c.customer_id: c for c in customers})

    def get(self, customer_id: int) -> Result[Customer | None, PlaceOrderError]:
        return Success(self._store.get(customer_id))
