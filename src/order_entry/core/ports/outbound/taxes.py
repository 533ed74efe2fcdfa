from __future__ import annotations

from typing import Protocol, Sequence

from returns.result import Result

from order_entry.core.domain.model.errors import PlaceOrderError
from order_entry.core.domain.model.order import TaxEntry


class TaxRateProvider(Protocol):
    def get_tax_entries(
        self, postal_code: str, country: str
    ) -> Result[Sequence[TaxEntry] | None, PlaceOrderError]: ...
