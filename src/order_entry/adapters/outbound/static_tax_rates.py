from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Sequence, Tuple

from returns.result import Result, Success

from order_entry.core.domain.model.errors import PlaceOrderError
from order_entry.core.domain.model.order import TaxEntry
from order_entry.core.ports.outbound.taxes import TaxRateProvider

Region = Tuple[str, str]  # (postal_code, country)


@dataclass
class StaticTaxRateTable(TaxRateProvider):
    entries_by_region: Dict[Region, Tuple[TaxEntry, ...]] = field(default_factory=dict)

    def get_tax_entries(
        self, postal_code: str, country: str
    ) -> Result[Sequence[TaxEntry] | None, PlaceOrderError]:
        # unknown region -> None, like a lookup that yields nothing
        return Success(self.entries_by_region.get((postal_code, country)))
