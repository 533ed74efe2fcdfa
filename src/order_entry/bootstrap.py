from __future__ import annotations

from decimal import Decimal

from order_entry.adapters.outbound.in_memory_customers import InMemoryCustomerDirectory
from order_entry.adapters.outbound.in_memory_fulfillment import InMemoryFulfillment
from order_entry.adapters.outbound.in_memory_products import InMemoryProductCatalog
from order_entry.adapters.outbound.static_tax_rates import StaticTaxRateTable
from order_entry.adapters.outbound.stdout_notifications import StdoutNotificationSender
from order_entry.config import Settings
from order_entry.core.domain.model.order import Customer, TaxEntry
from order_entry.core.domain.service.place_order_service import (
    OrderPlacementService,
    PlaceOrderDeps,
)


def build_place_order(settings: Settings | None = None) -> OrderPlacementService:
    settings = settings or Settings.from_env()

    # demo data for the in-memory adapters
    products = InMemoryProductCatalog(
        stock_by_sku={"laptop": 25, "Laptop": 25, "Tablet": 40, "Phone": 0}
    )
    customers = InMemoryCustomerDirectory.of(
        [
            Customer(customer_id=30, postal_code="12345", country="USA"),
            Customer(customer_id=31, postal_code="99999", country="USA"),
        ]
    )
    taxes = StaticTaxRateTable(
        entries_by_region={
            ("12345", "USA"): (
                TaxEntry(description="State sales tax", rate=Decimal("1.06")),
            ),
        }
    )

    return OrderPlacementService(
        PlaceOrderDeps(
            products=products,
            customers=customers,
            taxes=taxes,
            fulfillment=InMemoryFulfillment(first_order_id=1000),
            notifications=StdoutNotificationSender(),
            policy=settings.policy(),
        )
    )
