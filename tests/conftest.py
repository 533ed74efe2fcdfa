"""Hand-written test doubles for the outbound ports.

Every stub appends ``(port, args)`` to a shared call log so tests can assert
both arguments and the order collaborators were invoked in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Sequence, Tuple

import pytest
from returns.result import Failure, Result, Success

from order_entry.core.domain.model.errors import PlaceOrderError
from order_entry.core.domain.model.order import (
    Customer,
    Order,
    OrderConfirmation,
    OrderItem,
    Product,
    TaxEntry,
)
from order_entry.core.domain.model.policy import PlacementPolicy, ValidationMode
from order_entry.core.domain.service.place_order_service import (
    OrderPlacementService,
    PlaceOrderDeps,
)
from order_entry.logging_setup import PACKAGE_LOGGER

POSTAL_CODE = "12345"
COUNTRY = "USA"
ORDER_NUMBER = "orderNum1"
ORDER_ID = 123
CONFIRMED_CUSTOMER_ID = 99
FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

CallLog = List[Tuple[str, Tuple[Any, ...]]]


@dataclass
class StubProducts:
    calls: CallLog
    in_stock: bool = True
    stock_by_sku: Dict[str, bool] = field(default_factory=dict)
    error: PlaceOrderError | None = None

    def is_in_stock(self, sku: str) -> Result[bool, PlaceOrderError]:
        self.calls.append(("products", (sku,)))
        if self.error is not None:
            return Failure(self.error)
        return Success(self.stock_by_sku.get(sku, self.in_stock))


@dataclass
class StubCustomers:
    calls: CallLog
    customer: Customer | None = None
    error: PlaceOrderError | None = None

    def get(self, customer_id: int) -> Result[Customer | None, PlaceOrderError]:
        self.calls.append(("customers", (customer_id,)))
        if self.error is not None:
            return Failure(self.error)
        return Success(self.customer)


@dataclass
class StubTaxes:
    calls: CallLog
    entries: Sequence[TaxEntry] | None = None
    error: PlaceOrderError | None = None

    def get_tax_entries(
        self, postal_code: str, country: str
    ) -> Result[Sequence[TaxEntry] | None, PlaceOrderError]:
        self.calls.append(("taxes", (postal_code, country)))
        if self.error is not None:
            return Failure(self.error)
        return Success(self.entries)


@dataclass
class StubFulfillment:
    calls: CallLog
    confirmation: OrderConfirmation | None = None
    error: PlaceOrderError | None = None

    def fulfill(self, order: Order) -> Result[OrderConfirmation, PlaceOrderError]:
        self.calls.append(("fulfillment", (order,)))
        if self.error is not None:
            return Failure(self.error)
        assert self.confirmation is not None
        return Success(self.confirmation)


@dataclass
class StubNotifications:
    calls: CallLog
    error: PlaceOrderError | None = None

    def send_order_confirmation(
        self, customer_id: int, order_id: int
    ) -> Result[None, PlaceOrderError]:
        self.calls.append(("notifications", (customer_id, order_id)))
        if self.error is not None:
            return Failure(self.error)
        return Success(None)


@dataclass
class Collaborators:
    calls: CallLog
    products: StubProducts
    customers: StubCustomers
    taxes: StubTaxes
    fulfillment: StubFulfillment
    notifications: StubNotifications

    def service(
        self, mode: ValidationMode = ValidationMode.STRICT, legacy_stock_key: str = "laptop"
    ) -> OrderPlacementService:
        return OrderPlacementService(
            PlaceOrderDeps(
                products=self.products,
                customers=self.customers,
                taxes=self.taxes,
                fulfillment=self.fulfillment,
                notifications=self.notifications,
                policy=PlacementPolicy(mode=mode, legacy_stock_key=legacy_stock_key),
                clock=lambda: FIXED_NOW,
            )
        )

    def called(self, port: str) -> List[Tuple[Any, ...]]:
        return [args for name, args in self.calls if name == port]

    def sequence(self) -> List[str]:
        names: List[str] = []
        for name, _ in self.calls:
            if not names or names[-1] != name:
                names.append(name)
        return names


def make_tax_entries() -> Tuple[TaxEntry, ...]:
    return tuple(
        TaxEntry(description=f"This is a test Tax Entry {i}", rate=Decimal("1.2"))
        for i in range(1, 4)
    )


def make_order(customer_id: int = 30) -> Order:
    return Order(
        customer_id=customer_id,
        items=(
            OrderItem(
                product=Product(sku="Laptop", price=Decimal("200"), product_id=210),
                quantity=100,
            ),
            OrderItem(
                product=Product(sku="Tablet", price=Decimal("100"), product_id=370),
                quantity=200,
            ),
        ),
    )


@pytest.fixture
def collaborators() -> Collaborators:
    """Collaborators wired for a valid placement."""
    calls: CallLog = []
    return Collaborators(
        calls=calls,
        products=StubProducts(calls),
        customers=StubCustomers(
            calls, customer=Customer(customer_id=30, postal_code=POSTAL_CODE, country=COUNTRY)
        ),
        taxes=StubTaxes(calls, entries=make_tax_entries()),
        fulfillment=StubFulfillment(
            calls,
            confirmation=OrderConfirmation(
                order_id=ORDER_ID,
                order_number=ORDER_NUMBER,
                customer_id=CONFIRMED_CUSTOMER_ID,
            ),
        ),
        notifications=StubNotifications(calls),
    )


@pytest.fixture
def order() -> Order:
    return make_order()


@pytest.fixture(autouse=True)
def restore_package_logger():
    """configure_logging() mutates the package logger; undo it per test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
