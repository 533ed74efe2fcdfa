from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Tuple


@dataclass(frozen=True)
class Product:
    sku: str
    price: Decimal
    product_id: int | None = None


@dataclass(frozen=True)
class OrderItem:
    product: Product
    quantity: int

    def subtotal(self) -> Decimal:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class Order:
    customer_id: int
    items: Tuple[OrderItem, ...]

    def skus(self) -> Tuple[str, ...]:
        return tuple(it.product.sku for it in self.items)


@dataclass(frozen=True)
class Customer:
    customer_id: int
    postal_code: str
    country: str


@dataclass(frozen=True)
class TaxEntry:
    description: str
    rate: Decimal  # multiplier, 1.2 == +20%


@dataclass(frozen=True)
class OrderConfirmation:
    order_id: int
    order_number: str
    customer_id: int


@dataclass(frozen=True)
class OrderSummary:
    order_id: int
    order_number: str
    customer_id: int
    estimated_delivery_date: datetime
    net_total: Decimal
    total: Decimal
    taxes: Tuple[TaxEntry, ...]
    order_items: Tuple[OrderItem, ...]


def now_utc() -> datetime:
    return datetime.now(timezone.utc)
