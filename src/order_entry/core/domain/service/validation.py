from __future__ import annotations

from collections import Counter
from decimal import Decimal
from typing import Iterable, Sequence, Tuple

from order_entry.core.domain.model.order import OrderItem, TaxEntry


def net_total(items: Iterable[OrderItem]) -> Decimal:
    total = Decimal(0)
    for it in items:
        total += it.subtotal()
    return total


def gross_total(taxes: Sequence[TaxEntry], net: Decimal) -> Decimal:
    """Each entry's rate applies to the whole net total; results are summed."""
    return sum((t.rate * net for t in taxes), Decimal(0))


def distinct_skus(items: Iterable[OrderItem]) -> Tuple[str, ...]:
    # dict keeps first-appearance order
    return tuple(dict.fromkeys(it.product.sku for it in items))


def duplicate_skus(items: Sequence[OrderItem]) -> Tuple[str, ...]:
    counts = Counter(it.product.sku for it in items)
    return tuple(sku for sku in distinct_skus(items) if counts[sku] > 1)


# ---- reason messages --------------------------------------------------------


def not_unique_reason(sku: str) -> str:
    return f"Product sku '{sku}' is not unique in the order."


def out_of_stock_reason(sku: str) -> str:
    return (
        f"There is not enough stock available for the product {sku} "
        "to complete the order"
    )


CUSTOMER_NOT_FOUND = "Customer not found"


def invalid_tax_reason(postal_code: str, country: str) -> str:
    return (
        f"Tax Entry for the specified Postal Code: {postal_code} "
        f"and Country: {country} was invalid"
    )
