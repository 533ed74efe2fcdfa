from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

from returns.result import Success

from order_entry.core.domain.model.errors import OrderPlacementValidationError
from order_entry.core.domain.model.order import Order, OrderItem, OrderSummary, Product
from order_entry.core.ports.inbound.place_order import PlaceOrderUseCase


def run_cli(usecase: PlaceOrderUseCase, raw: str) -> int:
    """
    raw: JSON string.
    Example:
      {"customer_id": 30,
       "items": [{"sku": "Laptop", "price": "200.00", "quantity": 2}]}
    """
    try:
        payload = json.loads(raw)
        order = parse_order(payload)
    except Exception as e:  # noqa: BLE001
        print(f"invalid_input: {e}")
        return 2

    result = usecase.place_order(order)

    if isinstance(result, Success):
        print("[ok]", summary_to_dict(result.unwrap()))
        return 0

    err = result.failure()
    if isinstance(err, OrderPlacementValidationError):
        print("[ng]", "; ".join(err.reasons))
    else:
        print("[ng]", f"{type(err).__name__}: {err}")
    return 1


def parse_order(payload: dict[str, Any]) -> Order:
    if not isinstance(payload, dict):
        raise TypeError("payload must be a JSON object")
    items = tuple(
        OrderItem(
            product=Product(
                sku=str(x["sku"]),
                price=Decimal(str(x["price"])),
                product_id=int(x["product_id"]) if x.get("product_id") is not None else None,
            ),
            quantity=int(x["quantity"]),
        )
        for x in payload.get("items", [])
    )
    return Order(customer_id=int(payload["customer_id"]), items=items)


def summary_to_dict(summary: OrderSummary) -> dict[str, Any]:
    return {
        "order_id": summary.order_id,
        "order_number": summary.order_number,
        "customer_id": summary.customer_id,
        "estimated_delivery_date": summary.estimated_delivery_date.isoformat(),
        "net_total": str(summary.net_total),
        "total": str(summary.total),
        "taxes": [
            {"description": t.description, "rate": str(t.rate)} for t in summary.taxes
        ],
        "order_items": [
            {
                "sku": it.product.sku,
                "price": str(it.product.price),
                "quantity": it.quantity,
                "product_id": it.product.product_id,
            }
            for it in summary.order_items
        ],
    }
