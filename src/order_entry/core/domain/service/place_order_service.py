from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Callable, List, Tuple

from returns.pipeline import flow
from returns.pointfree import bind, map_
from returns.result import Failure, Result, Success

from order_entry.core.domain.model.errors import (
    OrderPlacementValidationError,
    PlaceOrderError,
)
from order_entry.core.domain.model.order import (
    Order,
    OrderConfirmation,
    OrderSummary,
    TaxEntry,
    now_utc,
)
from order_entry.core.domain.model.policy import PlacementPolicy, ValidationMode
from order_entry.core.domain.service.validation import (
    CUSTOMER_NOT_FOUND,
    distinct_skus,
    duplicate_skus,
    gross_total,
    invalid_tax_reason,
    net_total,
    not_unique_reason,
    out_of_stock_reason,
)
from order_entry.core.ports.inbound.place_order import PlaceOrderUseCase
from order_entry.core.ports.outbound.customers import CustomerDirectory
from order_entry.core.ports.outbound.fulfillment import FulfillmentProvider
from order_entry.core.ports.outbound.notifications import NotificationSender
from order_entry.core.ports.outbound.products import ProductAvailability
from order_entry.core.ports.outbound.taxes import TaxRateProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaceOrderDeps:
    products: ProductAvailability
    customers: CustomerDirectory
    taxes: TaxRateProvider
    fulfillment: FulfillmentProvider
    notifications: NotificationSender
    policy: PlacementPolicy = field(default_factory=PlacementPolicy)
    clock: Callable[[], datetime] = now_utc


@dataclass(frozen=True)
class ValidatedOrder:
    order: Order
    net_total: Decimal
    taxes: Tuple[TaxEntry, ...]


@dataclass(frozen=True)
class PlacementContext:
    validated: ValidatedOrder
    confirmation: OrderConfirmation


@dataclass(frozen=True)
class OrderPlacementService(PlaceOrderUseCase):
    """Validates an order against the catalog, customer directory and tax
    table, then hands it to fulfillment and notifies the customer.

    Validation reasons are accumulated per call; nothing is kept on the
    instance between calls.
    """

    deps: PlaceOrderDeps

    def place_order(self, order: Order) -> Result[OrderSummary, PlaceOrderError]:
        logger.debug(
            "placing order customer_id=%s items=%d", order.customer_id, len(order.items)
        )
        result = flow(
            order,
            self._validate,
            bind(self._fulfill),
            map_(self._summarize),
            bind(self._notify),
        )
        _log_outcome(order, result)
        return result

    def _validate(self, order: Order) -> Result[ValidatedOrder, PlaceOrderError]:
        if self.deps.policy.mode is ValidationMode.LEGACY:
            return self._validate_legacy(order)
        return self._validate_strict(order)

    # ---- validation variants -----------------------------------------------

    def _validate_strict(
        self, order: Order
    ) -> Result[ValidatedOrder, PlaceOrderError]:
        reasons: List[str] = [not_unique_reason(s) for s in duplicate_skus(order.items)]

        for sku in distinct_skus(order.items):
            stocked = self.deps.products.is_in_stock(sku)
            if isinstance(stocked, Failure):
                return stocked
            if not stocked.unwrap():
                reasons.append(out_of_stock_reason(sku))

        found = self.deps.customers.get(order.customer_id)
        if isinstance(found, Failure):
            return found
        customer = found.unwrap()

        taxes: Tuple[TaxEntry, ...] = ()
        if customer is None:
            # no postal code / country to look taxes up with
            reasons.append(CUSTOMER_NOT_FOUND)
        else:
            looked_up = self.deps.taxes.get_tax_entries(
                customer.postal_code, customer.country
            )
            if isinstance(looked_up, Failure):
                return looked_up
            entries = looked_up.unwrap()
            if not entries:
                reasons.append(invalid_tax_reason(customer.postal_code, customer.country))
            else:
                taxes = tuple(entries)

        if reasons:
            return Failure(OrderPlacementValidationError(reasons))
        return Success(ValidatedOrder(order, net_total(order.items), taxes))

    def _validate_legacy(
        self, order: Order
    ) -> Result[ValidatedOrder, PlaceOrderError]:
        reasons: List[str] = []
        net = Decimal(0)

        for item in order.items:
            # checks the configured key, not the item's sku
            stocked = self.deps.products.is_in_stock(self.deps.policy.legacy_stock_key)
            if isinstance(stocked, Failure):
                return stocked
            if not stocked.unwrap():
                reasons.append(out_of_stock_reason(item.product.sku))
            net += item.subtotal()

        found = self.deps.customers.get(order.customer_id)
        if isinstance(found, Failure):
            return found
        customer = found.unwrap()
        if customer is None:
            reasons.append(CUSTOMER_NOT_FOUND)
            return Failure(OrderPlacementValidationError(reasons))

        looked_up = self.deps.taxes.get_tax_entries(
            customer.postal_code, customer.country
        )
        if isinstance(looked_up, Failure):
            return looked_up
        entries = looked_up.unwrap()
        if entries is None:
            reasons.append(invalid_tax_reason(customer.postal_code, customer.country))
            return Failure(OrderPlacementValidationError(reasons))

        if reasons:
            logger.info("ignoring stock reasons in legacy mode: %s", reasons)
        return Success(ValidatedOrder(order, net, tuple(entries)))

    # ---- side effects ------------------------------------------------------

    def _fulfill(
        self, validated: ValidatedOrder
    ) -> Result[PlacementContext, PlaceOrderError]:
        return self.deps.fulfillment.fulfill(validated.order).map(
            lambda conf: PlacementContext(validated=validated, confirmation=conf)
        )

    def _summarize(self, ctx: PlacementContext) -> OrderSummary:
        v = ctx.validated
        return OrderSummary(
            order_id=ctx.confirmation.order_id,
            order_number=ctx.confirmation.order_number,
            customer_id=ctx.confirmation.customer_id,
            estimated_delivery_date=self.deps.clock(),
            net_total=v.net_total,
            total=gross_total(v.taxes, v.net_total),
            taxes=v.taxes,
            order_items=v.order.items,
        )

    def _notify(self, summary: OrderSummary) -> Result[OrderSummary, PlaceOrderError]:
        # fire-and-forget: a failed send does not undo a fulfilled order
        sent = self.deps.notifications.send_order_confirmation(
            summary.customer_id, summary.order_id
        )
        if isinstance(sent, Failure):
            err = sent.failure()
            logger.warning(
                "confirmation not sent order_id=%s customer_id=%s error=%s: %s",
                summary.order_id,
                summary.customer_id,
                type(err).__name__,
                err,
            )
        return Success(summary)


def _log_outcome(order: Order, result: Result[OrderSummary, PlaceOrderError]) -> None:
    if isinstance(result, Success):
        summary = result.unwrap()
        logger.info(
            "order placed order_id=%s order_number=%s total=%s",
            summary.order_id,
            summary.order_number,
            summary.total,
        )
        return

    err = result.failure()
    if isinstance(err, OrderPlacementValidationError):
        logger.info(
            "order rejected customer_id=%s reasons=%s", order.customer_id, list(err.reasons)
        )
    else:
        logger.warning(
            "order placement failed customer_id=%s error=%s: %s",
            order.customer_id,
            type(err).__name__,
            err,
        )
