from __future__ import annotations

from decimal import Decimal
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from returns.result import Success

from order_entry.core.domain.model.errors import (
    FulfillmentError,
    LookupFailed,
    NotificationError,
    OrderPlacementValidationError,
    PlaceOrderError,
)
from order_entry.core.domain.model.order import Order, OrderItem, OrderSummary, Product
from order_entry.core.ports.inbound.place_order import PlaceOrderUseCase

# ---- HTTP DTOs (adapter layer) ---------------------------------------------


class OrderItemIn(BaseModel):
    sku: str = Field(min_length=1, examples=["Laptop"])
    price: Decimal = Field(examples=["200.00"])
    quantity: int = Field(examples=[100])
    product_id: int | None = Field(default=None, examples=[210])


class PlaceOrderRequest(BaseModel):
    customer_id: int = Field(examples=[30])
    items: list[OrderItemIn]


class OrderItemOut(BaseModel):
    sku: str
    price: str
    quantity: int
    product_id: int | None = None


class TaxEntryOut(BaseModel):
    description: str
    rate: str


class OrderSummaryResponse(BaseModel):
    order_id: int
    order_number: str
    customer_id: int
    estimated_delivery_date: str
    net_total: str
    total: str
    taxes: list[TaxEntryOut]
    order_items: list[OrderItemOut]


class ErrorResponse(BaseModel):
    type: str
    message: str
    reasons: list[str] | None = None
    details: list[dict[str, Any]] | None = None


# ---- Mapping helpers -------------------------------------------------------


def _to_order(req: PlaceOrderRequest) -> Order:
    return Order(
        customer_id=req.customer_id,
        items=tuple(
            OrderItem(
                product=Product(sku=it.sku, price=it.price, product_id=it.product_id),
                quantity=it.quantity,
            )
            for it in req.items
        ),
    )


def _to_response(summary: OrderSummary) -> OrderSummaryResponse:
    return OrderSummaryResponse(
        order_id=summary.order_id,
        order_number=summary.order_number,
        customer_id=summary.customer_id,
        estimated_delivery_date=summary.estimated_delivery_date.isoformat(),
        net_total=str(summary.net_total),
        total=str(summary.total),
        taxes=[TaxEntryOut(description=t.description, rate=str(t.rate)) for t in summary.taxes],
        order_items=[
            OrderItemOut(
                sku=it.product.sku,
                price=str(it.product.price),
                quantity=it.quantity,
                product_id=it.product.product_id,
            )
            for it in summary.order_items
        ],
    )


def _map_error_to_http(err: PlaceOrderError) -> tuple[int, ErrorResponse]:
    if isinstance(err, OrderPlacementValidationError):
        return 422, ErrorResponse(
            type=type(err).__name__, message=str(err), reasons=list(err.reasons)
        )

    if isinstance(err, FulfillmentError):
        return 502, ErrorResponse(type=type(err).__name__, message=str(err))

    if isinstance(err, (NotificationError, LookupFailed)):
        return 503, ErrorResponse(type=type(err).__name__, message=str(err))

    return 500, ErrorResponse(type=type(err).__name__, message=str(err))


# ---- App factory -----------------------------------------------------------


def create_app(place_order_uc: PlaceOrderUseCase) -> FastAPI:
    app = FastAPI(title="order_entry")

    @app.exception_handler(PlaceOrderError)
    async def handle_domain_error(_: Request, exc: PlaceOrderError) -> JSONResponse:
        status, body = _map_error_to_http(exc)
        return JSONResponse(status_code=status, content=body.model_dump())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        body = ErrorResponse(
            type="RequestValidationError",
            message="invalid request",
            details=[{"loc": list(e["loc"]), "msg": e["msg"]} for e in exc.errors()],
        )
        return JSONResponse(status_code=400, content=body.model_dump())

    @app.exception_handler(Exception)
    async def handle_unexpected(_: Request, exc: Exception) -> JSONResponse:
        body = ErrorResponse(type=type(exc).__name__, message="internal server error")
        return JSONResponse(status_code=500, content=body.model_dump())

    # --- routes --------------------------------------------------------------

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post(
        "/orders",
        response_model=OrderSummaryResponse,
        status_code=201,
        responses={
            400: {"model": ErrorResponse},
            422: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
            502: {"model": ErrorResponse},
            503: {"model": ErrorResponse},
        },
    )
    def place_order(req: PlaceOrderRequest) -> Any:
        result = place_order_uc.place_order(_to_order(req))

        if isinstance(result, Success):
            return _to_response(result.unwrap())

        raise result.failure()

    return app
