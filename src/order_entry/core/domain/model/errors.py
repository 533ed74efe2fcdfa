from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Tuple


@dataclass(frozen=True)
class PlaceOrderError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover
        return self.message


@dataclass(frozen=True, init=False)
class OrderPlacementValidationError(PlaceOrderError):
    reasons: Tuple[str, ...] = field(default=())

    def __init__(self, reasons: Sequence[str]) -> None:
        if not reasons:
            raise ValueError("at least one reason is required")
        object.__setattr__(self, "reasons", tuple(reasons))
        object.__setattr__(self, "message", "\n".join(reasons))


@dataclass(frozen=True)
class CollaboratorError(PlaceOrderError):
    pass


@dataclass(frozen=True)
class LookupFailed(CollaboratorError):
    source: str

    def __str__(self) -> str:  # pragma: no cover
        return f"lookup_failed: {self.source} ({self.message})"


@dataclass(frozen=True)
class FulfillmentError(CollaboratorError):
    pass


@dataclass(frozen=True)
class NotificationError(CollaboratorError):
    pass
