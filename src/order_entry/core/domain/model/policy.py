from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ValidationMode(str, Enum):
    # collect every reason (duplicates, per-sku stock, customer, tax) before failing
    STRICT = "strict"
    # historical behaviour: one fixed stock key, fail on first missing customer/tax
    LEGACY = "legacy"


@dataclass(frozen=True)
class PlacementPolicy:
    mode: ValidationMode = ValidationMode.STRICT
    legacy_stock_key: str = "laptop"
