from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from order_entry.core.domain.model.policy import PlacementPolicy, ValidationMode

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    validation_mode: ValidationMode = ValidationMode.STRICT
    legacy_stock_key: str = "laptop"
    log_level: str = "INFO"
    log_json: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> "Settings":
        """Read ORDER_ENTRY_* variables; invalid values raise ValueError."""
        env = os.environ if env is None else env

        raw_mode = env.get("ORDER_ENTRY_VALIDATION_MODE", "strict").strip().lower()
        try:
            mode = ValidationMode(raw_mode)
        except ValueError:
            raise ValueError(
                f"ORDER_ENTRY_VALIDATION_MODE must be one of: strict, legacy (got {raw_mode!r})"
            ) from None

        stock_key = env.get("ORDER_ENTRY_LEGACY_STOCK_KEY", "laptop")
        if not stock_key.strip():
            raise ValueError("ORDER_ENTRY_LEGACY_STOCK_KEY must be non-empty")

        level = env.get("ORDER_ENTRY_LOG_LEVEL", "INFO").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"ORDER_ENTRY_LOG_LEVEL is not a logging level: {level!r}")

        raw_port = env.get("ORDER_ENTRY_PORT", "8000")
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"ORDER_ENTRY_PORT must be an integer (got {raw_port!r})") from None

        return Settings(
            validation_mode=mode,
            legacy_stock_key=stock_key,
            log_level=level,
            log_json=_parse_bool("ORDER_ENTRY_LOG_JSON", env.get("ORDER_ENTRY_LOG_JSON", "")),
            host=env.get("ORDER_ENTRY_HOST", "0.0.0.0"),
            port=port,
        )

    def policy(self) -> PlacementPolicy:
        return PlacementPolicy(mode=self.validation_mode, legacy_stock_key=self.legacy_stock_key)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag (got {raw!r})")
