from __future__ import annotations

import sys

from order_entry.adapters.inbound.cli import run_cli
from order_entry.bootstrap import build_place_order
from order_entry.config import Settings
from order_entry.logging_setup import configure_logging


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("usage: order-entry '<json>'")
        return 2

    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"invalid_config: {e}")
        return 2

    configure_logging(settings.log_level, json=settings.log_json)
    svc = build_place_order(settings)
    return run_cli(svc, argv[0])


def serve() -> None:
    import uvicorn

    settings = Settings.from_env()
    configure_logging(settings.log_level, json=settings.log_json)
    uvicorn.run(
        "order_entry.asgi:create_asgi_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    raise SystemExit(main())
