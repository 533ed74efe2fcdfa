from __future__ import annotations

from fastapi import FastAPI

from order_entry.adapters.inbound.web.fastapi_app import create_app
from order_entry.bootstrap import build_place_order
from order_entry.config import Settings


def create_asgi_app() -> FastAPI:
    return create_app(build_place_order(Settings.from_env()))
