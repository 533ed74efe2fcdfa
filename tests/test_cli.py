from __future__ import annotations

import json

import pytest

from order_entry.adapters.inbound.cli import parse_order, run_cli
from order_entry.bootstrap import build_place_order
from order_entry.config import Settings
from order_entry.main import main

VALID = {
    "customer_id": 30,
    "items": [
        {"sku": "Laptop", "price": "200", "quantity": 1, "product_id": 210},
        {"sku": "Tablet", "price": "100", "quantity": 2},
    ],
}


def test_parse_order():
    order = parse_order(VALID)

    assert order.customer_id == 30
    assert order.skus() == ("Laptop", "Tablet")
    assert order.items[0].product.product_id == 210
    assert order.items[1].product.product_id is None


def test_successful_placement(capsys):
    code = run_cli(build_place_order(Settings()), json.dumps(VALID))

    out = capsys.readouterr().out
    assert code == 0
    assert "[mail] order_confirmation: customer=30 order=1000" in out
    assert "[ok]" in out
    assert "'net_total': '400'" in out
    assert "'order_number': 'ORD-001000'" in out


def test_rejected_order_prints_reasons(capsys):
    payload = {"customer_id": 404, "items": [{"sku": "Phone", "price": "5", "quantity": 1}]}

    code = run_cli(build_place_order(Settings()), json.dumps(payload))

    out = capsys.readouterr().out
    assert code == 1
    assert out.startswith("[ng]")
    assert "product Phone" in out
    assert "Customer not found" in out


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "[]",
        json.dumps({"items": []}),
        json.dumps({"customer_id": 1, "items": [{"sku": "A", "price": "x", "quantity": 1}]}),
    ],
)
def test_invalid_input(capsys, raw):
    code = run_cli(build_place_order(Settings()), raw)

    assert code == 2
    assert capsys.readouterr().out.startswith("invalid_input:")


def test_main_without_arguments(capsys):
    assert main([]) == 2
    assert "usage" in capsys.readouterr().out


def test_main_rejects_bad_config(monkeypatch, capsys):
    monkeypatch.setenv("ORDER_ENTRY_VALIDATION_MODE", "sloppy")

    assert main([json.dumps(VALID)]) == 2
    assert capsys.readouterr().out.startswith("invalid_config:")


def test_main_legacy_mode(monkeypatch, capsys):
    monkeypatch.setenv("ORDER_ENTRY_VALIDATION_MODE", "legacy")
    # legacy mode only asks about "laptop", so the empty Phone stock is ignored
    payload = {"customer_id": 30, "items": [{"sku": "Phone", "price": "5", "quantity": 1}]}

    assert main([json.dumps(payload)]) == 0
    assert "[ok]" in capsys.readouterr().out


def test_summary_lists_order_items(capsys):
    run_cli(build_place_order(Settings()), json.dumps(VALID))

    out = capsys.readouterr().out
    assert "'order_items': [{'sku': 'Laptop', 'price': '200', 'quantity': 1, 'product_id': 210}" in out
    assert "{'sku': 'Tablet', 'price': '100', 'quantity': 2, 'product_id': None}" in out


def test_empty_order_is_placed(capsys):
    code = run_cli(build_place_order(Settings()), json.dumps({"customer_id": 30, "items": []}))

    out = capsys.readouterr().out
    assert code == 0
    assert "'net_total': '0'" in out
    assert "'order_items': []" in out
