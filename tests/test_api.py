"""
Tests for the HTTP API (`api/`).

The engine dependency is replaced with a machine backed by tmp_path, so no test
touches the real per-user data directory.

Covers:
- Product CRUD endpoints and their error mapping (400 / 404 / 409).
- Purchase flow through to sale history, summary and receipt.
- Clearing sale history and reloading inventory.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_machine
from api.main import app
from domain.item import Item
from services.vending_machine import VendingMachine

KOPI = {"item_id": "P001", "name": "Kopi Hitam", "price": "10000", "stock": 15, "image_ref": "/images/kopi.png"}


@pytest.fixture
def client(machine: VendingMachine):
    app.dependency_overrides[get_machine] = lambda: machine
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_add_and_list_products(client: TestClient) -> None:
    assert client.get("/api/v1/products").json() == {"items": [], "total_count": 0}

    response = client.post("/api/v1/products", json=KOPI)

    assert response.status_code == 201
    body = response.json()
    assert body["persisted"] is True
    assert body["product"]["item_id"] == "P001"
    assert Decimal(body["product"]["price"]) == Decimal("10000")
    assert body["product"]["in_stock"] is True

    listing = client.get("/api/v1/products").json()
    assert listing["total_count"] == 1
    assert listing["items"][0]["name"] == "Kopi Hitam"


def test_add_duplicate_product_returns_409(client: TestClient) -> None:
    client.post("/api/v1/products", json=KOPI)

    response = client.post("/api/v1/products", json={**KOPI, "name": "Other"})

    assert response.status_code == 409
    assert response.json() == {
        "error": "DUPLICATE_ID",
        "detail": "An item with ID 'P001' already exists",
        "status_code": 409,
    }
    assert client.get("/api/v1/products").json()["total_count"] == 1


@pytest.mark.parametrize(
    "override",
    [{"price": "-1"}, {"stock": -3}, {"item_id": "  "}, {"name": ""}],
)
def test_add_invalid_product_returns_400(client: TestClient, override: dict) -> None:
    response = client.post("/api/v1/products", json={**KOPI, **override})

    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_INPUT"


def test_get_unknown_product_returns_404(client: TestClient) -> None:
    response = client.get("/api/v1/products/P404")

    assert response.status_code == 404
    assert response.json()["error"] == "NOT_FOUND"


def test_update_product(client: TestClient) -> None:
    client.post("/api/v1/products", json=KOPI)

    response = client.put(
        "/api/v1/products/P001",
        json={"name": "Kopi Susu", "price": "12000", "stock": 15, "image_ref": "/images/kopi.png"},
    )

    assert response.status_code == 200
    assert response.json()["product"]["name"] == "Kopi Susu"
    assert client.get("/api/v1/products/P001").json()["name"] == "Kopi Susu"


def test_update_product_rejects_rename_and_unknown_id(client: TestClient) -> None:
    client.post("/api/v1/products", json=KOPI)

    rename = client.put("/api/v1/products/P001", json={**KOPI, "item_id": "P002"})
    missing = client.put("/api/v1/products/P404", json={**KOPI, "item_id": None})

    assert rename.status_code == 400
    assert missing.status_code == 404


def test_delete_product(client: TestClient) -> None:
    client.post("/api/v1/products", json=KOPI)

    response = client.delete("/api/v1/products/P001")

    assert response.status_code == 200
    assert response.json() == {"item_id": "P001", "removed": True, "persisted": True}
    assert client.delete("/api/v1/products/P001").status_code == 404


def test_purchase_flow_and_sale_history(client: TestClient) -> None:
    client.post("/api/v1/products", json=KOPI)

    response = client.post("/api/v1/purchases", json={"item_id": "P001"})

    assert response.status_code == 201
    body = response.json()
    assert body["remaining_stock"] == 14
    assert body["persisted"] is True
    assert body["sale"]["status"] == "SUCCEEDED"
    assert Decimal(body["sale"]["total"]) == Decimal("10000")
    sale_id = body["sale"]["sale_id"]
    assert sale_id.startswith("TRX-")

    sales = client.get("/api/v1/sales").json()
    assert sales["total_count"] == 1
    assert sales["sales"][0]["sale_id"] == sale_id

    assert client.get(f"/api/v1/sales/{sale_id}").json()["item_name"] == "Kopi Hitam"

    receipt = client.get(f"/api/v1/sales/{sale_id}/receipt")
    assert receipt.status_code == 200
    assert "Item           : Kopi Hitam" in receipt.text
    assert "Total          : Rp 10.000" in receipt.text

    summary = client.get("/api/v1/sales/summary").json()
    assert summary["total_transactions"] == 1
    assert summary["succeeded_transactions"] == 1
    assert Decimal(summary["revenue"]) == Decimal("10000")
    assert summary["revenue_display"] == "Rp 10.000"


def test_purchase_errors(client: TestClient, machine: VendingMachine) -> None:
    machine.add_item(Item(item_id="P009", name="Soda", price=9000, stock=0))

    out_of_stock = client.post("/api/v1/purchases", json={"item_id": "P009"})
    missing = client.post("/api/v1/purchases", json={"item_id": "P404"})

    assert out_of_stock.status_code == 409
    assert out_of_stock.json()["error"] == "OUT_OF_STOCK"
    assert out_of_stock.json()["detail"] == "'Soda' is out of stock"
    assert missing.status_code == 404
    assert machine.sale_count() == 0


def test_unknown_sale_returns_404(client: TestClient) -> None:
    assert client.get("/api/v1/sales/TRX-nope").status_code == 404
    assert client.get("/api/v1/sales/TRX-nope/receipt").status_code == 404


def test_clear_sales_keeps_inventory(client: TestClient) -> None:
    client.post("/api/v1/products", json=KOPI)
    client.post("/api/v1/purchases", json={"item_id": "P001"})
    client.post("/api/v1/purchases", json={"item_id": "P001"})

    response = client.delete("/api/v1/sales")

    assert response.json() == {"cleared": 2}
    assert client.get("/api/v1/sales").json()["total_count"] == 0
    assert client.get("/api/v1/products/P001").json()["stock"] == 13


def test_reload_products(client: TestClient, machine: VendingMachine, store) -> None:
    client.post("/api/v1/products", json=KOPI)
    store.save([Item(item_id="P100", name="Roti", price=7000, stock=4)])

    response = client.post("/api/v1/products/reload")

    assert response.json() == {"load_status": "LOADED", "item_count": 1}
    assert [item.item_id for item in machine.list_items()] == ["P100"]


def test_not_found_errors_share_error_body(client: TestClient) -> None:
    responses = [
        client.get("/api/v1/products/P404"),
        client.delete("/api/v1/products/P404"),
        client.get("/api/v1/sales/TRX-nope"),
        client.get("/api/v1/sales/TRX-nope/receipt"),
    ]

    for response in responses:
        assert response.status_code == 404
        assert set(response.json()) == {"error", "detail", "status_code"}
        assert response.json()["error"] == "NOT_FOUND"
    assert responses[1].json()["detail"] == "Item 'P404' was not found"
    assert responses[2].json()["detail"] == "Sale 'TRX-nope' was not found"
