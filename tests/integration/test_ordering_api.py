"""
Integration tests for the table ordering HTTP API.

Full flow: start session, shared order, add products, confirm, kitchen,
payment.
"""
from decimal import Decimal
from uuid import uuid4


def open_table(client, table_number):
    response = client.post(f"/api/v1/tables/{table_number}/session")
    assert response.status_code == 200
    return response.json()


def table_order(client, table_number):
    response = client.post(f"/api/v1/orders/table/{table_number}")
    assert response.status_code == 200
    return response.json()


def add_item(client, order_id, product_id, quantity=1):
    return client.post(
        f"/api/v1/orders/{order_id}/items",
        json={"product_id": product_id, "quantity": quantity},
    )


# =============================================================================
# ROOT / HEALTH
# =============================================================================

def test_root_and_health(test_client):
    assert test_client.get("/").json()["docs"] == "/docs"

    health = test_client.get("/health")
    assert health.status_code == 200
    assert health.json()["status"] == "healthy"

    ready = test_client.get("/health/ready").json()
    assert ready["checks"]["storage"] == "memory"
    assert ready["checks"]["notifications"] == "log"


# =============================================================================
# TABLES
# =============================================================================

def test_tables_are_seeded(test_client):
    tables = test_client.get("/api/v1/tables").json()

    assert [t["table_number"] for t in tables] == list(range(1, 11))
    assert not any(t["is_occupied"] for t in tables)


def test_session_start_is_shared_and_end_frees_table(test_client):
    first = open_table(test_client, 3)
    second = open_table(test_client, 3)
    assert first["session_id"] == second["session_id"]

    ended = test_client.delete("/api/v1/tables/3/session")
    assert ended.status_code == 200
    assert ended.json()["session_id"] == first["session_id"]

    again = test_client.delete("/api/v1/tables/3/session")
    assert again.status_code == 400
    assert again.json()["detail"] == "Table 3 does not have an active session to end."


def test_unknown_table(test_client):
    response = test_client.post("/api/v1/tables/99/session")

    assert response.status_code == 400
    assert response.json()["detail"] == "Table 99 does not exist."


def test_order_requires_session(test_client):
    response = test_client.post("/api/v1/orders/table/7")

    assert response.status_code == 400
    assert response.json()["detail"] == "Table 7 does not have an active session."

    open_table(test_client, 7)
    order = table_order(test_client, 7)
    assert order["status"] == "Draft"
    assert order["lines"] == []


# =============================================================================
# CATALOG
# =============================================================================

def test_menu_is_browsable(test_client, menu):
    categories = test_client.get("/api/v1/categories").json()

    assert len(categories) == 7
    assert "Papas Arrugadas con Mojo" in menu
    assert menu["Quesillo"]["allergens"] == ["Huevo", "Lactosa"]
    assert Decimal(menu["Papas Arrugadas con Mojo"]["price"]) == Decimal("4.50")


def test_products_of_unknown_category(test_client):
    response = test_client.get(f"/api/v1/categories/{uuid4()}/products")

    assert response.status_code == 400


# =============================================================================
# FULL FLOW
# =============================================================================

def test_full_table_flow(test_client, menu, notifications):
    open_table(test_client, 5)
    order = table_order(test_client, 5)
    order_id = order["id"]

    papas = menu["Papas Arrugadas con Mojo"]["id"]
    cerveza = menu["Cerveza Dorada"]["id"]

    add_item(test_client, order_id, papas, 2)
    add_item(test_client, order_id, cerveza, 1)
    response = add_item(test_client, order_id, papas, 1)

    assert response.status_code == 200
    body = response.json()
    assert len(body["lines"]) == 2
    assert body["lines"][0]["quantity"] == 3
    assert Decimal(body["total"]) == Decimal("15.50")

    # A second diner lands on the same order
    assert table_order(test_client, 5)["id"] == order_id

    confirmed = test_client.post(f"/api/v1/orders/{order_id}/confirm")
    assert confirmed.status_code == 200
    assert confirmed.json()["status"] == "Confirmed"
    assert [(n.group, n.method) for n in notifications.get_notifications()] == [
        ("table_5", "OrderConfirmed"),
        ("kitchen", "NewOrder"),
        ("table_5", "OrderStatusChanged"),
        ("kitchen", "OrderStatusChanged"),
    ]

    board = test_client.get("/api/v1/kitchen/orders").json()
    assert [o["id"] for o in board] == [order_id]

    skipped = test_client.put(
        f"/api/v1/kitchen/orders/{order_id}/status", json={"status": "Delivered"}
    )
    assert skipped.status_code == 400
    assert skipped.json()["detail"] == "Only ready orders can be marked as delivered."

    for status in ("Preparing", "Ready", "Delivered"):
        response = test_client.put(
            f"/api/v1/kitchen/orders/{order_id}/status", json={"status": status}
        )
        assert response.status_code == 200
        assert response.json()["status"] == status

    payment = test_client.post("/api/v1/payments", json={"order_id": order_id})
    assert payment.status_code == 200
    assert payment.json()["status"] == "Completed"
    assert Decimal(payment.json()["amount"]) == Decimal("15.50")
    assert payment.json()["transaction_id"].startswith("txn_mock_")

    second = test_client.post("/api/v1/payments", json={"order_id": order_id})
    assert second.status_code == 400
    assert second.json()["detail"] == "Payment has already been completed for this order"

    stored = test_client.get(f"/api/v1/payments/order/{order_id}")
    assert stored.json()["id"] == payment.json()["id"]


def test_draft_order_cannot_be_paid(test_client):
    open_table(test_client, 2)
    order = table_order(test_client, 2)

    response = test_client.post("/api/v1/payments", json={"order_id": order["id"]})

    assert response.status_code == 400
    assert response.json()["detail"] == (
        "Order must be confirmed before payment. Current status: Draft"
    )


def test_payment_lookup_errors(test_client):
    assert test_client.get(f"/api/v1/payments/order/{uuid4()}").status_code == 404
    assert test_client.get("/api/v1/payments/order/not-a-uuid").status_code == 400


def test_confirm_empty_order(test_client):
    open_table(test_client, 4)
    order = table_order(test_client, 4)

    response = test_client.post(f"/api/v1/orders/{order['id']}/confirm")

    assert response.status_code == 400
    assert response.json()["detail"] == "Cannot confirm an empty order."


def test_cancel_then_new_order(test_client, menu):
    open_table(test_client, 6)
    order = table_order(test_client, 6)
    add_item(test_client, order["id"], menu["Agua"]["id"])

    cancelled = test_client.post(f"/api/v1/orders/{order['id']}/cancel")
    assert cancelled.json()["status"] == "Cancelled"

    fresh = table_order(test_client, 6)
    assert fresh["id"] != order["id"]
    assert test_client.get(f"/api/v1/orders/{order['id']}").json()["status"] == "Cancelled"


def test_invalid_kitchen_status(test_client):
    open_table(test_client, 8)
    order = table_order(test_client, 8)

    response = test_client.put(
        f"/api/v1/kitchen/orders/{order['id']}/status", json={"status": "Burnt"}
    )

    assert response.status_code == 400
    assert response.json()["detail"].startswith("Invalid status: Burnt.")


def test_quantity_limit(test_client, menu):
    open_table(test_client, 9)
    order = table_order(test_client, 9)
    agua = menu["Agua"]["id"]

    assert add_item(test_client, order["id"], agua, 100).status_code == 200
    response = add_item(test_client, order["id"], agua, 1)

    assert response.status_code == 400
    assert response.json()["detail"] == "Total quantity cannot exceed 100. Attempted: 101"
