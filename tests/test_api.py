from datetime import datetime, timezone
from decimal import Decimal

from app.models.transactions import Transaction


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Cashier API is running"}


def test_health_checks_database(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["db"] == "ok"


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


def test_category_crud(client):
    created = client.post("/categories", json={"name": "Clothing", "description": "Apparel"})
    assert created.status_code == 201
    category_id = created.json()["id"]

    assert client.get(f"/categories/{category_id}").json()["name"] == "Clothing"

    updated = client.put(f"/categories/{category_id}", json={"description": None})
    assert updated.status_code == 200
    assert updated.json() == {"id": category_id, "name": "Clothing", "description": None}

    assert [c["id"] for c in client.get("/categories").json()] == [category_id]

    assert client.delete(f"/categories/{category_id}").status_code == 204
    assert client.get(f"/categories/{category_id}").status_code == 404


def test_deleting_category_detaches_products(client):
    category_id = client.post("/categories", json={"name": "Electronics"}).json()["id"]
    product = client.post(
        "/products",
        json={"name": "Laptop", "price": "1299.99", "stock": 20, "category_id": category_id},
    ).json()
    assert product["category_name"] == "Electronics"

    assert client.delete(f"/categories/{category_id}").status_code == 204

    after = client.get(f"/products/{product['id']}").json()
    assert after["category_id"] is None
    assert after["category_name"] is None
    assert after["stock"] == 20


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------


def test_product_crud(client):
    created = client.post("/products", json={"name": "Smartphone", "price": "699.99", "stock": 50})
    assert created.status_code == 201
    body = created.json()
    assert Decimal(body["price"]) == Decimal("699.99")
    assert body["stock"] == 50
    assert body["category_id"] is None

    updated = client.put(f"/products/{body['id']}", json={"price": "649.99"})
    assert updated.status_code == 200
    assert Decimal(updated.json()["price"]) == Decimal("649.99")
    assert updated.json()["name"] == "Smartphone"

    assert client.delete(f"/products/{body['id']}").status_code == 204
    assert client.get(f"/products/{body['id']}").status_code == 404


def test_product_validation(client):
    assert client.post("/products", json={"name": "Bad", "price": "-1.00", "stock": 1}).status_code == 422
    assert client.post("/products", json={"name": "Bad", "price": "1.00", "stock": -1}).status_code == 422
    assert client.post("/products", json={"name": "Bad", "price": "1.001", "stock": 1}).status_code == 422
    assert client.post("/products", json={"name": "Bad", "price": "1.00", "stock": 2**40}).status_code == 422
    assert client.post("/products", json={"name": "Bad", "price": "100000000.00", "stock": 1}).status_code == 422


def test_product_with_unknown_category(client):
    response = client.post("/products", json={"name": "Orphan", "price": "1.00", "category_id": 99})

    assert response.status_code == 404


def test_list_products_filter_and_paging(client):
    for name in ["Green Tea", "Black Tea", "Coffee", "Iced tea"]:
        client.post("/products", json={"name": name, "price": "2.00", "stock": 5})

    teas = client.get("/products", params={"name": "tea"}).json()
    assert [p["name"] for p in teas] == ["Green Tea", "Black Tea", "Iced tea"]

    page_two = client.get("/products", params={"page": 2, "limit": 3}).json()
    assert [p["name"] for p in page_two] == ["Iced tea"]


# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------


def _create_product(client, name="Widget", price="100.00", stock=10):
    return client.post("/products", json={"name": name, "price": price, "stock": stock}).json()["id"]


def test_checkout_success(client):
    product_id = _create_product(client, stock=10)

    response = client.post("/checkout", json={"items": [{"product_id": product_id, "quantity": 3}]})

    assert response.status_code == 201
    assert Decimal(response.json()["total"]) == Decimal("300.00")
    assert client.get(f"/products/{product_id}").json()["stock"] == 7

    transaction = client.get(f"/transactions/{response.json()['transaction_id']}").json()
    assert Decimal(transaction["total_amount"]) == Decimal("300.00")
    assert transaction["items"][0]["quantity"] == 3
    assert Decimal(transaction["items"][0]["subtotal"]) == Decimal("300.00")


def test_checkout_optimistic_mode(client):
    first = _create_product(client, name="Tea", price="50.00", stock=5)
    second = _create_product(client, name="Cake", price="30.00", stock=5)

    response = client.post(
        "/checkout",
        params={"lock_mode": "false"},
        json={"items": [{"product_id": first, "quantity": 2}, {"product_id": second, "quantity": 1}]},
    )

    assert response.status_code == 201
    assert Decimal(response.json()["total"]) == Decimal("130.00")


def test_checkout_insufficient_stock(client, db):
    product_id = _create_product(client, stock=2)

    response = client.post("/checkout", json={"items": [{"product_id": product_id, "quantity": 5}]})

    assert response.status_code == 409
    assert response.json()["detail"]["product_id"] == product_id
    assert client.get(f"/products/{product_id}").json()["stock"] == 2
    assert db.query(Transaction).count() == 0


def test_checkout_unknown_product(client):
    response = client.post("/checkout", json={"items": [{"product_id": 12345, "quantity": 1}]})

    assert response.status_code == 404
    assert response.json()["detail"]["product_id"] == 12345


def test_checkout_empty_cart(client):
    response = client.post("/checkout", json={"items": []})

    assert response.status_code == 400


def test_checkout_zero_quantity(client):
    product_id = _create_product(client)

    response = client.post("/checkout", json={"items": [{"product_id": product_id, "quantity": 0}]})

    assert response.status_code == 400
    assert client.get(f"/products/{product_id}").json()["stock"] == 10


def test_list_transactions_newest_first(client):
    product_id = _create_product(client, stock=10)
    first = client.post("/checkout", json={"items": [{"product_id": product_id, "quantity": 1}]}).json()
    second = client.post("/checkout", json={"items": [{"product_id": product_id, "quantity": 2}]}).json()

    listed = client.get("/transactions").json()

    assert [t["id"] for t in listed] == [second["transaction_id"], first["transaction_id"]]


def test_missing_transaction(client):
    assert client.get("/transactions/999").status_code == 404


def test_ids_beyond_integer_range_are_not_found(client):
    huge = 2**70

    response = client.post("/checkout", json={"items": [{"product_id": huge, "quantity": 1}]})

    assert response.status_code == 404
    assert response.json()["detail"]["product_id"] == huge
    assert client.get(f"/products/{huge}").status_code == 404
    assert client.get(f"/categories/{huge}").status_code == 404
    assert client.get(f"/transactions/{huge}").status_code == 404


def test_checkout_quantity_beyond_integer_range(client):
    product_id = _create_product(client, stock=10)

    response = client.post("/checkout", json={"items": [{"product_id": product_id, "quantity": 2**70}]})

    assert response.status_code == 409
    assert client.get(f"/products/{product_id}").json()["stock"] == 10


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------


def test_today_report(client):
    product_id = _create_product(client, name="Smartphone", price="699.99", stock=50)
    client.post("/checkout", json={"items": [{"product_id": product_id, "quantity": 3}]})

    body = client.get("/reports/today").json()

    assert Decimal(body["total_revenue"]) == Decimal("2099.97")
    assert body["total_transactions"] == 1
    assert body["best_selling_product"] == {
        "product_id": product_id,
        "name": "Smartphone",
        "quantity_sold": 3,
    }


def test_range_report_without_sales_omits_best_seller(client):
    response = client.get("/reports", params={"start_date": "2020-01-01", "end_date": "2020-01-31"})

    assert response.status_code == 200
    body = response.json()
    assert body["total_transactions"] == 0
    assert Decimal(body["total_revenue"]) == Decimal("0")
    assert "best_selling_product" not in body


def test_range_report_includes_today(client):
    product_id = _create_product(client, price="10.00")
    client.post("/checkout", json={"items": [{"product_id": product_id, "quantity": 2}]})
    today = datetime.now(timezone.utc).date().isoformat()

    body = client.get("/reports", params={"start_date": today, "end_date": today}).json()

    assert body["total_transactions"] == 1
    assert Decimal(body["total_revenue"]) == Decimal("20.00")


def test_range_report_rejects_inverted_range(client):
    response = client.get("/reports", params={"start_date": "2026-02-02", "end_date": "2026-02-01"})

    assert response.status_code == 400
