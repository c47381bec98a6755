# tests/test_products.py
from app.core.ids import new_id
from app.models.product import Product


def test_public_catalog(client, product):
    resp = client.get("/products")
    assert resp.status_code == 200
    assert [p["name"] for p in resp.json()] == ["Widget"]


def test_add_product_defaults(client, admin_headers):
    resp = client.post(
        "/api/productsadd",
        json={"img": "lamp.png", "name": "Lamp", "category": "home"},
        headers=admin_headers,
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["price"] == 0
    assert body["rating"] == 0
    assert len(body["id"]) == 24

    listed = client.get("/api/products", headers=admin_headers).json()
    assert [p["name"] for p in listed] == ["Lamp"]


def test_add_product_requires_img_and_name(client, admin_headers):
    resp = client.post(
        "/api/productsadd", json={"name": "No image"}, headers=admin_headers
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Image and Name are required!"

    resp = client.post("/api/productsadd", json={"img": "x.png"}, headers=admin_headers)
    assert resp.status_code == 400


def test_add_product_negative_price_rejected(client, admin_headers):
    resp = client.post(
        "/api/productsadd",
        json={"img": "x.png", "name": "Bad", "price": -1},
        headers=admin_headers,
    )
    assert resp.status_code == 422


def test_update_product(client, session, admin_headers, product):
    resp = client.put(
        f"/api/products/{product.id}",
        json={"price": 12.5, "rating": 4},
        headers=admin_headers,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Product updated successfully!"
    assert body["product"]["price"] == 12.5
    assert body["product"]["name"] == "Widget"


def test_update_product_malformed_id(client, admin_headers):
    resp = client.put(
        "/api/products/123", json={"name": "x"}, headers=admin_headers
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Invalid product ID"


def test_update_product_missing(client, admin_headers):
    resp = client.put(
        f"/api/products/{new_id()}", json={"name": "x"}, headers=admin_headers
    )
    assert resp.status_code == 404


def test_delete_product(client, session, admin_headers, product):
    product_id = product.id
    resp = client.delete(f"/api/products/{product_id}", headers=admin_headers)
    assert resp.status_code == 200
    session.expire_all()
    assert session.get(Product, product_id) is None

    again = client.delete(f"/api/products/{product_id}", headers=admin_headers)
    assert again.status_code == 200
