def test_root(client):
    assert client.get("/").json()["brand"] == "Mock Storefront"


def test_diagnostics_report_table_sizes(client):
    body = client.get("/test").json()
    assert body["tables"] == {"products": 9, "collections": 3, "orders": 0}
    assert body["order_ids"] == "FixedOrderIds"
    assert body["store"] == "✅ In-memory & Working"


def test_list_products_uses_camel_case(client):
    r = client.get("/api/products")
    assert r.status_code == 200
    body = r.json()
    assert body["next"] is None
    first = body["items"][0]
    assert first["imageUrl"] == "/assets/modelP_001.jpg"
    assert first["collectionIds"] == ["apparel", "bestSellers"]
    assert first["deletedAt"] is None


def test_list_products_filters_and_sorts(client):
    r = client.get("/api/products", params={"collectionId": "stickers", "sort": "price", "order": "desc"})
    prices = [p["price"] for p in r.json()["items"]]
    assert prices == [1000, 500, 500, 250, 200]


def test_list_products_ids_repeated_or_comma_separated(client):
    repeated = client.get("/api/products?ids=sticker-pack&ids=houston-sticker").json()
    joined = client.get("/api/products?ids=sticker-pack,houston-sticker").json()
    assert [p["id"] for p in repeated["items"]] == ["sticker-pack", "houston-sticker"]
    assert repeated == joined


def test_list_products_rejects_unknown_sort(client):
    assert client.get("/api/products", params={"sort": "stock", "order": "asc"}).status_code == 422


def test_get_product(client):
    r = client.get("/api/products/astro-sticker-sheet")
    assert r.status_code == 200
    assert r.json()["price"] == 1000


def test_get_product_not_found(client):
    r = client.get("/api/products/nonexistent")
    assert r.status_code == 404
    assert r.json()["detail"] == "not-found"


def test_collections(client):
    items = client.get("/api/collections").json()["items"]
    assert [c["slug"] for c in items] == ["apparel", "stickers", "best-sellers"]

    r = client.get("/api/collections/stickers")
    assert r.json()["products"] == []
    assert client.get("/api/collections/nope").status_code == 404


def test_create_customer(client):
    r = client.post("/api/customers", json={"email": "ada@example.com", "firstName": "Ada"})
    assert r.status_code == 201
    body = r.json()
    assert body["id"] == "customer-1"
    assert body["firstName"] == "Ada"
    assert body["deletedAt"] is None


def test_create_customer_without_body(client):
    assert client.post("/api/customers").status_code == 422


def test_create_and_get_order(client, store):
    payload = {
        "lineItems": [
            {"productVariantId": "L", "quantity": 1},
            {"productVariantId": "default", "quantity": 3},
        ],
        "shippingAddress": {"city": "Houston", "firstName": "Ada"},
    }
    r = client.post("/api/orders", json=payload)
    assert r.status_code == 201
    order = r.json()
    assert order["id"] == "dk3fd0sak3d"
    assert order["number"] == 1001
    assert len(order["lineItems"]) == 2
    assert order["lineItems"][0]["productVariant"]["product"]["id"] == "astro-icon-zip-up-hoodie"
    assert order["lineItems"][1]["quantity"] == 3
    assert order["shippingAddress"]["line1"] == ""
    assert order["shippingAddress"]["firstName"] == "Ada"
    assert order["billingAddress"]["phone"] is None

    fetched = client.get(f"/api/orders/{order['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["lineItems"][0]["id"] == order["lineItems"][0]["id"]
    assert list(store.orders) == ["dk3fd0sak3d"]


def test_create_order_unknown_variant(client, store):
    r = client.post("/api/orders", json={"lineItems": [{"productVariantId": "nope"}]})
    assert r.status_code == 400
    assert r.json()["detail"] == "Product variant nope not found"
    assert store.orders == {}


def test_get_order_not_found(client):
    r = client.get("/api/orders/missing")
    assert r.status_code == 404
    assert r.json()["detail"] == "not-found"


def test_format_price_endpoint(client):
    assert client.get("/api/format-price", params={"value": 250}).json() == {
        "value": 250,
        "formatted": "$2.50",
    }
