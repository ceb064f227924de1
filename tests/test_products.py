def test_list_active_products(client, products):
    response = client.get("/api/products")

    assert response.status_code == 200
    body = response.get_json()
    assert body["ok"] is True
    assert body["total"] == 2
    assert [product["slug"] for product in body["data"]] == [
        "amethyst-cluster",
        "rose-quartz-bracelet",
    ]
    assert body["data"][0]["price"] == 2750.5


def test_search_products(client, products):
    response = client.get("/api/products?search_key=quartz")

    assert [product["slug"] for product in response.get_json()["data"]] == [
        "rose-quartz-bracelet"
    ]


def test_product_by_id_or_slug(client, products):
    by_id = client.get(f"/api/products/{products['rose'].id}").get_json()
    by_slug = client.get("/api/products/rose-quartz-bracelet").get_json()

    assert by_id["data"]["id"] == by_slug["data"]["id"] == products["rose"].id


def test_unknown_or_inactive_product_is_404(client, products):
    missing = client.get("/api/products/unknown-slug")
    retired = client.get("/api/products/retired-incense")

    assert missing.status_code == 404
    assert missing.get_json()["ok"] is False
    assert retired.status_code == 404
