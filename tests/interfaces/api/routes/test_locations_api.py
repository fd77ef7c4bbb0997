"""HTTP tests for locations, famous products and favorites."""

import json


def _create_location(client, headers, **overrides):
    body = {"kind": "food_shop", "name": "Raan Jay Fai", "image_url": "/uploads/jayfai.jpg"}
    body.update(overrides)
    response = client.post("/api/locations", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_locations_can_be_listed_by_kind(client, signup) -> None:
    _, headers = signup("author")
    _create_location(client, headers)
    _create_location(client, headers, kind="attraction", name="Wat Pho")

    food = client.get("/api/locations", params={"kind": "food_shop"}).json()
    everything = client.get("/api/locations").json()

    assert [location["name"] for location in food] == ["Raan Jay Fai"]
    assert {location["name"] for location in everything} == {"Raan Jay Fai", "Wat Pho"}
    assert food[0]["image_url"].startswith("http")
    assert client.get("/api/locations/missing").status_code == 404


def test_new_product_is_broadcast_to_everyone_else(client, app, signup, flush) -> None:
    _, author_headers = signup("author", display_name="Author")
    location = _create_location(client, author_headers)
    reader, reader_headers = signup("reader")
    connection = app.state.connection_registry.register(reader["id"])

    response = client.post(
        f"/api/locations/{location['id']}/products",
        json={"name": "Crab omelette", "image_url": "/uploads/omelette.jpg"},
        headers=author_headers,
    )
    flush()

    assert response.status_code == 201, response.text
    product = response.json()
    assert product["location_id"] == location["id"]

    [frame] = connection.channel.drain()
    message = json.loads(frame[len("data: ") : -2])
    assert message["data"]["type"] == "new_product"
    assert message["data"]["payload"]["product"]["name"] == "Crab omelette"

    [stored] = client.get("/api/notifications", headers=reader_headers).json()
    assert stored["type"] == "new_product"
    assert stored["payload"]["productId"] == product["id"]
    assert stored["payload"]["productName"] == "Crab omelette"
    assert stored["payload"]["locationId"] == location["id"]
    assert stored["payload"]["locationName"] == "Raan Jay Fai"
    assert client.get("/api/notifications", headers=author_headers).json() == []

    products = client.get(f"/api/locations/{location['id']}/products").json()
    assert [item["name"] for item in products] == ["Crab omelette"]


def test_product_for_unknown_location_returns_404(client, signup) -> None:
    _, headers = signup("author")

    response = client.post(
        "/api/locations/missing/products", json={"name": "Nothing"}, headers=headers
    )

    assert response.status_code == 404


def test_favorites_toggle_on_and_off(client, signup) -> None:
    _, author_headers = signup("author")
    first = _create_location(client, author_headers)
    second = _create_location(client, author_headers, kind="attraction", name="Wat Pho")
    _, headers = signup("traveller")

    assert client.get("/api/favorites", headers=headers).json() == []

    added = client.post(
        "/api/favorites/toggle", json={"location_id": first["id"]}, headers=headers
    )
    client.post("/api/favorites/toggle", json={"location_id": second["id"]}, headers=headers)
    assert added.json() == {"status": "added"}
    assert sorted(client.get("/api/favorites", headers=headers).json()) == sorted(
        [first["id"], second["id"]]
    )

    removed = client.post(
        "/api/favorites/toggle", json={"location_id": first["id"]}, headers=headers
    )
    assert removed.json() == {"status": "removed"}
    assert client.get("/api/favorites", headers=headers).json() == [second["id"]]
    assert client.get("/api/favorites", headers=author_headers).json() == []


def test_favorites_require_a_known_location_and_a_token(client, signup) -> None:
    _, headers = signup("traveller")

    missing = client.post(
        "/api/favorites/toggle", json={"location_id": "missing"}, headers=headers
    )

    assert missing.status_code == 404
    assert client.get("/api/favorites").status_code == 401
