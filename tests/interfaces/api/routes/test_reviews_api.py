"""HTTP tests for reviews, replies and likes and the notifications they raise."""

import json


def _setup_location(client, signup):
    owner, owner_headers = signup("owner", display_name="Owner")
    response = client.post(
        "/api/locations",
        json={"kind": "food_shop", "name": "Khao Soi Mae Sai"},
        headers=owner_headers,
    )
    assert response.status_code == 201, response.text
    return owner, owner_headers, response.json()


def _types(client, headers):
    return [item["type"] for item in client.get("/api/notifications", headers=headers).json()]


def test_review_notifies_the_location_owner(client, app, signup, flush) -> None:
    owner, owner_headers, location = _setup_location(client, signup)
    _, visitor_headers = signup("visitor", display_name="Visitor")
    connection = app.state.connection_registry.register(owner["id"])

    response = client.post(
        f"/api/locations/{location['id']}/reviews",
        json={"rating": 4, "comment": "Rich broth, " + "very tasty " * 10},
        headers=visitor_headers,
    )
    flush()

    assert response.status_code == 201
    [frame] = connection.channel.drain()
    message = json.loads(frame[len("data: ") : -2])
    assert message["data"]["type"] == "new_review"
    assert message["data"]["payload"]["review"]["rating"] == 4

    [stored] = client.get("/api/notifications", headers=owner_headers).json()
    assert stored["type"] == "new_review"
    assert stored["actor_name"] == "Visitor"
    assert stored["payload"]["reviewId"] == response.json()["id"]
    assert len(stored["payload"]["commentSnippet"]) <= 50

    detail = client.get(f"/api/locations/{location['id']}").json()
    assert detail["rating"] == 4
    assert detail["review_count"] == 1


def test_reviewing_your_own_location_is_silent(client, signup, flush) -> None:
    _, owner_headers, location = _setup_location(client, signup)

    response = client.post(
        f"/api/locations/{location['id']}/reviews",
        json={"rating": 5},
        headers=owner_headers,
    )
    flush()

    assert response.status_code == 201
    assert _types(client, owner_headers) == []


def test_likes_and_replies_notify_the_review_author(client, signup, flush) -> None:
    _, _, location = _setup_location(client, signup)
    _, author_headers = signup("author")
    _, fan_headers = signup("fan")
    review = client.post(
        f"/api/locations/{location['id']}/reviews",
        json={"rating": 5, "comment": "Best in town"},
        headers=author_headers,
    ).json()

    liked = client.post(f"/api/reviews/{review['id']}/like", headers=fan_headers)
    assert liked.json() == {"liked": True, "likes_count": 1}
    unliked = client.post(f"/api/reviews/{review['id']}/like", headers=fan_headers)
    assert unliked.json() == {"liked": False, "likes_count": 0}

    reply = client.post(
        f"/api/reviews/{review['id']}/comments",
        json={"comment": "Totally agree"},
        headers=fan_headers,
    )
    assert reply.status_code == 201
    flush()

    assert sorted(_types(client, author_headers)) == ["new_like", "new_reply"]

    comment_like = client.post(
        f"/api/comments/{reply.json()['id']}/like", headers=author_headers
    )
    assert comment_like.json() == {"liked": True, "likes_count": 1}
    flush()

    [notification] = client.get("/api/notifications", headers=fan_headers).json()
    assert notification["type"] == "new_comment_like"
    assert notification["payload"]["commentId"] == reply.json()["id"]
    assert notification["payload"]["commentSnippet"] == "Totally agree"


def test_liking_your_own_review_is_silent(client, signup, flush) -> None:
    _, _, location = _setup_location(client, signup)
    _, author_headers = signup("author")
    review = client.post(
        f"/api/locations/{location['id']}/reviews",
        json={"rating": 3},
        headers=author_headers,
    ).json()

    response = client.post(f"/api/reviews/{review['id']}/like", headers=author_headers)
    flush()

    assert response.json()["liked"] is True
    assert _types(client, author_headers) == []


def test_unknown_review_returns_404(client, signup) -> None:
    _, headers = signup("visitor")

    assert client.post("/api/reviews/missing/like", headers=headers).status_code == 404
