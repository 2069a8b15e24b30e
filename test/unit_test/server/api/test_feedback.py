"""Tests for the feedback endpoints and the rating they maintain."""

import pytest


@pytest.fixture
async def exchange_id(client, registered_users) -> str:
    response = await client.post(
        "/api/exchange-requests",
        json={"requesterId": "u-alice", "targetId": "u-bob", "skillToTeach": "Python", "skillToLearn": "Guitar"},
    )
    return response.json()["id"]


def _feedback(exchange_id: str, stars: int, from_user: str = "u-alice", to_user: str = "u-bob") -> dict:
    return {
        "exchangeRequestId": exchange_id,
        "fromUserId": from_user,
        "toUserId": to_user,
        "stars": stars,
        "comment": "Great teacher",
    }


class TestCreateFeedback:
    async def test_create_feedback(self, client, exchange_id):
        response = await client.post("/api/feedback", json=_feedback(exchange_id, 4))

        assert response.status_code == 201
        body = response.json()
        assert body["stars"] == 4
        assert body["toUserId"] == "u-bob"
        assert body["comment"] == "Great teacher"

    @pytest.mark.parametrize("stars", [0, 6])
    async def test_stars_out_of_range_is_400(self, client, exchange_id, stars):
        response = await client.post("/api/feedback", json=_feedback(exchange_id, stars))

        assert response.status_code == 400

    async def test_unknown_exchange_is_404(self, client, registered_users):
        response = await client.post("/api/feedback", json=_feedback("missing", 5))

        assert response.status_code == 404
        assert response.json()["detail"] == "Exchange request not found"

    async def test_unknown_receiver_is_404(self, client, exchange_id):
        response = await client.post("/api/feedback", json=_feedback(exchange_id, 5, to_user="ghost"))

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    async def test_unknown_author_is_404(self, client, exchange_id):
        response = await client.post("/api/feedback", json=_feedback(exchange_id, 5, from_user="ghost"))

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"
        assert (await client.get("/api/users/u-bob")).json()["rating"] == 5.0

    async def test_receiver_rating_becomes_average(self, client, exchange_id):
        await client.post("/api/feedback", json=_feedback(exchange_id, 4))
        await client.post("/api/feedback", json=_feedback(exchange_id, 3, from_user="u-carol"))

        bob = (await client.get("/api/users/u-bob")).json()

        assert bob["rating"] == 3.5


class TestReadFeedback:
    async def test_received_newest_first(self, client, exchange_id):
        first = (await client.post("/api/feedback", json=_feedback(exchange_id, 4))).json()
        second = (await client.post("/api/feedback", json=_feedback(exchange_id, 2, from_user="u-carol"))).json()

        body = (await client.get("/api/feedback/received", params={"userId": "u-bob"})).json()

        assert {f["id"] for f in body} == {first["id"], second["id"]}
        assert (await client.get("/api/feedback/received", params={"userId": "u-alice"})).json() == []

    async def test_stats(self, client, exchange_id):
        for stars, sender in ((5, "u-alice"), (4, "u-carol"), (4, "u-alice")):
            await client.post("/api/feedback", json=_feedback(exchange_id, stars, from_user=sender))

        response = await client.get("/api/feedback/stats", params={"userId": "u-bob"})

        assert response.json() == {"avgStars": 4.33, "count": 3}

    async def test_stats_without_feedback(self, client, registered_users):
        response = await client.get("/api/feedback/stats", params={"userId": "u-carol"})

        assert response.json() == {"avgStars": 0.0, "count": 0}

    async def test_user_id_required(self, client):
        assert (await client.get("/api/feedback/stats")).status_code == 400
        assert (await client.get("/api/feedback/received")).status_code == 400
