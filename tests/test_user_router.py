"""HTTP tests for /api/user against the SQLite-backed repository."""
import json

import pytest
from sqlalchemy import select

from models.like import Like
from models.user import User


@pytest.mark.asyncio
async def test_requests_without_token_are_rejected(client, seeded_users):
    response = await client.get("/api/user")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_list_defaults_to_opposite_gender(client, seeded_users, auth_headers):
    response = await client.get("/api/user", headers=auth_headers(5, "bob"))

    assert response.status_code == 200
    users = response.json()
    assert {u["id"] for u in users} == {6, 8, 9}
    assert all(u["gender"] == "female" for u in users)


@pytest.mark.asyncio
async def test_list_for_female_requester_returns_males(client, seeded_users, auth_headers):
    response = await client.get("/api/user", headers=auth_headers(6, "alice"))

    assert {u["id"] for u in response.json()} == {5, 7}


@pytest.mark.asyncio
async def test_list_respects_explicit_gender_and_excludes_requester(client, seeded_users, auth_headers):
    response = await client.get("/api/user", params={"gender": "male"}, headers=auth_headers(5, "bob"))

    assert [u["id"] for u in response.json()] == [7]


@pytest.mark.asyncio
async def test_list_sets_pagination_header(client, seeded_users, auth_headers):
    response = await client.get(
        "/api/user",
        params={"pageNumber": 2, "pageSize": 2},
        headers=auth_headers(5, "bob"),
    )

    assert response.status_code == 200
    assert len(response.json()) == 1
    pagination = json.loads(response.headers["Pagination"])
    assert pagination == {
        "currentPage": 2,
        "itemsPerPage": 2,
        "totalItems": 3,
        "totalPages": 2,
    }
    assert response.headers["Access-Control-Expose-Headers"] == "Pagination"


@pytest.mark.asyncio
async def test_list_maps_main_photo_and_age(client, seeded_users, auth_headers):
    response = await client.get("/api/user", headers=auth_headers(5, "bob"))

    kate = next(u for u in response.json() if u["id"] == 9)
    assert kate["photo_url"] == "https://example.com/kate-1.jpg"
    assert kate["age"] == 28
    assert kate["known_as"] == "Kate"


@pytest.mark.asyncio
async def test_get_user_returns_detailed_dto(client, seeded_users, auth_headers):
    response = await client.get("/api/user/9", headers=auth_headers(5, "bob"))

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 9
    assert data["username"] == "kate"
    assert len(data["photos"]) == 2
    assert [p["is_main"] for p in data["photos"]].count(True) == 1


@pytest.mark.asyncio
async def test_get_missing_user_returns_404(client, seeded_users, auth_headers):
    response = await client.get("/api/user/999", headers=auth_headers(5, "bob"))

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_own_profile(client, seeded_users, auth_headers, session_factory):
    payload = {
        "introduction": "Hi there",
        "looking_for": "Someone kind",
        "interests": "Chess",
        "city": "Tallinn",
        "country": "Estonia",
    }
    response = await client.put("/api/user/5", json=payload, headers=auth_headers(5, "bob"))

    assert response.status_code == 204
    assert response.content == b""
    async with session_factory() as session:
        user = (await session.execute(select(User).where(User.id == 5))).scalar_one()
    assert user.introduction == "Hi there"
    assert user.city == "Tallinn"


@pytest.mark.asyncio
async def test_repeated_identical_update_is_204(client, seeded_users, auth_headers):
    payload = {"introduction": "Same", "city": "Riga", "country": "Latvia"}

    first = await client.put("/api/user/5", json=payload, headers=auth_headers(5, "bob"))
    second = await client.put("/api/user/5", json=payload, headers=auth_headers(5, "bob"))

    assert first.status_code == 204
    assert second.status_code == 204


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {},
    {"introduction": "hacked"},
    {"city": "x" * 100},
    {"introduction": 123},
    ["not", "an", "object"],
])
async def test_update_other_user_is_401(client, seeded_users, auth_headers, session_factory, payload):
    response = await client.put("/api/user/5", json=payload, headers=auth_headers(6, "alice"))

    assert response.status_code == 401
    async with session_factory() as session:
        user = (await session.execute(select(User).where(User.id == 5))).scalar_one()
    assert user.introduction is None
    assert user.city == "Riga"


@pytest.mark.asyncio
async def test_like_then_repeat(client, seeded_users, auth_headers, session_factory):
    first = await client.post("/api/user/5/like/9", headers=auth_headers(5, "bob"))

    assert first.status_code == 200
    assert first.content == b""
    async with session_factory() as session:
        likes = (await session.execute(select(Like))).scalars().all()
    assert [(like.liker_id, like.likee_id) for like in likes] == [(5, 9)]

    second = await client.post("/api/user/5/like/9", headers=auth_headers(5, "bob"))
    assert second.status_code == 400
    assert second.json()["detail"] == "You already liked the user"


@pytest.mark.asyncio
async def test_like_missing_user_is_404(client, seeded_users, auth_headers):
    response = await client.post("/api/user/5/like/999", headers=auth_headers(5, "bob"))

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_like_on_behalf_of_other_user_is_401(client, seeded_users, auth_headers, session_factory):
    response = await client.post("/api/user/5/like/9", headers=auth_headers(6, "alice"))

    assert response.status_code == 401
    async with session_factory() as session:
        likes = (await session.execute(select(Like))).scalars().all()
    assert likes == []


@pytest.mark.asyncio
async def test_likees_filter_after_like(client, seeded_users, auth_headers):
    await client.post("/api/user/5/like/9", headers=auth_headers(5, "bob"))

    likees = await client.get("/api/user", params={"likees": "true"}, headers=auth_headers(5, "bob"))
    likers = await client.get("/api/user", params={"likers": "true", "gender": "male"}, headers=auth_headers(9, "kate"))

    assert [u["id"] for u in likees.json()] == [9]
    assert [u["id"] for u in likers.json()] == [5]


@pytest.mark.asyncio
async def test_requests_update_last_active(client, seeded_users, auth_headers, session_factory):
    before = seeded_users[5].last_active

    await client.get("/api/user/9", headers=auth_headers(5, "bob"))

    async with session_factory() as session:
        user = (await session.execute(select(User).where(User.id == 5))).scalar_one()
    assert user.last_active > before
