"""
API tests for /api/workers.
"""
import asyncio
from unittest.mock import AsyncMock

import pytest
from fastapi import status
from httpx import AsyncClient
from pymongo.errors import OperationFailure


def payload(**overrides):
    data = {
        "name": "Rosa Diaz",
        "city": "Austin",
        "skills": "Plumbing, , Electrical,plumbing",
        "experience": 6,
        "contact": "rosa@example.com",
    }
    data.update(overrides)
    return data


# Search


@pytest.mark.asyncio
async def test_search_without_params_returns_all(async_client: AsyncClient, use_repo, fake_repo):
    use_repo(fake_repo)

    response = await async_client.get("/api/workers")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert len(data) == 5
    assert all(isinstance(w["_id"], str) for w in data)
    assert all("__v" not in w for w in data)


@pytest.mark.asyncio
async def test_search_name_or_skill_within_city(async_client: AsyncClient, use_repo, fake_repo):
    use_repo(fake_repo)

    response = await async_client.get("/api/workers", params={"name": "Jo", "skill": "paint"})
    assert sorted(w["name"] for w in response.json()) == ["Joan Carter", "Mike Jones", "Priya Nair"]

    response = await async_client.get(
        "/api/workers", params={"name": "Jo", "skill": "paint", "city": "AUSTIN"}
    )
    assert sorted(w["name"] for w in response.json()) == ["Joan Carter", "Mike Jones"]


@pytest.mark.asyncio
async def test_search_city_is_literal(async_client: AsyncClient, use_repo, fake_repo):
    use_repo(fake_repo)

    response = await async_client.get("/api/workers", params={"city": "a.b"})

    assert [w["name"] for w in response.json()] == ["Ana Cruz"]


@pytest.mark.asyncio
async def test_search_blank_params_are_ignored(async_client: AsyncClient, use_repo, fake_repo):
    use_repo(fake_repo)

    response = await async_client.get("/api/workers", params={"skill": "  ", "city": ""})

    assert len(response.json()) == 5
    assert fake_repo.queries == [{}]


@pytest.mark.asyncio
async def test_search_store_failure_returns_500(async_client: AsyncClient, use_repo):
    repo = AsyncMock()
    repo.find.side_effect = OperationFailure("boom")
    use_repo(repo)

    response = await async_client.get("/api/workers", params={"city": "austin"})

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"message": "Error fetching workers"}


@pytest.mark.asyncio
async def test_search_failure_with_server_error_details_returns_500(async_client: AsyncClient, use_repo):
    repo = AsyncMock()
    repo.find.side_effect = OperationFailure(
        "unknown operator: $foo", code=2, details={"ok": 0, "errmsg": "unknown operator: $foo", "code": 2}
    )
    use_repo(repo)

    response = await async_client.get("/api/workers", params={"skill": "plumbing"})

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"message": "Error fetching workers"}


# Create


@pytest.mark.asyncio
async def test_create_worker(async_client: AsyncClient, use_repo, empty_repo):
    use_repo(empty_repo)

    response = await async_client.post("/api/workers", json=payload(isVerified=True))

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["_id"]
    assert data["city"] == "austin"
    assert data["skills"] == ["plumbing", "electrical", "plumbing"]
    assert data["ratings"] == 0
    assert data["distance"] == 0
    assert data["isVerified"] is False
    assert data["createdAt"]


@pytest.mark.asyncio
async def test_create_with_form_body(async_client: AsyncClient, use_repo, empty_repo):
    use_repo(empty_repo)

    response = await async_client.post(
        "/api/workers",
        data={"name": "Form User", "city": "Dallas", "skills": ["Welding", "Roofing"], "experience": "4"},
    )

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["skills"] == ["welding", "roofing"]
    assert response.json()["experience"] == 4


@pytest.mark.asyncio
async def test_create_with_bracket_form_keys(async_client: AsyncClient, use_repo, empty_repo):
    use_repo(empty_repo)

    response = await async_client.post(
        "/api/workers",
        content="name=Bracket+User&city=Reno&skills[]=Masonry&experience=2",
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["skills"] == ["masonry"]


@pytest.mark.asyncio
async def test_create_structural_errors(async_client: AsyncClient, use_repo, empty_repo):
    use_repo(empty_repo)

    response = await async_client.post("/api/workers", json=payload(name="R", experience=150))

    assert response.status_code == 422
    fields = sorted(e["field"] for e in response.json()["errors"])
    assert fields == ["experience", "name"]
    assert empty_repo.insert_attempts == 0


@pytest.mark.asyncio
async def test_create_invalid_json(async_client: AsyncClient, use_repo, empty_repo):
    use_repo(empty_repo)

    response = await async_client.post(
        "/api/workers", content="{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "body"


@pytest.mark.asyncio
async def test_create_empty_skills(async_client: AsyncClient, use_repo, empty_repo):
    use_repo(empty_repo)

    response = await async_client.post("/api/workers", json=payload(skills=",, ,"))

    assert response.status_code == 422
    assert response.json() == {"message": "At least one skill required"}


@pytest.mark.asyncio
async def test_create_explicit_and_missing_ratings(async_client: AsyncClient, use_repo, empty_repo):
    use_repo(empty_repo)

    explicit = await async_client.post("/api/workers", json=payload(ratings=0, contact="a@example.com"))
    omitted = await async_client.post("/api/workers", json=payload(contact="b@example.com"))

    assert explicit.json()["ratings"] == 0
    assert omitted.json()["ratings"] == 0


@pytest.mark.asyncio
async def test_create_duplicate_contact_conflict(async_client: AsyncClient, use_repo, empty_repo):
    use_repo(empty_repo)

    first, second = await asyncio.gather(
        async_client.post("/api/workers", json=payload(name="Racer One")),
        async_client.post("/api/workers", json=payload(name="Racer Two")),
    )

    assert sorted([first.status_code, second.status_code]) == [201, 409]
    loser = first if first.status_code == 409 else second
    assert loser.json() == {"message": "Duplicate key error"}


@pytest.mark.asyncio
async def test_create_store_failure_returns_generic_500(async_client: AsyncClient, use_repo):
    repo = AsyncMock()
    repo.insert.side_effect = OperationFailure("secret internal detail")
    use_repo(repo)

    response = await async_client.post("/api/workers", json=payload())

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"message": "Error creating worker"}
    assert "secret" not in response.text


@pytest.mark.asyncio
async def test_create_failure_with_server_error_details_returns_500(async_client: AsyncClient, use_repo):
    repo = AsyncMock()
    repo.insert.side_effect = OperationFailure(
        "document failed validation", code=121, details={"ok": 0, "errInfo": {"failingDocumentId": "x"}}
    )
    use_repo(repo)

    response = await async_client.post("/api/workers", json=payload())

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"message": "Error creating worker"}


@pytest.mark.asyncio
async def test_create_form_with_blank_ratings_and_distance(async_client: AsyncClient, use_repo, empty_repo):
    use_repo(empty_repo)

    response = await async_client.post(
        "/api/workers",
        data={
            "name": "Form User",
            "city": "Dallas",
            "skills": "Welding",
            "experience": "4",
            "ratings": "",
            "distance": "",
        },
    )

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["ratings"] == 0
    assert response.json()["distance"] == 0
