"""GET /api/v1/search: auth, result shape, paging and error responses."""

from datetime import timedelta

from httpx import AsyncClient

from app.api.v1.dependencies import RecordRepositories, get_record_repositories
from app.infrastructure.security.jwt import create_access_token
from tests.factories import OTHER_USER_ID

SEARCH = "/api/v1/search"


async def test_missing_token_returns_401(client: AsyncClient) -> None:
    response = await client.get(SEARCH, params={"q": "damage"})
    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


async def test_invalid_or_expired_token_returns_401(client: AsyncClient) -> None:
    expired = create_access_token("user-1", expires_delta=timedelta(minutes=-5))
    for token in ("not-a-jwt", expired):
        response = await client.get(
            SEARCH, params={"q": "damage"}, headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 401


async def test_results_are_newest_first_across_kinds(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.get(SEARCH, params={"q": "damage"}, headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert [(r["type"], r["id"]) for r in body["results"]] == [
        ("document", "document-1"),
        ("claim", "claim-1"),
        ("policy", "policy-1"),
    ]
    assert body["pagination"] == {"total": 3, "page": 1, "limit": 20, "totalPages": 1}


async def test_result_item_shape(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.get(
        SEARCH, params={"q": "damage", "types": "claim"}, headers=auth_headers
    )
    (item,) = response.json()["results"]
    assert set(item) == {"id", "type", "title", "description", "date", "link"}
    assert item["title"] == "Claim #CLM-1001"
    assert item["description"].endswith(" - SUBMITTED")
    assert item["link"] == "/claims/claim-1"
    assert item["date"].startswith("2023-01-02T00:00:00")


async def test_other_users_records_are_invisible(client: AsyncClient) -> None:
    headers = {"Authorization": f"Bearer {create_access_token(OTHER_USER_ID)}"}
    response = await client.get(SEARCH, params={"q": "damage"}, headers=headers)
    ids = [r["id"] for r in response.json()["results"]]
    assert ids == ["document-3", "claim-3", "policy-3"]


async def test_blank_query_returns_empty_page(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    for q in ("", "   "):
        response = await client.get(SEARCH, params={"q": q}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {
            "results": [],
            "pagination": {"total": 0, "page": 1, "limit": 20, "totalPages": 0},
        }


async def test_unknown_types_fall_back_to_all_kinds(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.get(
        SEARCH, params={"q": "damage", "types": "bogus,nothing"}, headers=auth_headers
    )
    assert response.json()["pagination"]["total"] == 3


async def test_keyword_inference_widens_claims(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.get(
        SEARCH, params={"q": "approved", "types": "claim"}, headers=auth_headers
    )
    assert [r["id"] for r in response.json()["results"]] == ["claim-2"]


async def test_limit_and_page(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.get(
        SEARCH, params={"q": "damage", "limit": 2}, headers=auth_headers
    )
    body = response.json()
    assert [r["id"] for r in body["results"]] == ["document-1", "claim-1"]
    assert body["pagination"] == {"total": 3, "page": 1, "limit": 2, "totalPages": 2}


async def test_invalid_paging_returns_422(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    for params in ({"limit": 0}, {"limit": 1000}, {"page": 0}, {"page": "x"}):
        response = await client.get(
            SEARCH, params={"q": "damage", **params}, headers=auth_headers
        )
        assert response.status_code == 422, params
        assert response.json()["error"] == "VALIDATION_ERROR"


class _BrokenRepository:
    async def search(self, predicate, sort, skip=0, limit=None):
        raise ConnectionError("connection refused by db-primary:5432")

    async def count(self, predicate):
        raise ConnectionError("connection refused by db-primary:5432")

    async def distinct_values(self, predicate, field):
        raise ConnectionError("connection refused by db-primary:5432")


async def test_store_failure_returns_sanitized_500(
    app, client: AsyncClient, auth_headers: dict[str, str], memory_store
) -> None:
    app.dependency_overrides[get_record_repositories] = lambda: RecordRepositories(
        policies=memory_store.policies,
        claims=_BrokenRepository(),
        documents=memory_store.documents,
    )
    response = await client.get(SEARCH, params={"q": "damage"}, headers=auth_headers)
    assert response.status_code == 500
    body = response.json()
    assert body == {"error": "SEARCH_BACKEND_ERROR", "message": "Internal server error"}
    assert "db-primary" not in response.text


async def test_repeated_type_is_a_single_kind_search(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.get(
        SEARCH, params={"q": "damage", "types": "claim,claim"}, headers=auth_headers
    )
    body = response.json()
    assert [r["id"] for r in body["results"]] == ["claim-1"]
    assert body["pagination"]["total"] == 1


async def test_overlong_query_returns_422(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    ok = await client.get(SEARCH, params={"q": "d" * 500}, headers=auth_headers)
    assert ok.status_code == 200
    response = await client.get(SEARCH, params={"q": "d" * 501}, headers=auth_headers)
    assert response.status_code == 422
    assert response.json()["details"][0]["loc"] == ["query", "q"]
