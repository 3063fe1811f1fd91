"""Error handlers - lookups keep their 404 envelope, server-side failures stay opaque."""

from fastapi import APIRouter

from championship_api.core.errors import DatabaseError, ResourceNotFoundError


async def test_database_error_answers_generic_500(app, client):
    router = APIRouter()

    @router.get("/boom")
    async def boom():
        raise DatabaseError("Connection or operational error", "execute")

    app.include_router(router)

    res = await client.get("/boom")
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["category"] == "internal"
    assert "Connection" not in error["message"]


async def test_generic_not_found_envelope(app, client):
    router = APIRouter()

    @router.get("/missing")
    async def missing():
        raise ResourceNotFoundError("Team", "abc")

    app.include_router(router)

    res = await client.get("/missing")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["message"] == "Team 'abc' not found"
    assert error["context"]["record_id"] == "abc"
