"""User Store - persistence behavior against a real (SQLite) session.

Invariants:
    - list_all() is newest first
    - Failed validation persists nothing
    - update_by_id()/delete_by_id() report unknown or malformed ids as not found
    - update_by_id() bumps updated_at, leaves created_at alone
"""

import uuid

import pytest

from championship_api.core.errors import RecordValidationError
from championship_api.services.user_store import UserStore


def _fields(university="Alabama", point_differential=10, championship_year=2020):
    return {
        "university": university,
        "pointDifferential": point_differential,
        "championshipYear": championship_year,
    }


@pytest.fixture
def store(test_db):
    return UserStore(test_db)


async def test_create_generates_id_and_timestamps(store):
    record = await store.create(_fields())
    assert isinstance(record.id, uuid.UUID)
    assert record.created_at == record.updated_at
    assert record.created_at.tzinfo is not None


async def test_list_all_empty(store):
    assert await store.list_all() == []


async def test_list_all_newest_first(store):
    for name in ("A", "B", "C"):
        await store.create(_fields(university=name))
    records = await store.list_all()
    assert [r.university for r in records] == ["C", "B", "A"]


async def test_invalid_create_persists_nothing(store):
    with pytest.raises(RecordValidationError):
        await store.create({"university": "Clemson"})
    assert await store.list_all() == []


async def test_update_replaces_business_fields(store):
    created = await store.create(_fields(university="A"))
    updated = await store.update_by_id(
        str(created.id), _fields(university="B", point_differential=-5, championship_year=2021),
    )
    assert updated.id == created.id
    assert updated.university == "B"
    assert updated.point_differential == -5
    assert updated.championship_year == 2021
    assert updated.created_at == created.created_at
    assert updated.updated_at > updated.created_at


async def test_update_unknown_id_returns_none(store):
    assert await store.update_by_id(str(uuid.uuid4()), _fields()) is None


async def test_update_malformed_id_returns_none(store):
    assert await store.update_by_id("not-a-uuid", _fields()) is None


async def test_update_validates_before_lookup(store):
    with pytest.raises(RecordValidationError):
        await store.update_by_id(str(uuid.uuid4()), _fields(championship_year=-1))


async def test_delete_removes_record(store):
    created = await store.create(_fields())
    assert await store.delete_by_id(str(created.id)) is True
    assert await store.list_all() == []
    assert await store.delete_by_id(str(created.id)) is False


async def test_delete_malformed_id_returns_false(store):
    assert await store.delete_by_id("12345") is False
