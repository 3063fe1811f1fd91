"""Users Resource - list, create, replace and delete championship records.

Invariants:
    - One store call per request; no business logic in the handlers
    - Unknown ids answer 404 {"message": "User not found"}
    - Request bodies are validated by the store, not by FastAPI, so the same
      rules apply to every caller of UserStore

Design Decisions:
    - Body typed as dict[str, Any]: FastAPI rejects malformed JSON and non-object
      bodies, field rules stay in core/validate_user.py
    - PUT is a full replace: all three business fields required every time
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from championship_api.core.errors import UserNotFoundError
from championship_api.infrastructure.database import get_db
from championship_api.schemas.user import DeleteResult, UserRecord
from championship_api.services.user_store import UserStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


def get_user_store(db: AsyncSession = Depends(get_db)) -> UserStore:
    """FastAPI dependency binding a UserStore to the request session."""
    return UserStore(db)


@router.get("", response_model=list[UserRecord])
async def list_users(store: UserStore = Depends(get_user_store)):
    """All records, newest first."""
    return await store.list_all()


@router.post(
    "", response_model=UserRecord, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    payload: dict[str, Any] = Body(...),
    store: UserStore = Depends(get_user_store),
):
    return await store.create(payload)


@router.put("/{user_id}", response_model=UserRecord)
async def update_user(
    user_id: str,
    payload: dict[str, Any] = Body(...),
    store: UserStore = Depends(get_user_store),
):
    """Replace the business fields of one record."""
    user = await store.update_by_id(user_id, payload)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


@router.delete("/{user_id}", response_model=DeleteResult)
async def delete_user(
    user_id: str, store: UserStore = Depends(get_user_store),
):
    if not await store.delete_by_id(user_id):
        raise UserNotFoundError(user_id)
    return DeleteResult()
