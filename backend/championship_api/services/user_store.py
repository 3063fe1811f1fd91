"""User Store - persistence operations over the users collection.

Invariants:
    - Every write validates through validate_user_fields before touching the session
    - list_all() returns newest first (created_at descending), whole collection
    - update_by_id() overwrites all three business fields and bumps updated_at
    - Missing or malformed ids are "not found" (None / False), never an exception
    - Each mutating call commits its own unit of work

Design Decisions:
    - Store receives the AsyncSession: session lifecycle stays with the caller
      (request-scoped via get_db, or a test fixture)
    - Returns UserRecord schemas, not ORM rows: callers never hold live entities
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from championship_api.core.validate_user import validate_user_fields
from championship_api.models.user import User, utcnow
from championship_api.schemas.user import UserRecord

logger = logging.getLogger(__name__)


class UserStore:
    """CRUD operations for user records on one database session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_all(self) -> list[UserRecord]:
        result = await self._db.execute(
            select(User).order_by(User.created_at.desc()),
        )
        return [_to_record(u) for u in result.scalars().all()]

    async def create(self, fields: Any) -> UserRecord:
        """Validate and persist a new record."""
        valid = validate_user_fields(fields)
        now = utcnow()
        user = User(
            university=valid.university,
            point_differential=valid.point_differential,
            championship_year=valid.championship_year,
            created_at=now,
            updated_at=now,
        )
        self._db.add(user)
        await self._db.commit()
        logger.info("User created", extra={"record_id": str(user.id)})
        return _to_record(user)

    async def update_by_id(self, user_id: str, fields: Any) -> UserRecord | None:
        """Replace the business fields of an existing record.

        Validation runs before the lookup, so invalid input fails even
        when the id does not exist.
        """
        valid = validate_user_fields(fields)
        user = await self._get(user_id)
        if user is None:
            return None
        user.university = valid.university
        user.point_differential = valid.point_differential
        user.championship_year = valid.championship_year
        user.updated_at = utcnow()
        await self._db.commit()
        logger.info("User updated", extra={"record_id": str(user.id)})
        return _to_record(user)

    async def delete_by_id(self, user_id: str) -> bool:
        """Permanently remove a record. Returns False when nothing matched."""
        user = await self._get(user_id)
        if user is None:
            return False
        await self._db.delete(user)
        await self._db.commit()
        logger.info("User deleted", extra={"record_id": user_id})
        return True

    async def _get(self, user_id: str) -> User | None:
        try:
            key = UUID(str(user_id))
        except ValueError:
            return None
        return await self._db.get(User, key)


def _to_record(user: User) -> UserRecord:
    return UserRecord(
        id=user.id,
        university=user.university,
        point_differential=user.point_differential,
        championship_year=user.championship_year,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )
