"""User Schemas - Pydantic models for the users resource boundary.

Invariants:
    - UserFields.university: stripped, non-empty
    - UserFields.point_differential: finite number (NaN and Infinity rejected)
    - UserFields.championship_year: integer in [0, 2**31 - 1]
    - JSON keys are camelCase (pointDifferential, championshipYear, createdAt, updatedAt)
    - Serialized timestamps always carry a UTC offset

Design Decisions:
    - alias_generator=to_camel with populate_by_name: snake_case in Python, camelCase on the wire
    - Unknown keys ignored (Pydantic default): extra body fields are dropped, never persisted
"""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# championship_year is stored in a 32-bit INTEGER column
MAX_CHAMPIONSHIP_YEAR = 2**31 - 1


class UserFields(BaseModel):
    """Business fields of a user record, as supplied by clients."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    university: str
    point_differential: float = Field(allow_inf_nan=False)
    championship_year: int = Field(ge=0, le=MAX_CHAMPIONSHIP_YEAR)

    @field_validator("university")
    @classmethod
    def strip_university(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("university cannot be empty or whitespace")
        return v


class UserRecord(UserFields):
    """Persisted user record - public-facing shape."""
    id: UUID
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class DeleteResult(BaseModel):
    """Body returned after a successful delete."""
    success: bool = True
