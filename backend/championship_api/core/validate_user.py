"""User Field Validation - pure check of untrusted input against the record rules.

Invariants:
    - No IO: usable from the store, the routes, or scripts alike
    - Returns a UserFields value or raises RecordValidationError, never anything else
    - Non-object input (list, string, null) is rejected as a whole

Design Decisions:
    - Pydantic does the field work; this function only translates its errors
      into the domain error so callers never see pydantic.ValidationError
"""

from typing import Any

from pydantic import ValidationError

from championship_api.core.errors import RecordValidationError
from championship_api.schemas.user import UserFields


def validate_user_fields(data: Any) -> UserFields:
    """Validate business fields for create or full replace."""
    try:
        return UserFields.model_validate(data)
    except ValidationError as e:
        raise RecordValidationError(_error_details(e)) from e


def _error_details(exc: ValidationError) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(loc) for loc in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
