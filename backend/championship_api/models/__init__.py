"""ORM Models - SQLAlchemy declarative models for persisted entities.

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all runs
"""

from championship_api.models.user import User  # noqa: F401
