"""Services Layer - persistence operations composed from core validation and ORM models."""
