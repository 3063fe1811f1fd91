"""Database Package - declarative base shared by ORM models."""
