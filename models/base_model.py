#!/usr/bin/env python3
"""
Shared SQLAlchemy base and mixins.

- TimestampMixin: created_at / updated_at maintained by the database
- BaseModel: adds a UUID primary key (String(36)) on top of the timestamps

Timestamps use server-side defaults (func.now()); for SQLite this maps to
CURRENT_TIMESTAMP, which is UTC.
"""

from __future__ import annotations

import uuid

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

# Declarative base for all models
Base = declarative_base()


def _uuid_str() -> str:
    """Return a canonical UUIDv4 string (36 chars, with hyphens)."""
    return str(uuid.uuid4())


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __init__(self, *args, **kwargs):
        """
        Allow attribute initialization via kwargs without requiring a session here.
        created_at/updated_at are left to the DB unless passed explicitly (e.g. in tests).
        """
        for key, value in kwargs.items():
            if key != "__class__":
                setattr(self, key, value)


class BaseModel(TimestampMixin):
    """
    Base mixin for persistent models identified by a UUID.
    """

    id = Column(String(36), primary_key=True, default=_uuid_str, nullable=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Ensure an id exists if caller passed none
        if getattr(self, "id", None) is None:
            self.id = _uuid_str()

    def __str__(self) -> str:
        return f"[{self.__class__.__name__}] ({self.id})"
