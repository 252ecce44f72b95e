#!/usr/bin/env python3
"""
Shared SQLAlchemy base and mixin for the Post API.

- created_at / updated_at timestamps, set by the database
- save() and delete() that go through the DBStorage singleton
- keyword-argument constructor

Primary keys are declared per model: users and profiles are keyed by username,
posts by an integer id, follows by the (follower, followed) pair.
"""

from __future__ import annotations

from datetime import datetime, timezone

# Importing 'models' gives access to the global 'storage' instance (DBStorage)
# defined in models/__init__.py.
import models

from sqlalchemy import Column, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

# Declarative base for all models
Base = declarative_base()


class BaseModel:
    """
    Base mixin for all persistent models.

    Timestamps use server-side defaults (func.now()); for SQLite this maps to
    CURRENT_TIMESTAMP.
    """

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __init__(self, *args, **kwargs):
        for key, value in kwargs.items():
            if key != "__class__":
                setattr(self, key, value)

    def __str__(self) -> str:
        return f"[{self.__class__.__name__}] {self.__dict__}"

    def save(self):
        """Persist the instance and commit."""
        self.updated_at = datetime.now(timezone.utc)
        models.storage.new(self)
        models.storage.save()

    def delete(self):
        """
        Mark the instance for deletion.
        Not committed here; the caller decides when to call storage.save().
        """
        models.storage.delete(self)
