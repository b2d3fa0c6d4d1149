"""Declarative base for all models.

Table classes live in ``gujlearn.models``; import that package before calling
``Base.metadata.create_all`` so every table is registered.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass
