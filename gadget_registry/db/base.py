"""
SQLAlchemy declarative base and metadata.
Single place for table definitions and migrations.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models. Alembic reads Base.metadata."""

    pass
