"""SQLAlchemy Declarative Base — shared base class for table descriptions.

Invariants:
    - All models inherit from Base
    - Base.metadata is the single description of the persisted layout
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all Users API ORM models."""
    pass
