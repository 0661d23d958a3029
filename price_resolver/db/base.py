"""SQLAlchemy Declarative Base — shared base class for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - Unnamed constraints and indexes get deterministic names (NAMING_CONVENTION)

Design Decisions:
    - Separate file for Base: avoids circular imports between models and infrastructure
    - Naming convention keeps create_schema and alembic migrations emitting the same names
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_N_name)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for price service ORM models."""
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
