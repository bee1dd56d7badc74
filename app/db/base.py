"""Base class for all database models."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Postgres-style constraint names; storage errors are translated by column,
# so unique constraints follow the ``<table>_<column>_key`` convention.
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "%(table_name)s_%(column_0_name)s_key",
    "ck": "%(table_name)s_%(constraint_name)s_check",
    "fk": "%(table_name)s_%(column_0_name)s_fkey",
    "pk": "%(table_name)s_pkey",
}


class Base(DeclarativeBase):
    """Base class for all models."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# Range of PostgreSQL INTEGER (int4) columns
INT4_MIN = -2_147_483_648
INT4_MAX = 2_147_483_647
