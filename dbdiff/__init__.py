"""dbdiff: describe live database schemas for diffing.

Each dialect introspects one database engine and returns a dialect-agnostic
:class:`SchemaDescription` (tables with columns and indexes, sequences) that
can be stored as a YAML snapshot and compared against another description.

Example:
    >>> from dbdiff import describe_database
    >>> description = describe_database(
    ...     "postgres",
    ...     {"host": "localhost", "username": "app", "password": "secret",
    ...      "database": "app"},
    ... )
    >>> description.to_yaml("app.schema.yaml")
"""

from .architecture import Column, Index, SchemaDescription, Sequence, Table
from .db import (
    DanglingIndexError,
    DatabaseConnectionError,
    IntrospectionError,
    PostgresConfig,
    QueryError,
    UnknownDialectError,
    available_dialects,
    describe_database,
    get_dialect,
    register,
)
from .onto import DialectType

__all__ = [
    "Column",
    "DanglingIndexError",
    "DatabaseConnectionError",
    "DialectType",
    "Index",
    "IntrospectionError",
    "PostgresConfig",
    "QueryError",
    "SchemaDescription",
    "Sequence",
    "Table",
    "UnknownDialectError",
    "available_dialects",
    "describe_database",
    "get_dialect",
    "register",
]
