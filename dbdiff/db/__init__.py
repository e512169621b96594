"""Dialects and their registry.

Key Components:
    - Dialect: abstract schema-describing backend
    - registry: dialects keyed by name (``"postgres"``, ...)
    - IntrospectionError and subclasses: failures while describing a database
"""

from .conn import (
    DanglingIndexError,
    DatabaseConnectionError,
    Dialect,
    IntrospectionError,
    QueryError,
    UnknownDialectError,
)
from .connection import PostgresConfig
from .registry import available_dialects, describe_database, get_dialect, register
from . import postgres  # noqa: F401  registers the postgres dialect

__all__ = [
    "DanglingIndexError",
    "DatabaseConnectionError",
    "Dialect",
    "IntrospectionError",
    "PostgresConfig",
    "QueryError",
    "UnknownDialectError",
    "available_dialects",
    "describe_database",
    "get_dialect",
    "register",
]
