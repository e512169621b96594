"""Abstract dialect interface and introspection errors.

A dialect turns connection options for one database engine into a
dialect-agnostic :class:`SchemaDescription`. Concrete dialects register
themselves in :mod:`dbdiff.db.registry` under their :class:`DialectType`.

Error hierarchy:
    - IntrospectionError: any failure while describing a database
        - DatabaseConnectionError: the session could not be established
        - QueryError: a metadata query failed or returned malformed rows
        - DanglingIndexError: an index has no owning table in the description
    - UnknownDialectError: no dialect registered under the requested name
"""

from __future__ import annotations

import abc
from typing import ClassVar

from pydantic import ValidationError

from dbdiff.architecture.schema import SchemaDescription
from dbdiff.onto import DialectType

from .connection.config_mapping import get_config_class
from .connection.onto import ConnectionOptions, resolve_connection_string


class IntrospectionError(Exception):
    """Describing a database failed; no partial description is available."""

    def __init__(self, message: str):
        super().__init__(f"introspection failed: {message}")


class DatabaseConnectionError(IntrospectionError):
    """Raised when a database session cannot be established."""


class QueryError(IntrospectionError):
    """Raised when a metadata query fails.

    Attributes:
        query: SQL text of the failing query
    """

    def __init__(self, query: str, reason: object):
        self.query = query
        super().__init__(f"query failed ({reason}): {' '.join(query.split())}")


class DanglingIndexError(IntrospectionError):
    """Raised when an index cannot be attached to any described table."""

    def __init__(self, index_name: str, table_name: str, schema_name: str):
        self.index_name = index_name
        self.table_name = table_name
        self.schema_name = schema_name
        super().__init__(
            f"dangling index '{index_name}': owning table "
            f"'{schema_name}.{table_name}' is not part of the description"
        )


class UnknownDialectError(KeyError):
    """Raised when no dialect is registered under the requested name."""


class Dialect(abc.ABC):
    """Schema-describing backend for one database engine."""

    flavor: ClassVar[DialectType]

    @classmethod
    def connection_string(cls, options: ConnectionOptions) -> str:
        """Resolve options to a connection string using the dialect's config class.

        Raises:
            DatabaseConnectionError: If structured options do not validate
        """
        try:
            return resolve_connection_string(
                options, config_class=get_config_class(cls.flavor)
            )
        except ValidationError as e:
            raise DatabaseConnectionError(
                f"invalid connection options ({e.error_count()} error(s)): "
                + ", ".join(".".join(map(str, err["loc"])) for err in e.errors())
            ) from e

    @abc.abstractmethod
    def describe_database(self, options: ConnectionOptions) -> SchemaDescription:
        """Introspect the live schema behind ``options``.

        Raises:
            IntrospectionError: On any failure; the connection is closed first.
        """
