"""PostgreSQL dialect: live schema introspection.

The description is built from a fixed sequence of catalog queries:

1. user tables from ``pg_tables``
2. columns of every table from ``information_schema.columns``, fetched
   concurrently (bounded by ``max_concurrent_queries``)
3. all indexes outside ``pg_catalog`` / ``pg_toast``, attached to their
   owning table by (name, schema)
4. sequences from ``information_schema.sequences``

Exactly one connection is opened per call and it is closed on every path
before a result is returned or an error is raised.

Example:
    >>> from dbdiff.db.postgres import PostgresDialect
    >>> dialect = PostgresDialect()
    >>> description = dialect.describe_database(
    ...     {"host": "localhost", "username": "app", "password": "secret",
    ...      "database": "app", "dialect_options": {"sslmode": "disable"}}
    ... )
    >>> [t.name for t in description.tables]
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, ClassVar, TypeVar

from pydantic import BaseModel, ValidationError
from suthing import Timer

from dbdiff.architecture.onto_sql import ColumnRow, IndexRow, SequenceRow, TableRow
from dbdiff.architecture.schema import Column, Index, SchemaDescription, Sequence, Table
from dbdiff.db.conn import DanglingIndexError, Dialect, QueryError
from dbdiff.db.connection.onto import ConnectionOptions
from dbdiff.db.registry import register
from dbdiff.onto import DialectType

from . import queries
from .client import PostgresClient
from .types import format_column_type

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENT_QUERIES = 8

R = TypeVar("R", bound=BaseModel)


def decode_rows(model: type[R], rows: list[dict[str, Any]], query: str) -> list[R]:
    """Validate raw catalog rows into typed records.

    Raises:
        QueryError: If a row does not have the expected shape
    """
    try:
        return [model.model_validate(row) for row in rows]
    except ValidationError as e:
        raise QueryError(
            query, f"unexpected {model.__name__} shape, {e.error_count()} error(s)"
        ) from e


def to_column(row: ColumnRow) -> Column:
    return Column(
        name=row.column_name,
        nullable=row.is_nullable == "YES",
        default_value=row.column_default,
        type=format_column_type(
            row.data_type, row.udt_name, row.character_maximum_length
        ),
    )


def assemble_tables(
    table_rows: list[TableRow],
    columns: list[list[Column]],
    index_rows: list[IndexRow],
) -> list[Table]:
    """Join tables, their columns and all indexes into Table records.

    Tables keep the order of ``table_rows``; indexes keep catalog order
    within their table.

    Raises:
        DanglingIndexError: If an index's (relation, namespace) matches no table
    """
    indexes: dict[tuple[str, str], list[Index]] = {
        (row.tablename, row.schemaname): [] for row in table_rows
    }
    for index_row in index_rows:
        owned = indexes.get(index_row.table_key)
        if owned is None:
            raise DanglingIndexError(
                index_row.indname, index_row.indrelid, index_row.nspname
            )
        owned.append(index_row.to_index(schema_name=index_row.nspname))

    return [
        Table(
            name=row.tablename,
            schema_name=row.schemaname,
            columns=table_columns,
            indexes=indexes[(row.tablename, row.schemaname)],
        )
        for row, table_columns in zip(table_rows, columns)
    ]


@register(DialectType.POSTGRES)
class PostgresDialect(Dialect):
    """Describes a live PostgreSQL database.

    Attributes:
        max_concurrent_queries: Upper bound of column queries in flight
        client_factory: Callable opening a client for a connection string
    """

    flavor: ClassVar[DialectType] = DialectType.POSTGRES

    def __init__(
        self,
        max_concurrent_queries: int = DEFAULT_MAX_CONCURRENT_QUERIES,
        client_factory: Callable[[str], PostgresClient] = PostgresClient,
    ):
        if max_concurrent_queries < 1:
            raise ValueError(
                f"max_concurrent_queries must be positive, got {max_concurrent_queries}"
            )
        self.max_concurrent_queries = max_concurrent_queries
        self.client_factory = client_factory

    def describe_database(self, options: ConnectionOptions) -> SchemaDescription:
        """Describe the database behind ``options``.

        Runs :meth:`adescribe_database` in a fresh event loop; use the
        coroutine directly when a loop is already running.

        Args:
            options: Connection string, ``PostgresConfig`` or mapping with
                host, port, username, password, database, dialect_options

        Returns:
            SchemaDescription: tables and sequences in catalog order

        Raises:
            IntrospectionError: On any failure; the connection is closed first
        """
        return asyncio.run(self.adescribe_database(options))

    async def adescribe_database(
        self, options: ConnectionOptions
    ) -> SchemaDescription:
        connection_string = self.connection_string(options)

        with Timer() as klepsidra:
            client = await asyncio.to_thread(self.client_factory, connection_string)
            try:
                table_rows = await self._fetch_tables(client)
                columns = await self._fetch_columns(client, table_rows)
                index_rows = await self._fetch_indexes(client)
                tables = assemble_tables(table_rows, columns, index_rows)
                sequences = await self._fetch_sequences(client)
            finally:
                client.end()

        logger.info(
            f"Described {len(tables)} tables and {len(sequences)} sequences "
            f"in {klepsidra.elapsed:.1f} sec"
        )
        return SchemaDescription(tables=tables, sequences=sequences)

    async def _fetch_tables(self, client: PostgresClient) -> list[TableRow]:
        rows = await asyncio.to_thread(
            client.find, queries.TABLES, queries.EXCLUDED_TABLE_SCHEMAS
        )
        table_rows = decode_rows(TableRow, rows, queries.TABLES)
        logger.debug(f"Found {len(table_rows)} tables")
        return table_rows

    async def _fetch_columns(
        self, client: PostgresClient, table_rows: list[TableRow]
    ) -> list[list[Column]]:
        """Fetch columns of every table, one query per table.

        Results are returned in the order of ``table_rows``. Once a query
        fails, queries still waiting for a slot are skipped; queries already
        running are left to finish and their results are discarded. The first
        failure in table order is raised.
        """
        semaphore = asyncio.Semaphore(self.max_concurrent_queries)
        failed = asyncio.Event()

        async def fetch(table_row: TableRow) -> list[Column] | None:
            async with semaphore:
                if failed.is_set():
                    return None
                try:
                    rows = await asyncio.to_thread(
                        client.find,
                        queries.COLUMNS,
                        (table_row.tablename, table_row.schemaname),
                    )
                    column_rows = decode_rows(ColumnRow, rows, queries.COLUMNS)
                except Exception:
                    failed.set()
                    raise
                return [to_column(row) for row in column_rows]

        results = await asyncio.gather(
            *[fetch(table_row) for table_row in table_rows], return_exceptions=True
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result

        logger.debug(f"Fetched columns of {len(results)} tables")
        return list(results)

    async def _fetch_indexes(self, client: PostgresClient) -> list[IndexRow]:
        rows = await asyncio.to_thread(client.find, queries.INDEXES)
        index_rows = decode_rows(IndexRow, rows, queries.INDEXES)
        logger.debug(f"Found {len(index_rows)} indexes")
        return index_rows

    async def _fetch_sequences(self, client: PostgresClient) -> list[Sequence]:
        rows = await asyncio.to_thread(client.find, queries.SEQUENCES)
        sequence_rows = decode_rows(SequenceRow, rows, queries.SEQUENCES)
        logger.debug(f"Found {len(sequence_rows)} sequences")
        return [row.to_sequence() for row in sequence_rows]
