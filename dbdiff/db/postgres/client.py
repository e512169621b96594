"""Thin psycopg2 client used by the PostgreSQL dialect.

The session is opened read-only in autocommit mode: every metadata query runs
in its own implicit transaction, so one failing statement does not abort the
statements issued concurrently on the same connection.
"""

import logging
from typing import Any

import psycopg2
from psycopg2.extras import RealDictCursor

from dbdiff.db.conn import DatabaseConnectionError, QueryError

logger = logging.getLogger(__name__)


class PostgresClient:
    """psycopg2 connection exposing ``find`` and ``end``.

    psycopg2 connections are thread-safe, so ``find`` may be called from
    several worker threads; the driver serializes the statements.

    Attributes:
        conn: psycopg2 connection instance
    """

    def __init__(self, connection_string: str):
        """Open the connection.

        Args:
            connection_string: libpq URI or keyword/value connection string

        Raises:
            DatabaseConnectionError: If the session cannot be established
        """
        self.conn = None
        try:
            self.conn = psycopg2.connect(connection_string)
            self.conn.set_session(readonly=True, autocommit=True)
        except psycopg2.Error as e:
            logger.error(f"Failed to connect to PostgreSQL: {e}", exc_info=True)
            self.close()
            raise DatabaseConnectionError(str(e).strip()) from e
        logger.info(
            f"Successfully connected to PostgreSQL database "
            f"'{self.conn.info.dbname}' on {self.conn.info.host}"
        )

    def find(self, query: str, params: tuple | None = None) -> list[dict[str, Any]]:
        """Execute a SELECT query and return its rows as dictionaries.

        Args:
            query: SQL SELECT query to execute
            params: Optional tuple of parameters for parameterized queries

        Raises:
            QueryError: If the query fails
        """
        try:
            with self.conn.cursor(cursor_factory=RealDictCursor) as cursor:
                cursor.execute(query, params)
                return [dict(row) for row in cursor.fetchall()]
        except psycopg2.Error as e:
            raise QueryError(query, str(e).strip()) from e

    def end(self):
        """Close the PostgreSQL connection; errors are logged, not raised."""
        if self.conn is None:
            return
        try:
            self.conn.close()
            logger.debug("PostgreSQL connection closed")
        except Exception as e:
            logger.warning(f"Error closing PostgreSQL connection: {e}", exc_info=True)
        finally:
            self.conn = None

    close = end

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, exc_traceback):
        self.end()
        return False
