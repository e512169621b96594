import pytest

from dbdiff.db.postgres import PostgresDialect
from fakes import FakeClient, column_row, index_row, sequence_row, table_row


@pytest.fixture(scope="function")
def users_catalog():
    """One table `users` with two columns, a unique index and a sequence."""
    return {
        "tables": [table_row("users")],
        "columns": [
            column_row("users", "id", "int4", nullable=False),
            column_row("users", "email", "varchar", length=255),
        ],
        "indexes": [index_row("users_email_idx", "users", ["email"], unique=True)],
        "sequences": [sequence_row("users_id_seq")],
    }


@pytest.fixture(scope="function")
def make_dialect():
    """Build a PostgresDialect backed by FakeClient instances.

    Returns a factory ``(catalog, **client_kwargs) -> (dialect, clients)``
    where ``clients`` collects every client the dialect opened.
    """

    def _make(catalog, max_concurrent_queries=8, **client_kwargs):
        clients = []

        def factory(connection_string):
            client = FakeClient(connection_string, catalog, **client_kwargs)
            clients.append(client)
            return client

        dialect = PostgresDialect(
            max_concurrent_queries=max_concurrent_queries, client_factory=factory
        )
        return dialect, clients

    return _make
