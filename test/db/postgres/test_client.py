"""Tests for PostgresClient error wrapping and connection release."""

import psycopg2
import pytest

from dbdiff.db.conn import DatabaseConnectionError, QueryError
from dbdiff.db.postgres import PostgresClient


class _Info:
    dbname = "app"
    host = "localhost"


class _Cursor:
    def __init__(self, rows, error=None):
        self.rows = rows
        self.error = error
        self.executed = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, query, params=None):
        self.executed.append((query, params))
        if self.error is not None:
            raise self.error

    def fetchall(self):
        return self.rows


class _Connection:
    info = _Info()

    def __init__(self, rows=(), error=None, session_error=None):
        self.cursor_obj = _Cursor(list(rows), error)
        self.session_error = session_error
        self.session = None
        self.closed = False

    def set_session(self, **kwargs):
        if self.session_error is not None:
            raise self.session_error
        self.session = kwargs

    def cursor(self, cursor_factory=None):
        return self.cursor_obj

    def close(self):
        self.closed = True


@pytest.fixture(scope="function")
def fake_connect(monkeypatch):
    created = []

    def install(**kwargs):
        def connect(dsn):
            conn = _Connection(**kwargs)
            conn.dsn = dsn
            created.append(conn)
            return conn

        monkeypatch.setattr(psycopg2, "connect", connect)
        return created

    return install


def test_session_is_read_only_autocommit(fake_connect):
    created = fake_connect()

    client = PostgresClient("postgres://u:p@localhost:5432/app")

    assert created[0].dsn == "postgres://u:p@localhost:5432/app"
    assert created[0].session == {"readonly": True, "autocommit": True}
    client.end()
    assert created[0].closed is True
    assert client.conn is None


def test_find_returns_dicts(fake_connect):
    fake_connect(rows=[{"tablename": "users", "schemaname": "public"}])

    with PostgresClient("postgres://u:p@localhost/app") as client:
        rows = client.find("SELECT * FROM pg_tables WHERE schemaname = %s", ("public",))

    assert rows == [{"tablename": "users", "schemaname": "public"}]


def test_find_wraps_driver_errors(fake_connect):
    fake_connect(error=psycopg2.ProgrammingError("permission denied for table pg_index"))
    client = PostgresClient("postgres://u:p@localhost/app")

    with pytest.raises(QueryError, match="permission denied") as excinfo:
        client.find("SELECT *\n    FROM pg_index")

    assert excinfo.value.query == "SELECT *\n    FROM pg_index"
    assert "SELECT * FROM pg_index" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, psycopg2.ProgrammingError)


def test_connect_failure(monkeypatch):
    def connect(dsn):
        raise psycopg2.OperationalError("could not connect to server")

    monkeypatch.setattr(psycopg2, "connect", connect)

    with pytest.raises(DatabaseConnectionError, match="could not connect"):
        PostgresClient("postgres://u:p@nowhere/app")


def test_session_failure_closes_connection(fake_connect):
    created = fake_connect(session_error=psycopg2.InterfaceError("connection already closed"))

    with pytest.raises(DatabaseConnectionError):
        PostgresClient("postgres://u:p@localhost/app")

    assert created[0].closed is True


def test_end_is_idempotent(fake_connect):
    created = fake_connect()
    client = PostgresClient("postgres://u:p@localhost/app")

    client.end()
    client.close()

    assert created[0].closed is True
