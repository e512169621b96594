"""Tests for the dialect registry."""

import pytest

import dbdiff
from dbdiff.architecture.schema import SchemaDescription, Table
from dbdiff.db import registry
from dbdiff.db.conn import Dialect, UnknownDialectError
from dbdiff.db.postgres import PostgresDialect
from dbdiff.onto import DialectType


@pytest.fixture(scope="function")
def isolated_registry(monkeypatch):
    monkeypatch.setattr(registry, "_DIALECTS", dict(registry._DIALECTS))


def test_postgres_is_registered():
    assert "postgres" in registry.available_dialects()
    assert isinstance(registry.get_dialect("postgres"), PostgresDialect)
    assert isinstance(registry.get_dialect(DialectType.POSTGRES), PostgresDialect)


def test_get_dialect_forwards_arguments():
    dialect = registry.get_dialect("postgres", max_concurrent_queries=2)
    assert dialect.max_concurrent_queries == 2


def test_unknown_dialect():
    with pytest.raises(UnknownDialectError, match="oracle"):
        registry.get_dialect("oracle")


def test_register_and_describe(isolated_registry):
    @registry.register(DialectType.SQLITE)
    class StaticDialect(Dialect):
        flavor = DialectType.SQLITE

        def describe_database(self, options):
            return SchemaDescription(tables=[Table(name=options, schema_name="main")])

    assert "sqlite" in registry.available_dialects()
    description = dbdiff.describe_database("sqlite", "inventory")
    assert description.get_table("inventory", "main") is not None


def test_reregistering_replaces(isolated_registry):
    @registry.register("postgres")
    class OtherPostgres(PostgresDialect):
        pass

    assert type(registry.get_dialect("postgres")) is OtherPostgres
