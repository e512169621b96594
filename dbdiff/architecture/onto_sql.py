"""Typed catalog rows returned by the PostgreSQL metadata queries.

Each query result is decoded into one of these models before it is mapped
onto the schema description, so malformed rows fail at the boundary.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from dbdiff.architecture.schema import Index, Sequence


class CatalogRow(BaseModel):
    model_config = ConfigDict(extra="ignore")


class TableRow(CatalogRow):
    """Row of ``pg_tables``."""

    schemaname: str
    tablename: str


class ColumnRow(CatalogRow):
    """Row of ``information_schema.columns``."""

    table_name: str
    table_schema: str
    column_name: str
    data_type: str
    udt_name: str
    character_maximum_length: int | None = None
    is_nullable: str = "YES"
    column_default: str | None = None


class IndexRow(CatalogRow):
    """Row of the ``pg_index`` / ``pg_class`` / ``pg_am`` / ``pg_namespace`` join."""

    indname: str
    indowner: int | None = None
    indrelid: str
    """Name of the owning relation (not its OID)."""
    indisprimary: bool = False
    indisunique: bool = False
    indam: str
    indkey: list[int] = []
    indkey_names: list[str] = []
    indexprs: bool = False
    """True when at least one key is an expression."""
    indpred: bool = False
    """True for partial indexes."""
    nspname: str

    @property
    def table_key(self) -> tuple[str, str]:
        return self.indrelid, self.nspname

    def to_index(self, schema_name: str) -> Index:
        return Index(
            name=self.indname,
            schema_name=schema_name,
            primary=self.indisprimary,
            unique=self.indisunique,
            type=self.indam,
            keys=list(self.indkey_names),
        )


class SequenceRow(CatalogRow):
    """Row of ``information_schema.sequences``; unknown columns are kept."""

    model_config = ConfigDict(extra="allow")

    sequence_catalog: str | None = None
    sequence_schema: str
    sequence_name: str
    cycle_option: str = "NO"

    def to_sequence(self) -> Sequence:
        passthrough: dict[str, Any] = dict(self.model_extra or {})
        return Sequence(
            schema_name=self.sequence_schema,
            name=self.sequence_name,
            cycle=self.cycle_option == "YES",
            **passthrough,
        )
