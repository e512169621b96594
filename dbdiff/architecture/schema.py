"""Dialect-agnostic schema description.

These models are the output of every dialect's ``describe_database`` and the
input of the diff step. Attribute names follow Python conventions while the
serialized keys (aliases) are shared by all dialects.

Example:
    >>> description = SchemaDescription(tables=[], sequences=[])
    >>> description.to_dict()
    {'tables': [], 'sequences': []}
"""

from __future__ import annotations

from pydantic import ConfigDict, Field

from dbdiff.architecture.base import ConfigBaseModel


class Column(ConfigBaseModel):
    """Table column as reported by the catalog."""

    name: str
    nullable: bool
    default_value: str | None = Field(default=None, alias="defaultValue")
    type: str


class Index(ConfigBaseModel):
    """Index attached to its owning table.

    Attributes:
        name: Index name
        schema_name: Schema of the owning table
        primary: Whether the index backs the primary key
        unique: Whether the index enforces uniqueness
        type: Access method name (btree, hash, gin, ...)
        keys: Per-key index definition expressions, in key order
    """

    name: str
    schema_name: str = Field(alias="schema")
    primary: bool = False
    unique: bool = False
    type: str
    keys: list[str] = Field(default_factory=list)


class Table(ConfigBaseModel):
    """Table with its columns and indexes. Identified by (name, schema)."""

    name: str
    schema_name: str = Field(alias="schema")
    columns: list[Column] = Field(default_factory=list)
    indexes: list[Index] = Field(default_factory=list)

    @property
    def key(self) -> tuple[str, str]:
        return self.name, self.schema_name


class Sequence(ConfigBaseModel):
    """Sequence with normalized identity fields.

    Catalog attributes other than the identity ones (``data_type``,
    ``start_value``, ``increment``, ...) are kept as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    schema_name: str = Field(alias="schema")
    name: str
    cycle: bool = False


class SchemaDescription(ConfigBaseModel):
    """Snapshot of a database schema: tables and sequences, in catalog order."""

    tables: list[Table] = Field(default_factory=list)
    sequences: list[Sequence] = Field(default_factory=list)

    def get_table(self, name: str, schema_name: str = "public") -> Table | None:
        """Return the table identified by (name, schema), if present."""
        return next(
            (t for t in self.tables if t.key == (name, schema_name)),
            None,
        )
