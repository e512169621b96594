"""Tests for column type formatting."""

import pytest

from dbdiff.db.postgres.types import format_column_type


@pytest.mark.parametrize(
    "data_type, udt_name, length, expected",
    [
        ("ARRAY", "_varchar", None, "varchar[]"),
        ("ARRAY", "_int4", None, "int4[]"),
        ("ARRAY", "int4", None, "int4[]"),
        ("ARRAY", "__weird", None, "_weird[]"),
        ("USER-DEFINED", "hstore", None, "hstore"),
        ("USER-DEFINED", "mood", None, "mood"),
        ("character varying", "varchar", 255, "character varying(255)"),
        ("character", "bpchar", 2, "character(2)"),
        ("integer", "int4", None, "integer"),
        ("timestamp with time zone", "timestamptz", None, "timestamp with time zone"),
        ("text", "text", 0, "text"),
    ],
)
def test_format_column_type(data_type, udt_name, length, expected):
    assert format_column_type(data_type, udt_name, length) == expected


def test_length_applies_to_array_element():
    assert format_column_type("ARRAY", "_varchar", 16) == "varchar[](16)"
