"""Column type formatting for PostgreSQL catalog rows."""

ARRAY_DATA_TYPE = "ARRAY"
USER_DEFINED_DATA_TYPE = "USER-DEFINED"


def format_column_type(
    data_type: str, udt_name: str | None, character_maximum_length: int | None = None
) -> str:
    """Format the type of a column from its ``information_schema`` attributes.

    Arrays are reported as ``ARRAY`` with the element type in ``udt_name``
    prefixed by an underscore (``_varchar``); user-defined types (enums,
    extension types such as hstore) are reported as ``USER-DEFINED``.

    Args:
        data_type: ``information_schema.columns.data_type``
        udt_name: ``information_schema.columns.udt_name``
        character_maximum_length: Declared length, if any

    Returns:
        str: e.g. ``character varying(255)``, ``int4[]``, ``hstore``
    """
    if data_type == ARRAY_DATA_TYPE:
        type_name = udt_name or ""
        if type_name.startswith("_"):
            type_name = type_name[1:]
        type_name += "[]"
    elif data_type == USER_DEFINED_DATA_TYPE:
        type_name = udt_name or data_type
    else:
        type_name = data_type

    if character_maximum_length:
        type_name = f"{type_name}({character_maximum_length})"
    return type_name
