from .onto import (
    ConnectionOptions,
    DBConfig,
    PostgresConfig,
    encode_dialect_options,
    resolve_connection_string,
    serialize_dialect_option,
)

__all__ = [
    "ConnectionOptions",
    "DBConfig",
    "PostgresConfig",
    "encode_dialect_options",
    "resolve_connection_string",
    "serialize_dialect_option",
]
