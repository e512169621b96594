"""Core enumerations shared across dialects.

Key Components:
    - BaseEnum: Base class for string-based enumerations with flexible membership testing
    - DialectType: Database engines a dialect can be registered for

Example:
    >>> "postgres" in DialectType  # True
    >>> "oracle" in DialectType  # False
"""

from enum import EnumMeta

from strenum import StrEnum


class MetaEnum(EnumMeta):
    """Metaclass for flexible enumeration membership testing.

    Allows checking whether a raw value is a valid member with the `in`
    operator, without instantiating the enum first.
    """

    def __contains__(self, member: object) -> bool:
        if isinstance(member, self):
            return True
        try:
            self(member)
            return True
        except ValueError:
            return False


class BaseEnum(StrEnum, metaclass=MetaEnum):
    """Base class for string-based enumerations."""

    def __str__(self) -> str:
        """Return the enum value as string for proper serialization."""
        return self.value

    def __repr__(self) -> str:
        return self.value


def _register_yaml_representer():
    """Serialize BaseEnum members as plain strings in YAML snapshots."""
    import yaml

    def base_enum_representer(dumper, data):
        return dumper.represent_scalar("tag:yaml.org,2002:str", str(data.value))

    yaml.add_representer(BaseEnum, base_enum_representer)
    yaml.add_multi_representer(BaseEnum, base_enum_representer)


_register_yaml_representer()


class DialectType(BaseEnum):
    """Database engines a schema-describing dialect can be registered for.

    Attributes:
        POSTGRES: PostgreSQL
        MYSQL: MySQL / MariaDB
        SQLITE: SQLite
    """

    POSTGRES = "postgres"
    MYSQL = "mysql"
    SQLITE = "sqlite"
