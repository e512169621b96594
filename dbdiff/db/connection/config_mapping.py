from typing import Dict, Type

from .onto import DBConfig, PostgresConfig
from ...onto import DialectType

# Define this mapping in a separate file to avoid circular imports
DIALECT_CONFIG_MAPPING: Dict[DialectType, Type[DBConfig]] = {
    DialectType.POSTGRES: PostgresConfig,
}


def get_config_class(dialect_type: DialectType) -> Type[DBConfig]:
    """Get the config class used to validate structured options of a dialect.

    Args:
        dialect_type: The dialect type enum value

    Returns:
        The corresponding DBConfig subclass

    Raises:
        KeyError: If the dialect_type has no config class
    """
    return DIALECT_CONFIG_MAPPING[DialectType(dialect_type)]
