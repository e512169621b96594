"""Registry of schema-describing dialects keyed by dialect name.

Example:
    >>> from dbdiff.db.registry import describe_database
    >>> description = describe_database("postgres", "postgres://u:p@localhost/app")
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from dbdiff.architecture.schema import SchemaDescription

from .conn import Dialect, UnknownDialectError
from .connection.onto import ConnectionOptions

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=type[Dialect])

_DIALECTS: dict[str, type[Dialect]] = {}


def register(name: str) -> Callable[[D], D]:
    """Class decorator registering a dialect under ``name``.

    Registering the same name twice replaces the previous dialect.
    """

    def decorator(dialect_cls: D) -> D:
        key = str(name)
        if key in _DIALECTS and _DIALECTS[key] is not dialect_cls:
            logger.warning(
                f"Dialect '{key}' re-registered: {_DIALECTS[key].__name__} "
                f"replaced by {dialect_cls.__name__}"
            )
        _DIALECTS[key] = dialect_cls
        logger.debug(f"Registered dialect '{key}' -> {dialect_cls.__name__}")
        return dialect_cls

    return decorator


def get_dialect(name: str, **kwargs) -> Dialect:
    """Instantiate the dialect registered under ``name``.

    Args:
        name: Dialect name, e.g. ``"postgres"``
        **kwargs: Passed to the dialect constructor

    Raises:
        UnknownDialectError: If nothing is registered under ``name``
    """
    try:
        dialect_cls = _DIALECTS[str(name)]
    except KeyError:
        raise UnknownDialectError(
            f"No dialect registered under '{name}'; "
            f"available: {', '.join(available_dialects()) or 'none'}"
        ) from None
    return dialect_cls(**kwargs)


def available_dialects() -> list[str]:
    return sorted(_DIALECTS)


def describe_database(name: str, options: ConnectionOptions) -> SchemaDescription:
    """Describe a database with the dialect registered under ``name``."""
    return get_dialect(name).describe_database(options)
