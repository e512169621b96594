from .base import ConfigBaseModel
from .schema import Column, Index, SchemaDescription, Sequence, Table

__all__ = [
    "Column",
    "ConfigBaseModel",
    "Index",
    "SchemaDescription",
    "Sequence",
    "Table",
]
