"""Models package.

Column definitions and table configuration value types.
"""

from tablestore.models.field_definition import (
    DirectField,
    FieldDefinition,
    FieldDefinitions,
    SyntheticField,
    lexicographic,
    numeric,
    resolve_field,
)
from tablestore.models.table_config import ColGroup, RowValue, SortDirection, TableConfig

__all__ = [
    "ColGroup",
    "DirectField",
    "FieldDefinition",
    "FieldDefinitions",
    "RowValue",
    "SortDirection",
    "SyntheticField",
    "TableConfig",
    "lexicographic",
    "numeric",
    "resolve_field",
]
