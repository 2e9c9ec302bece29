"""tablestore - reactive data store for tabular widgets.

Author: Michael Economou
Date: 2026-01-01

Holds column definitions and records for one table, derives headings, sorted
and decorated rows and footer data on demand, and notifies subscribers when
anything changes.

Usage:
    from tablestore import FieldDefinition, SortDirection, TableStore, numeric

    store = TableStore(
        field_defs={"age": FieldDefinition("Age", sort=numeric)},
        records=[{"age": 3}, {"age": 1}],
    )
    unsubscribe = store.subscribe(lambda: render(store.get_rows()))
    store.sort_field = "age"
    store.sort_direction = SortDirection.ASCENDING
"""

from tablestore.config import APP_VERSION as __version__
from tablestore.core.table_store import TableStore
from tablestore.exceptions import TableConfigError, TableStoreError
from tablestore.models.field_definition import (
    DirectField,
    FieldDefinition,
    FieldDefinitions,
    SyntheticField,
    lexicographic,
    numeric,
)
from tablestore.models.table_config import ColGroup, RowValue, SortDirection, TableConfig
from tablestore.utils.logging import get_cached_logger, init_logging

__all__ = [
    "ColGroup",
    "DirectField",
    "FieldDefinition",
    "FieldDefinitions",
    "RowValue",
    "SortDirection",
    "SyntheticField",
    "TableConfig",
    "TableConfigError",
    "TableStore",
    "TableStoreError",
    "__version__",
    "get_cached_logger",
    "init_logging",
    "lexicographic",
    "numeric",
]
