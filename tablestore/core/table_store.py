"""Module: table_store.py

Author: Michael Economou
Date: 2026-01-01

Table Store - Single source of truth for one table instance.

The TableStore holds the table configuration (column definitions, caption,
column groups, sort settings, header flag, footer function) and the raw
records. Every property setter replaces the stored value and publishes a
change to subscribers, who then pull derived views:

- get_fields(): column keys in display order
- get_headings(): (field, heading) pairs
- get_records(): synthesized and sorted records
- get_rows(): synthesized, sorted, then decorated cells per row
- get_footer(): footer rendering unit, or None when there is no footer

Derivations are recomputed from current state on every call. Nothing is cached
and the records list handed to the store is never modified.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tablestore.core.sort_manager import SortManager
from tablestore.exceptions import TableConfigError
from tablestore.models.field_definition import (
    FieldDefinition,
    FieldDefinitions,
    to_field_definitions,
)
from tablestore.models.table_config import (
    ColGroup,
    FooterFunction,
    RowValue,
    SortDirection,
    TableConfig,
)
from tablestore.utils.events.observable import ObservableStore
from tablestore.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class TableStore(ObservableStore):
    """Reactive store behind a table widget.

    Construct with a TableConfig, a plain mapping, or keyword arguments:

        store = TableStore(
            field_defs={"name": FieldDefinition("Name", sort=lexicographic)},
            records=[{"name": "b"}, {"name": "a"}],
            sort_field="name",
            sort_direction=SortDirection.ASCENDING,
        )

    Setters never validate their input. A sort_field that names no sortable
    column simply leaves the records in their original order.
    """

    def __init__(self, config: TableConfig | Mapping[str, Any] | None = None, **kwargs: Any):
        super().__init__()

        if config is None:
            config = TableConfig.from_mapping(kwargs)
        elif isinstance(config, Mapping):
            config = TableConfig.from_mapping({**config, **kwargs})
        elif kwargs:
            raise TableConfigError("Pass either a TableConfig or keyword arguments, not both")

        self._sort_manager = SortManager()

        self._table_id: str = config.table_id
        self._field_defs: FieldDefinitions = config.field_defs
        self._records: list[Any] = config.records
        self._caption: Any = config.caption
        self._col_groups: list[ColGroup | Mapping[str, Any]] = config.col_groups
        self._sort_field: str = config.sort_field
        self._sort_direction: SortDirection = config.sort_direction
        self._show_header: bool = config.show_header
        self._footer_function: FooterFunction | Any = config.footer_function

        logger.debug(
            "[TableStore] Initialized %s: %d columns, %d records",
            self._table_id,
            len(self._field_defs),
            len(self._records),
            extra={"dev_only": True},
        )

    def __repr__(self) -> str:
        return (
            f"TableStore(table_id={self._table_id!r}, fields={self.get_fields()!r}, "
            f"records={len(self._records)})"
        )

    # =====================================
    # State Properties
    # =====================================

    @property
    def table_id(self) -> str:
        return self._table_id

    @table_id.setter
    def table_id(self, table_id: str) -> None:
        self._table_id = table_id
        self.publish()

    @property
    def field_defs(self) -> FieldDefinitions:
        """Column definitions in display order (a copy of the stored mapping)."""
        return dict(self._field_defs)

    @field_defs.setter
    def field_defs(self, field_defs: Mapping[str, FieldDefinition | Any]) -> None:
        self._field_defs = to_field_definitions(field_defs)
        self.publish()

    @property
    def records(self) -> list[Any]:
        """Raw, unsynthesized records, as handed to the store."""
        return self._records

    @records.setter
    def records(self, records: list[Any]) -> None:
        self._records = records
        self.publish()

    @property
    def caption(self) -> Any:
        return self._caption

    @caption.setter
    def caption(self, caption: Any) -> None:
        self._caption = caption
        self.publish()

    @property
    def col_groups(self) -> list[ColGroup | Mapping[str, Any]]:
        """Column groups, exactly as handed to the store."""
        return self._col_groups

    @col_groups.setter
    def col_groups(self, col_groups: list[ColGroup | Mapping[str, Any]]) -> None:
        self._col_groups = col_groups
        self.publish()

    @property
    def sort_field(self) -> str:
        return self._sort_field

    @sort_field.setter
    def sort_field(self, sort_field: str) -> None:
        self._sort_field = sort_field
        self.publish()

    @property
    def sort_direction(self) -> SortDirection:
        return self._sort_direction

    @sort_direction.setter
    def sort_direction(self, sort_direction: SortDirection | str) -> None:
        self._sort_direction = SortDirection.coerce(sort_direction)
        self.publish()

    @property
    def show_header(self) -> bool:
        return self._show_header

    @show_header.setter
    def show_header(self, show_header: bool) -> None:
        self._show_header = show_header
        self.publish()

    @property
    def footer_function(self) -> FooterFunction | Any:
        return self._footer_function

    @footer_function.setter
    def footer_function(self, footer_function: FooterFunction | Any) -> None:
        self._footer_function = footer_function
        self.publish()

    def update(self, **changes: Any) -> None:
        """Replace several properties with a single notification.

        Args:
            **changes: Property names (table_id, records, sort_field, ...) and new values

        Raises:
            AttributeError: If a name is not a table store property
        """
        unknown = [name for name in changes if name not in TableConfig.__dataclass_fields__]
        if unknown:
            raise AttributeError(f"TableStore has no property {', '.join(sorted(unknown))}")

        with self.batch():
            for name, value in changes.items():
                setattr(self, name, value)

    # =====================================
    # Derivations
    # =====================================

    @property
    def is_sorted(self) -> bool:
        """Whether the current sort settings reorder the records."""
        comparator = self._sort_manager.get_comparator(
            self._field_defs, self._sort_field, self._sort_direction
        )
        return comparator is not None

    def get_fields(self) -> list[str]:
        """Return the column keys in display order."""
        return list(self._field_defs)

    def get_headings(self) -> list[RowValue]:
        """Return (field, heading) for every column in display order."""
        return [RowValue(key, field_def.heading) for key, field_def in self._field_defs.items()]

    def synthesize_fields(self, record: Mapping[str, Any]) -> dict[str, Any]:
        """Return a shallow copy of record with every synthesized column computed.

        Columns without a synthesizer keep record[key], or stay absent when the
        record has no such key.
        """
        synthesized = dict(record)
        for key, field_def in self._field_defs.items():
            if field_def.synthesizer is not None:
                synthesized[key] = field_def.synthesizer(record)
        return synthesized

    def decorate_field(self, field: str, value: Any) -> Any:
        """Apply the decorator of column ``field`` to value.

        Unknown columns and columns without a decorator return value unchanged.
        """
        field_def = self._field_defs.get(field)
        if field_def is None:
            return value
        return field_def.decorate(value)

    def _sort(self, records: list[Any]) -> list[Any]:
        return self._sort_manager.sort_records(
            records, self._field_defs, self._sort_field, self._sort_direction
        )

    def get_records(self) -> list[dict[str, Any]]:
        """Return the synthesized records in display order."""
        return self._sort([self.synthesize_fields(record) for record in self._records])

    def get_rows(self) -> list[list[RowValue]]:
        """Return the displayable cells of every row, in display order.

        Sorting runs on synthesized values. Decoration is applied afterwards so
        decorators may return values that do not support comparison. Every row
        has one cell per column; a column the record lacks yields None.
        """
        accessors = [
            (field_def.accessor(key), field_def) for key, field_def in self._field_defs.items()
        ]

        resolved = []
        for record in self._records:
            resolved.append(
                {accessor.key: accessor.resolve(record) for accessor, _ in accessors}
            )

        rows = []
        for values in self._sort(resolved):
            rows.append(
                [
                    RowValue(accessor.key, field_def.decorate(values[accessor.key]))
                    for accessor, field_def in accessors
                ]
            )
        return rows

    def get_footer(self) -> Any:
        """Return the footer rendering unit, or None when there is no footer.

        A callable footer_function receives get_records(). Any other value is a
        static footer and is returned as is.
        """
        footer = self._footer_function
        if footer is None:
            return None
        if callable(footer):
            return footer(self.get_records())
        return footer
