"""tablestore.core.sort_manager.

Sorting logic for the table store.

This module provides the SortManager class that orders synthesized records by
the active sort column using that column's comparator.

Author: Michael Economou
Date: 2026-01-01
"""

from functools import cmp_to_key
from typing import Any

from tablestore.models.field_definition import FieldDefinitions, SortFunc, resolve_field
from tablestore.models.table_config import SortDirection
from tablestore.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class SortManager:
    """Sorts records for table display.

    Responsibilities:
        - Decide whether the (sort_field, sort_direction) pair takes effect
        - Sort a copy of the records ascending with the column comparator
        - Produce descending order by reversing the stable ascending result,
          so runs of equal keys come out in reverse original order
    """

    def get_comparator(
        self,
        field_defs: FieldDefinitions,
        sort_field: str,
        sort_direction: SortDirection,
    ) -> SortFunc | None:
        """Return the active column comparator, or None when sorting is a no-op.

        Args:
            field_defs: Current column definitions
            sort_field: Column key to sort by ("" for none)
            sort_direction: Requested direction

        Returns:
            The column's comparator or None
        """
        if sort_direction == SortDirection.NONE or not sort_field:
            return None

        field_def = field_defs.get(sort_field)
        if field_def is None or field_def.sort is None:
            logger.debug(
                "[SortManager] Column %r is not sortable, keeping original order",
                sort_field,
                extra={"dev_only": True},
            )
            return None

        return field_def.sort

    def sort_records(
        self,
        records: list[Any],
        field_defs: FieldDefinitions,
        sort_field: str,
        sort_direction: SortDirection,
    ) -> list[Any]:
        """Sort records by the specified column.

        Args:
            records: Synthesized records (never modified)
            field_defs: Current column definitions
            sort_field: Column key to sort by
            sort_direction: Requested direction

        Returns:
            New list of records, in display order
        """
        sort = self.get_comparator(field_defs, sort_field, sort_direction)
        if sort is None:
            return list(records)

        def compare(a: Any, b: Any) -> Any:
            return sort(resolve_field(a, sort_field), resolve_field(b, sort_field))

        ordered = sorted(records, key=cmp_to_key(compare))
        if sort_direction == SortDirection.DESCENDING:
            ordered.reverse()
        return ordered
