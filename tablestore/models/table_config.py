"""Module: table_config.py

Author: Michael Economou
Date: 2026-01-01

Value types for table store configuration: sort direction, column groups,
row cells and the initialization object accepted by TableStore.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, NamedTuple

from tablestore.config import (
    CONFIG_KEY_ALIASES,
    DEFAULT_SHOW_HEADER,
    DEFAULT_SORT_FIELD,
    DEFAULT_TABLE_ID,
)
from tablestore.models.field_definition import FieldDefinitions, to_field_definitions
from tablestore.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class SortDirection(str, Enum):
    """Direction of the active sort."""

    ASCENDING = "asc"
    DESCENDING = "desc"
    NONE = "na"

    @classmethod
    def coerce(cls, value: SortDirection | str) -> SortDirection:
        """Accept either a member or its string value.

        Unrecognised values degrade to NONE (no sort) instead of failing.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            logger.debug(
                "[SortDirection] Unknown sort direction %r, sorting disabled",
                value,
                extra={"dev_only": True},
            )
            return cls.NONE


@dataclass
class ColGroup:
    """Typed attributes for one <col> element.

    Optional convenience: the store passes col_groups through untouched, so
    plain mappings such as {"span": 2, "class": "ids"} work just as well.
    """

    span: int | None = None
    class_name: str | None = None


class RowValue(NamedTuple):
    """One cell (or heading) of a derived row."""

    field: str
    value: Any


FooterFunction = Callable[[list[dict[str, Any]]], Any]


@dataclass
class TableConfig:
    """Initialization object for TableStore. Every field is optional."""

    table_id: str = DEFAULT_TABLE_ID
    field_defs: FieldDefinitions = field(default_factory=dict)
    records: list[Any] = field(default_factory=list)
    caption: Any = None
    col_groups: list[ColGroup | Mapping[str, Any]] = field(default_factory=list)
    sort_field: str = DEFAULT_SORT_FIELD
    sort_direction: SortDirection = SortDirection.NONE
    show_header: bool = DEFAULT_SHOW_HEADER
    footer_function: FooterFunction | Any = None

    def __post_init__(self):
        self.field_defs = to_field_definitions(self.field_defs)
        self.sort_direction = SortDirection.coerce(self.sort_direction)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TableConfig:
        """Build a config from a plain dict.

        Accepts snake_case keys as well as the camelCase keys listed in
        CONFIG_KEY_ALIASES. Keys with a None value fall back to the default.
        Unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        unknown: list[str] = []

        for key, value in data.items():
            name = CONFIG_KEY_ALIASES.get(key, key)
            if name not in known:
                unknown.append(key)
            elif value is not None:
                kwargs[name] = value

        if unknown:
            logger.debug(
                "[TableConfig] Ignoring unknown configuration keys: %s",
                ", ".join(sorted(unknown)),
                extra={"dev_only": True},
            )

        return cls(**kwargs)
