"""Module: field_definition.py

Author: Michael Economou
Date: 2026-01-01

Column definitions for the table store.

A FieldDefinition carries the per-column metadata a renderer needs: the
heading to display, an optional synthesizer that computes the value from the
whole record, an optional decorator that turns a resolved value into its
displayable form, and an optional comparator that makes the column sortable.

FieldDefinitions is an ordered mapping of column key to FieldDefinition.
Insertion order is the display order of the columns.

Also ships the two stock comparators, lexicographic() and numeric().
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, NamedTuple, Union

Record = Mapping[str, Any]
Synthesizer = Callable[[Record], Any]
Decorator = Callable[[Any], Any]
SortFunc = Callable[[Any, Any], int]


def resolve_field(record: Record, key: str) -> Any:
    """Return record[key], or None when the record has no such key."""
    return record.get(key)


class DirectField(NamedTuple):
    """Column read straight from the record."""

    key: str

    def resolve(self, record: Record) -> Any:
        return resolve_field(record, self.key)


class SyntheticField(NamedTuple):
    """Column computed from the whole record."""

    key: str
    synthesizer: Synthesizer

    def resolve(self, record: Record) -> Any:
        return self.synthesizer(record)


FieldAccessor = Union[DirectField, SyntheticField]


@dataclass
class FieldDefinition:
    """Metadata for one table column.

    Attributes:
        heading: Displayable heading. Never inspected, only passed through.
        synthesizer: Computes the column value from the full record
        decorator: Wraps a resolved value for presentation
        sort: Three-way comparator over resolved values. Its presence makes the
            column sortable.
    """

    heading: Any = None
    synthesizer: Synthesizer | None = None
    decorator: Decorator | None = None
    sort: SortFunc | None = None

    @property
    def sortable(self) -> bool:
        return self.sort is not None

    @property
    def synthetic(self) -> bool:
        return self.synthesizer is not None

    def accessor(self, key: str) -> FieldAccessor:
        """Return how the value for column ``key`` is obtained from a record."""
        if self.synthesizer is not None:
            return SyntheticField(key, self.synthesizer)
        return DirectField(key)

    def decorate(self, value: Any) -> Any:
        """Apply the decorator, or return the value unchanged when there is none."""
        if self.decorator is None:
            return value
        return self.decorator(value)

    @classmethod
    def from_value(cls, value: FieldDefinition | Mapping[str, Any] | Any) -> FieldDefinition:
        """Build a FieldDefinition from a definition, a keyword mapping or a bare heading.

        Args:
            value: An existing FieldDefinition (returned as is), a mapping with
                any of heading/synthesizer/decorator/sort, or any other value,
                which becomes the heading

        Returns:
            FieldDefinition instance
        """
        if isinstance(value, FieldDefinition):
            return value
        if isinstance(value, Mapping):
            return cls(**value)
        return cls(heading=value)


FieldDefinitions = dict[str, FieldDefinition]


def to_field_definitions(definitions: Mapping[str, Any] | None) -> FieldDefinitions:
    """Copy ``definitions`` into a new ordered FieldDefinitions dict."""
    if not definitions:
        return {}
    return {key: FieldDefinition.from_value(value) for key, value in definitions.items()}


# =====================================
# Sorting functions
# =====================================


def lexicographic(a: Any, b: Any) -> int:
    """Three-way comparison using the natural ordering of the values."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def numeric(a: Any, b: Any) -> Any:
    """Numeric comparison: the difference a - b."""
    return a - b
