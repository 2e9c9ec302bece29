"""Module: exceptions.py

Author: Michael Economou
Date: 2026-01-01

Exception types raised by tablestore.

The store itself raises almost nothing: configuration mismatches degrade to a
no-op sort, unknown configuration keys are ignored and errors from
caller-supplied functions propagate unchanged.
"""


class TableStoreError(Exception):
    """Base class for tablestore errors."""


class TableConfigError(TableStoreError, TypeError):
    """Raised when TableStore is constructed with conflicting configuration arguments."""
