"""Core package.

The table store and its sort engine.
"""

from tablestore.core.sort_manager import SortManager
from tablestore.core.table_store import TableStore

__all__ = ["SortManager", "TableStore"]
