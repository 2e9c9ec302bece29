"""Module: tablestore.config

Author: Michael Economou
Date: 2026-01-01

Configuration package for tablestore.

This package organizes configuration into logical modules:
- app: Package info and logging settings
- table: Table store defaults and configuration key aliases

All settings are re-exported from this module:
    from tablestore.config import DEFAULT_TABLE_ID, LOG_FORMAT
"""

from tablestore.config.app import *  # noqa: F401, F403
from tablestore.config.table import *  # noqa: F401, F403
