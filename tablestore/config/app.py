"""Module: tablestore.config.app

Author: Michael Economou
Date: 2026-01-01

Package-level configuration: package info and logging settings.
"""

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "tablestore"
APP_VERSION = "1.0"

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_LEVEL = "INFO"
LOG_FORMAT = "[%(levelname)s] %(message)s"
LOG_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# File logging
LOG_FILE_MAX_BYTES = 10_000_000  # 10MB per file
LOG_FILE_BACKUP_COUNT = 5

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False
