"""Module: tablestore.config.table

Author: Michael Economou
Date: 2026-01-01

Table store defaults.
"""

# =====================================
# TABLE STORE DEFAULTS
# =====================================

# Identifier used by external styling when none is given
DEFAULT_TABLE_ID = "AdaTable"

# Empty sort field means no active sort
DEFAULT_SORT_FIELD = ""

DEFAULT_SHOW_HEADER = False

# =====================================
# CONFIGURATION KEYS
# =====================================

# camelCase keys accepted by TableConfig.from_mapping()
CONFIG_KEY_ALIASES = {
    "tableId": "table_id",
    "fieldDefs": "field_defs",
    "colGroups": "col_groups",
    "sortField": "sort_field",
    "sortDirection": "sort_direction",
    "showHeader": "show_header",
    "footerFunction": "footer_function",
}
