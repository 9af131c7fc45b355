"""
Application-level constants for hardcoded business logic.

These values define catalog behavior and are not meant to be changed via
environment variables. For configurable values (database, logging, etc.),
see catalog/settings.py.
"""

# ============================================================================
# Routing
# ============================================================================

# Prefix shared by every catalog page
CATALOG_PREFIX = "/catalog"

# Where successful deletes and missing-record deletes land
GENRE_LIST_URL = f"{CATALOG_PREFIX}/genres"
AUTHOR_LIST_URL = f"{CATALOG_PREFIX}/authors"


# ============================================================================
# Validation
# ============================================================================

# Genre names shorter than this are rejected
GENRE_NAME_MIN_LENGTH = 3

# Upper bound for every free-text name column
NAME_MAX_LENGTH = 100


# ============================================================================
# Date presentation
# ============================================================================

# Value format for <input type="date"> fields
DATE_INPUT_FORMAT = "%Y-%m-%d"

# Separator between birth and death dates in an author's lifespan
LIFESPAN_SEPARATOR = " - "
