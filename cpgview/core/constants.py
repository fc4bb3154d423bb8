"""Shared constants for cpgview.

This module contains constants that are used across multiple modules
to avoid duplication and ensure consistency.
"""

# =============================================================================
# Input Validation
# =============================================================================

# Maximum length of a node / function identifier after trimming
MAX_ID_LENGTH = 500

# Maximum length of a free-text search term (longer terms are truncated)
MAX_QUERY_LENGTH = 200

# Characters permitted in identifiers.
# Matches the Go CPG id format: package::function@file:line:col
ID_PATTERN = r"[a-zA-Z0-9:_/@.\-]+"

# Control characters stripped from identifiers and queries
CONTROL_CHARS_PATTERN = r"[\x00-\x08\x0B-\x0C\x0E-\x1F\x7F]"

# =============================================================================
# Query Limits
# =============================================================================

# Maximum number of rows returned by a function-name search
MAX_SEARCH_RESULTS = 50

# Maximum number of nodes in an assembled neighborhood graph
MAX_NODES_IN_GRAPH = 1000

# =============================================================================
# Graph Conventions
# =============================================================================

# Id prefix of functions that live outside the analyzed codebase
EXTERNAL_NODE_PREFIX = "ext::"

# Display fallback for external nodes with no package
DEFAULT_EXTERNAL_PACKAGE = "standard library"
