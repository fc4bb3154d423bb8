"""Input validation for identifiers and search terms.

Every externally supplied string passes through one of these functions
before it reaches the store. They never raise on bad input; they return
a ValidationResult describing why it was rejected.
"""

import logging
import re
from urllib.parse import unquote

from ..constants import (
    CONTROL_CHARS_PATTERN,
    ID_PATTERN,
    MAX_ID_LENGTH,
    MAX_QUERY_LENGTH,
)
from .models import ValidationResult

logger = logging.getLogger(__name__)

_ID_RE = re.compile(ID_PATTERN)
_CONTROL_RE = re.compile(CONTROL_CHARS_PATTERN)
_LIKE_WILDCARD_RE = re.compile(r"([\\%_])")


def _strip_control_chars(value: str) -> str:
    return _CONTROL_RE.sub("", value)


def _percent_decode(value: str) -> str:
    """Decode %XX escapes; fall back to the raw value if they are not valid UTF-8."""
    try:
        return unquote(value, errors="strict")
    except UnicodeDecodeError:
        logger.warning("Malformed percent-encoding in identifier, using raw value")
        return value


def escape_like(value: str) -> str:
    """Backslash-escape ``%``, ``_`` and the escape character ``\\`` itself."""
    return _LIKE_WILDCARD_RE.sub(r"\\\1", value)


def sanitize_node_id(node_id) -> ValidationResult:
    """Canonicalize a node id taken from a request.

    Steps, in order: reject missing / non-string input, percent-decode,
    trim, reject empty, reject over-long, strip control characters, then
    reject anything outside ``[A-Za-z0-9:_/@.-]``.

    Args:
        node_id: Raw id, possibly URL-encoded

    Returns:
        ValidationResult with the canonical id as ``sanitized``
    """
    if not node_id or not isinstance(node_id, str):
        return ValidationResult(valid=False, error="Node ID is required")

    sanitized = _percent_decode(node_id).strip()

    if sanitized == "":
        return ValidationResult(valid=False, error="Node ID cannot be empty")

    if len(sanitized) > MAX_ID_LENGTH:
        return ValidationResult(
            valid=False,
            error=f"Node ID too long (max {MAX_ID_LENGTH} characters)",
        )

    sanitized = _strip_control_chars(sanitized)

    if not _ID_RE.fullmatch(sanitized):
        return ValidationResult(valid=False, error="Node ID contains invalid characters")

    return ValidationResult(valid=True, sanitized=sanitized)


def validate_search_query(query) -> ValidationResult:
    """Sanitize a free-text function-name search term.

    An empty term is valid and means "no query yet". Terms longer than
    MAX_QUERY_LENGTH are truncated rather than rejected. The ``%`` and
    ``_`` wildcards are escaped so they match literally in a LIKE pattern
    using ``ESCAPE '\\'``.
    """
    if not isinstance(query, str):
        return ValidationResult(valid=False, error="Query must be a string")

    sanitized = query.strip()

    if len(sanitized) > MAX_QUERY_LENGTH:
        sanitized = sanitized[:MAX_QUERY_LENGTH]

    sanitized = _strip_control_chars(sanitized)
    sanitized = escape_like(sanitized)

    return ValidationResult(valid=True, sanitized=sanitized)
