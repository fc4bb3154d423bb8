"""Domain exceptions for cpgview.

Every error raised by the query layer inherits from CPGViewError so the
API can translate it into a typed JSON response in one place. Store
failures (SQLAlchemyError) sit outside this hierarchy;
the API logs them and returns a generic internal error.
"""

from typing import Any, Dict, Optional


class CPGViewError(Exception):
    """Base exception for expected, locally-detected query outcomes."""

    status_code = 500

    def __init__(self, error: str, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.error = error
        self.message = message
        self.details = details or {}
        super().__init__(error)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error}
        if self.message:
            body["message"] = self.message
        body.update(self.details)
        return body


class ValidationError(CPGViewError):
    """Malformed, oversized or disallowed-character input."""

    status_code = 400


class NotFoundError(CPGViewError):
    """Well-formed id with no matching node."""

    status_code = 404


class WrongKindError(CPGViewError):
    """The id names a node, but not a function node."""

    status_code = 400

    def __init__(self, node_id: str, kind: str):
        self.node_id = node_id
        self.kind = kind
        super().__init__(f"Node exists but is not a function (kind: {kind})")


class UnavailableSourceError(CPGViewError):
    """The node exists but its source text cannot be produced."""

    status_code = 404


class ExternalSourceError(UnavailableSourceError):
    """External function: the store never holds its source."""


class NoFileMetadataError(UnavailableSourceError):
    """Node carries no file reference."""


class SourceFileMissingError(UnavailableSourceError):
    """Node references a file with no row in the sources table."""


class StoreUnavailableError(Exception):
    """The read-only store could not be opened."""
