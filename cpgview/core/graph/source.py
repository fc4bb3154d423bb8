"""Source slicing: map a node's file/line metadata onto stored file text."""

import logging
from typing import Optional, Tuple

from ..constants import DEFAULT_EXTERNAL_PACKAGE, EXTERNAL_NODE_PREFIX
from ..db import DatabaseManager, Node, SourceFile
from ..exceptions import (
    ExternalSourceError,
    NoFileMetadataError,
    NotFoundError,
    SourceFileMissingError,
)
from .models import SourceSlice

logger = logging.getLogger(__name__)


# (line present, end_line present) -> how to build (start_line, end_line).
# A missing start means 1; a missing end means the start line, or the
# whole file when neither is known.
_RANGE_RULES = {
    (True, True): lambda line, end_line, total: (line, end_line),
    (True, False): lambda line, end_line, total: (line, line),
    (False, True): lambda line, end_line, total: (1, end_line),
    (False, False): lambda line, end_line, total: (1, total),
}


def resolve_line_range(
    line: Optional[int],
    end_line: Optional[int],
    total_lines: int,
) -> Tuple[int, int]:
    """Resolve a node's stored line metadata into a 1-based inclusive range.

    No clamping is applied: a start beyond ``total_lines`` is returned
    as-is and slices to an empty string.
    """
    rule = _RANGE_RULES[(bool(line), bool(end_line))]
    return rule(line, end_line, total_lines)


def slice_lines(content: str, start_line: int, end_line: int) -> str:
    lines = content.split("\n")
    return "\n".join(lines[start_line - 1:end_line])


def is_external(node_id: str) -> bool:
    return node_id.startswith(EXTERNAL_NODE_PREFIX)


def get_source(db: DatabaseManager, node_id: str) -> SourceSlice:
    """Extract the source lines backing a node.

    Args:
        db: DatabaseManager instance
        node_id: Validated node id

    Returns:
        SourceSlice with the resolved file, range and code

    Raises:
        ExternalSourceError: External function (``ext::`` prefix)
        NotFoundError: No node has this id
        NoFileMetadataError: Node has no file
        SourceFileMissingError: File is not in the sources table
    """
    if is_external(node_id):
        _raise_external(db, node_id)

    with db.get_session() as session:
        node = session.query(Node).filter(Node.id == node_id).first()
        if not node:
            raise NotFoundError("Node not found")

        if not node.file:
            raise NoFileMetadataError(
                "Source code not available",
                message=(
                    f'Node "{node.name or node_id}" exists but has no file information. '
                    "This might be a generated or external node."
                ),
                details={"node_info": {"name": node.name, "package": node.package}},
            )

        file_name, line, end_line = node.file, node.line, node.end_line

        source = session.query(SourceFile).filter(SourceFile.file == file_name).first()
        if not source:
            logger.warning(f"Source file missing for node {node_id}: {file_name}")
            raise SourceFileMissingError(
                "Source file not found",
                message=f'File "{file_name}" not found in sources table.',
                details={"file": file_name},
            )
        content = source.content

    total_lines = len(content.split("\n"))
    start, end = resolve_line_range(line, end_line, total_lines)
    return SourceSlice(
        file_name=file_name,
        start_line=start,
        end_line=end,
        code=slice_lines(content, start, end),
    )


def _raise_external(db: DatabaseManager, node_id: str) -> None:
    with db.get_session() as session:
        node = session.query(Node).filter(Node.id == node_id).first()
        if not node:
            raise NotFoundError("External node - source code not available")
        name, package, type_info = node.name, node.package, node.type_info

    raise ExternalSourceError(
        "External function - source code not available",
        message=(
            f"This is an external function from {package or DEFAULT_EXTERNAL_PACKAGE}. "
            "Source code is not available in the database."
        ),
        details={"node_info": {"name": name, "package": package, "type_info": type_info}},
    )
