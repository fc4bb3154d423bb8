"""CPG read queries.

Provides functions to query the nodes, edges and sources tables for
function search, one-hop call neighborhoods, induced edge sets and
summary statistics. All SQL is parameterised; identifiers reach these
functions only after passing through ``validation``.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy import bindparam, text

from ..constants import MAX_SEARCH_RESULTS
from ..db import DatabaseManager, EdgeKind, NodeKind
from .models import Direction, FunctionMatch, NeighborRow, TargetFunction

logger = logging.getLogger(__name__)

_FUNCTION = NodeKind.FUNCTION.value
_CALL = EdgeKind.CALL.value


def search_functions(
    db: DatabaseManager,
    term: str,
    limit: int = MAX_SEARCH_RESULTS,
) -> List[FunctionMatch]:
    """Find function nodes whose name contains ``term``.

    Args:
        db: DatabaseManager instance
        term: Sanitized, wildcard-escaped search term
        limit: Maximum number of rows

    Returns:
        Up to ``limit`` matches in store order. An empty term returns an
        empty list without querying.
    """
    if term == "":
        return []

    with db.get_session() as session:
        result = session.execute(
            text(r"""
                SELECT id, name
                FROM nodes
                WHERE kind = :kind AND name LIKE :pattern ESCAPE '\'
                LIMIT :limit
            """),
            {"kind": _FUNCTION, "pattern": f"%{term}%", "limit": limit},
        )
        return [FunctionMatch(id=str(row.id), name=row.name) for row in result.fetchall()]


def get_function(db: DatabaseManager, function_id: str) -> Optional[TargetFunction]:
    """Get a function node's id and name, or None if no function has this id."""
    with db.get_session() as session:
        row = session.execute(
            text("SELECT id, name FROM nodes WHERE id = :id AND kind = :kind"),
            {"id": function_id, "kind": _FUNCTION},
        ).fetchone()
    if row is None:
        return None
    return TargetFunction(id=str(row.id), name=row.name)


def get_node_kind(db: DatabaseManager, node_id: str) -> Optional[Tuple[str, NodeKind]]:
    """Get the raw and parsed kind of any node, or None if the id is unknown."""
    with db.get_session() as session:
        row = session.execute(
            text("SELECT kind FROM nodes WHERE id = :id"),
            {"id": node_id},
        ).fetchone()
    if row is None:
        return None
    return row.kind, NodeKind.parse(row.kind)


def get_neighbor_rows(db: DatabaseManager, function_id: str) -> List[NeighborRow]:
    """Get the direct callers and callees of a function in one query.

    Callers come first, then callees; each group is ordered by name.
    Only function nodes joined through call edges are returned, so
    dangling edges produce no row.
    """
    with db.get_session() as session:
        result = session.execute(
            text("""
                SELECT 'caller' AS direction, 0 AS direction_order,
                       n.id, n.name, n.package, n.file, n.line
                FROM edges e JOIN nodes n ON n.id = e.source
                WHERE e.target = :id AND e.kind = :call AND n.kind = :kind
                UNION ALL
                SELECT 'callee' AS direction, 1 AS direction_order,
                       n.id, n.name, n.package, n.file, n.line
                FROM edges e JOIN nodes n ON n.id = e.target
                WHERE e.source = :id AND e.kind = :call AND n.kind = :kind
                ORDER BY direction_order, name
            """),
            {"id": function_id, "call": _CALL, "kind": _FUNCTION},
        )
        return [
            NeighborRow(
                direction=Direction(row.direction),
                id=str(row.id),
                name=row.name,
                package=row.package,
                file=row.file,
                line=row.line,
            )
            for row in result.fetchall()
        ]


def get_call_edges_between(db: DatabaseManager, node_ids: Sequence[str]) -> List[Dict[str, str]]:
    """Get every call edge whose source and target are both in ``node_ids``.

    Returns:
        List of dicts with source and target, in store order
    """
    if not node_ids:
        return []

    ids = list(node_ids)
    stmt = text("""
        SELECT e.source, e.target
        FROM edges e
        WHERE e.kind = :call
          AND e.source IN :source_ids
          AND e.target IN :target_ids
    """).bindparams(
        bindparam("source_ids", expanding=True),
        bindparam("target_ids", expanding=True),
    )

    with db.get_session() as session:
        result = session.execute(stmt, {"call": _CALL, "source_ids": ids, "target_ids": ids})
        return [
            {"source": str(row.source), "target": str(row.target)}
            for row in result.fetchall()
        ]


def get_graph_stats(db: DatabaseManager) -> Dict[str, object]:
    """Get node and edge counts by kind plus the number of stored files."""
    with db.get_session() as session:
        node_rows = session.execute(
            text("""
                SELECT kind, COUNT(*) AS cnt
                FROM nodes
                GROUP BY kind
                ORDER BY cnt DESC
            """)
        ).fetchall()
        edge_rows = session.execute(
            text("""
                SELECT kind, COUNT(*) AS cnt
                FROM edges
                GROUP BY kind
                ORDER BY cnt DESC
            """)
        ).fetchall()
        source_count = session.execute(text("SELECT COUNT(*) FROM sources")).scalar()

    node_kinds = {row.kind: row.cnt for row in node_rows}
    edge_kinds = {row.kind: row.cnt for row in edge_rows}
    return {
        "total_nodes": sum(node_kinds.values()),
        "total_edges": sum(edge_kinds.values()),
        "node_kinds": node_kinds,
        "edge_kinds": edge_kinds,
        "source_files": source_count or 0,
    }
