"""Neighborhood graph assembly.

Turns a resolved Neighborhood into the node/edge lists handed to the
rendering client. The node cap here is the only thing bounding response
size: however large a function's fan-in or fan-out, the client never
receives more than ``max_nodes`` nodes.
"""

import logging
from typing import List, Sequence

from ..constants import MAX_NODES_IN_GRAPH
from ..db import DatabaseManager
from . import queries
from .models import Graph, GraphEdge, GraphNode, Neighborhood

logger = logging.getLogger(__name__)


class GraphAssembler:
    """Builds a capped node list and its induced call-edge set."""

    def __init__(self, db: DatabaseManager, max_nodes: int = MAX_NODES_IN_GRAPH):
        self._db = db
        self._max_nodes = max_nodes

    def assemble(self, neighborhood: Neighborhood) -> Graph:
        """Assemble the graph for a neighborhood.

        Nodes are the target followed by every distinct neighbor, first
        occurrence wins. Overflow beyond ``max_nodes`` is dropped from the
        end. Edges are every call edge with both ends in the kept set.
        """
        nodes = self._collect_nodes(neighborhood)

        if len(nodes) > self._max_nodes:
            logger.warning(
                f"Too many nodes requested: {len(nodes)}, limiting to {self._max_nodes}"
            )
            nodes = nodes[: self._max_nodes]

        edges = self._induced_edges([n.id for n in nodes])
        return Graph(nodes=nodes, edges=edges)

    @staticmethod
    def _collect_nodes(neighborhood: Neighborhood) -> List[GraphNode]:
        seen = set()
        nodes: List[GraphNode] = []

        candidates = [(neighborhood.target.id, neighborhood.target.name)]
        candidates.extend((row.id, row.name) for row in neighborhood.rows)

        for node_id, name in candidates:
            if node_id in seen:
                continue
            seen.add(node_id)
            nodes.append(GraphNode(id=node_id, label=name or node_id))
        return nodes

    def _induced_edges(self, node_ids: Sequence[str]) -> List[GraphEdge]:
        if not node_ids:
            return []

        edges: List[GraphEdge] = []
        counter = 0
        for row in queries.get_call_edges_between(self._db, node_ids):
            edges.append(GraphEdge(id=f"edge-{counter}", source=row["source"], target=row["target"]))
            counter += 1
        return edges
