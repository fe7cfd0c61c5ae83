"""
Bean dependency graph backed by rustworkx.

It manages:
- The bimap between bean names and rustworkx integer indices.
- Node and Edge payload storage, in discovery order.
- Ordered outgoing-edge lookup used by highlighting.

A BeanGraph is immutable once the builder hands it out.
"""

from collections import defaultdict
from typing import Any, Dict, Iterable, Iterator, List, Optional

import rustworkx as rx

from .types import Edge, Node

UNKNOWN_SOURCE = "unknown source"


class BeanGraph:
    """
    Node/edge model of one bean report.

    Features:
    - O(1) node lookup by bean name
    - Outgoing edges returned in declaration order
    - Cycle detection through the rustworkx backend
    """

    def __init__(self, nodes: Iterable[Node] = (), edges: Iterable[Edge] = ()):
        self._graph = rx.PyDiGraph(multigraph=True)
        self._id_to_idx: Dict[str, int] = {}
        self._nodes: List[Node] = []
        self._edges: List[Edge] = []

        for node in nodes:
            self._add_node(node)
        for edge in edges:
            self._add_edge(edge)

    def _add_node(self, node: Node) -> None:
        if node.id in self._id_to_idx:
            raise ValueError(f"Duplicate node id: {node.id}")
        self._id_to_idx[node.id] = self._graph.add_node(node)
        self._nodes.append(node)

    def _add_edge(self, edge: Edge) -> None:
        u_idx = self._id_to_idx.get(edge.source)
        v_idx = self._id_to_idx.get(edge.target)
        if u_idx is None or v_idx is None:
            raise ValueError(f"Dangling edge: {edge.source} -> {edge.target}")
        self._graph.add_edge(u_idx, v_idx, edge)
        self._edges.append(edge)

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes)

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    @property
    def node_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.num_edges()

    def is_empty(self) -> bool:
        return not self._nodes

    def get_node(self, node_id: str) -> Optional[Node]:
        """Retrieve a node by id."""
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return None
        return self._graph[idx]

    def has_node(self, node_id: str) -> bool:
        return node_id in self._id_to_idx

    def out_edges(self, node_id: str) -> List[Edge]:
        """
        Outgoing edges of a node, in the order the bean declared them.

        Edge indices are allocated in insertion order, so sorting them
        recovers the declaration order.
        """
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return []
        edge_indices = sorted(self._graph.incident_edges(idx))
        return [self._graph.get_edge_data_by_index(i) for i in edge_indices]

    def sequence_id_of(self, node_id: str) -> str:
        """Sequence id of a node as a string, or "" if the id is unknown."""
        node = self.get_node(node_id)
        if node is None:
            return ""
        return str(node.sequence_id)

    def node_ids(self) -> List[str]:
        """All node ids, sorted for display."""
        return sorted(self._id_to_idx)

    def describe(self, node_id: str) -> str:
        """The resource a bean was declared in, for display on click."""
        node = self.get_node(node_id)
        if node is None or not node.resource:
            return UNKNOWN_SOURCE
        return node.resource

    def find_cycle(self) -> List[str]:
        """
        Return the ids along one dependency cycle, or [] if the graph is acyclic.
        """
        if rx.is_directed_acyclic_graph(self._graph):
            return []
        cycle = rx.digraph_find_cycle(self._graph)
        return [self._graph[u].id for u, _ in cycle]

    def iter_nodes(self) -> Iterator[Node]:
        return iter(self._nodes)

    def iter_edges(self) -> Iterator[Edge]:
        return iter(self._edges)

    def get_stats(self) -> Dict[str, Any]:
        nodes_by_group: Dict[str, int] = defaultdict(int)
        for node in self._nodes:
            nodes_by_group[node.group.name.lower()] += 1

        return {
            "total_nodes": self.node_count,
            "total_edges": self.edge_count,
            "placeholders": sum(1 for n in self._nodes if n.placeholder),
            "nodes_by_group": dict(nodes_by_group),
            "has_cycle": not rx.is_directed_acyclic_graph(self._graph),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [node.model_dump(mode="json") for node in self._nodes],
            "edges": [edge.model_dump(mode="json") for edge in self._edges],
            "stats": self.get_stats(),
        }
