"""
Dependency Highlight Analysis.

Computes the forward dependency chain of a selected bean: the edges to
mark and the nodes they reach. Bean dependency data can contain circular
references, so the walk keeps a visited set and uses an explicit stack
instead of recursion.
"""

import logging
from typing import Iterator, List, Set

from pydantic import BaseModel, ConfigDict, Field

from ..core.graph import BeanGraph
from ..core.types import Edge

logger = logging.getLogger(__name__)


class HighlightResult(BaseModel):
    """Edges and nodes marked by a selection."""
    selected_id: str
    transitive: bool = False
    edges: List[Edge] = Field(default_factory=list)
    nodes: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    @property
    def render_keys(self) -> Set[str]:
        return {edge.render_key for edge in self.edges}


class HighlightEngine:
    """
    Marks the outgoing dependency chain of a node.
    """

    def __init__(self, graph: BeanGraph):
        self.graph = graph

    def highlight(self, selected_id: str, transitive: bool = False) -> HighlightResult:
        """
        Collect the edges to mark for a selection.

        Edges come out in depth-first pre-order: each outgoing edge is
        marked, then (when transitive) its target's chain is walked before
        the next sibling edge. A node is expanded at most once, which both
        terminates cycles and keeps every edge to a single mark.

        Unknown ids produce an empty result.
        """
        if not self.graph.has_node(selected_id):
            logger.debug("Ignoring selection of unknown node %r", selected_id)
            return HighlightResult(selected_id=selected_id, transitive=transitive)

        marked: List[Edge] = []
        reached: List[str] = [selected_id]
        visited: Set[str] = {selected_id}
        stack: List[Iterator[Edge]] = [iter(self.graph.out_edges(selected_id))]

        while stack:
            edge = next(stack[-1], None)
            if edge is None:
                stack.pop()
                continue

            marked.append(edge)
            if edge.target in visited:
                continue
            visited.add(edge.target)
            reached.append(edge.target)
            if transitive:
                stack.append(iter(self.graph.out_edges(edge.target)))

        logger.debug(
            "Highlight %r (transitive=%s): %d edges, %d nodes",
            selected_id, transitive, len(marked), len(reached),
        )
        return HighlightResult(
            selected_id=selected_id,
            transitive=transitive,
            edges=marked,
            nodes=reached,
        )


def highlight(graph: BeanGraph, selected_id: str, transitive: bool = False) -> HighlightResult:
    """Convenience wrapper around HighlightEngine(graph).highlight()."""
    return HighlightEngine(graph).highlight(selected_id, transitive)
