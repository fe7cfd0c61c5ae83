"""
Graph Builder.

Turns a RawReport into a BeanGraph. Bean names are collected from every
context, but a bean is only materialized if the "application" context
declares it, and its record is always read from there. Dependency names
that never become a bean are closed over with placeholder nodes so that
every edge target resolves.
"""

import logging
from typing import Dict, List

from .graph import BeanGraph
from .types import Edge, Node, NodeGroup, RawReport

logger = logging.getLogger(__name__)

GROUP_PREFIXES = (
    ("org.springframework", NodeGroup.SPRING),
    ("org.", NodeGroup.ORG),
    ("com.", NodeGroup.COM),
)


def classify(name: str) -> NodeGroup:
    """Map a bean name to its color group. First matching prefix wins."""
    for prefix, group in GROUP_PREFIXES:
        if name.startswith(prefix):
            return group
    return NodeGroup.OTHER


def render_key(source_seq: str, target_seq: str) -> str:
    return f"l{source_seq}_{target_seq}"


class GraphBuilder:
    """
    Builds the canonical node/edge model of a report.

    build() is pure: the same report always yields the same graph,
    including sequence ids and render keys.
    """

    def build(self, report: RawReport) -> BeanGraph:
        application_beans = report.application_beans
        nodes: Dict[str, Node] = {}
        edges: List[Edge] = []
        referenced: Dict[str, None] = {}  # ordered set
        counter = 0

        for context in report.contexts.values():
            if not context.beans:
                continue
            for name in context.beans:
                if name in nodes or name not in application_beans:
                    continue

                bean = application_beans[name]
                counter += 1
                nodes[name] = Node(
                    id=name,
                    sequence_id=counter,
                    group=classify(name),
                    resource=bean.resource,
                )
                for dependency in bean.dependencies:
                    referenced[dependency] = None
                    edges.append(Edge(
                        source=name,
                        target=dependency,
                        weight=len(bean.dependencies),
                    ))

        for name in referenced:
            if name not in nodes:
                counter += 1
                nodes[name] = Node(
                    id=name,
                    sequence_id=counter,
                    group=NodeGroup.PLACEHOLDER,
                    placeholder=True,
                )

        def seq(node_id: str) -> str:
            node = nodes.get(node_id)
            return str(node.sequence_id) if node else ""

        keyed = [
            edge.model_copy(update={"render_key": render_key(seq(edge.source), seq(edge.target))})
            for edge in edges
        ]

        graph = BeanGraph(nodes.values(), keyed)
        logger.debug(
            "Built graph: %d nodes (%d placeholders), %d edges",
            graph.node_count,
            sum(1 for n in nodes.values() if n.placeholder),
            graph.edge_count,
        )
        return graph


def build_graph(report: RawReport) -> BeanGraph:
    """Convenience wrapper around GraphBuilder().build()."""
    return GraphBuilder().build(report)
