"""
Deps Command - Show the dependency chain of a bean.

Usage:
    beangraph deps beans.json myService             # direct dependencies
    beangraph deps beans.json myService --transitive
"""

from __future__ import annotations

from typing import Dict, List

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from ...analysis.highlight import HighlightEngine
from ...core.exceptions import BeanGraphError, NodeNotFoundError
from ...core.graph import BeanGraph
from ...core.types import Edge
from ..utils import echo_json_success, fail, open_session, resolve_config

console = Console()


@click.command()
@click.argument("report", type=click.Path(dir_okay=False))
@click.argument("bean")
@click.option("-t", "--transitive", is_flag=True, help="Follow dependencies of dependencies")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def deps(ctx: click.Context, report: str, bean: str, transitive: bool, as_json: bool):
    """
    Show what BEAN depends on.
    """
    try:
        session = open_session(report, config=resolve_config(ctx))
        session.set_transitive(transitive)
        if session.select_node(bean) is None:
            raise NodeNotFoundError(bean)
        result = session.highlight
    except BeanGraphError as e:
        fail(e, as_json)

    if as_json:
        echo_json_success(result.model_dump(mode="json"))
        return

    console.print(build_tree(session.graph, bean, result.edges))


def build_tree(graph: BeanGraph, root_id: str, edges: List[Edge]) -> Tree:
    """
    Arrange highlighted edges as a tree under the selected bean.

    Each node is expanded once; a repeated target is shown as a leaf
    marked with ↺.
    """
    children: Dict[str, List[Edge]] = {}
    for edge in edges:
        children.setdefault(edge.source, []).append(edge)

    tree = Tree(_label(graph, root_id, root=True))
    expanded = {root_id}
    stack = [(tree, root_id)]

    while stack:
        branch, node_id = stack.pop()
        for edge in children.get(node_id, []):
            if edge.target in expanded:
                branch.add(f"{_label(graph, edge.target)} [dim]↺[/dim]")
                continue
            expanded.add(edge.target)
            stack.append((branch.add(_label(graph, edge.target)), edge.target))

    if not edges:
        tree.add("[dim]No dependencies[/dim]")
    return tree


def _label(graph: BeanGraph, node_id: str, root: bool = False) -> str:
    node = graph.get_node(node_id)
    name = f"[bold]{escape(node_id)}[/bold]" if root else f"[cyan]{escape(node_id)}[/cyan]"
    if node is not None and node.placeholder:
        return f"{name} [yellow](external)[/yellow]"
    return f"{name} [dim]{escape(graph.describe(node_id))}[/dim]"
