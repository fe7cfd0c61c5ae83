"""
Nodes Command - List the beans of a report.

Prints every node id, sorted, with its group and declaring resource.
"""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...core.exceptions import BeanGraphError
from ..utils import echo_json_success, fail, open_session, resolve_config

console = Console()


@click.command()
@click.argument("report", type=click.Path(dir_okay=False))
@click.option("--placeholders/--no-placeholders", default=True, show_default=True,
              help="Include dependencies that are not beans of the application context")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def nodes(ctx: click.Context, report: str, placeholders: bool, as_json: bool):
    """
    List bean names, sorted.
    """
    try:
        session = open_session(report, config=resolve_config(ctx))
    except BeanGraphError as e:
        fail(e, as_json)

    graph = session.graph
    listed = [graph.get_node(node_id) for node_id in graph.node_ids()]
    if not placeholders:
        listed = [node for node in listed if not node.placeholder]

    if as_json:
        echo_json_success([node.model_dump(mode="json") for node in listed])
        return

    table = Table(title=f"Beans ({len(listed)})")
    table.add_column("Bean", style="cyan")
    table.add_column("Group", justify="right")
    table.add_column("Resource", style="dim")

    for node in listed:
        table.add_row(
            escape(node.id),
            node.group.name.lower(),
            escape(graph.describe(node.id)),
        )
    console.print(table)
