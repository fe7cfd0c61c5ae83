"""
Stats Command - Summarize a report's dependency graph.
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
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def stats(ctx: click.Context, report: str, as_json: bool):
    """
    Show node and edge counts and detect dependency cycles.
    """
    try:
        session = open_session(report, config=resolve_config(ctx))
    except BeanGraphError as e:
        fail(e, as_json)

    graph = session.graph
    summary = graph.get_stats()
    cycle = graph.find_cycle()
    summary["cycle"] = cycle

    if as_json:
        echo_json_success(summary)
        return

    table = Table(title="Bean Graph")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Nodes", str(summary["total_nodes"]))
    table.add_row("Edges", str(summary["total_edges"]))
    table.add_row("Placeholders", str(summary["placeholders"]))
    for group, count in sorted(summary["nodes_by_group"].items()):
        table.add_row(f"  {group}", str(count))
    console.print(table)

    if cycle:
        chain = " → ".join(cycle + cycle[:1])
        console.print(f"[yellow]⚠ Dependency cycle:[/yellow] {escape(chain)}")
    else:
        console.print("[green]✓ No dependency cycles[/green]")
