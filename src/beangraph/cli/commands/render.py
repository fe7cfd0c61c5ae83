"""
Render Command - Draw the bean dependency graph.

Runs the force layout to convergence and writes the diagram as HTML or
SVG, or prints the render scene as JSON for editor integrations.
"""

import logging
from typing import Optional

import click

from ...config import Bounds, DEFAULT_HEIGHT, DEFAULT_WIDTH
from ...core.exceptions import BeanGraphError, NodeNotFoundError
from ...render.svg import write_visualization
from ..utils import echo_info, echo_json_success, echo_success, echo_warning, fail, open_session, resolve_config

logger = logging.getLogger(__name__)


@click.command()
@click.argument("report", type=click.Path(dir_okay=False))
@click.option("-o", "--output", default="beans.html", help="Output file (.html or .svg)")
@click.option("-s", "--select", "selected", default=None, help="Bean whose dependencies are highlighted")
@click.option("-t", "--transitive", is_flag=True, help="Highlight the whole dependency chain")
@click.option("--width", default=DEFAULT_WIDTH, type=click.FloatRange(min=0, min_open=True), show_default=True, help="Drawing width")
@click.option("--height", default=DEFAULT_HEIGHT, type=click.FloatRange(min=0, min_open=True), show_default=True, help="Drawing height")
@click.option("--max-ticks", default=None, type=int, help="Stop the layout after this many ticks")
@click.option("--json", "as_json", is_flag=True, help="Output the render scene as JSON to stdout")
@click.option("--open", "open_browser", is_flag=True, help="Open the result in a browser")
@click.pass_context
def render(
    ctx: click.Context,
    report: str,
    output: str,
    selected: Optional[str],
    transitive: bool,
    width: float,
    height: float,
    max_ticks: Optional[int],
    as_json: bool,
    open_browser: bool,
):
    """
    Lay out a /beans report and write the diagram.
    """
    try:
        config = resolve_config(ctx)
        session = open_session(report, config=config, bounds=Bounds(width=width, height=height))
        session.set_transitive(transitive)

        if selected is not None and session.select_node(selected) is None:
            raise NodeNotFoundError(selected)

        frame = session.start_layout().run_until_converged(max_ticks=max_ticks)
        logger.info("Layout stopped at tick %d", frame.tick)
        scene = session.scene()
    except BeanGraphError as e:
        fail(e, as_json)

    if as_json:
        echo_json_success(scene.model_dump(mode="json"))
        return

    if session.graph.is_empty():
        echo_warning("No beans found in the 'application' context")

    try:
        out_file = write_visualization(scene, output, bounds=session.bounds, open_browser=open_browser)
    except ValueError as e:
        fail(BeanGraphError(str(e)))

    echo_success(f"Generated: {out_file}")
    echo_info(f"{len(scene.nodes)} beans, {len(scene.edges)} dependencies, {frame.tick} layout ticks")
    echo_info(f"Open: file://{out_file.absolute()}")
