"""
beangraph CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging

import click

from .commands import deps, nodes, render, stats


@click.group()
@click.version_option(package_name="beangraph")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("-c", "--config", "config_path", default=None,
              type=click.Path(dir_okay=False),
              help="Layout config YAML (default: .beangraph/config.yaml)")
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: str):
    """beangraph: Spring bean dependency visualizer.

    Reads the JSON report of the Spring Boot Actuator /beans endpoint
    and draws its dependency graph with a force-directed layout.

    \b
    Quick Start:
      beangraph render beans.json --output beans.html
      beangraph render beans.json --select myService --transitive
      beangraph deps beans.json myService --transitive
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


# Register commands
main.add_command(render.render)
main.add_command(deps.deps)
main.add_command(nodes.nodes)
main.add_command(stats.stats)

if __name__ == "__main__":
    main()
