"""
SVG Visualization Output.

Turns a Scene into a standalone SVG document, or an HTML page embedding
it, with the arrow markers, dash-flow animation for highlighted edges and
the radius pulse on the selected node.
"""

import logging
import webbrowser
from html import escape
from pathlib import Path
from typing import List, Optional

from ..config import Bounds
from ..layout.geometry import format_number
from .scene import HIGHLIGHT_COLOR, Scene

logger = logging.getLogger(__name__)

EDGE_COLOR = "#999"

SVG_DEFS = """  <defs>
    <marker id="head" viewBox="0 0 10 10" refX="5" refY="5" markerWidth="6" markerHeight="6" orient="auto-start-reverse">
      <path d="M 0 0 L 10 5 L 0 10 z" fill="__EDGE_COLOR__"/>
    </marker>
    <marker id="redhead" viewBox="0 0 10 10" refX="5" refY="5" markerWidth="6" markerHeight="6" orient="auto-start-reverse">
      <path d="M 0 0 L 10 5 L 0 10 z" fill="__HIGHLIGHT_COLOR__"/>
    </marker>
    <style>
      .dashflow { stroke-dasharray: 4 2; animation: dashflow 1s linear infinite; }
      @keyframes dashflow { to { stroke-dashoffset: -6; } }
    </style>
  </defs>"""

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>__TITLE__</title>
    <style>
        body { margin: 0; font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif; }
        header { padding: 8px 16px; border-bottom: 1px solid #ddd; font-size: 13px; color: #444; }
        #main svg { width: 100vw; height: calc(100vh - 40px); }
        circle { cursor: pointer; }
    </style>
</head>
<body>
    <header>__SUMMARY__</header>
    <div id="main">
__SVG__
    </div>
    <script>
        document.querySelectorAll('#main circle').forEach((c) => {
            c.addEventListener('click', (e) => alert(e.target.getAttribute('data-resource')));
        });
    </script>
</body>
</html>
"""


def _attr(value) -> str:
    return escape(str(value), quote=True)


def generate_svg(scene: Scene, bounds: Optional[Bounds] = None) -> str:
    """Render a scene as an SVG document."""
    bounds = bounds or Bounds()
    width = format_number(float(bounds.width))
    height = format_number(float(bounds.height))
    radius = format_number(float(scene.radius))

    lines: List[str] = [
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}">',
        SVG_DEFS.replace("__EDGE_COLOR__", EDGE_COLOR).replace("__HIGHLIGHT_COLOR__", HIGHLIGHT_COLOR),
        "  <g>",
        f'    <rect fill="white" fill-opacity="0" width="{width}" height="{height}"/>',
        f'    <g stroke="{EDGE_COLOR}">',
    ]

    for edge in scene.edges:
        if edge.highlighted:
            style = f'stroke="{HIGHLIGHT_COLOR}" marker-end="url(#redhead)" class="dashflow"'
        else:
            style = 'marker-end="url(#head)"'
        lines.append(
            f'      <path id="{_attr(edge.render_key)}" {style} '
            f'stroke-width="{format_number(edge.stroke_width)}" d="{_attr(edge.path)}"/>'
        )

    lines.append("    </g>")
    lines.append('    <g stroke="none">')

    for node in scene.nodes:
        opening = (
            f'      <circle id="{node.element_id}" r="{radius}" '
            f'cx="{format_number(node.x)}" cy="{format_number(node.y)}" '
            f'fill="{node.color}" data-resource="{_attr(node.resource)}">'
        )
        lines.append(opening)
        lines.append(f"        <title>{escape(node.id)}</title>")
        if scene.pulse and scene.pulse.node_id == node.id:
            lines.append(
                f'        <animate attributeName="r" dur="{scene.pulse.duration}" '
                f'values="{scene.pulse.values}" repeatCount="indefinite"/>'
            )
        lines.append("      </circle>")

    lines.append("    </g>")
    lines.append("  </g>")
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def generate_html(scene: Scene, bounds: Optional[Bounds] = None, title: str = "Bean Dependencies") -> str:
    """Render a scene as a standalone HTML page."""
    summary = f"{len(scene.nodes)} beans, {len(scene.edges)} dependencies"
    if scene.selected_id:
        summary += f" | selected: {scene.selected_id}"

    return (
        HTML_TEMPLATE
        .replace("__TITLE__", escape(title))
        .replace("__SUMMARY__", escape(summary))
        .replace("__SVG__", generate_svg(scene, bounds))
    )


def write_visualization(
    scene: Scene,
    output_path: str = "beans.html",
    bounds: Optional[Bounds] = None,
    open_browser: bool = False,
) -> Path:
    """
    Write a scene to .html or .svg, chosen by the output suffix.
    """
    out_file = Path(output_path)
    if out_file.suffix == ".svg":
        content = generate_svg(scene, bounds)
    elif out_file.suffix in (".html", ".htm"):
        content = generate_html(scene, bounds)
    else:
        raise ValueError(f"Unsupported format: {out_file.suffix or '(none)'}")

    out_file.write_text(content, encoding="utf-8")
    logger.debug("Wrote %s (%d bytes)", out_file, len(content))

    if open_browser:
        webbrowser.open(out_file.resolve().as_uri())
    return out_file
