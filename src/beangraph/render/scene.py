"""
Render Scene.

The data handed across the rendering boundary: one glyph per node with
its screen position and color, one glyph per edge with its path
instruction and stroke width, and the highlight state. Building a Scene
does not touch any drawing surface; svg.py turns it into markup.
"""

from typing import Dict, List, Mapping, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..analysis.highlight import HighlightResult
from ..config import NODE_RADIUS, PULSE_DURATION, PULSE_SCALE
from ..core.graph import UNKNOWN_SOURCE, BeanGraph
from ..layout.geometry import arrow_path, format_number, stroke_width

# Ten-color categorical palette
CATEGORY10 = (
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
)

HIGHLIGHT_COLOR = "#f00"


class OrdinalColorScale:
    """
    Assigns palette colors to keys in the order the keys are first seen.

    The palette wraps around once exhausted.
    """

    def __init__(self, palette=CATEGORY10):
        self.palette = tuple(palette)
        self._assigned: Dict[object, str] = {}

    def __call__(self, key) -> str:
        if key not in self._assigned:
            self._assigned[key] = self.palette[len(self._assigned) % len(self.palette)]
        return self._assigned[key]


class Pulse(BaseModel):
    """One-shot radius animation on a selected node."""
    node_id: str
    values: str
    duration: str = PULSE_DURATION

    model_config = ConfigDict(frozen=True)

    @classmethod
    def for_radius(cls, node_id: str, radius: float = NODE_RADIUS) -> "Pulse":
        peak = PULSE_SCALE * radius
        values = ";".join(format_number(float(v)) for v in (radius, peak, radius))
        return cls(node_id=node_id, values=values)


class NodeGlyph(BaseModel):
    id: str
    element_id: str
    x: float
    y: float
    group: int
    resource: str
    color: str
    selected: bool = False


class EdgeGlyph(BaseModel):
    render_key: str
    source: str
    target: str
    path: str
    stroke_width: float
    highlighted: bool = False


class Scene(BaseModel):
    """Everything a renderer needs to draw one frame."""
    nodes: List[NodeGlyph] = Field(default_factory=list)
    edges: List[EdgeGlyph] = Field(default_factory=list)
    radius: float = NODE_RADIUS
    selected_id: Optional[str] = None
    pulse: Optional[Pulse] = None

    @property
    def highlighted_keys(self) -> Set[str]:
        return {edge.render_key for edge in self.edges if edge.highlighted}


def build_scene(
    graph: BeanGraph,
    positions: Mapping[str, Tuple[float, float]],
    highlight: Optional[HighlightResult] = None,
    pulse: Optional[Pulse] = None,
    radius: float = NODE_RADIUS,
) -> Scene:
    """
    Combine a graph, a layout frame's positions and the highlight state.

    Highlighted edges are ordered last, in highlight order, so they are
    drawn on top of the others.
    """
    color = OrdinalColorScale()
    marked = highlight.render_keys if highlight else set()
    selected_id = highlight.selected_id if highlight and not highlight.is_empty else None

    nodes = []
    for node in graph.iter_nodes():
        x, y = positions.get(node.id, (0.0, 0.0))
        fill = color(node.group)
        nodes.append(NodeGlyph(
            id=node.id,
            element_id=f"c{node.sequence_id}",
            x=x,
            y=y,
            group=int(node.group),
            resource=node.resource or UNKNOWN_SOURCE,
            color=HIGHLIGHT_COLOR if node.id == selected_id else fill,
            selected=node.id == selected_id,
        ))

    plain: List[EdgeGlyph] = []
    for edge in graph.iter_edges():
        if edge.render_key in marked:
            continue
        plain.append(_edge_glyph(edge, positions, radius, highlighted=False))

    on_top: List[EdgeGlyph] = []
    if highlight:
        for edge in highlight.edges:
            on_top.append(_edge_glyph(edge, positions, radius, highlighted=True))

    return Scene(
        nodes=nodes,
        edges=plain + on_top,
        radius=radius,
        selected_id=selected_id,
        pulse=pulse if selected_id and pulse and pulse.node_id == selected_id else None,
    )


def _edge_glyph(edge, positions, radius: float, highlighted: bool) -> EdgeGlyph:
    sx, sy = positions.get(edge.source, (0.0, 0.0))
    tx, ty = positions.get(edge.target, (0.0, 0.0))
    return EdgeGlyph(
        render_key=edge.render_key,
        source=edge.source,
        target=edge.target,
        path=arrow_path(sx, sy, tx, ty, radius),
        stroke_width=stroke_width(edge.weight),
        highlighted=highlighted,
    )
