"""
Visualization Session.

Holds the state of one interactive session explicitly: the last accepted
report, the graph built from it, the current highlight and the running
layout. Every load or reset supersedes the previous graph and simulation;
tick callbacks issued by a superseded simulation are dropped.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .analysis.highlight import HighlightEngine, HighlightResult
from .config import Bounds, LayoutConfig
from .core.builder import GraphBuilder
from .core.exceptions import BeanGraphError
from .core.graph import BeanGraph
from .core.report import load_report, parse_and_validate
from .core.result import Err, Ok, Result
from .core.types import RawReport
from .layout.simulation import ForceSimulation, LayoutEngine, LayoutFrame, TickCallback
from .render.scene import Pulse, Scene, build_scene

logger = logging.getLogger(__name__)


class VisualizationSession:
    """
    Event-driven facade over builder, highlight and layout.

    Not thread-safe: handlers are expected to run one at a time on a
    single event loop.
    """

    def __init__(self, config: Optional[LayoutConfig] = None, bounds: Optional[Bounds] = None):
        self.config = config or LayoutConfig()
        self.bounds = bounds or Bounds()
        self.transitive = False
        self.report: Optional[RawReport] = None
        self.graph: Optional[BeanGraph] = None
        self.highlight: Optional[HighlightResult] = None
        self.pulse: Optional[Pulse] = None
        self.simulation: Optional[ForceSimulation] = None
        self.last_frame: Optional[LayoutFrame] = None
        self._generation = 0
        self._builder = GraphBuilder()
        self._layout = LayoutEngine(self.config)

    @property
    def generation(self) -> int:
        """Incremented each time a new graph replaces the previous one."""
        return self._generation

    def load(self, text: Union[str, bytes]) -> Result[BeanGraph, BeanGraphError]:
        """
        Accept a new report.

        On failure the current report, graph and highlight are kept.
        """
        result = parse_and_validate(text)
        return self._accept(result)

    def load_file(self, path: Union[str, Path]) -> Result[BeanGraph, BeanGraphError]:
        return self._accept(load_report(path))

    def _accept(self, result: Result[RawReport, BeanGraphError]) -> Result[BeanGraph, BeanGraphError]:
        if isinstance(result, Err):
            logger.warning("Report rejected: %s", result.error)
            return result
        self.report = result.value
        return Ok(self._render())

    def reset(self) -> Optional[BeanGraph]:
        """Rebuild from the last accepted report, discarding the highlight."""
        if self.report is None:
            return None
        return self._render()

    def _render(self) -> BeanGraph:
        if self.simulation is not None:
            self.simulation.stop()
        self._generation += 1
        self.graph = self._builder.build(self.report)
        self.highlight = None
        self.pulse = None
        self.simulation = None
        self.last_frame = None
        logger.info(
            "Render %d: %d nodes, %d edges",
            self._generation, self.graph.node_count, self.graph.edge_count,
        )
        return self.graph

    def set_transitive(self, transitive: bool) -> None:
        """Applies to the next selection."""
        self.transitive = transitive

    def select_node(self, node_id: str) -> Optional[HighlightResult]:
        """
        Highlight the dependency chain of node_id.

        Returns None, leaving state untouched, if there is no graph or the
        id is not in it.
        """
        if self.graph is None or not self.graph.has_node(node_id):
            logger.debug("Selection %r ignored", node_id)
            return None

        self.highlight = HighlightEngine(self.graph).highlight(node_id, self.transitive)
        self.pulse = Pulse.for_radius(node_id, self.config.radius)
        return self.highlight

    def start_layout(self, on_frame: Optional[TickCallback] = None) -> ForceSimulation:
        """
        Start a simulation for the current graph, superseding any running one.

        on_frame is only called while this simulation's graph is still the
        session's current one.
        """
        if self.graph is None:
            raise BeanGraphError("No report loaded")
        if self.simulation is not None:
            self.simulation.stop()

        generation = self._generation
        simulation = self._layout.run(self.graph, self.bounds)

        def deliver(frame: LayoutFrame) -> None:
            if generation != self._generation or simulation is not self.simulation:
                logger.debug("Dropping stale frame %d of render %d", frame.tick, generation)
                return
            self.last_frame = frame
            if on_frame is not None:
                on_frame(frame)

        simulation.on_tick(deliver)
        self.simulation = simulation
        self.last_frame = simulation.frame()
        return simulation

    def scene(self) -> Scene:
        """Scene of the latest delivered frame and the current highlight."""
        if self.graph is None:
            return Scene(radius=self.config.radius)
        positions = self.last_frame.positions if self.last_frame else {}
        return build_scene(
            self.graph,
            positions,
            highlight=self.highlight,
            pulse=self.pulse,
            radius=self.config.radius,
        )
