"""
Force-directed Layout Simulation.

A ForceSimulation is a long-lived, stepped process: every tick() cools
alpha, applies the forces, integrates velocities into positions and
produces a LayoutFrame. Nothing here blocks; the caller (a UI event loop,
or run_until_converged for batch rendering) decides when to tick, and
stop() ends the run when a newer render supersedes it.
"""

import logging
import math
import random
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from ..config import ALPHA_START, Bounds, LayoutConfig
from ..core.graph import BeanGraph
from .forces import CenterForce, CollideForce, Force, LinkForce, ManyBodyForce, SimNode

logger = logging.getLogger(__name__)

INITIAL_RADIUS = 10.0
INITIAL_ANGLE = math.pi * (3 - math.sqrt(5))

TickCallback = Callable[["LayoutFrame"], None]


class LayoutFrame(BaseModel):
    """Node positions after one simulation step."""
    tick: int
    alpha: float
    positions: Dict[str, Tuple[float, float]]

    model_config = ConfigDict(frozen=True)


class ForceSimulation:
    """
    Velocity-Verlet force simulation over a fixed node set.
    """

    def __init__(self, node_ids: List[str], config: Optional[LayoutConfig] = None):
        self.config = config or LayoutConfig()
        self.nodes = [SimNode(id=node_id, index=i) for i, node_id in enumerate(node_ids)]
        self.alpha = ALPHA_START
        self.ticks = 0
        self._forces: Dict[str, Force] = {}
        self._listeners: List[TickCallback] = []
        self._stopped = False
        self._rng = random.Random(self.config.seed)
        self._initialize_positions()

    def _initialize_positions(self) -> None:
        """Place nodes on a phyllotaxis spiral around the origin."""
        for node in self.nodes:
            if math.isnan(node.x) or math.isnan(node.y):
                radius = INITIAL_RADIUS * math.sqrt(0.5 + node.index)
                angle = node.index * INITIAL_ANGLE
                node.x = radius * math.cos(angle)
                node.y = radius * math.sin(angle)

    def force(self, name: str, force: Force) -> "ForceSimulation":
        """Register a named force, replacing any previous one of that name."""
        force.initialize(self.nodes, self._rng)
        self._forces[name] = force
        return self

    def get_force(self, name: str) -> Optional[Force]:
        return self._forces.get(name)

    def on_tick(self, callback: TickCallback) -> "ForceSimulation":
        self._listeners.append(callback)
        return self

    @property
    def converged(self) -> bool:
        return self.alpha < self.config.alpha_min

    @property
    def stopped(self) -> bool:
        return self._stopped

    @property
    def running(self) -> bool:
        return not (self._stopped or self.converged)

    def stop(self) -> None:
        """Cancel the run. Later ticks are refused."""
        if not self._stopped:
            logger.debug("Simulation stopped after %d ticks", self.ticks)
        self._stopped = True

    def positions(self) -> Dict[str, Tuple[float, float]]:
        return {node.id: (node.x, node.y) for node in self.nodes}

    def frame(self) -> LayoutFrame:
        return LayoutFrame(tick=self.ticks, alpha=self.alpha, positions=self.positions())

    def step(self) -> None:
        """Advance one tick without notifying listeners."""
        config = self.config
        self.alpha += (config.alpha_target - self.alpha) * config.alpha_decay

        for force in self._forces.values():
            force.apply(self.alpha)

        keep = 1 - config.velocity_decay
        for node in self.nodes:
            if node.fx is None:
                node.vx *= keep
                node.x += node.vx
            else:
                node.x = node.fx
                node.vx = 0.0
            if node.fy is None:
                node.vy *= keep
                node.y += node.vy
            else:
                node.y = node.fy
                node.vy = 0.0
        self.ticks += 1

    def tick(self) -> Optional[LayoutFrame]:
        """
        Run one tick and notify listeners.

        Returns None once the simulation has been stopped or has converged.
        """
        if not self.running:
            return None
        self.step()
        frame = self.frame()
        for callback in list(self._listeners):
            callback(frame)
        return frame

    def __iter__(self) -> Iterator[LayoutFrame]:
        while True:
            frame = self.tick()
            if frame is None:
                return
            yield frame

    def run_until_converged(self, max_ticks: Optional[int] = None) -> LayoutFrame:
        """
        Drive ticks until convergence, stop(), or max_ticks.

        Returns the last frame produced (or the current state if no tick ran).
        """
        last = None
        for frame in self:
            last = frame
            if max_ticks is not None and frame.tick >= max_ticks:
                break
        if last is None:
            last = self.frame()
        logger.debug(
            "Layout finished at tick %d (alpha=%.5f, converged=%s)",
            last.tick, last.alpha, self.converged,
        )
        return last


class LayoutEngine:
    """
    Configures the force simulation used to lay out a bean graph.

    Forces, applied in this order each tick:
    - link: pulls dependencies toward a fixed separation
    - charge: repels every pair of nodes
    - collide: keeps glyphs from overlapping
    - center: keeps the layout centered in the drawing bounds
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = config or LayoutConfig()

    def run(self, graph: BeanGraph, bounds: Optional[Bounds] = None) -> ForceSimulation:
        bounds = bounds or Bounds()
        config = self.config
        cx, cy = bounds.center

        simulation = ForceSimulation([node.id for node in graph.iter_nodes()], config)
        simulation.force("link", LinkForce(
            [(edge.source, edge.target) for edge in graph.iter_edges()],
            distance=config.link_distance,
        ))
        simulation.force("charge", ManyBodyForce(
            strength=config.charge_strength,
            distance_min=config.charge_distance_min,
        ))
        simulation.force("collide", CollideForce(
            radius=config.radius,
            strength=config.collide_strength,
        ))
        simulation.force("center", CenterForce(cx, cy))

        logger.debug(
            "Starting layout of %d nodes in %sx%s",
            graph.node_count, bounds.width, bounds.height,
        )
        return simulation
