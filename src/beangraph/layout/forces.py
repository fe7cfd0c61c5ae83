"""
Forces of the layout simulation.

Each force is bound to the simulation's node list once, then applied on
every tick with the current alpha. Forces adjust velocities, except the
centering force which translates positions directly.
"""

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple


@dataclass
class SimNode:
    """Mutable per-node state of a running simulation."""
    id: str
    index: int
    x: float = math.nan
    y: float = math.nan
    vx: float = 0.0
    vy: float = 0.0
    fx: Optional[float] = None
    fy: Optional[float] = None


def jiggle(rng: random.Random) -> float:
    """A tiny random offset used to separate coincident points."""
    return (rng.random() - 0.5) * 1e-6


class Force(ABC):
    """A force contributing to each simulation step."""

    def initialize(self, nodes: Sequence[SimNode], rng: random.Random) -> None:
        self.nodes = nodes
        self.rng = rng

    @abstractmethod
    def apply(self, alpha: float) -> None:
        ...


class LinkForce(Force):
    """
    Pulls linked nodes toward a target separation.

    Strength defaults to 1 / min(degree(source), degree(target)) so that
    hubs are not dragged around by their many neighbours. The correction
    is split between the endpoints in proportion to their degrees.
    """

    def __init__(self, links: Sequence[Tuple[str, str]], distance: float, iterations: int = 1):
        self.links = list(links)
        self.distance = distance
        self.iterations = iterations
        self._resolved: List[Tuple[SimNode, SimNode]] = []
        self._strengths: List[float] = []
        self._bias: List[float] = []

    def initialize(self, nodes: Sequence[SimNode], rng: random.Random) -> None:
        super().initialize(nodes, rng)
        by_id: Dict[str, SimNode] = {node.id: node for node in nodes}
        count: Dict[int, int] = {}

        self._resolved = []
        for source_id, target_id in self.links:
            source = by_id.get(source_id)
            target = by_id.get(target_id)
            if source is None or target is None:
                raise ValueError(f"Link references missing node: {source_id} -> {target_id}")
            self._resolved.append((source, target))
            count[source.index] = count.get(source.index, 0) + 1
            count[target.index] = count.get(target.index, 0) + 1

        self._strengths = [
            1 / min(count[s.index], count[t.index]) for s, t in self._resolved
        ]
        self._bias = [
            count[s.index] / (count[s.index] + count[t.index]) for s, t in self._resolved
        ]

    def apply(self, alpha: float) -> None:
        for _ in range(self.iterations):
            for i, (source, target) in enumerate(self._resolved):
                x = target.x + target.vx - source.x - source.vx or jiggle(self.rng)
                y = target.y + target.vy - source.y - source.vy or jiggle(self.rng)
                length = math.sqrt(x * x + y * y)
                length = (length - self.distance) / length * alpha * self._strengths[i]
                x *= length
                y *= length
                b = self._bias[i]
                target.vx -= x * b
                target.vy -= y * b
                source.vx += x * (1 - b)
                source.vy += y * (1 - b)


class ManyBodyForce(Force):
    """
    Pairwise charge between all nodes; negative strength repels.

    Computed exactly over every pair. Distances below distance_min are
    softened to avoid runaway forces between near-coincident nodes.
    """

    def __init__(self, strength: float, distance_min: float = 1.0):
        self.strength = strength
        self.distance_min2 = distance_min * distance_min

    def apply(self, alpha: float) -> None:
        nodes = self.nodes
        for node in nodes:
            for other in nodes:
                if other is node:
                    continue
                x = other.x - node.x
                y = other.y - node.y
                l = x * x + y * y
                if x == 0:
                    x = jiggle(self.rng)
                    l += x * x
                if y == 0:
                    y = jiggle(self.rng)
                    l += y * y
                if l < self.distance_min2:
                    l = math.sqrt(self.distance_min2 * l)
                w = self.strength * alpha / l
                node.vx += x * w
                node.vy += y * w


class CollideForce(Force):
    """
    Keeps node glyphs from overlapping.

    Every node has the given collision radius; two nodes are pushed apart
    when their predicted centers are closer than the sum of their radii.
    """

    def __init__(self, radius: float, strength: float = 1.0, iterations: int = 1):
        self.radius = radius
        self.strength = strength
        self.iterations = iterations

    def apply(self, alpha: float) -> None:
        nodes = self.nodes
        ri = rj = self.radius
        r = ri + rj
        # Equal radii split the correction evenly
        share = (rj * rj) / (ri * ri + rj * rj)

        for _ in range(self.iterations):
            for i, node in enumerate(nodes):
                xi = node.x + node.vx
                yi = node.y + node.vy
                for other in nodes[i + 1:]:
                    x = xi - other.x - other.vx
                    y = yi - other.y - other.vy
                    l = x * x + y * y
                    if l >= r * r:
                        continue
                    if x == 0:
                        x = jiggle(self.rng)
                        l += x * x
                    if y == 0:
                        y = jiggle(self.rng)
                        l += y * y
                    l = math.sqrt(l)
                    l = (r - l) / l * self.strength
                    x *= l
                    y *= l
                    node.vx += x * share
                    node.vy += y * share
                    other.vx -= x * (1 - share)
                    other.vy -= y * (1 - share)


class CenterForce(Force):
    """Translates all nodes so their mean position sits at (x, y)."""

    def __init__(self, x: float, y: float, strength: float = 1.0):
        self.x = x
        self.y = y
        self.strength = strength

    def apply(self, alpha: float) -> None:
        nodes = self.nodes
        if not nodes:
            return
        sx = sum(node.x for node in nodes) / len(nodes) - self.x
        sy = sum(node.y for node in nodes) / len(nodes) - self.y
        sx *= self.strength
        sy *= self.strength
        for node in nodes:
            node.x -= sx
            node.y -= sy
