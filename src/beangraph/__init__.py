"""
beangraph: Spring bean dependency visualizer.

Builds a dependency graph from a Spring Boot Actuator /beans report,
highlights dependency chains and lays the graph out with a
force-directed simulation.
"""

from .analysis.highlight import HighlightEngine, HighlightResult, highlight
from .config import Bounds, LayoutConfig, load_config
from .core.builder import GraphBuilder, build_graph, classify
from .core.graph import BeanGraph
from .core.report import load_report, parse_and_validate
from .core.types import Edge, Node, NodeGroup, RawReport
from .layout.simulation import ForceSimulation, LayoutEngine, LayoutFrame
from .session import VisualizationSession

__version__ = "0.1.0"

__all__ = [
    "BeanGraph",
    "Bounds",
    "Edge",
    "ForceSimulation",
    "GraphBuilder",
    "HighlightEngine",
    "HighlightResult",
    "LayoutConfig",
    "LayoutEngine",
    "LayoutFrame",
    "Node",
    "NodeGroup",
    "RawReport",
    "VisualizationSession",
    "build_graph",
    "classify",
    "highlight",
    "load_config",
    "load_report",
    "parse_and_validate",
]
