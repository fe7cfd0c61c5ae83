"""
beangraph Core Module.

Report parsing and validation, the canonical node/edge types and the
graph builder.
"""

from .builder import GraphBuilder, build_graph, classify
from .exceptions import (
    BeanGraphError,
    ConfigError,
    NodeNotFoundError,
    ReportFormatError,
    ReportParseError,
    ReportReadError,
)
from .graph import BeanGraph
from .report import load_report, parse_and_validate
from .result import Err, Ok, Result
from .types import BeanRecord, ContextReport, Edge, Node, NodeGroup, RawReport

__all__ = [
    "BeanGraph",
    "BeanGraphError",
    "BeanRecord",
    "ConfigError",
    "ContextReport",
    "Edge",
    "Err",
    "GraphBuilder",
    "Node",
    "NodeGroup",
    "NodeNotFoundError",
    "Ok",
    "RawReport",
    "ReportFormatError",
    "ReportParseError",
    "ReportReadError",
    "Result",
    "build_graph",
    "classify",
    "load_report",
    "parse_and_validate",
]
