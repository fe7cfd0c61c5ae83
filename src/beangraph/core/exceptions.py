"""
Exception hierarchy for beangraph.

Everything raised or returned by the library derives from BeanGraphError,
so the CLI can report any failure at a single boundary.
"""


class BeanGraphError(Exception):
    """Base class for all beangraph errors."""


class ReportParseError(BeanGraphError):
    """The report text is not valid JSON."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Report is not valid JSON: {detail}")


class ReportReadError(BeanGraphError):
    """The report file could not be opened or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read report {path}: {reason}")


class ReportFormatError(BeanGraphError):
    """The report parsed but has no usable contexts map."""

    def __init__(self, detail: str = "missing or empty 'contexts'"):
        self.detail = detail
        super().__init__(f"Invalid format: {detail}")


class NodeNotFoundError(BeanGraphError):
    """A bean name given on the command line is not in the graph."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Bean not found: {node_id}")


class ConfigError(BeanGraphError):
    """The configuration file could not be read or has invalid values."""
