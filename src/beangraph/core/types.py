"""
Core type definitions for beangraph.

Two families of models live here:
- The raw report shape, as produced by the Spring Boot Actuator /beans endpoint.
- The normalized graph shape (Node, Edge) consumed by highlighting, layout
  and rendering.
"""

from enum import IntEnum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

APPLICATION_CONTEXT = "application"


class NodeGroup(IntEnum):
    """Color groups assigned to nodes by name prefix."""
    PLACEHOLDER = 0
    OTHER = 1
    SPRING = 2
    ORG = 3
    COM = 4


class BeanRecord(BaseModel):
    """
    A single bean entry of a context.

    Actuator also reports aliases, scope and type; those are accepted
    and dropped.
    """
    resource: Optional[str] = None
    dependencies: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class ContextReport(BaseModel):
    """A named grouping of beans."""
    beans: Optional[Dict[str, BeanRecord]] = None
    parent_id: Optional[str] = Field(default=None, alias="parentId")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RawReport(BaseModel):
    """
    Parsed /beans report.

    Only the context named "application" is authoritative for whether a
    bean exists.
    """
    contexts: Dict[str, ContextReport]

    model_config = ConfigDict(extra="ignore")

    @property
    def application_beans(self) -> Dict[str, BeanRecord]:
        context = self.contexts.get(APPLICATION_CONTEXT)
        if context is None or context.beans is None:
            return {}
        return context.beans


class Node(BaseModel):
    """
    A bean, or a placeholder for a dependency that was never materialized.
    """
    id: str
    sequence_id: int
    group: NodeGroup
    resource: Optional[str] = None
    placeholder: bool = False

    model_config = ConfigDict(frozen=True)

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if isinstance(other, Node):
            return self.id == other.id
        return False


class Edge(BaseModel):
    """
    Directed dependency from a bean to one of its declared dependencies.

    weight is the number of dependencies declared by the source bean, so it
    is the same for every edge leaving a given source.
    """
    source: str
    target: str
    weight: int
    render_key: str = ""

    model_config = ConfigDict(frozen=True)
