"""
Diagram models consumed by the layout engine.

Only what layout reads or writes is modelled here: node boxes with a
position, a size and a lock flag, and directed edges between node IDs.
`LayoutGraph.from_diagram` adapts a Diagram for the layout algorithms and
`LayoutGraph.apply_positions` writes the results back.

Edge input may use the older `from`/`to` (or `from_node`/`to_node`) keys;
they are accepted and stored as `source`/`target`.
"""

from typing import Any, Optional
import math
import uuid

from pydantic import BaseModel, Field, field_validator, model_validator

# Older payload key -> canonical edge field
_LEGACY_EDGE_KEYS = {
    "from": "source",
    "from_node": "source",
    "to": "target",
    "to_node": "target",
}


def _short_id(prefix: str) -> str:
    return f"{prefix}{uuid.uuid4().hex[:8]}"


class Node(BaseModel):
    """A box in the diagram. (x, y) is the top-left corner."""
    id: str = Field(default_factory=lambda: _short_id("n"))
    label: str = ""
    x: float = 0
    y: float = 0
    width: float = Field(default=100, ge=0)
    height: float = Field(default=50, ge=0)
    locked: bool = False  # Pinned by the user; force layout leaves it in place

    @field_validator("x", "y")
    @classmethod
    def finite_position(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("Node position must be a finite number")
        return value


class Edge(BaseModel):
    """
    A directed edge from `source` to `target` (node IDs).

    Either end may be None, e.g. while the user is still dragging it out.
    Layout skips such edges.
    """
    id: str = Field(default_factory=lambda: _short_id("e"))
    source: Optional[str] = None
    target: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def accept_legacy_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for legacy, canonical in _LEGACY_EDGE_KEYS.items():
            if legacy in data and canonical not in data:
                data[canonical] = data.pop(legacy)
        return data

    @property
    def is_bound(self) -> bool:
        return self.source is not None and self.target is not None


class Diagram(BaseModel):
    """Nodes plus the edges between them."""
    id: str = Field(default_factory=lambda: _short_id("diagram-"))
    name: str = "Untitled Diagram"
    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)

    def get_node(self, node_id: str) -> Optional[Node]:
        return next((node for node in self.nodes if node.id == node_id), None)
