"""Render-ready node and edge models consumed by the graph viewer."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from flowboard.schemas.project import Node, Position

RENDER_NODE_TYPE = "flow"
RENDER_EDGE_TYPE = "smoothstep"


class EdgeStyle(BaseModel):
    """Stroke settings shared by every rendered edge."""

    model_config = ConfigDict(populate_by_name=True)

    stroke: str = "#6b7280"
    stroke_width: int = Field(default=1, alias="strokeWidth")


class RenderNodeData(BaseModel):
    """Payload carried by a render node."""

    node: Node


class RenderNode(BaseModel):
    id: str
    type: str = RENDER_NODE_TYPE
    position: Position
    data: RenderNodeData


class RenderEdge(BaseModel):
    id: str
    source: str
    target: str
    type: str = RENDER_EDGE_TYPE
    style: EdgeStyle = Field(default_factory=EdgeStyle)


class Graph(BaseModel):
    """Node and edge lists in the renderer's shape."""

    nodes: list[RenderNode] = Field(default_factory=list)
    edges: list[RenderEdge] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Dump using the renderer's camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)
