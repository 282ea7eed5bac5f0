"""Shared schemas for flowboard."""

from flowboard.schemas.graph import EdgeStyle, Graph, RenderEdge, RenderNode, RenderNodeData
from flowboard.schemas.project import ROOT_PARENT, Edge, Node, Position, Project, Section, new_project

__all__ = [
    "ROOT_PARENT",
    "Edge",
    "EdgeStyle",
    "Graph",
    "Node",
    "Position",
    "Project",
    "RenderEdge",
    "RenderNode",
    "RenderNodeData",
    "Section",
    "new_project",
]
