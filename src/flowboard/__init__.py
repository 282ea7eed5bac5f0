"""flowboard: edit a tree of pages, lay it out and keep it in sync."""

from flowboard.board import Board, BoardStatus
from flowboard.exceptions import (
    FetchError,
    FlowboardError,
    ProjectNotFoundError,
    ProjectNotLoadedError,
    RemoteStoreError,
    SaveError,
)
from flowboard.graph import project_graph
from flowboard.layout import DEFAULT_LAYOUT, LayoutConfig
from flowboard.schemas import Edge, Graph, Node, Position, Project, Section, new_project
from flowboard.signature import project_signature
from flowboard.sync import SyncManager
from flowboard.tree_store import ConnectMode

__all__ = [
    "DEFAULT_LAYOUT",
    "Board",
    "BoardStatus",
    "ConnectMode",
    "Edge",
    "FetchError",
    "FlowboardError",
    "Graph",
    "LayoutConfig",
    "Node",
    "Position",
    "Project",
    "ProjectNotFoundError",
    "ProjectNotLoadedError",
    "RemoteStoreError",
    "SaveError",
    "Section",
    "SyncManager",
    "new_project",
    "project_graph",
    "project_signature",
]
