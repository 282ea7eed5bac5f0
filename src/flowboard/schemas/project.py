"""Project, node, section and edge models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

ROOT_PARENT = ""


class Section(BaseModel):
    """An ordered text block owned by a node."""

    id: str
    title: str
    content: str


class Position(BaseModel):
    """Canvas coordinates of a node."""

    x: float
    y: float


class Node(BaseModel):
    """A page of the board.

    Attributes:
        id: Identifier, unique within the project.
        title: Display title.
        sections: Ordered sections; display order and storage order match.
        position: Canvas position computed by the layout engine.
        parent: Id of the owning node, or an empty string for the root.
    """

    id: str
    title: str
    sections: list[Section] = Field(default_factory=list)
    position: Position
    parent: str = ROOT_PARENT

    @property
    def is_root(self) -> bool:
        return self.parent == ROOT_PARENT


class Edge(BaseModel):
    """A source -> target link rendered between two nodes."""

    id: str
    source: str
    target: str


class Project(BaseModel):
    """The unit of persistence and synchronization.

    The root is stored inside ``nodes`` as the node whose parent is empty.
    On the wire the project id travels as ``_id``.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    title: str
    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)

    @property
    def root_id(self) -> str | None:
        for node in self.nodes:
            if node.is_root:
                return node.id
        return None

    def find_node(self, node_id: str) -> Node | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def children_of(self, parent_id: str) -> list[Node]:
        return [node for node in self.nodes if node.parent == parent_id]

    def persisted_payload(self) -> dict[str, Any]:
        """Return the ``{title, nodes, edges}`` body the project store accepts."""
        return self.model_dump(mode="json", include={"title", "nodes", "edges"})


def new_project(project_id: str = "local", title: str = "Untitled Project") -> Project:
    """Seed a fresh project holding only the root node."""
    root = Node(id="root", title="Home", position=Position(x=400, y=100))
    return Project(id=project_id, title=title, nodes=[root], edges=[])
