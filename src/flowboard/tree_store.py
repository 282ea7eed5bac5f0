"""Mutation operations over a Project.

Every operation takes the current project and returns the next one. When an
operation does not apply (unknown id, empty input, out-of-range index) the
input object itself is returned, so ``result is project`` means "no change".
Applied operations work on a deep copy; the input is never modified.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Callable
from uuid import uuid4

from flowboard.layout import DEFAULT_LAYOUT, LayoutConfig, child_position, relayout_children
from flowboard.schemas import ROOT_PARENT, Edge, Node, Project, Section

IdFactory = Callable[[], str]


class ConnectMode(str, Enum):
    """How a manually drawn edge is interpreted.

    COSMETIC adds an extra edge on top of the tree and leaves parents alone.
    REPARENT moves the target node under the source.
    """

    COSMETIC = "cosmetic"
    REPARENT = "reparent"


def new_id() -> str:
    """Generate a fresh node, section or edge id."""
    return uuid4().hex


def _node_index(project: Project, node_id: str) -> int | None:
    for index, node in enumerate(project.nodes):
        if node.id == node_id:
            return index
    return None


def _subtree_ids(nodes: list[Node], node_id: str) -> set[str]:
    children: dict[str, list[str]] = {}
    for node in nodes:
        children.setdefault(node.parent, []).append(node.id)

    collected: set[str] = set()
    stack = [node_id]
    while stack:
        current = stack.pop()
        if current in collected:
            continue
        collected.add(current)
        stack.extend(children.get(current, []))
    return collected


def _with_relayout(project: Project, parent_id: str, config: LayoutConfig) -> Project:
    project.nodes = relayout_children(project.nodes, parent_id, config)
    return project


def relayout(project: Project, parent_id: str, config: LayoutConfig = DEFAULT_LAYOUT) -> Project:
    """Recompute the positions of ``parent_id``'s direct children."""
    if _node_index(project, parent_id) is None:
        return project
    return _with_relayout(project.model_copy(deep=True), parent_id, config)


def rename_project(project: Project, title: str) -> Project:
    updated = project.model_copy(deep=True)
    updated.title = title
    return updated


def add_node(
    project: Project,
    parent_id: str,
    *,
    id_factory: IdFactory = new_id,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> Project:
    """Append a new child page under ``parent_id`` and re-fan its siblings."""
    parent_index = _node_index(project, parent_id)
    if parent_index is None:
        return project

    updated = project.model_copy(deep=True)
    parent = updated.nodes[parent_index]
    sibling_count = len(updated.children_of(parent_id))
    node = Node(
        id=id_factory(),
        title=f"Page {len(updated.nodes) + 1}",
        sections=[],
        position=child_position(parent, sibling_count + 1, sibling_count, config),
        parent=parent_id,
    )
    updated.nodes.append(node)
    updated.edges.append(Edge(id=id_factory(), source=parent_id, target=node.id))
    return _with_relayout(updated, parent_id, config)


def remove_node(
    project: Project,
    node_id: str,
    *,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> Project:
    """Remove ``node_id`` together with all of its descendants.

    The root is never removed.
    """
    node = project.find_node(node_id)
    if node is None or node.is_root:
        return project

    doomed = _subtree_ids(project.nodes, node_id)
    updated = project.model_copy(deep=True)
    updated.nodes = [n for n in updated.nodes if n.id not in doomed]
    updated.edges = [
        e for e in updated.edges if e.source not in doomed and e.target not in doomed
    ]
    return _with_relayout(updated, node.parent, config)


def rename_node(project: Project, node_id: str, title: str) -> Project:
    index = _node_index(project, node_id)
    if index is None:
        return project
    updated = project.model_copy(deep=True)
    updated.nodes[index].title = title
    return updated


def add_section(
    project: Project,
    node_id: str,
    title: str,
    content: str,
    *,
    id_factory: IdFactory = new_id,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> Project:
    """Append a section; blank titles or contents are rejected."""
    title = title.strip()
    content = content.strip()
    index = _node_index(project, node_id)
    if index is None or not title or not content:
        return project

    updated = project.model_copy(deep=True)
    updated.nodes[index].sections.append(
        Section(id=id_factory(), title=title, content=content)
    )
    return _with_relayout(updated, node_id, config)


def remove_section(
    project: Project,
    node_id: str,
    section_id: str,
    *,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> Project:
    node = project.find_node(node_id)
    if node is None or not any(s.id == section_id for s in node.sections):
        return project

    updated = project.model_copy(deep=True)
    target = updated.nodes[_node_index(updated, node_id)]
    target.sections = [s for s in target.sections if s.id != section_id]
    return _with_relayout(updated, node_id, config)


def update_section(
    project: Project,
    node_id: str,
    section_id: str,
    title: str,
    content: str,
) -> Project:
    """Replace a section's text. Section count is unchanged, so no relayout."""
    node = project.find_node(node_id)
    if node is None:
        return project
    position = next((i for i, s in enumerate(node.sections) if s.id == section_id), None)
    if position is None:
        return project

    updated = project.model_copy(deep=True)
    section = updated.nodes[_node_index(updated, node_id)].sections[position]
    section.title = title
    section.content = content
    return updated


def reorder_sections(
    project: Project,
    node_id: str,
    old_index: int,
    new_index: int,
    *,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> Project:
    """Move the section at ``old_index`` so it ends up at ``new_index``."""
    node = project.find_node(node_id)
    if node is None:
        return project
    count = len(node.sections)
    if not (0 <= old_index < count and 0 <= new_index < count):
        return project

    updated = project.model_copy(deep=True)
    target = updated.nodes[_node_index(updated, node_id)]
    sections = list(target.sections)
    moved = sections.pop(old_index)
    sections.insert(new_index, moved)
    target.sections = sections
    return _with_relayout(updated, node_id, config)


def connect(
    project: Project,
    source_id: str,
    target_id: str,
    *,
    mode: ConnectMode | str = ConnectMode.COSMETIC,
    id_factory: IdFactory = new_id,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> Project:
    """Add a manually drawn edge from ``source_id`` to ``target_id``.

    In COSMETIC mode the edge is layered over the tree. In REPARENT mode the
    target moves under the source, replacing its previous parent link; moves
    that would create a cycle or detach the root are ignored.
    """
    mode = ConnectMode(mode)
    if source_id == target_id:
        return project
    source = project.find_node(source_id)
    target = project.find_node(target_id)
    if source is None or target is None:
        return project

    if mode is ConnectMode.COSMETIC:
        if any(e.source == source_id and e.target == target_id for e in project.edges):
            return project
        updated = project.model_copy(deep=True)
        updated.edges.append(Edge(id=id_factory(), source=source_id, target=target_id))
        return updated

    if target.is_root or target.parent == source_id:
        return project
    if source_id in _subtree_ids(project.nodes, target_id):
        return project

    old_parent = target.parent
    updated = project.model_copy(deep=True)
    updated.nodes[_node_index(updated, target_id)].parent = source_id
    updated.edges = [
        e for e in updated.edges if not (e.source == old_parent and e.target == target_id)
    ]
    updated.edges.append(Edge(id=id_factory(), source=source_id, target=target_id))
    updated = _with_relayout(updated, old_parent, config)
    return _with_relayout(updated, source_id, config)


def tree_violations(project: Project, *, allow_extra_edges: bool = False) -> list[str]:
    """Describe every way ``project`` breaks the tree invariants.

    Args:
        project: The project to check.
        allow_extra_edges: Accept edges that do not mirror a parent link, as
            produced by cosmetic connections.

    Returns:
        Human readable problems; an empty list means the project is a valid tree.
    """
    problems: list[str] = []
    node_ids = [node.id for node in project.nodes]
    known = set(node_ids)

    for node_id, count in Counter(node_ids).items():
        if count > 1:
            problems.append(f"duplicate node id {node_id!r}")
    for edge_id, count in Counter(e.id for e in project.edges).items():
        if count > 1:
            problems.append(f"duplicate edge id {edge_id!r}")
    for node in project.nodes:
        for section_id, count in Counter(s.id for s in node.sections).items():
            if count > 1:
                problems.append(f"duplicate section id {section_id!r} in node {node.id!r}")

    roots = [node.id for node in project.nodes if node.parent == ROOT_PARENT]
    if not roots:
        problems.append("no root node")
    elif len(roots) > 1:
        problems.append(f"multiple root nodes: {', '.join(roots)}")

    for node in project.nodes:
        if node.parent != ROOT_PARENT and node.parent not in known:
            problems.append(f"node {node.id!r} has unknown parent {node.parent!r}")

    if len(roots) == 1:
        reachable = _subtree_ids(project.nodes, roots[0])
        for node_id in node_ids:
            if node_id not in reachable:
                problems.append(f"node {node_id!r} is not reachable from the root")

    expected = {(node.parent, node.id) for node in project.nodes if node.parent != ROOT_PARENT}
    actual = {(e.source, e.target) for e in project.edges}
    for source, target in sorted(expected - actual):
        problems.append(f"missing edge {source!r} -> {target!r}")
    for edge in project.edges:
        if edge.source not in known or edge.target not in known:
            problems.append(f"edge {edge.id!r} references a missing node")
        elif not allow_extra_edges and (edge.source, edge.target) not in expected:
            problems.append(f"edge {edge.id!r} does not match a parent link")
    return problems
