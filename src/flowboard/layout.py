"""Formula-based placement of a node's children.

Children fan out symmetrically below their parent. Parents with more sections
render taller, so both the sibling spacing and the drop to the child row grow
with the parent's section count.
"""

from __future__ import annotations

from dataclasses import dataclass

from flowboard.schemas import Node, Position


@dataclass(frozen=True)
class LayoutConfig:
    """Spacing constants for the layout formula.

    Attributes:
        base_spacing: Horizontal distance between sibling centers.
        section_spacing_increment: Extra horizontal spacing per parent section.
        base_node_height: Height of a node without sections.
        section_height: Height added per parent section.
        min_buffer: Smallest gap between a parent and its child row.
        buffer_per_section: Gap growth per parent section once above min_buffer.
    """

    base_spacing: float = 450
    section_spacing_increment: float = 50
    base_node_height: float = 250
    section_height: float = 120
    min_buffer: float = 100
    buffer_per_section: float = 30


DEFAULT_LAYOUT = LayoutConfig()


def horizontal_spacing(section_count: int, config: LayoutConfig = DEFAULT_LAYOUT) -> float:
    """Distance between the centers of neighbouring siblings."""
    return config.base_spacing + section_count * config.section_spacing_increment


def vertical_offset(section_count: int, config: LayoutConfig = DEFAULT_LAYOUT) -> float:
    """Distance from a parent to its row of children."""
    buffer = max(config.min_buffer, section_count * config.buffer_per_section)
    return config.base_node_height + section_count * config.section_height + buffer


def child_position(
    parent: Node,
    child_count: int,
    child_index: int,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> Position:
    """Compute where the ``child_index``-th of ``child_count`` siblings goes.

    Args:
        parent: The parent node; its position and section count drive the fan.
        child_count: Number of siblings in the row.
        child_index: Zero-based slot of the child in the row.
        config: Spacing constants.

    Returns:
        The child's position. The row is centered under ``parent``.
    """
    section_count = len(parent.sections)
    spacing = horizontal_spacing(section_count, config)
    total_width = (child_count - 1) * spacing
    start_x = parent.position.x - total_width / 2
    return Position(
        x=start_x + child_index * spacing,
        y=parent.position.y + vertical_offset(section_count, config),
    )


def relayout_children(
    nodes: list[Node],
    parent_id: str,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> list[Node]:
    """Return ``nodes`` with the direct children of ``parent_id`` repositioned.

    Existing child positions are discarded. Grandchildren keep their positions
    until their own parent is laid out. An unknown parent leaves ``nodes`` as is.
    """
    parent = next((node for node in nodes if node.id == parent_id), None)
    if parent is None:
        return nodes

    child_count = sum(1 for node in nodes if node.parent == parent_id)
    result: list[Node] = []
    index = 0
    for node in nodes:
        if node.parent == parent_id:
            position = child_position(parent, child_count, index, config)
            node = node.model_copy(update={"position": position})
            index += 1
        result.append(node)
    return result
