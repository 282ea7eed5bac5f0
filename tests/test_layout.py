"""Tests for the layout engine."""

from __future__ import annotations

from flowboard.layout import (
    LayoutConfig,
    child_position,
    horizontal_spacing,
    relayout_children,
    vertical_offset,
)
from flowboard.schemas import Node, Position, Section


def _parent(x: float = 500, y: float = 100, sections: int = 0) -> Node:
    return Node(
        id="p",
        title="Parent",
        position=Position(x=x, y=y),
        sections=[Section(id=f"s{i}", title="t", content="c") for i in range(sections)],
    )


def _child(node_id: str, parent: str = "p") -> Node:
    return Node(id=node_id, title=node_id, position=Position(x=-1, y=-1), parent=parent)


class TestSpacing:
    """Tests for the spacing formulas."""

    def test_spacing_without_sections(self) -> None:
        assert horizontal_spacing(0) == 450
        assert vertical_offset(0) == 250 + 100

    def test_spacing_grows_with_sections(self) -> None:
        assert horizontal_spacing(2) == 550
        # 250 + 2 * 120 + max(100, 60)
        assert vertical_offset(2) == 590

    def test_buffer_switches_to_per_section_growth(self) -> None:
        # 250 + 5 * 120 + max(100, 150)
        assert vertical_offset(5) == 1000

    def test_custom_config(self) -> None:
        config = LayoutConfig(base_spacing=100, section_spacing_increment=10)
        assert horizontal_spacing(3, config) == 130


class TestChildPosition:
    """Tests for child_position."""

    def test_single_child_sits_under_parent(self) -> None:
        position = child_position(_parent(), 1, 0)
        assert position == Position(x=500, y=450)

    def test_three_children_fan_symmetrically(self) -> None:
        parent = _parent()
        xs = [child_position(parent, 3, i).x for i in range(3)]
        assert xs == [50, 500, 950]

    def test_parent_sections_widen_fan(self) -> None:
        parent = _parent(sections=2)
        positions = [child_position(parent, 2, i) for i in range(2)]
        assert [p.x for p in positions] == [225, 775]
        assert all(p.y == 690 for p in positions)


class TestRelayoutChildren:
    """Tests for relayout_children."""

    def test_places_children_in_node_order(self) -> None:
        nodes = [_parent(), _child("a"), _child("b"), _child("c")]
        result = relayout_children(nodes, "p")

        assert [(n.position.x, n.position.y) for n in result[1:]] == [
            (50, 450),
            (500, 450),
            (950, 450),
        ]

    def test_is_idempotent(self) -> None:
        nodes = [_parent(), _child("a"), _child("b")]
        once = relayout_children(nodes, "p")
        twice = relayout_children(once, "p")
        assert once == twice

    def test_does_not_cascade_to_grandchildren(self) -> None:
        grandchild = _child("g", parent="a")
        nodes = [_parent(), _child("a"), grandchild]
        result = relayout_children(nodes, "p")

        assert result[2].position == Position(x=-1, y=-1)

    def test_unknown_parent_returns_input(self) -> None:
        nodes = [_parent(), _child("a")]
        assert relayout_children(nodes, "missing") is nodes

    def test_does_not_modify_input(self) -> None:
        child = _child("a")
        relayout_children([_parent(), child], "p")
        assert child.position == Position(x=-1, y=-1)
