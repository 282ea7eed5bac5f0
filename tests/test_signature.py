"""Tests for project signatures."""

from __future__ import annotations

from flowboard.schemas import Edge, Project
from flowboard.signature import EMPTY_SIGNATURE, project_signature
from flowboard.tree_store import rename_node, reorder_sections


class TestProjectSignature:
    """Tests for project_signature."""

    def test_equal_content_gives_equal_signature(self, sample_project: Project) -> None:
        copy = Project.model_validate(sample_project.model_dump(by_alias=True))
        assert project_signature(copy) == project_signature(sample_project)

    def test_is_never_empty(self, sample_project: Project) -> None:
        assert project_signature(sample_project) != EMPTY_SIGNATURE

    def test_ignores_project_id(self, sample_project: Project) -> None:
        other = sample_project.model_copy(update={"id": "other"})
        assert project_signature(other) == project_signature(sample_project)

    def test_integer_and_float_positions_match(self, sample_project: Project) -> None:
        payload = sample_project.model_dump(by_alias=True)
        payload["nodes"][0]["position"] = {"x": 500, "y": 100}
        assert project_signature(Project.model_validate(payload)) == project_signature(
            sample_project
        )

    def test_edge_order_does_not_matter(self, sample_project: Project) -> None:
        shuffled = sample_project.model_copy(update={"edges": list(reversed(sample_project.edges))})
        assert project_signature(shuffled) == project_signature(sample_project)

    def test_title_change_is_detected(self, sample_project: Project) -> None:
        renamed = sample_project.model_copy(update={"title": "Other"})
        assert project_signature(renamed) != project_signature(sample_project)

    def test_node_content_change_is_detected(self, sample_project: Project) -> None:
        renamed = rename_node(sample_project, "a", "Company")
        assert project_signature(renamed) != project_signature(sample_project)

    def test_section_order_change_is_detected(self, sample_project: Project) -> None:
        reordered = reorder_sections(sample_project, "root", 0, 1)
        assert project_signature(reordered) != project_signature(sample_project)

    def test_position_change_is_detected(self, sample_project: Project) -> None:
        moved = sample_project.model_copy(deep=True)
        moved.nodes[1].position.x = 1
        assert project_signature(moved) != project_signature(sample_project)

    def test_edge_change_is_detected(self, sample_project: Project) -> None:
        extra = sample_project.model_copy(
            update={"edges": [*sample_project.edges, Edge(id="e9", source="d", target="c")]}
        )
        assert project_signature(extra) != project_signature(sample_project)
