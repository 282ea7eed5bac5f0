"""Tests for the local snapshot store."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from flowboard.schemas import Project
from flowboard.snapshot import SnapshotStore


class TestSnapshotStore:
    """Tests for SnapshotStore."""

    def test_missing_file_loads_none(self, tmp_path: Path) -> None:
        assert SnapshotStore(tmp_path / "board.json", "k1").load() is None

    def test_save_then_load(self, tmp_path: Path, sample_project: Project) -> None:
        store = SnapshotStore(tmp_path / "nested" / "board.json", "k1")

        store.save(sample_project)

        assert store.load() == sample_project

    def test_file_layout(self, tmp_path: Path, sample_project: Project) -> None:
        path = tmp_path / "board.json"
        SnapshotStore(path, "k1").save(sample_project)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["key"] == "k1"
        assert data["state"]["_id"] == "p1"
        assert not path.with_suffix(".json.tmp").exists()

    def test_other_key_is_ignored(self, tmp_path: Path, sample_project: Project) -> None:
        path = tmp_path / "board.json"
        SnapshotStore(path, "canva-board").save(sample_project)

        assert SnapshotStore(path, "flowboard-board-v2").load() is None

    @pytest.mark.parametrize("content", ["not json", "[]", '{"key": "k1", "state": {"title": 1}}'])
    def test_unusable_content_loads_none(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "board.json"
        path.write_text(content, encoding="utf-8")

        assert SnapshotStore(path, "k1").load() is None

    def test_clear(self, tmp_path: Path, sample_project: Project) -> None:
        store = SnapshotStore(tmp_path / "board.json", "k1")
        store.save(sample_project)

        store.clear()
        store.clear()

        assert store.load() is None

    @pytest.mark.asyncio
    async def test_async_load(self, tmp_path: Path, sample_project: Project) -> None:
        store = SnapshotStore(tmp_path / "board.json", "k1")

        store.save(sample_project)

        assert await store.load_async() == sample_project
