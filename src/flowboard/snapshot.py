"""Local JSON snapshot of the board, kept between sessions."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from pydantic import ValidationError

from flowboard.config import FLOWBOARD_SNAPSHOT_KEY, FLOWBOARD_SNAPSHOT_PATH
from flowboard.schemas import Project

logger = logging.getLogger(__name__)


class SnapshotStore:
    """Read and write a versioned snapshot file.

    The file holds ``{"key": ..., "state": ...}``. A snapshot written under a
    different key is treated as absent, which is how incompatible snapshots
    from older versions get dropped.
    """

    def __init__(self, path: Path | None = None, key: str | None = None) -> None:
        self.path = path or FLOWBOARD_SNAPSHOT_PATH
        self.key = key or FLOWBOARD_SNAPSHOT_KEY

    def load(self) -> Project | None:
        """Return the stored project, or None when there is no usable snapshot."""
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Unreadable snapshot %s: %s", self.path, exc)
            return None
        if not isinstance(data, dict) or data.get("key") != self.key:
            logger.info("Ignoring snapshot %s written under another key", self.path)
            return None
        try:
            return Project.model_validate(data.get("state"))
        except ValidationError as exc:
            logger.warning("Malformed snapshot %s: %s", self.path, exc)
            return None

    def save(self, project: Project) -> None:
        """Overwrite the snapshot with ``project``."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {"key": self.key, "state": project.model_dump(mode="json", by_alias=True)}
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        tmp_path.replace(self.path)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)

    async def load_async(self) -> Project | None:
        return await asyncio.to_thread(self.load)
