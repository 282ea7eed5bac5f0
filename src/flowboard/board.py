"""Board session: owns the current project and wires mutations to sync.

A board loads its project once, then applies tree operations, writes the
local snapshot and asks the sync manager to save after every mutation.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable

from flowboard import tree_store
from flowboard.api import fetch_project, save_project
from flowboard.config import FLOWBOARD_CONNECT_MODE
from flowboard.exceptions import FetchError, ProjectNotLoadedError
from flowboard.graph import project_graph
from flowboard.layout import DEFAULT_LAYOUT, LayoutConfig
from flowboard.schemas import Graph, Project, new_project
from flowboard.snapshot import SnapshotStore
from flowboard.sync import ErrorHandler, SaveFn, SyncManager
from flowboard.tree_store import ConnectMode

logger = logging.getLogger(__name__)

FetchFn = Callable[[str], Awaitable[Project]]
ConfirmFn = Callable[[str], bool]

REMOVE_NODE_PROMPT = "Remove this node and all its children?"


class BoardStatus(str, Enum):
    """Lifecycle of a board session."""

    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


def _always_confirm(message: str) -> bool:
    return True


class Board:
    """Editable view over one project.

    Args:
        project_id: Id of the project to open.
        fetch: Loader for the project; None opens the board from the local
            snapshot (or a fresh project) instead of the remote store.
        save: Remote writer; None disables remote sync.
        snapshot: Local snapshot store; None disables the snapshot.
        confirm: Asked before destructive operations; declining cancels them.
        connect_mode: How manually drawn edges are interpreted.
        layout: Layout constants.
        on_save_error: Receives exceptions from failed saves.
    """

    def __init__(
        self,
        project_id: str,
        *,
        fetch: FetchFn | None = fetch_project,
        save: SaveFn | None = save_project,
        snapshot: SnapshotStore | None = None,
        confirm: ConfirmFn = _always_confirm,
        connect_mode: ConnectMode | str = FLOWBOARD_CONNECT_MODE,
        layout: LayoutConfig = DEFAULT_LAYOUT,
        on_save_error: ErrorHandler | None = None,
    ) -> None:
        self.project_id = project_id
        self.status = BoardStatus.LOADING
        self.error: str | None = None
        self.connect_mode = ConnectMode(connect_mode)
        self.layout = layout
        self._project: Project | None = None
        self._fetch = fetch
        self._snapshot = snapshot
        self._confirm = confirm
        self.sync = SyncManager(save, on_error=on_save_error) if save is not None else None

    @classmethod
    def local(cls, project_id: str = "local", *, snapshot: SnapshotStore | None = None, **kwargs) -> Board:
        """Build a board that only persists to the local snapshot."""
        return cls(project_id, fetch=None, save=None, snapshot=snapshot or SnapshotStore(), **kwargs)

    @property
    def project(self) -> Project:
        if self.status is not BoardStatus.READY or self._project is None:
            raise ProjectNotLoadedError(f"Project {self.project_id} is not loaded ({self.status.value})")
        return self._project

    async def load(self) -> Project | None:
        """Load the project once.

        A failed fetch leaves the board in the FAILED state with ``error`` set;
        there is no retry.

        Returns:
            The loaded project, or None when loading failed.
        """
        if self._fetch is None:
            project = await self._load_local()
        else:
            try:
                project = await self._fetch(self.project_id)
            except FetchError as exc:
                self.status = BoardStatus.FAILED
                self.error = str(exc)
                logger.error(
                    "Failed to load project",
                    extra={"project_id": self.project_id, "error": str(exc)},
                )
                return None

        problems = tree_store.tree_violations(
            project, allow_extra_edges=self.connect_mode is ConnectMode.COSMETIC
        )
        for problem in problems:
            logger.warning("Loaded project is not a valid tree: %s", problem)

        if self.sync is not None:
            self.sync.mark_synced(project)
        self._project = project
        self.status = BoardStatus.READY
        return project

    async def _load_local(self) -> Project:
        if self._snapshot is not None:
            stored = await self._snapshot.load_async()
            if stored is not None and stored.id == self.project_id:
                return stored
        return new_project(self.project_id)

    def graph(self) -> Graph:
        """Render-ready nodes and edges for the current project."""
        return project_graph(self.project)

    async def wait_for_save(self) -> None:
        if self.sync is not None:
            await self.sync.wait()

    def _commit(self, updated: Project) -> asyncio.Task[None] | None:
        current = self.project
        if updated is not current:
            self._project = updated
            if self._snapshot is not None:
                self._snapshot.save(updated)
        if self.sync is None:
            return None
        return self.sync.maybe_save(self._project)

    def rename_project(self, title: str) -> asyncio.Task[None] | None:
        return self._commit(tree_store.rename_project(self.project, title))

    def add_node(self, parent_id: str) -> asyncio.Task[None] | None:
        return self._commit(tree_store.add_node(self.project, parent_id, config=self.layout))

    def remove_node(self, node_id: str) -> asyncio.Task[None] | None:
        """Remove a node and its subtree after the user confirms."""
        project = self.project
        node = project.find_node(node_id)
        if node is None or node.is_root:
            return None
        if not self._confirm(REMOVE_NODE_PROMPT):
            logger.debug("Node removal declined", extra={"node_id": node_id})
            return None
        return self._commit(tree_store.remove_node(project, node_id, config=self.layout))

    def rename_node(self, node_id: str, title: str) -> asyncio.Task[None] | None:
        return self._commit(tree_store.rename_node(self.project, node_id, title))

    def add_section(self, node_id: str, title: str, content: str) -> asyncio.Task[None] | None:
        return self._commit(
            tree_store.add_section(self.project, node_id, title, content, config=self.layout)
        )

    def remove_section(self, node_id: str, section_id: str) -> asyncio.Task[None] | None:
        return self._commit(
            tree_store.remove_section(self.project, node_id, section_id, config=self.layout)
        )

    def update_section(
        self, node_id: str, section_id: str, title: str, content: str
    ) -> asyncio.Task[None] | None:
        return self._commit(
            tree_store.update_section(self.project, node_id, section_id, title, content)
        )

    def reorder_sections(
        self, node_id: str, old_index: int, new_index: int
    ) -> asyncio.Task[None] | None:
        return self._commit(
            tree_store.reorder_sections(
                self.project, node_id, old_index, new_index, config=self.layout
            )
        )

    def connect(self, source_id: str, target_id: str) -> asyncio.Task[None] | None:
        return self._commit(
            tree_store.connect(
                self.project, source_id, target_id, mode=self.connect_mode, config=self.layout
            )
        )
