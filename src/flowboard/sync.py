"""Push board changes to the project store, one write at a time."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from flowboard.schemas import Project
from flowboard.signature import EMPTY_SIGNATURE, project_signature

logger = logging.getLogger(__name__)

SaveFn = Callable[[Project], Awaitable[Project]]
ErrorHandler = Callable[[Exception], None]


class SyncManager:
    """Decide when a project should be written to the remote store.

    A save is skipped when the project matches the last acknowledged state or
    when another save is still running. Skipped saves are not queued: the
    caller invokes ``maybe_save`` after each mutation, and the latest state is
    picked up by the first call made once the running save has finished.

    Attributes:
        last_sent_signature: Signature of the last state the store acknowledged.
        save_in_flight: True while a save request is outstanding.
    """

    def __init__(self, save: SaveFn, *, on_error: ErrorHandler | None = None) -> None:
        self._save = save
        self._on_error = on_error
        self._task: asyncio.Task[None] | None = None
        self.last_sent_signature = EMPTY_SIGNATURE
        self.save_in_flight = False

    def mark_synced(self, project: Project) -> None:
        """Record ``project`` as already stored, e.g. right after loading it."""
        self.last_sent_signature = project_signature(project)

    def maybe_save(self, project: Project) -> asyncio.Task[None] | None:
        """Start a background save of ``project`` if it is worth sending.

        Must be called while an event loop is running.

        Returns:
            The task performing the save, or None when the save was dropped.
        """
        signature = project_signature(project)
        if signature == self.last_sent_signature or self.save_in_flight:
            return None

        self.save_in_flight = True
        self._task = asyncio.get_running_loop().create_task(self._run_save(project))
        return self._task

    async def wait(self) -> None:
        """Wait for the outstanding save, if any, to finish."""
        if self._task is not None:
            await self._task

    async def _run_save(self, project: Project) -> None:
        try:
            stored = await self._save(project)
        except Exception as exc:
            logger.warning(
                "Project save failed",
                extra={"project_id": project.id, "error": str(exc)},
            )
            if self._on_error is not None:
                try:
                    self._on_error(exc)
                except Exception:
                    logger.exception(
                        "Save error handler failed", extra={"project_id": project.id}
                    )
        else:
            # The store may normalize what it receives; compare against its copy.
            self.last_sent_signature = project_signature(stored)
            logger.debug("Project saved", extra={"project_id": project.id})
        finally:
            self.save_in_flight = False
