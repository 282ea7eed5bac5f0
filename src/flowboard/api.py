"""Client for the remote project store."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from flowboard.config import FLOWBOARD_API_BASE
from flowboard.exceptions import FetchError, ProjectNotFoundError, SaveError
from flowboard.http_utils import request_json_with_retries
from flowboard.schemas import Project

logger = logging.getLogger(__name__)


def project_url(project_id: str, base_url: str | None = None) -> str:
    """Build the store URL of a project."""
    base = (base_url or FLOWBOARD_API_BASE).rstrip("/")
    return f"{base}/projects/{project_id}"


async def fetch_project(
    project_id: str,
    *,
    base_url: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> Project:
    """Load a project from the store.

    Args:
        project_id: Id of the project to load.
        base_url: Store API base; defaults to FLOWBOARD_API_BASE.
        client: Optional shared httpx.AsyncClient.

    Returns:
        The stored project.

    Raises:
        ProjectNotFoundError: If the store has no such project.
        FetchError: If the request fails or the body is not a project.
    """
    url = project_url(project_id, base_url)
    body = await request_json_with_retries(
        "GET",
        url,
        client=client,
        error_class=FetchError,
        on_404=ProjectNotFoundError,
        on_404_message=f"Project {project_id} does not exist",
    )
    try:
        return Project.model_validate(body)
    except ValidationError as exc:
        raise FetchError(f"Malformed project from {url}: {exc}") from exc


async def save_project(
    project: Project,
    *,
    base_url: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> Project:
    """Write ``{title, nodes, edges}`` to the store and return its stored copy.

    Raises:
        SaveError: If the request fails or the store answers with something
            that is not a project.
    """
    url = project_url(project.id, base_url)
    body = await request_json_with_retries(
        "PUT",
        url,
        json_body=project.persisted_payload(),
        client=client,
        error_class=SaveError,
    )
    # Stores may echo only {title, nodes, edges}; the id is the one we sent.
    if isinstance(body, dict) and "_id" not in body:
        body = {"_id": project.id, **body}
    try:
        stored = Project.model_validate(body)
    except ValidationError as exc:
        raise SaveError(f"Malformed project from {url}: {exc}") from exc
    logger.debug("Stored project", extra={"project_id": stored.id, "nodes": len(stored.nodes)})
    return stored
