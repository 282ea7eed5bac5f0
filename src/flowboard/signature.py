"""Canonical serialization of the persisted part of a project."""

from __future__ import annotations

import json
from typing import Any, Final

from flowboard.schemas import Project

EMPTY_SIGNATURE: Final[str] = ""


def project_signature(project: Project) -> str:
    """Serialize ``{title, nodes, edges}`` so equal content gives equal strings.

    Keys are sorted and separators are compact. Node and section order is
    meaningful and kept; edges form a set and are sorted.
    """
    payload: dict[str, Any] = project.persisted_payload()
    payload["edges"] = sorted(
        payload["edges"], key=lambda edge: (edge["id"], edge["source"], edge["target"])
    )
    return json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
