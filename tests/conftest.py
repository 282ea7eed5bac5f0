"""Test setup for flowboard."""

from __future__ import annotations

import itertools
import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from flowboard.schemas import Edge, Node, Position, Project, Section  # noqa: E402


@pytest.fixture
def id_factory() -> Callable[[], str]:
    """Deterministic ids: id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def sample_project() -> Project:
    """root -> (a -> (b -> c), d); root has two sections."""
    return Project(
        id="p1",
        title="Site map",
        nodes=[
            Node(
                id="root",
                title="Home",
                position=Position(x=500, y=100),
                sections=[
                    Section(id="s1", title="Hero", content="Welcome"),
                    Section(id="s2", title="Footer", content="Links"),
                ],
            ),
            Node(id="a", title="About", position=Position(x=0, y=0), parent="root"),
            Node(id="b", title="Team", position=Position(x=0, y=0), parent="a"),
            Node(id="c", title="Jobs", position=Position(x=0, y=0), parent="b"),
            Node(id="d", title="Blog", position=Position(x=0, y=0), parent="root"),
        ],
        edges=[
            Edge(id="e1", source="root", target="a"),
            Edge(id="e2", source="a", target="b"),
            Edge(id="e3", source="b", target="c"),
            Edge(id="e4", source="root", target="d"),
        ],
    )
