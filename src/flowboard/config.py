"""Local configuration for flowboard."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_API_BASE = "http://localhost:8877/api"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "flowboard/0.1"
DEFAULT_SNAPSHOT_PATH = ".flowboard/board.json"
# Bump the key when the stored shape changes; older snapshots are then ignored.
DEFAULT_SNAPSHOT_KEY = "flowboard-board-v2"
DEFAULT_CONNECT_MODE = "cosmetic"

FLOWBOARD_API_BASE = os.getenv("FLOWBOARD_API_BASE", DEFAULT_API_BASE).rstrip("/")
FLOWBOARD_FETCH_TIMEOUT_S = float(os.getenv("FLOWBOARD_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
FLOWBOARD_FETCH_MAX_RETRIES = int(os.getenv("FLOWBOARD_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
FLOWBOARD_FETCH_BACKOFF_S = float(os.getenv("FLOWBOARD_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
FLOWBOARD_USER_AGENT = os.getenv("FLOWBOARD_USER_AGENT", DEFAULT_USER_AGENT)

# Local-only snapshot of the board, rewritten after every mutation.
FLOWBOARD_SNAPSHOT_PATH = Path(os.getenv("FLOWBOARD_SNAPSHOT_PATH", DEFAULT_SNAPSHOT_PATH)).expanduser().resolve()
FLOWBOARD_SNAPSHOT_KEY = os.getenv("FLOWBOARD_SNAPSHOT_KEY", DEFAULT_SNAPSHOT_KEY)
FLOWBOARD_CONNECT_MODE = os.getenv("FLOWBOARD_CONNECT_MODE", DEFAULT_CONNECT_MODE).lower()
