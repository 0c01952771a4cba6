"""Shared defaults for the search engine, its strategies and the CLI.

Edit these to change the behaviour of `solver.py` / `run.py` when no
explicit argument is given.
"""

from __future__ import annotations

import os
from typing import Optional

# ==== Logging ================================================================

# Name of the logger shared by every module in the package.
LOGGER_NAME: str = "search_engine"

# Level applied the first time the logger is configured.
LOG_LEVEL: str = os.environ.get("SEARCH_ENGINE_LOG_LEVEL", "INFO")

# ==== Local search ===========================================================

# Step budget for min-conflicts when the caller gives none.
DEFAULT_MAX_STEPS: int = 1000

# Seed for the injected random source; None draws fresh entropy.
DEFAULT_SEED: Optional[int] = None

# ==== Tree search ============================================================

# Frontier discipline used by default ("fifo", "lifo" or "cost").
DEFAULT_FRONTIER: str = "fifo"
