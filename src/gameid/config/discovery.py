"""Locate gameid.toml.

``GAMEID_CONFIG`` names the file directly; otherwise the nearest
``gameid.toml`` in the working directory or one of its parents is used.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "gameid.toml"
CONFIG_ENV_VAR = "GAMEID_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd).

    A ``GAMEID_CONFIG`` pointing at a missing file disables discovery
    rather than falling back to the walk-up search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        explicit = Path(override)
        return explicit if explicit.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
