from __future__ import annotations

import os
from pathlib import Path


def project_root() -> Path:
    """Base directory for default data: $DATAFILE_HOME, else the working directory."""
    home = os.getenv("DATAFILE_HOME", "").strip()
    return Path(home) if home else Path.cwd()


def data_dir() -> Path:
    # Not created here; write_text makes parent dirs on first save.
    return project_root() / "data"
