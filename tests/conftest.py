from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


SETTINGS_ENV = ("DATAFILE_HOME", "DATAFILE_PATH", "DATAFILE_STRICT", "DATAFILE_LOG_FILE_EVENTS")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """
    Start every test without DATAFILE_* variables and outside the repo, so a
    developer's local.env is never picked up.
    """
    for name in SETTINGS_ENV:
        # setenv first so the undo step removes anything load_dotenv adds later
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sandbox_project(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Point DATAFILE_HOME at a temp dir so default data files never land in the repo.
    """
    monkeypatch.setenv("DATAFILE_HOME", str(tmp_path))
    return tmp_path
