from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from persistence.paths import data_dir


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Backing file for the default repository
    data_file_path: Path

    # Parse policy: strict raises on the first malformed record
    strict: bool

    # Log "FILE CREATED" when a write creates the file
    log_file_events: bool


def get_settings(env_file: str | None = "local.env") -> Settings:
    if env_file:
        load_dotenv(env_file)

    raw_path = os.getenv("DATAFILE_PATH", "").strip()
    data_file_path = Path(raw_path) if raw_path else data_dir() / "data.data"

    strict = _env_bool("DATAFILE_STRICT", False)
    log_file_events = _env_bool("DATAFILE_LOG_FILE_EVENTS", True)

    return Settings(
        data_file_path=data_file_path,
        strict=strict,
        log_file_events=log_file_events,
    )
