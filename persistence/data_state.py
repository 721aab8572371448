from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel

from datafile.validator import validate_entry

from .disk_store import DiskDataFileStore

logger = logging.getLogger(__name__)


class InformationRecord(BaseModel):
    """Title/content pair looked up by key, as an information window shows it."""

    title: str | None = None
    content: str | None = None


class DataFileRepository(Protocol):
    def get(self, key: str) -> str | None:
        ...

    def put(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> bool:
        ...

    def keys(self) -> list[str]:
        ...

    def all(self) -> dict[str, str]:
        ...

    def get_information(self, title_key: str, content_key: str) -> InformationRecord:
        ...


class DiskDataFileRepository(DataFileRepository):
    """
    Key-level access to one data file.

    Every call loads the whole file and every write saves it back. A missing
    file reads as an empty document; any other read failure propagates.
    """

    def __init__(
        self,
        path: Path | None = None,
        *,
        strict: bool | None = None,
        log_file_events: bool | None = None,
    ):
        # Settings (local.env, data dir) are only consulted for what the caller left out.
        if path is None or strict is None or log_file_events is None:
            from settings import get_settings

            settings = get_settings()
            path = settings.data_file_path if path is None else path
            strict = settings.strict if strict is None else strict
            log_file_events = settings.log_file_events if log_file_events is None else log_file_events

        self._store = DiskDataFileStore(path, strict=strict, log_file_events=log_file_events)

    @property
    def path(self) -> Path:
        return self._store.path

    def _load(self) -> dict[str, str]:
        if not self._store.exists():
            logger.debug("DATAFILE LOAD: %s missing, starting empty", self._store.path)
            return {}
        return self._store.load()

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def put(self, key: str, value: str) -> None:
        validate_entry(key, value)
        data = self._load()
        data[key] = value
        self._store.save(data)

    def delete(self, key: str) -> bool:
        data = self._load()
        if key not in data:
            return False
        del data[key]
        self._store.save(data)
        return True

    def keys(self) -> list[str]:
        return sorted(self._load())

    def all(self) -> dict[str, str]:
        return self._load()

    def get_information(self, title_key: str, content_key: str) -> InformationRecord:
        data = self._load()
        return InformationRecord(title=data.get(title_key), content=data.get(content_key))

    def write_example(self) -> None:
        self._store.write_example()
