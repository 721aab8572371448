from __future__ import annotations

from pathlib import Path

from datafile.files import read_data_file, write_data_file, write_example_data_file

from .interfaces import KeyValueDocumentStore


class DiskDataFileStore(KeyValueDocumentStore):
    """
    Stores a single data-file document on disk at a fixed path.

    - load() raises the file errors; check exists() first for a fresh store.
    - save() validates every entry before touching the file.
    - No locking: a reader racing a writer on the same path may see a torn file.
    """

    def __init__(self, path: Path, *, strict: bool = False, log_file_events: bool = True):
        self._path = path
        self._strict = strict
        self._log_file_events = log_file_events

    @property
    def path(self) -> Path:
        return self._path

    @property
    def strict(self) -> bool:
        return self._strict

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> dict[str, str]:
        return read_data_file(self._path, strict=self._strict)

    def save(self, doc: dict[str, str]) -> None:
        write_data_file(doc, self._path, log_created=self._log_file_events)

    def write_example(self) -> None:
        write_example_data_file(self._path, log_created=self._log_file_events)
