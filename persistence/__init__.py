from __future__ import annotations

from .data_state import DataFileRepository, DiskDataFileRepository, InformationRecord
from .disk_store import DiskDataFileStore
from .interfaces import KeyValueDocumentStore
from .repositories import AsyncDataFileRepository, AsyncDiskDataFileRepository

__all__ = [
    "KeyValueDocumentStore",
    "DiskDataFileStore",
    "InformationRecord",
    "DataFileRepository",
    "DiskDataFileRepository",
    "AsyncDataFileRepository",
    "AsyncDiskDataFileRepository",
]
