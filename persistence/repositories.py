from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol

from .data_state import DiskDataFileRepository, InformationRecord


class AsyncDataFileRepository(Protocol):
    async def get(self, key: str) -> str | None: ...
    async def put(self, key: str, value: str) -> None: ...
    async def delete(self, key: str) -> bool: ...

    async def keys(self) -> list[str]: ...
    async def all(self) -> dict[str, str]: ...

    async def get_information(self, title_key: str, content_key: str) -> InformationRecord: ...


class AsyncDiskDataFileRepository(AsyncDataFileRepository):
    """
    Async wrapper around the disk-backed data-file repository.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(
        self,
        path: Path | None = None,
        *,
        strict: bool | None = None,
        log_file_events: bool | None = None,
    ) -> None:
        self._repo = DiskDataFileRepository(path, strict=strict, log_file_events=log_file_events)

    async def get(self, key: str) -> str | None:
        return await asyncio.to_thread(self._repo.get, key)

    async def put(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._repo.put, key, value)

    async def delete(self, key: str) -> bool:
        return await asyncio.to_thread(self._repo.delete, key)

    async def keys(self) -> list[str]:
        return await asyncio.to_thread(self._repo.keys)

    async def all(self) -> dict[str, str]:
        return await asyncio.to_thread(self._repo.all)

    async def get_information(self, title_key: str, content_key: str) -> InformationRecord:
        return await asyncio.to_thread(self._repo.get_information, title_key, content_key)
