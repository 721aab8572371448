from __future__ import annotations

from typing import Protocol


class KeyValueDocumentStore(Protocol):
    """
    Minimal interface: a single flat str -> str document persisted under a key.
    """

    def load(self) -> dict[str, str]:
        """Load and return the full document (never None)."""
        ...

    def save(self, doc: dict[str, str]) -> None:
        """Validate and persist the full document."""
        ...
