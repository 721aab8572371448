from __future__ import annotations

from pydantic import BaseModel, Field

from .parser import parse
from .serializer import serialize


class DataDocument(BaseModel):
    """
    In-memory form of a data file:
      { "<key>": "<value>", ... }

    Iteration order carries no meaning; to_text() always sorts by key.
    """

    entries: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_text(cls, text: str, *, strict: bool = False) -> "DataDocument":
        return cls(entries=parse(text, strict=strict))

    def to_text(self) -> str:
        return serialize(self.entries)

    def as_dict(self) -> dict[str, str]:
        return dict(self.entries)

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.entries.get(key, default)

    def keys(self) -> list[str]:
        return sorted(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)
