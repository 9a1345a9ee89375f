from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class MergeRequest:
    iid: int
    title: str
    author_name: str = ""
    author_username: str = ""
    labels: tuple[str, ...] = field(default_factory=tuple)

    @property
    def author(self) -> str:
        if not self.author_name:
            return ""
        if not self.author_username:
            return self.author_name
        return f"{self.author_name} @{self.author_username}"

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> MergeRequest:
        """Builds a record from one element of the merge requests JSON array."""
        author = payload.get("author") or {}
        return cls(
            iid=int(payload["iid"]),
            title=payload.get("title") or "",
            author_name=author.get("name") or "",
            author_username=author.get("username") or "",
            labels=tuple(payload.get("labels") or ()),
        )
