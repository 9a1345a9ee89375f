from __future__ import annotations

from dataclasses import dataclass

from gitlab_changelog.core.exceptions.changelog_error import ChangelogError


@dataclass(eq=False)
class MergeRequestApiError(ChangelogError):
    message: str
    status_code: int | None = None

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"error while requesting merge requests from API: {self.message}{code}"
