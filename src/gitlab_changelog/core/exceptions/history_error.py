from __future__ import annotations

from dataclasses import dataclass

from gitlab_changelog.core.exceptions.changelog_error import ChangelogError


@dataclass(eq=False)
class HistoryError(ChangelogError):
    command: tuple[str, ...]
    returncode: int
    stderr: str = ""

    def __str__(self) -> str:
        detail = f": {self.stderr.strip()}" if self.stderr.strip() else ""
        return f"'{' '.join(self.command)}' exited with status {self.returncode}{detail}"
