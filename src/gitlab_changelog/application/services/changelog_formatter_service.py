from __future__ import annotations

from datetime import date

from gitlab_changelog.configuration.scope_config_model import ScopeConfigModel
from gitlab_changelog.core.entities.merge_request import MergeRequest

RFC3339_DATE = "%Y-%m-%d"


class ChangelogFormatterService:
    """Renders changelog entries as markdown bullets."""

    @staticmethod
    def format_entry(iid: int, title: str | None, author: str = "") -> str:
        suffix = f" ({author})" if author else ""
        return f"- {title or ''} !{iid}{suffix}"

    def format_entries(self, iids: list[int], titles: dict[int, str]) -> list[str]:
        """One line per referenced IID, in the given order; unknown IIDs get an empty title."""
        return [self.format_entry(iid, titles.get(iid)) for iid in iids]

    def format_header(self, release: str, today: date | None = None) -> str:
        today = today or date.today()
        return f"## {release} ({today.strftime(RFC3339_DATE)})"

    def render(self, iids: list[int], titles: dict[int, str], release: str | None = None, today: date | None = None) -> str:
        lines = self._header_lines(release, today)
        lines.extend(self.format_entries(iids, titles))
        return "\n".join(lines) + "\n"

    def render_scoped(
        self,
        iids: list[int],
        merge_requests: dict[int, MergeRequest],
        scopes: ScopeConfigModel,
        release: str | None = None,
        today: date | None = None,
    ) -> str:
        """Same entries as render(), grouped under '### <scope>' sections in configuration order.

        Within a section the given order is kept. IIDs without a record land
        in the default scope with an empty title.
        """
        sections: dict[str, list[str]] = {name: [] for name in scopes.scope_order()}
        for iid in iids:
            mr = merge_requests.get(iid)
            labels = mr.labels if mr else ()
            author = mr.author if mr and scopes.credits_author(labels) else ""
            sections[scopes.scope_for(labels)].append(self.format_entry(iid, mr.title if mr else None, author))

        lines = self._header_lines(release, today)
        for name, entries in sections.items():
            if not entries:
                continue
            lines.extend([f"### {name}", "", *entries, ""])
        return "\n".join(lines) + "\n"

    def _header_lines(self, release: str | None, today: date | None) -> list[str]:
        lines: list[str] = []
        if release:
            lines.append(self.format_header(release, today))
        lines.append("")
        return lines
