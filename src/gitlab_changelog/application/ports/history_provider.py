from abc import ABC, abstractmethod


class HistoryProvider(ABC):
    """Abstract access to the repository history the changelog is built from."""

    @abstractmethod
    def resolve_latest_tag(self, matcher: str) -> str | None:
        """Returns the most recent tag fully matching the regex, or None."""
        pass

    @abstractmethod
    def list_merge_request_ids(self, starting_point: str) -> list[int]:
        """Lists merge request IIDs referenced since starting_point, newest first, duplicates kept."""
        pass
