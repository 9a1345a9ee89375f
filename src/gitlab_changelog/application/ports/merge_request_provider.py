from abc import ABC, abstractmethod

from gitlab_changelog.core.entities.merge_request import MergeRequest


class MergeRequestProvider(ABC):
    """Abstract source of merge request details."""

    @abstractmethod
    def list_merge_requests(self, iids: list[int], per_page: int) -> list[MergeRequest]:
        """Fetches the merge requests with the given IIDs, one request per page of IIDs."""
        pass
