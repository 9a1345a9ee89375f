from typing import Any

import httpx

from gitlab_changelog.application.ports.merge_request_provider import MergeRequestProvider
from gitlab_changelog.core.entities.merge_request import MergeRequest
from gitlab_changelog.core.exceptions import MergeRequestApiError
from gitlab_changelog.infrastructure.observability.logger_factory_service import LoggerFactoryService
from gitlab_changelog.infrastructure.providers.vcs.clients.gitlab_http_client import GitLabHttpClient

logger = LoggerFactoryService.build_logger(__name__)


def chunked(items: list[int], size: int) -> list[list[int]]:
    """Splits items into consecutive chunks of at most size elements."""
    if size < 1:
        raise ValueError(f"chunk size must be positive, got {size}")
    return [items[start:start + size] for start in range(0, len(items), size)]


class GitLabMrService(MergeRequestProvider):
    def __init__(self, client: GitLabHttpClient, project_id: str):
        self.client = client
        self.project_id = project_id

    def list_merge_requests(self, iids: list[int], per_page: int) -> list[MergeRequest]:
        merge_requests: list[MergeRequest] = []
        pages = chunked(iids, per_page)
        for page, page_iids in enumerate(pages, start=1):
            logger.debug(f"Requesting page {page}/{len(pages)} of merge request details ({len(page_iids)} IIDs)")
            merge_requests.extend(self._fetch_page(page_iids, per_page))

        logger.info(f"Fetched {len(merge_requests)} merge requests in {len(pages)} request(s)")
        return merge_requests

    def _fetch_page(self, iids: list[int], per_page: int) -> list[MergeRequest]:
        path = f"projects/{self.project_id}/merge_requests/"
        params = {"iid[]": iids, "per_page": per_page}

        response = self.client.get(path, params=params)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Failed to list merge requests: {e.response.status_code}")
            raise MergeRequestApiError(
                message=f"GET projects/{self.project_id}/merge_requests/ failed",
                status_code=e.response.status_code,
            ) from e

        try:
            payload: Any = response.json()
        except ValueError as e:
            raise MergeRequestApiError(message=f"malformed JSON in response: {e}") from e

        if not isinstance(payload, list):
            raise MergeRequestApiError(message=f"expected a JSON array, got {type(payload).__name__}")

        return [MergeRequest.from_api(item) for item in payload]
