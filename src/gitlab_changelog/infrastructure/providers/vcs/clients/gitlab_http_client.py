from typing import Any

import httpx

from gitlab_changelog.configuration.changelog_settings import ChangelogSettings
from gitlab_changelog.infrastructure.observability.logger_factory_service import LoggerFactoryService
from gitlab_changelog.infrastructure.observability.redaction_service import redact_text

logger = LoggerFactoryService.build_logger(__name__)


class GitLabHttpClient:
    """Thin synchronous wrapper around the GitLab REST API.

    Authenticates with the ``private_token`` query parameter, which is what the
    merge requests endpoint of the v3 API expects.
    """

    def __init__(self, settings: ChangelogSettings, transport: httpx.BaseTransport | None = None):
        self.settings = settings
        self.base_url = settings.api_url.rstrip("/")
        self.transport = transport
        self._validate_config()

    def _validate_config(self):
        self.settings.validate_gitlab_credentials()

    def _get_headers(self) -> dict[str, str]:
        return {"Accept": "application/json"}

    def _with_token(self, params: dict[str, Any] | None) -> dict[str, Any]:
        merged = dict(params or {})
        merged["private_token"] = self.settings.private_token.get_secret_value()
        return merged

    def _timeout(self) -> float | None:
        return self.settings.http_timeout or None

    def get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        url = f"{self.base_url}/{path.lstrip('/')}"
        with httpx.Client(transport=self.transport) as client:
            response = client.get(url, headers=self._get_headers(), params=self._with_token(params), timeout=self._timeout())
        logger.debug(redact_text(f"GET {response.request.url} -> {response.status_code}"))
        return response
