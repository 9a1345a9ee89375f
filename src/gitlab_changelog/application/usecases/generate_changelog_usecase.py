from __future__ import annotations

from dataclasses import dataclass, field

from gitlab_changelog.application.ports.changelog_writer import ChangelogWriter
from gitlab_changelog.application.ports.history_provider import HistoryProvider
from gitlab_changelog.application.ports.merge_request_provider import MergeRequestProvider
from gitlab_changelog.application.services.changelog_formatter_service import ChangelogFormatterService
from gitlab_changelog.configuration.changelog_settings import ChangelogSettings
from gitlab_changelog.configuration.scope_config_model import ScopeConfigModel
from gitlab_changelog.core.entities.merge_request import MergeRequest
from gitlab_changelog.core.exceptions import ConfigurationError
from gitlab_changelog.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)


@dataclass
class ChangelogResult:
    starting_point: str | None
    referenced_iids: list[int] = field(default_factory=list)
    fetched_iids: list[int] = field(default_factory=list)
    merge_requests: dict[int, MergeRequest] = field(default_factory=dict)
    titles: dict[int, str] = field(default_factory=dict)
    content: str = ""


class GenerateChangelogUseCase:
    """Runs the four stages: starting point, history scan, title fetch, rendering."""

    def __init__(
        self,
        settings: ChangelogSettings,
        history: HistoryProvider,
        merge_requests: MergeRequestProvider,
        writer: ChangelogWriter,
        formatter: ChangelogFormatterService | None = None,
        scopes: ScopeConfigModel | None = None,
    ):
        self.settings = settings
        self.history = history
        self.merge_requests = merge_requests
        self.writer = writer
        self.formatter = formatter or ChangelogFormatterService()
        self.scopes = scopes

    def execute(self) -> ChangelogResult:
        starting_point = self.resolve_starting_point()
        result = ChangelogResult(starting_point=starting_point)

        if starting_point is not None:
            result.referenced_iids = self.collect_iids(starting_point)

        # Newest first for output; oldest first for querying.
        result.fetched_iids = sorted(result.referenced_iids)
        result.merge_requests = self.fetch_merge_requests(result.fetched_iids)
        result.titles = {iid: mr.title for iid, mr in result.merge_requests.items()}

        result.content = self.render(result)
        self.writer.write(result.content)
        return result

    def resolve_starting_point(self) -> str | None:
        if self.settings.starting_point:
            logger.info(f"Using starting point {self.settings.starting_point} from configuration")
            return self.settings.starting_point

        tag = self.history.resolve_latest_tag(self.settings.starting_point_matcher)
        if tag is None:
            message = "Couldn't determine the starting point; set STARTING_POINT"
            if self.settings.strict_starting_point:
                raise ConfigurationError(message)
            logger.error(message)
            return None

        logger.info(f"Using latest tag {tag} as starting point")
        return tag

    def collect_iids(self, starting_point: str) -> list[int]:
        """Referenced IIDs newest first, excluded ones dropped, repeats kept."""
        excluded = self.settings.excluded_mr_ids
        iids = self.history.list_merge_request_ids(starting_point)
        kept = [iid for iid in iids if iid not in excluded]
        if len(kept) != len(iids):
            logger.info(f"Skipped {len(iids) - len(kept)} excluded merge request reference(s)")
        return kept

    def fetch_merge_requests(self, iids: list[int]) -> dict[int, MergeRequest]:
        """Records keyed by IID; a later record for the same IID wins."""
        if not iids:
            return {}
        merge_requests = self.merge_requests.list_merge_requests(iids, self.settings.page_size)
        return {mr.iid: mr for mr in merge_requests}

    def render(self, result: ChangelogResult) -> str:
        if self.scopes is None:
            return self.formatter.render(result.referenced_iids, result.titles, release=self.settings.release)
        return self.formatter.render_scoped(
            result.referenced_iids, result.merge_requests, self.scopes, release=self.settings.release
        )
