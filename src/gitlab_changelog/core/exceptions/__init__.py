from gitlab_changelog.core.exceptions.changelog_error import ChangelogError
from gitlab_changelog.core.exceptions.configuration_error import ConfigurationError
from gitlab_changelog.core.exceptions.history_error import HistoryError
from gitlab_changelog.core.exceptions.merge_request_api_error import MergeRequestApiError

__all__ = [
    "ChangelogError",
    "ConfigurationError",
    "HistoryError",
    "MergeRequestApiError",
]
