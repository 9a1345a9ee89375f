from gitlab_changelog.core.exceptions.changelog_error import ChangelogError


class ConfigurationError(ChangelogError):
    """Raised when configuration is invalid or incomplete."""
