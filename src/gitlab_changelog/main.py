import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from gitlab_changelog.application.usecases.generate_changelog_usecase import GenerateChangelogUseCase
from gitlab_changelog.configuration.changelog_settings import ChangelogSettings
from gitlab_changelog.configuration.scope_config_loader import ScopeConfigLoader
from gitlab_changelog.core.exceptions import ConfigurationError
from gitlab_changelog.infrastructure.observability.logger_factory_service import LoggerFactoryService
from gitlab_changelog.infrastructure.providers.vcs.clients.gitlab_http_client import GitLabHttpClient
from gitlab_changelog.infrastructure.providers.vcs.git_history_provider_impl import GitHistoryProvider
from gitlab_changelog.infrastructure.providers.vcs.services.gitlab_mr_service import GitLabMrService
from gitlab_changelog.infrastructure.writers.changelog_writer import build_writer

logger = LoggerFactoryService.build_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitlab-changelog",
        description="Generate draft changelog entries from merge requests referenced in git history.",
    )
    parser.add_argument("--starting-point", dest="starting_point", help="git ref to start from (STARTING_POINT)")
    parser.add_argument("--starting-point-matcher", dest="starting_point_matcher", help="regex for release tags")
    parser.add_argument("--exclude", dest="exclude_mr_ids", help="comma-separated MR IIDs to skip (EXCLUDE_MR_IDS)")
    parser.add_argument("--project-id", dest="project_id", help="URL-encoded project path or numeric ID (PROJECT_ID)")
    parser.add_argument("--release", dest="release", help="add a '## <release> (<date>)' header")
    parser.add_argument("--changelog-file", dest="changelog_file", type=Path, help="prepend entries to this file")
    parser.add_argument("--scope-config", dest="scope_config", type=Path,
                        help="YAML file grouping entries by merge request labels (SCOPE_CONFIG_FILE)")
    parser.add_argument("--strict", dest="strict_starting_point", action="store_true", default=None,
                        help="fail when no starting point can be determined")
    parser.add_argument("--log-level", dest="log_level", help="logging level (LOG_LEVEL)")
    parser.add_argument("--repo", dest="repo", type=Path, default=None, help="repository path, default: cwd")
    return parser


def load_settings(args: argparse.Namespace) -> ChangelogSettings:
    overrides = {
        name: value
        for name, value in vars(args).items()
        if name != "repo" and value is not None
    }
    return ChangelogSettings(**overrides)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    LoggerFactoryService.configure_root_logger(args.log_level)

    try:
        settings = load_settings(args)
        settings.validate_gitlab_credentials()
        scopes = ScopeConfigLoader.load(settings.scope_config) if settings.scope_config else None
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    LoggerFactoryService.configure_root_logger(settings.log_level)

    client = GitLabHttpClient(settings)
    usecase = GenerateChangelogUseCase(
        settings=settings,
        history=GitHistoryProvider(repo_path=args.repo),
        merge_requests=GitLabMrService(client, settings.project_id),
        writer=build_writer(settings.changelog_file),
        scopes=scopes,
    )

    try:
        usecase.execute()
    except ConfigurationError as e:
        logger.error(str(e))
        return 1
    return 0


def cli():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
