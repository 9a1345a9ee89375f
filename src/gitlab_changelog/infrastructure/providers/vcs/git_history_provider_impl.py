import re
import subprocess
from collections.abc import Callable
from pathlib import Path

from gitlab_changelog.application.ports.history_provider import HistoryProvider
from gitlab_changelog.core.exceptions import HistoryError
from gitlab_changelog.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)

# Trailer GitLab appends to merge commits; newer versions prefix the project path.
MERGE_REQUEST_TRAILER = re.compile(r"^\s*See merge request (?:[\w.\-/]+)?!(\d+)\s*$", re.MULTILINE)
TAG_DECORATION_PREFIX = "tag: "

Runner = Callable[..., subprocess.CompletedProcess]


class GitHistoryProvider(HistoryProvider):
    """HistoryProvider backed by the git CLI."""

    def __init__(self, repo_path: Path | None = None, git_binary: str = "git", runner: Runner = subprocess.run):
        self.repo_path = repo_path
        self.git_binary = git_binary
        self.runner = runner

    def resolve_latest_tag(self, matcher: str) -> str | None:
        pattern = re.compile(matcher)

        tag = self._latest_first_parent_tag(pattern)
        if tag:
            logger.debug(f"Found tag {tag} on the first-parent history")
            return tag

        described = self._run("describe", "--tags", "--abbrev=0", check=False)
        if described is None:
            logger.debug("git describe found no ancestor tag")
            return None

        candidate = described.strip()
        if candidate and pattern.fullmatch(candidate):
            logger.debug(f"Using closest ancestor tag {candidate}")
            return candidate

        logger.debug(f"Closest ancestor tag {candidate!r} does not match {matcher!r}")
        return None

    def list_merge_request_ids(self, starting_point: str) -> list[int]:
        output = self._run("log", "--first-parent", "--pretty=format:%B", f"{starting_point}..HEAD")
        iids = [int(match) for match in MERGE_REQUEST_TRAILER.findall(output)]
        logger.info(f"Found {len(iids)} merge request references since {starting_point}")
        return iids

    def _latest_first_parent_tag(self, pattern: re.Pattern[str]) -> str | None:
        output = self._run(
            "log", "--first-parent", "--simplify-by-decoration", "--pretty=format:%D", check=False
        )
        if not output:
            return None

        for line in output.splitlines():
            for ref in line.split(","):
                ref = ref.strip()
                if not ref.startswith(TAG_DECORATION_PREFIX):
                    continue
                name = ref[len(TAG_DECORATION_PREFIX):]
                if pattern.fullmatch(name):
                    return name
        return None

    def _run(self, *args: str, check: bool = True) -> str | None:
        command = (self.git_binary, *args)
        result = self.runner(
            list(command),
            cwd=self.repo_path,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            if check:
                raise HistoryError(command=command, returncode=result.returncode, stderr=result.stderr or "")
            return None
        return result.stdout
