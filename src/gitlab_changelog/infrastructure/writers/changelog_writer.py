from __future__ import annotations

import os
import shutil
import sys
import tempfile
from pathlib import Path
from typing import TextIO

from gitlab_changelog.application.ports.changelog_writer import ChangelogWriter
from gitlab_changelog.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)


class StreamChangelogWriter(ChangelogWriter):
    """Writes the rendered changelog to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def write(self, content: str) -> None:
        stream = self.stream or sys.stdout
        stream.write(content)
        stream.flush()


class FilePrependChangelogWriter(ChangelogWriter):
    """Puts the new entries on top of an existing changelog file.

    The new content and the previous file body are first assembled in a
    temporary file next to the target, which then replaces the target.
    """

    def __init__(self, target_file: Path):
        self.target_file = Path(target_file)

    def write(self, content: str) -> None:
        directory = self.target_file.parent
        directory.mkdir(parents=True, exist_ok=True)

        fd, temp_name = tempfile.mkstemp(prefix=".changelog", dir=directory, text=True)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as target:
                target.write(content)
                if self.target_file.exists():
                    logger.debug(f"Appending previous content of {self.target_file}")
                    target.write("\n")
                    with self.target_file.open("r", encoding="utf-8") as source:
                        shutil.copyfileobj(source, target)
                else:
                    logger.debug(f"{self.target_file} doesn't exist; creating it")
            self._apply_mode(temp_name)
            os.replace(temp_name, self.target_file)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise

        logger.info(f"Changelog entries written to {self.target_file}")

    def _apply_mode(self, temp_name: str) -> None:
        """Gives the new file the target's mode, or the umask default when the target is new."""
        if self.target_file.exists():
            shutil.copymode(self.target_file, temp_name)
            return
        os.chmod(temp_name, 0o666 & ~current_umask())


def current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def build_writer(changelog_file: Path | None) -> ChangelogWriter:
    if changelog_file is None:
        return StreamChangelogWriter()
    return FilePrependChangelogWriter(changelog_file)
