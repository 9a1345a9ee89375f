import io
import os
import stat

import pytest

from gitlab_changelog.infrastructure.writers.changelog_writer import (
    FilePrependChangelogWriter,
    StreamChangelogWriter,
    build_writer,
    current_umask,
)


def test_stream_writer_writes_content():
    stream = io.StringIO()

    StreamChangelogWriter(stream).write("\n- Entry !1\n")

    assert stream.getvalue() == "\n- Entry !1\n"


def test_stream_writer_defaults_to_stdout(capsys):
    StreamChangelogWriter().write("\n- Entry !1\n")

    assert capsys.readouterr().out == "\n- Entry !1\n"


def test_prepend_creates_missing_file(tmp_path):
    target = tmp_path / "docs" / "CHANGELOG.md"

    FilePrependChangelogWriter(target).write("## v1.0.0 (2024-01-01)\n\n- One !1\n")

    assert target.read_text() == "## v1.0.0 (2024-01-01)\n\n- One !1\n"


def test_prepend_keeps_previous_content_below(tmp_path):
    target = tmp_path / "CHANGELOG.md"
    target.write_text("## v0.9.0 (2023-12-01)\n\n- Old !0\n")

    FilePrependChangelogWriter(target).write("## v1.0.0 (2024-01-01)\n\n- New !1\n")

    assert target.read_text() == (
        "## v1.0.0 (2024-01-01)\n\n- New !1\n"
        "\n"
        "## v0.9.0 (2023-12-01)\n\n- Old !0\n"
    )
    assert [p.name for p in tmp_path.iterdir()] == ["CHANGELOG.md"]


def test_build_writer_selects_sink(tmp_path):
    assert isinstance(build_writer(None), StreamChangelogWriter)
    assert isinstance(build_writer(tmp_path / "CHANGELOG.md"), FilePrependChangelogWriter)


@pytest.mark.skipif(os.name == "nt", reason="POSIX file modes")
def test_prepend_preserves_existing_file_mode(tmp_path):
    target = tmp_path / "CHANGELOG.md"
    target.write_text("old\n")
    target.chmod(0o644)

    FilePrependChangelogWriter(target).write("new\n")

    assert stat.S_IMODE(target.stat().st_mode) == 0o644
    assert target.read_text() == "new\n\nold\n"


@pytest.mark.skipif(os.name == "nt", reason="POSIX file modes")
def test_prepend_creates_new_file_with_umask_default(tmp_path):
    target = tmp_path / "CHANGELOG.md"

    FilePrependChangelogWriter(target).write("new\n")

    assert stat.S_IMODE(target.stat().st_mode) == 0o666 & ~current_umask()
