from datetime import date

from gitlab_changelog.application.services.changelog_formatter_service import ChangelogFormatterService
from gitlab_changelog.configuration.scope_config_model import ScopeConfigModel, ScopeModel
from gitlab_changelog.core.entities.merge_request import MergeRequest


def test_entries_follow_given_order_and_keep_repeats():
    formatter = ChangelogFormatterService()

    lines = formatter.format_entries([12, 7, 12], {7: "Add feature", 12: "Fix bug"})

    assert lines == ["- Fix bug !12", "- Add feature !7", "- Fix bug !12"]


def test_missing_title_renders_empty():
    formatter = ChangelogFormatterService()

    assert formatter.format_entries([42], {}) == ["-  !42"]


def test_render_starts_with_blank_line():
    content = ChangelogFormatterService().render([2, 1], {1: "One", 2: "Two"})

    assert content == "\n- Two !2\n- One !1\n"


def test_render_with_release_header():
    content = ChangelogFormatterService().render([1], {1: "One"}, release="v1.3.0", today=date(2024, 5, 17))

    assert content.splitlines() == ["## v1.3.0 (2024-05-17)", "", "- One !1"]


def test_render_without_entries():
    assert ChangelogFormatterService().render([], {}) == "\n"


SCOPES = ScopeConfigModel(
    scopes=[
        ScopeModel(name="New features", labels=["feature"]),
        ScopeModel(name="Bug fixes", labels=["bug", "regression"]),
    ],
    author_labels=["Community contribution"],
)


def test_render_scoped_groups_by_label_in_configuration_order():
    records = {
        3: MergeRequest(3, "Fix crash", labels=("regression",)),
        5: MergeRequest(5, "Add cache", labels=("feature",)),
        8: MergeRequest(8, "Update docs", labels=("documentation",)),
    }

    content = ChangelogFormatterService().render_scoped([8, 3, 5, 3], records, SCOPES)

    assert content == (
        "\n"
        "### New features\n\n- Add cache !5\n\n"
        "### Bug fixes\n\n- Fix crash !3\n- Fix crash !3\n\n"
        "### Other changes\n\n- Update docs !8\n\n"
    )


def test_render_scoped_credits_authors_only_for_marked_labels():
    records = {
        1: MergeRequest(1, "Add flag", "Jane Doe", "jdoe", ("feature", "Community contribution")),
        2: MergeRequest(2, "Add option", "John Roe", "jroe", ("feature",)),
    }

    content = ChangelogFormatterService().render_scoped([2, 1], records, SCOPES)

    assert "- Add option !2\n- Add flag !1 (Jane Doe @jdoe)\n" in content


def test_render_scoped_puts_unknown_iids_in_default_scope():
    content = ChangelogFormatterService().render_scoped(
        [4], {}, SCOPES, release="v2.0.0", today=date(2024, 5, 17)
    )

    assert content.splitlines() == ["## v2.0.0 (2024-05-17)", "", "### Other changes", "", "-  !4", ""]
