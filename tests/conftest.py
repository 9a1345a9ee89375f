import pytest

from gitlab_changelog.configuration.changelog_settings import ChangelogSettings

CHANGELOG_ENV_VARS = (
    "GITLAB_PRIVATE_TOKEN",
    "STARTING_POINT",
    "STARTING_POINT_MATCHER",
    "STRICT_STARTING_POINT",
    "EXCLUDE_MR_IDS",
    "PROJECT_ID",
    "GITLAB_API_URL",
    "MR_PAGE_SIZE",
    "GITLAB_HTTP_TIMEOUT",
    "RELEASE",
    "CHANGELOG_FILE",
    "SCOPE_CONFIG_FILE",
    "LOG_LEVEL",
)

API_URL = "https://gitlab.example.com/api/v3"
PROJECT_ID = "123"
MERGE_REQUESTS_URL = f"{API_URL}/projects/{PROJECT_ID}/merge_requests/"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in CHANGELOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    return ChangelogSettings(
        private_token="mock_gl_token",
        api_url=API_URL,
        project_id=PROJECT_ID,
        http_timeout=5.0,
    )


@pytest.fixture
def merge_requests_url():
    return MERGE_REQUESTS_URL


@pytest.fixture
def mr_payload():
    def build(iid, title=None):
        return {
            "iid": iid,
            "title": title if title is not None else f"Change {iid}",
            "author": {"name": "Jane Doe", "username": "jdoe"},
            "labels": ["feature"],
            "web_url": f"https://gitlab.example.com/group/project/merge_requests/{iid}",
        }

    return build
