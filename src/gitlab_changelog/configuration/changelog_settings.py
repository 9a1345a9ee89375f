from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gitlab_changelog.core.exceptions import ConfigurationError

DEFAULT_PROJECT_ID = "gitlab-org%2Fgitlab-ci-multi-runner"
DEFAULT_STARTING_POINT_MATCHER = r"v[0-9]+\.[0-9]+\.[0-9]+"


class ChangelogSettings(BaseSettings):
    """Settings for a single changelog generation run.

    Built once at process start from the environment (and CLI overrides) and
    handed to every stage explicitly.
    """

    # ── GitLab API ──
    private_token: SecretStr | None = Field(default=None, alias="GITLAB_PRIVATE_TOKEN")
    project_id: str = Field(default=DEFAULT_PROJECT_ID, alias="PROJECT_ID")
    api_url: str = Field(default="https://gitlab.com/api/v3", alias="GITLAB_API_URL")
    page_size: int = Field(default=15, ge=1, alias="MR_PAGE_SIZE")
    http_timeout: float = Field(default=30.0, ge=0, alias="GITLAB_HTTP_TIMEOUT")

    # ── History scanning ──
    starting_point: str | None = Field(default=None, alias="STARTING_POINT")
    starting_point_matcher: str = Field(default=DEFAULT_STARTING_POINT_MATCHER, alias="STARTING_POINT_MATCHER")
    strict_starting_point: bool = Field(default=False, alias="STRICT_STARTING_POINT")
    exclude_mr_ids: str = Field(default="", alias="EXCLUDE_MR_IDS")

    # ── Output ──
    release: str | None = Field(default=None, alias="RELEASE")
    changelog_file: Path | None = Field(default=None, alias="CHANGELOG_FILE")
    scope_config: Path | None = Field(default=None, alias="SCOPE_CONFIG_FILE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("private_token", "starting_point", "release", "changelog_file", "scope_config", mode="before")
    @classmethod
    def blank_as_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("exclude_mr_ids", mode="before")
    @classmethod
    def parse_exclusions(cls, value: object) -> str:
        """Accept a comma-separated string or an iterable of ints, normalized to a string."""
        if value is None:
            return ""
        if isinstance(value, str):
            items = [item.strip() for item in value.split(",") if item.strip()]
        else:
            items = [str(item).strip() for item in value]
        for item in items:
            if not item.isdigit():
                raise ValueError(f"EXCLUDE_MR_IDS must be comma-separated integers, got {item!r}")
        return ",".join(items)

    @property
    def excluded_mr_ids(self) -> frozenset[int]:
        if not self.exclude_mr_ids:
            return frozenset()
        return frozenset(int(item) for item in self.exclude_mr_ids.split(","))

    def validate_gitlab_credentials(self) -> None:
        if not self.private_token or not self.private_token.get_secret_value().strip():
            raise ConfigurationError("GITLAB_PRIVATE_TOKEN is missing or empty.")

    model_config = SettingsConfigDict(env_file=None, extra="ignore", populate_by_name=True)
