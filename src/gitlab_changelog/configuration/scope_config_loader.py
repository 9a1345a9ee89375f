from pathlib import Path

import yaml
from pydantic import ValidationError

from gitlab_changelog.configuration.scope_config_model import ScopeConfigModel
from gitlab_changelog.core.exceptions import ConfigurationError
from gitlab_changelog.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)


class ScopeConfigLoader:
    @staticmethod
    def load(path: Path) -> ScopeConfigModel:
        """
        Loads and validates a YAML scope configuration file.
        """
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Scope configuration not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in scope configuration {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Scope configuration {path} must be a mapping")

        try:
            config = ScopeConfigModel(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid scope configuration {path}: {e}") from e

        logger.info(f"Loaded {len(config.scopes)} changelog scope(s) from {path}")
        return config
