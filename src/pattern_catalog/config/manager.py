"""Configuration management for the catalog."""
from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from pattern_catalog._package import ENV_PREFIX
from pattern_catalog.config.schemas import AppConfig
from pattern_catalog.config.utils.env_expansion import expand_env_vars
from pattern_catalog.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    f"{ENV_PREFIX}_LOG_LEVEL": ("logging", "level"),
    f"{ENV_PREFIX}_LOG_DESTINATION": ("logging", "destination"),
    f"{ENV_PREFIX}_LOG_FILE": ("logging", "file_path"),
    f"{ENV_PREFIX}_FORMAT": ("catalog", "output_format"),
}


class ConfigurationManager:
    """
    Single source of truth for catalog configuration.

    Configuration is assembled from, in increasing precedence:
    - schema defaults
    - an optional JSON or YAML file
    - environment variable overrides

    Loading is lazy and happens once.
    """

    def __init__(self, config_file: Optional[str] = None):
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    def get_app_config(self) -> AppConfig:
        """
        Get the validated application configuration.

        Raises:
            ConfigurationError: If the file cannot be read or fails validation
        """
        with self._lock:
            if self._app_config is None:
                self._app_config = self._load()
            return self._app_config

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a single configuration value."""
        section_config = getattr(self.get_app_config(), section, None)
        if section_config is None:
            return default
        return getattr(section_config, key, default)

    def reload(self) -> AppConfig:
        """Discard the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
            return self.get_app_config()

    def _load(self) -> AppConfig:
        data: Dict[str, Any] = {}
        if self._config_file:
            data = self._read_file(Path(self._config_file))
        data = expand_env_vars(data)
        self._apply_env_overrides(data)

        try:
            config = AppConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.error_count()} validation error(s)",
                details=e.errors(),
            ) from e

        logger.debug("Configuration loaded from %s", self._config_file or "defaults")
        return config

    @staticmethod
    def _read_file(path: Path) -> Dict[str, Any]:
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot parse configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a mapping at the top level"
            )
        return data

    @staticmethod
    def _apply_env_overrides(data: Dict[str, Any]) -> None:
        for env_var, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value:
                data.setdefault(section, {})[key] = value
                logger.debug("Applied override %s -> %s.%s", env_var, section, key)
