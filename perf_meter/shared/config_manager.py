"""ConfigurationManager for the YAML measurement configuration.

The manager reads the configuration file, validates it against
MeasurementConfig and reports every problem as a ConfigurationError. It never
terminates the process; the entry point decides how to react.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import ValidationError

from .config import MeasurementConfig


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    def __init__(self, message: str, config_key: Optional[str] = None,
                 suggestions: Optional[List[str]] = None, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.config_key = config_key
        self.suggestions = suggestions or []
        self.cause = cause


logger = logging.getLogger(__name__)


class ConfigurationManager:
    """Loads and caches the measurement configuration."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        self.config_path = Path(config_path) if config_path is not None else None
        self._config: Optional[MeasurementConfig] = None

    @property
    def config(self) -> Optional[MeasurementConfig]:
        """The loaded configuration, or None before load()."""
        return self._config

    def load(self, config_path: Optional[Union[str, Path]] = None) -> MeasurementConfig:
        """Load configuration from a YAML file.

        Args:
            config_path: Optional path overriding the one given at construction

        Returns:
            The validated configuration instance

        Raises:
            ConfigurationError: If the file is missing, unreadable, not valid
                YAML, not a mapping, or fails validation.
        """
        if self._config is not None:
            logger.debug("Configuration already loaded, returning cached config")
            return self._config

        if config_path is not None:
            self.config_path = Path(config_path)
        if self.config_path is None:
            raise ConfigurationError("Option 'config' must be given", config_key="config")

        logger.info(f"Loading configuration from: {self.config_path}")

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
            logger.debug("Configuration file loaded successfully")

        except FileNotFoundError as e:
            error_msg = "Option 'config' must be a valid file"
            logger.error(f"{error_msg}: {e}")
            raise ConfigurationError(error_msg, config_key="config", cause=e)

        except OSError as e:
            error_msg = f"Unable to read configuration file {self.config_path}: {e}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg, config_key="config", cause=e)

        except yaml.YAMLError as e:
            error_msg = f"Invalid YAML in configuration file {self.config_path}: {e}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg, cause=e)

        if not isinstance(data, dict):
            error_msg = f"Configuration file {self.config_path} must contain a mapping"
            logger.error(error_msg)
            raise ConfigurationError(error_msg, suggestions=["Define 'base', 'pages' and 'requests' at the top level"])

        try:
            self._config = MeasurementConfig(**data)
            logger.info("Configuration validated successfully")

        except ValidationError as e:
            first = e.errors()[0]
            config_key = ".".join(str(part) for part in first.get("loc", ())) or None
            error_msg = f"Configuration validation error: {e}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg, config_key=config_key, cause=e)

        return self._config

    def get(self) -> MeasurementConfig:
        """Get the current configuration.

        Raises:
            ConfigurationError: If configuration is not loaded.
        """
        if self._config is None:
            error_msg = "Configuration not loaded. Call load() first."
            logger.error(error_msg)
            raise ConfigurationError(error_msg)
        return self._config

    def reload(self, config_path: Optional[Union[str, Path]] = None) -> MeasurementConfig:
        """Reload configuration from file."""
        self._config = None
        logger.info("Configuration reload requested")
        return self.load(config_path)

    def reset(self) -> None:
        """Clear the cached configuration."""
        self._config = None
        logger.info("Configuration manager reset")

    def is_loaded(self) -> bool:
        return self._config is not None
