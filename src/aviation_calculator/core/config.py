"""Configuration loader for YAML files.

This module provides configuration loading with support for nested access,
defaults, and packaged data files such as the airframe performance tables.

Typical usage example:
    from aviation_calculator.core.config import ConfigLoader

    config = ConfigLoader.load_resource("fk9.yaml")
    max_slope = config.get("limits.max_slope_percent", default=25.0)
"""

import logging
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DATA_PACKAGE = "aviation_calculator.data"


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Configuration loader for YAML files.

    Provides loading, nested access, and default values for configuration.

    Examples:
        >>> config = ConfigLoader.load("config/logging.yaml")
        >>> level = config.get("console.level", default="INFO")
    """

    def __init__(self, data: dict[str, Any]) -> None:
        """Initialize with configuration data.

        Args:
            data: Configuration dictionary.
        """
        self._data = data

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If file cannot be loaded.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        logger.debug("Loaded configuration from: %s", path)
        return cls._from_document(data, str(path))

    @classmethod
    def load_resource(cls, name: str, package: str = DATA_PACKAGE) -> "ConfigLoader":
        """Load a YAML data file shipped inside the package.

        Args:
            name: File name inside the data package (e.g., "fk9.yaml").
            package: Dotted name of the package holding the file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If the resource is missing or not valid YAML.

        Examples:
            >>> tables = ConfigLoader.load_resource("fk9.yaml")
        """
        resource = resources.files(package).joinpath(name)

        if not resource.is_file():
            raise ConfigError(f"Data file not found: {package}/{name}")

        try:
            data = yaml.safe_load(resource.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {package}/{name}: {e}") from e

        logger.debug("Loaded data file: %s/%s", package, name)
        return cls._from_document(data, f"{package}/{name}")

    @classmethod
    def _from_document(cls, data: Any, source: str) -> "ConfigLoader":
        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {source}")

        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Supports nested access like "engines.rotax_912_uls.mass_kg".

        Args:
            key: Configuration key (supports dot notation).
            default: Default value if key not found.

        Returns:
            Configuration value or default.
        """
        keys = key.split(".")
        value = self._data

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Args:
            key: Section key (supports dot notation).

        Returns:
            Configuration section as dictionary.

        Raises:
            ConfigError: If section not found or not a dict.
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value

    def merge(self, other: "ConfigLoader") -> None:
        """Merge another configuration into this one.

        Args:
            other: ConfigLoader to merge from.

        Note:
            Other config values override existing ones.
        """
        self._data = self._merge_dicts(self._data, other._data)

    def _merge_dicts(self, base: dict, override: dict) -> dict:
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value

        return result

    def to_dict(self) -> dict[str, Any]:
        """Get the configuration as a dictionary.

        Returns:
            Configuration dictionary.
        """
        return self._data.copy()
