"""Logging system for the calculation modules.

This module provides a small logging layer with optional YAML configuration
and per-module log levels. The package never installs handlers on its own;
a host application opts in by calling initialize_logging().

Typical usage example:
    from aviation_calculator.core.logging_system import get_logger

    logger = get_logger(__name__)

    def pressure_altitude(qnh, elevation):
        ...
        logger.debug("Pressure altitude for QNH %.2f hPa: %.2f ft", qnh, result)

A YAML configuration looks like:

    level: DEBUG
    console:
      enabled: true
      level: INFO
    file:
      enabled: true
      path: logs/aviation_calculator.log
    modules:
      aviation_calculator.navigation.wind_triangle:
        level: DEBUG
"""

import logging
import time
from pathlib import Path
from typing import Any

from aviation_calculator.core.config import ConfigError, ConfigLoader

PACKAGE_LOGGER_NAME = "aviation_calculator"

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_handlers: list[logging.Handler] = []
_initialized = False


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def initialize_logging(config_path: str | Path | None = None) -> None:
    """Initialize the logging system.

    Installs the configured handlers on the package logger. Calling it again
    replaces the previous configuration.

    Args:
        config_path: Path to a logging configuration YAML file.
            If None, uses the default configuration (console at INFO).

    Raises:
        LoggingError: If the configuration file cannot be loaded.

    Examples:
        >>> initialize_logging("config/logging.yaml")
        >>> log = get_logger("aviation_calculator.atmosphere")
        >>> log.info("Logging initialized")
    """
    global _logging_config, _initialized

    config = ConfigLoader(_get_default_config())
    if config_path:
        try:
            config.merge(ConfigLoader.load(config_path))
        except ConfigError as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e

    _logging_config = config.to_dict()
    _configure_package_logger()

    # Re-apply module levels to loggers handed out before initialization
    for name, logger in _loggers_cache.items():
        _apply_module_config(name, logger)

    _initialized = True


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration.

    Returns:
        Default logging configuration dictionary.
    """
    return {
        "level": "DEBUG",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "console": {
            "enabled": True,
            "level": "INFO",
        },
        "file": {
            "enabled": False,
            "path": "logs/aviation_calculator.log",
        },
        "modules": {},
    }


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise LoggingError(f"Unknown log level: {level}")
    return resolved


def _configure_package_logger() -> None:
    """Replace the handlers of the package logger with the configured ones."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(_resolve_level(_logging_config.get("level", "DEBUG")))

    for handler in _handlers:
        package_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()

    console_config = _logging_config.get("console", {})
    if console_config.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_resolve_level(console_config.get("level", "INFO")))
        console_handler.setFormatter(_get_formatter())
        _handlers.append(console_handler)

    file_config = _logging_config.get("file", {})
    if file_config.get("enabled", False):
        log_file = Path(file_config.get("path", "logs/aviation_calculator.log"))
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            raise LoggingError(f"Cannot open log file {log_file}: {e}") from e
        file_handler.setLevel(_resolve_level(file_config.get("level", "DEBUG")))
        file_handler.setFormatter(_get_formatter())
        _handlers.append(file_handler)

    for handler in _handlers:
        package_logger.addHandler(handler)


class MillisecondFormatter(logging.Formatter):
    """Formatter that shows milliseconds with dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def _apply_module_config(name: str, logger: logging.Logger) -> None:
    module_config = _logging_config.get("modules", {}).get(name, {})

    if not module_config.get("enabled", True):
        logger.disabled = True
        return

    logger.disabled = False
    if "level" in module_config:
        logger.setLevel(_resolve_level(module_config["level"]))


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module.

    Loggers are cached and reused. Each logger can have its own level
    specified in the logging config YAML under the 'modules' section.

    Args:
        name: Logger name (typically the module's __name__).

    Returns:
        Configured logger instance.

    Examples:
        >>> log = get_logger(__name__)
        >>> log.debug("Wind correction angle: %.2f deg", wca)

    Note:
        Use lazy formatting (%) instead of f-strings.
    """
    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    if _initialized:
        _apply_module_config(name, logger)

    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Detach and close the handlers installed by initialize_logging().

    Examples:
        >>> shutdown_logging()
    """
    global _initialized

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in _handlers:
        handler.flush()
        package_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()
    package_logger.setLevel(logging.NOTSET)

    for logger in _loggers_cache.values():
        logger.disabled = False
        logger.setLevel(logging.NOTSET)
    _loggers_cache.clear()
    _logging_config.clear()
    _initialized = False
