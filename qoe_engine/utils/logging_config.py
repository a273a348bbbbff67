"""
Centralized logging configuration module.

The scoring modules only create module-level loggers
(``logging.getLogger(__name__)``); this module wires handlers for the
applications embedding the engine and for the ``qoe-score`` CLI:

- stderr console handler
- optional rotating log file
- optional YAML logging configuration (logging.config.dictConfig format)
"""

import logging
import logging.config
import logging.handlers
import os
from pathlib import Path
from typing import Optional

import yaml

LOG_FILE_NAME = "qoe_engine.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10MB
LOG_FILE_BACKUP_COUNT = 5


def _validate_log_level(log_level: str) -> str:
    """
    Validate and normalize log level.

    Args:
        log_level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Normalized log level string

    Raises:
        ValueError: If log level is invalid
    """
    valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    log_level = log_level.upper()

    if log_level not in valid_levels:
        raise ValueError(f"Invalid log level: {log_level}. Must be one of {valid_levels}")

    return log_level


def _create_log_directory(log_dir: str) -> Path:
    """
    Create the log directory if needed.

    Raises:
        OSError: If directory creation fails
    """
    log_path = Path(log_dir).resolve()
    log_path.mkdir(parents=True, exist_ok=True)
    return log_path


def setup_logging(
    log_dir: str = "logs",
    log_level: str = "WARNING",
    enable_console: bool = True,
    enable_file: bool = False,
    config_file: Optional[str] = None,
) -> None:
    """
    Setup centralized logging configuration.

    Args:
        log_dir: Directory for log files (default: "logs")
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Enable console (stderr) logging
        enable_file: Enable file logging with rotation
        config_file: Optional path to YAML config file (overrides other params)

    Raises:
        ValueError: If configuration is invalid
        OSError: If log directory creation fails
    """
    if config_file and os.path.exists(config_file):
        _setup_logging_from_file(config_file, log_dir)
        return

    log_level = _validate_log_level(log_level)

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {},
        "loggers": {},
        "root": {
            "level": log_level,
            "handlers": [],
        },
    }

    if enable_console:
        config["handlers"]["console"] = {
            "class": "logging.StreamHandler",
            "level": log_level,
            "formatter": "standard",
            "stream": "ext://sys.stderr",
        }
        config["root"]["handlers"].append("console")

    log_path = None
    if enable_file:
        log_path = _create_log_directory(log_dir)
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": log_level,
            "formatter": "standard",
            "filename": str(log_path / LOG_FILE_NAME),
            "maxBytes": LOG_FILE_MAX_BYTES,
            "backupCount": LOG_FILE_BACKUP_COUNT,
            "encoding": "utf8",
        }
        config["root"]["handlers"].append("file")

    logging.config.dictConfig(config)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized: level={log_level}, console={enable_console}, file={enable_file}")
    if log_path is not None:
        logger.info(f"Log directory: {log_path}")


def _setup_logging_from_file(config_file: str, log_dir: str) -> None:
    """
    Setup logging from YAML configuration file.

    Args:
        config_file: Path to YAML configuration file
        log_dir: Base directory for log files (used to resolve relative paths)

    Raises:
        ValueError: If configuration file is invalid
        OSError: If configuration file cannot be read
    """
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in logging configuration: {e}") from e

    if not isinstance(config, dict):
        raise ValueError(f"Logging configuration {config_file} must be a mapping")

    handlers = config.get("handlers", {})
    if any("filename" in h for h in handlers.values()):
        log_path = _create_log_directory(log_dir)
        for handler_config in handlers.values():
            filename = handler_config.get("filename")
            if filename and not os.path.isabs(filename):
                handler_config["filename"] = str(log_path / filename)

    logging.config.dictConfig(config)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized from config file: {config_file}")


def shutdown_logging() -> None:
    """Flush and close all handlers before exit."""
    logging.shutdown()
