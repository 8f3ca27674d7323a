"""Structlog-based logging configuration for Monkey Explorer.

This module provides structured logging configuration using structlog,
with git version tracking and environment-aware rendering:
- Docker / production: JSON lines on stderr
- Development: Human-readable console output on stderr

Logs always go to stderr so command output on stdout stays clean.
"""

import logging
import os
import subprocess
import sys
from collections.abc import Callable
from typing import Any

import structlog

from monkeyexplorer.config.models import ExplorerConfig


def is_docker_environment() -> bool:
    """Check if running in a Docker container."""
    return os.path.exists("/.dockerenv") or os.environ.get("DOCKER_CONTAINER") == "true"


def get_git_version() -> str:
    """Get the current git branch and commit hash for version logging.

    Returns version in format: branch@SHA[:8]
    """
    try:
        branch_result = subprocess.run(
            ["git", "rev-parse", "--abbrev-ref", "HEAD"],
            capture_output=True,
            text=True,
            timeout=5,
        )
        branch = branch_result.stdout.strip() if branch_result.returncode == 0 else "unknown"

        commit_result = subprocess.run(
            ["git", "rev-parse", "--short=8", "HEAD"],
            capture_output=True,
            text=True,
            timeout=5,
        )
        commit = commit_result.stdout.strip() if commit_result.returncode == 0 else "unknown"

        return f"{branch}@{commit}"
    except (subprocess.TimeoutExpired, subprocess.SubprocessError, FileNotFoundError):
        return "unknown"


def get_deployment_environment() -> str:
    """Get deployment environment with 'production' fallback."""
    if is_docker_environment():
        return "docker"
    elif os.environ.get("MONKEYEXPLORER_ENV") == "development":
        return "development"
    else:
        return "production"


def _add_static_context(extra_fields: dict[str, str]) -> Callable:
    """Processor to add static context fields to all log entries."""

    def processor(
        logger: structlog.BoundLogger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.update(extra_fields)
        return event_dict

    return processor


def _should_use_json(config: ExplorerConfig) -> bool:
    """Decide between JSON and console rendering."""
    if config.logging.json_logs is not None:
        return config.logging.json_logs
    # Auto-detect: JSON everywhere except development shells
    return get_deployment_environment() != "development"


def _configure_processors(config: ExplorerConfig, git_version: str) -> list:
    """Configure structlog processors based on environment."""
    extra_fields = {
        "service": "monkey-explorer",
        "version": git_version,
        "deployment": get_deployment_environment(),
        **config.logging.extra_fields,  # Allow config to override/add fields
    }

    processors = [
        structlog.contextvars.merge_contextvars,
        _add_static_context(extra_fields),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO"),
    ]

    if config.logging.include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder())

    if _should_use_json(config):
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    return processors


def _configure_handlers(config: ExplorerConfig) -> None:
    """Route stdlib logging to stderr at the configured level."""
    root_logger = logging.getLogger()
    log_level = getattr(logging, config.logging.level.upper(), logging.WARNING)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(log_level)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(log_level)
    stderr_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(stderr_handler)


def configure_structlog(config: ExplorerConfig) -> None:
    """Configure structlog-based logging system.

    Args:
        config: The ExplorerConfig instance containing logging settings.
    """
    git_version = get_git_version()
    processors = _configure_processors(config, git_version)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, config.logging.level.upper(), logging.WARNING)
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configure_handlers(config)

    logger = structlog.get_logger(__name__)
    logger.debug(
        "Structured logging configured",
        git_version=git_version,
        log_level=config.logging.level,
        environment=get_deployment_environment(),
        json_output=_should_use_json(config),
    )
