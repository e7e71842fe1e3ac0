"""
Configuration for the log sync.

Each setting is taken from the command line when given, then from its
environment variable, then from the built-in default.

Environment Variables:
    CI_LOGS_API_BASE: Buildbot API base URL (default: https://build.julialang.org/api/v2)
    CI_LOGS_DIR: Output root directory (default: ~/.ci/logs)
    CI_LOGS_TAIL: Builds per builder to mirror (default: 100)
    CI_LOGS_RETRIES: Extra attempts for each failed GET (default: 3)
"""

import logging
import os
from pathlib import Path

from cilog_client.client import DEFAULT_RETRIES
from cilog_datasources.buildbot import DEFAULT_API_BASE

logger = logging.getLogger(__name__)

DEFAULT_TAIL = 100


def get_api_base(cli_arg: str | None = None) -> str:
    """Get the buildbot API base URL."""
    if cli_arg:
        return cli_arg
    return os.environ.get("CI_LOGS_API_BASE", DEFAULT_API_BASE)


def default_output_dir() -> Path:
    """Get the output root from CI_LOGS_DIR or use ~/.ci/logs."""
    env_dir = os.environ.get("CI_LOGS_DIR")
    if env_dir:
        return Path(env_dir)
    return Path.home() / ".ci" / "logs"


def get_output_dir(cli_arg: str | None = None) -> Path:
    """Get the output root directory."""
    if cli_arg:
        return Path(cli_arg)
    return default_output_dir()


def _get_non_negative_int(cli_arg: int | None, env_var: str, default: int) -> int:
    # Command-line values are range-checked by click
    if cli_arg is not None:
        return cli_arg

    raw = os.environ.get(env_var)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Invalid {env_var}={raw}, using default {default}")
        return default
    if value < 0:
        logger.warning(f"Invalid {env_var}={value}, using default {default}")
        return default
    return value


def get_tail(cli_arg: int | None = None) -> int:
    """Get the number of most recent builds to mirror per builder."""
    return _get_non_negative_int(cli_arg, "CI_LOGS_TAIL", DEFAULT_TAIL)


def get_retries(cli_arg: int | None = None) -> int:
    """Get the number of extra attempts for each failed GET."""
    return _get_non_negative_int(cli_arg, "CI_LOGS_RETRIES", DEFAULT_RETRIES)
