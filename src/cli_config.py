"""Runtime configuration for the CLI.

Settings come from an optional YAML/JSON file (``--config`` or the
``SANEPACK_CONFIG`` environment variable); command-line flags always win.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from constants import Constants
from errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass
class RunConfig:
    """Resolved settings for one run."""

    target: str = Constants.DEFAULT_TARGET
    templates: Optional[str] = None
    output_dir: Optional[str] = None


def load_config_file(config_path: Optional[str]) -> Dict[str, Any]:
    """Load the settings mapping from ``config_path``.

    A missing path yields an empty mapping; an unreadable or malformed file
    is an error.
    """
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    # YAML is a superset of JSON, so one loader covers both formats.
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"could not read config {config_path}: {exc}") from exc
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise ConfigError(f"could not parse config {config_path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config {config_path}: expected a mapping")
    return data.get("sanepack", data)


def resolve_config(args: Any) -> RunConfig:
    """Merge file settings with CLI overrides (CLI has highest precedence)."""
    path = getattr(args, "CONFIG", None) or os.environ.get(Constants.ENV_CONFIG)
    settings = load_config_file(path)
    if settings:
        logger.info("Loaded config from: %s", path)

    config = RunConfig(
        target=str(settings.get("target") or Constants.DEFAULT_TARGET).lower(),
        templates=settings.get("templates"),
        output_dir=settings.get("output_dir"),
    )
    if getattr(args, "TARGET", None):
        config.target = args.TARGET
    if getattr(args, "TEMPLATES", None):
        config.templates = args.TEMPLATES
    if getattr(args, "OUTPUT_DIR", None):
        config.output_dir = args.OUTPUT_DIR
    return config


def resolve_log_level(args: Any) -> Optional[str]:
    """Map --loglevel/--debug/--verbose to a level name; None defers to the environment."""
    if getattr(args, "LOG_LEVEL", None):
        return str(args.LOG_LEVEL).upper()
    if getattr(args, "DEBUG", False):
        return "DEBUG"
    if getattr(args, "VERBOSE", False):
        return "INFO"
    return None
