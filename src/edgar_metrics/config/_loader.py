"""
YAML defaults for the settings classes.

The YAML files live in ``edgar_metrics/configs`` and are installed as package
data. ``PATHS_CONFIGS_DIR`` points the loader at another directory, e.g. a
deployment-specific copy.

Usage:
    from edgar_metrics.config._loader import load_yaml_section

    parser_defaults = load_yaml_section("config.yaml").get("submission_parser", {})
    metrics_defaults = load_yaml_section("features/disclosure_metrics.yaml", "disclosure_metrics")
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from edgar_metrics.config.paths import PathsConfig

logger = logging.getLogger(__name__)


def configs_dir() -> Path:
    """Directory holding the YAML defaults (honours PATHS_CONFIGS_DIR)."""
    return PathsConfig().configs_dir


@lru_cache(maxsize=16)
def _read_yaml(path: Path) -> Dict[str, Any]:
    """
    Parse one YAML file into a mapping.

    Raises:
        ValueError: If the file holds something other than a mapping
    """
    if not path.is_file():
        logger.debug(f"No config file at {path}; using built-in defaults")
        return {}

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )
    return data


def load_yaml_section(config_file: str, section: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a YAML file from the configs directory, or one top-level section of it.

    Args:
        config_file: Path relative to the configs directory
        section: Optional top-level key (e.g. "disclosure_metrics")

    Returns:
        Mapping of settings; empty when the file or section is absent
    """
    data = _read_yaml(configs_dir() / config_file)
    if section is None:
        return data
    return data.get(section) or {}


def clear_config_cache() -> None:
    """Forget parsed files so the next load rereads them (used by tests)."""
    _read_yaml.cache_clear()
