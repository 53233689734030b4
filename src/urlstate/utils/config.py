"""
urlstate Configuration Loader.

Locates the project's .urlstate/ directory and loads .urlstate/config.yaml
for the path parser.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_DIR = ".urlstate"


def config_path_for(repo_root: Path) -> Path:
    return repo_root / CONFIG_DIR / "config.yaml"


def find_project_root(start: Optional[Path] = None) -> Path:
    """
    Find the nearest directory, from start upward, holding a .urlstate/ directory.

    Falls back to start (default: cwd) so commands still run unconfigured.
    """
    origin = (start or Path.cwd()).resolve()
    for candidate in (origin, *origin.parents):
        if config_path_for(candidate).parent.is_dir():
            return candidate
    return origin


def load_urlstate_config(repo_root: Path) -> Dict[str, Any]:
    """
    Load .urlstate/config.yaml configuration file.

    Args:
        repo_root: Project root path

    Returns:
        Parsed configuration dict, or empty dict if file doesn't exist

    Example config:
        state:
          base_url: http://abc.com:123
          series:
            - trusty
            - xenial
    """
    config_path = config_path_for(repo_root)

    if not config_path.exists():
        return {}

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Could not read %s: %s", config_path, e)
        return {}

    if not isinstance(config, dict):
        if config is not None:
            logger.warning("Ignoring %s: top level must be a mapping", config_path)
        return {}
    return config


def get_state_config(repo_root: Path) -> Dict[str, Any]:
    """
    Get parser configuration.

    Args:
        repo_root: Project root path

    Returns:
        State configuration dict with defaults applied
    """
    config = load_urlstate_config(repo_root)
    state_config = config.get("state") or {}
    if not isinstance(state_config, dict):
        logger.warning(
            "Ignoring 'state' in %s: expected a mapping, got %s",
            config_path_for(repo_root), type(state_config).__name__,
        )
        state_config = {}

    defaults = {
        "base_url": None,
        "series": None,
    }

    for key, default_value in defaults.items():
        if key not in state_config:
            state_config[key] = default_value

    return state_config


def parse_series_option(value: Optional[str]) -> Optional[List[str]]:
    """Split a comma-separated --series option into a series list."""
    if value is None:
        return None
    return [series.strip() for series in value.split(",") if series.strip()]
