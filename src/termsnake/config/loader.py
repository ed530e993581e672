"""Configuration loader"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable, Optional

import yaml
from rich.markup import escape

from termsnake.utils.console import print_warning

from .schema import Config

# Default config file names
USER_CONFIG_DIR = ".termsnake"
USER_CONFIG_FILE = "config.yaml"
PROJECT_CONFIG_FILE = ".termsnake.yaml"


def get_user_config_path() -> Path:
    """Get user configuration file path"""
    return Path.home() / USER_CONFIG_DIR / USER_CONFIG_FILE


def get_project_config_path(project_root: Optional[Path] = None) -> Path:
    """Get project configuration file path"""
    root = project_root or Path.cwd()
    return root / PROJECT_CONFIG_FILE


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries"""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _env_number(name: str, cast: Callable[[str], Any] = int) -> Optional[Any]:
    """Read a numeric override, warning about and skipping values that do not parse"""
    if raw := os.getenv(name):
        try:
            return cast(raw)
        except ValueError:
            print_warning(escape(f"Ignoring {name}={raw!r}: not a valid {cast.__name__}"))
    return None


def _apply_env_vars(config_data: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides"""

    if (width := _env_number("TERMSNAKE_WIDTH")) is not None:
        config_data.setdefault("board", {})["width"] = width

    if (height := _env_number("TERMSNAKE_HEIGHT")) is not None:
        config_data.setdefault("board", {})["height"] = height

    # TERMSNAKE_SPEED is the starting tick interval in seconds
    if (speed := _env_number("TERMSNAKE_SPEED", float)) is not None:
        config_data.setdefault("speed", {})["base_interval"] = speed

    if data_path := os.getenv("TERMSNAKE_DATA_PATH"):
        config_data.setdefault("storage", {})["data_path"] = data_path

    return config_data


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML configuration file"""
    if not path.exists():
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
            return data if isinstance(data, dict) else {}
    except (OSError, yaml.YAMLError):
        return {}


def load_config(
    project_root: Optional[Path] = None,
    user_config_path: Optional[Path] = None,
    project_config_path: Optional[Path] = None,
    extra_config_path: Optional[Path] = None,
) -> Config:
    """
    Load configuration from multiple sources.

    Priority (highest to lowest):
    1. Environment variables
    2. Extra config passed with --config
    3. Project config (.termsnake.yaml)
    4. User config (~/.termsnake/config.yaml)
    5. Default values

    Args:
        project_root: Project root directory (default: cwd)
        user_config_path: Custom user config path
        project_config_path: Custom project config path
        extra_config_path: Additional config file applied on top of the others

    Returns:
        Merged Config object
    """
    config_data: dict[str, Any] = {}

    # Load user config
    user_path = user_config_path or get_user_config_path()
    user_data = _load_yaml_file(user_path)
    if user_data:
        config_data = _deep_merge(config_data, user_data)

    # Load project config
    project_path = project_config_path or get_project_config_path(project_root)
    project_data = _load_yaml_file(project_path)
    if project_data:
        config_data = _deep_merge(config_data, project_data)

    if extra_config_path is not None:
        extra_data = _load_yaml_file(extra_config_path)
        if extra_data:
            config_data = _deep_merge(config_data, extra_data)

    # Apply environment variables
    config_data = _apply_env_vars(config_data)

    return Config(**config_data)


def save_config(config: Config, path: Path) -> None:
    """Save configuration to file"""
    # Ensure parent directory exists
    path.parent.mkdir(parents=True, exist_ok=True)

    # Convert to dict, excluding defaults
    data = config.model_dump(exclude_defaults=True)

    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True)


DEFAULT_CONFIG_TEMPLATE = """# termsnake configuration
# Location: ~/.termsnake/config.yaml
# Project overrides: .termsnake.yaml in the current directory

# ===== Board =====
board:
  width: 30
  height: 20

# ===== Speed (seconds) =====
speed:
  base_interval: 0.150   # tick interval at score 0
  speed_step: 0.005      # faster by this much per point
  min_interval: 0.060    # never faster than this
  poll_interval: 0.020
  game_over_pause: 2.0

# ===== High scores =====
storage:
  data_path: ".data/data.json"

# ===== Display =====
display:
  snake_color: "green"
  head_color: "bright_green"
  food_color: "red"
  border_color: "grey50"
  show_scores: true
"""


def init_user_config(force: bool = False) -> Path:
    """Initialize the user configuration file.

    Args:
        force: If True, overwrite existing config file

    Returns:
        Path to config file
    """
    config_path = get_user_config_path()

    # Create directory if it doesn't exist
    config_path.parent.mkdir(parents=True, exist_ok=True)

    if config_path.exists() and not force:
        return config_path

    config_path.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    return config_path


def ensure_config_dir() -> Path:
    """Ensure ~/.termsnake directory exists and return path.

    Called on CLI startup. Does not create the config file, that is done
    by init_user_config().
    """
    config_dir = Path.home() / USER_CONFIG_DIR
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir
