"""Configuration module"""

from .loader import (
    ensure_config_dir,
    get_project_config_path,
    get_user_config_path,
    init_user_config,
    load_config,
    save_config,
)
from .schema import (
    BoardConfig,
    Config,
    DisplayConfig,
    SpeedConfig,
    StorageConfig,
)

__all__ = [
    "Config",
    "BoardConfig",
    "SpeedConfig",
    "StorageConfig",
    "DisplayConfig",
    "load_config",
    "save_config",
    "init_user_config",
    "ensure_config_dir",
    "get_user_config_path",
    "get_project_config_path",
]
