"""Configuration loading and default locations."""

from .config import Config
from .paths import default_config_path, default_log_file

__all__ = ["Config", "default_config_path", "default_log_file"]
