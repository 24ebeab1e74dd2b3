"""XDG-compliant path management for tmux-workspace."""

from pathlib import Path

from xdg_base_dirs import xdg_config_home

APP_NAME = "tmux-workspace"
PROJECT_CONFIG_NAME = ".tmux-workspace.yaml"


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    return xdg_config_home() / APP_NAME


def get_config_file_path() -> Path:
    """Get the config.yaml file path."""
    return get_config_dir() / "config.yaml"
