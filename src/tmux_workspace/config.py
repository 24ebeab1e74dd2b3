"""Configuration management for tmux-workspace."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import cast

import yaml
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tmux_workspace.workspace import DEFAULT_HISTFILE_NAME
from tmux_workspace.xdg_paths import PROJECT_CONFIG_NAME, get_config_file_path


class Config(BaseModel):
    """Configuration settings for tmux-workspace."""

    # Point HISTFILE of every new pane at a history file inside the workspace directory
    histfile: bool = True
    histfile_name: str = DEFAULT_HISTFILE_NAME

    # Print tmux commands instead of running them, as if --print was given
    print_commands: bool = False


@dataclass
class ConfigWarning:
    """A config validation warning."""

    file: str
    field_name: str
    message: str
    value: object = field(default=None, repr=False)


def _load_yaml_file(path: Path) -> tuple[dict[str, object], list[ConfigWarning]]:
    """Load a YAML mapping from ``path``.

    A file that doesn't exist (or sits under something that isn't a directory)
    is simply absent. Every other problem becomes a warning and an empty dict.
    """
    try:
        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (FileNotFoundError, NotADirectoryError):
        return {}, []
    except OSError as e:
        return {}, [ConfigWarning(file=str(path), field_name="(file)", message=f"File read error: {e}")]
    except yaml.YAMLError as e:
        return {}, [ConfigWarning(file=str(path), field_name="(file)", message=f"YAML parse error: {e}")]

    if raw is None:
        return {}, []
    if not isinstance(raw, dict):
        return {}, [ConfigWarning(file=str(path), field_name="(file)", message="expected a mapping", value=raw)]
    return cast(dict[str, object], raw), []


def load_config(
    config_path: Path | None = None,
    project_dir: Path | None = None,
) -> tuple[Config, list[ConfigWarning]]:
    """Load configuration with layered merging.

    Loading order (last value wins):
    1. User config (~/.config/tmux-workspace/config.yaml) - base
    2. Project config (.tmux-workspace.yaml in project_dir) - per-workspace overrides

    Invalid settings are reported as warnings and fall back to their defaults.

    Args:
        config_path: Optional path to user config file. Uses default if None.
        project_dir: Optional workspace directory containing .tmux-workspace.yaml.

    Returns:
        Tuple of (loaded Config, list of ConfigWarnings).
    """
    settings, warnings = _load_yaml_file(config_path or get_config_file_path())

    if project_dir:
        project_settings, project_warnings = _load_yaml_file(project_dir / PROJECT_CONFIG_NAME)
        warnings.extend(project_warnings)
        # All settings are scalars, so a project key replaces the user one outright
        settings = {**settings, **project_settings}

    try:
        return Config.model_validate(settings), warnings
    except ValidationError as e:
        for error in e.errors():
            name = ".".join(str(loc) for loc in error["loc"])
            warnings.append(
                ConfigWarning(file="merged config", field_name=name, message=error["msg"], value=error.get("input"))
            )
            if error["loc"]:
                settings.pop(str(error["loc"][0]), None)

    try:
        return Config.model_validate(settings), warnings
    except ValidationError:
        return Config(), warnings


def display_config_warnings(warnings: list[ConfigWarning], console: Console) -> None:
    """Show config warnings as a table, one row per problem."""
    if not warnings:
        return

    table = Table.grid(padding=(0, 2))
    table.add_column(style="dim")
    table.add_column(style="bold")
    table.add_column(style="yellow")
    for warning in warnings:
        problem = warning.message
        if warning.value is not None:
            problem += f" (got: {warning.value!r})"
        table.add_row(Text(warning.file), Text(warning.field_name), Text(problem))

    console.print(Panel(table, title="[yellow]Config Warnings[/]", border_style="yellow"))
