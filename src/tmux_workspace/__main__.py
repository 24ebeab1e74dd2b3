"""CLI entry point for tmux-workspace."""

import os
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from tmux_workspace import __version__
from tmux_workspace.config import display_config_warnings, load_config
from tmux_workspace.errors import WorkspaceError
from tmux_workspace.tmux import Command, is_inside_tmux, pane_attr, run_commands, serialize_commands
from tmux_workspace.workspace import default_window_name, flip_layout, open_window
from tmux_workspace.xdg_paths import get_config_file_path

app = typer.Typer(
    name="tmux-workspace",
    help="Create a new workspace by providing a directory, or flip between workspace layouts.",
    no_args_is_help=False,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"tmux-workspace {__version__}")
        raise typer.Exit()


def _fail(context: str, error: Exception) -> typer.Exit:
    """Report an error on stderr and return the exit to raise."""
    err_console.print(f"[red]Error:[/] {escape(context)}: {escape(str(error))}", highlight=False, soft_wrap=True)
    return typer.Exit(1)


def _first_attr(attr: str, what: str) -> str:
    """Return the first pane's value of ``attr``, exiting if tmux can't tell."""
    try:
        return pane_attr(attr)[0]
    except WorkspaceError as e:
        raise _fail(f"couldn't find {what}", e) from None


@app.command()
def main(
    ctx: typer.Context,
    directories: Annotated[
        list[str] | None,
        typer.Argument(
            metavar="[DIRECTORY]",
            help="Open a new workspace window in this directory. Without it, flip the current window's layout.",
            show_default=False,
        ),
    ] = None,
    session: Annotated[
        str | None,
        typer.Option("--session", "-session", "-s", help="The target session (default: current session)."),
    ] = None,
    window: Annotated[
        str | None,
        typer.Option("--window", "-window", "-w", help="The target window (default: derived or current window)."),
    ] = None,
    print_commands: Annotated[
        bool,
        typer.Option("--print", "-print", "-p", help="Print the tmux commands instead of executing."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-C", help="Config file path."),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help="Increase verbosity."),
    ] = 0,
    dump_config: Annotated[
        bool,
        typer.Option("--dump-config", help="Output current configuration."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version."),
    ] = None,
) -> None:
    """Create a new workspace by providing a directory, or flip between workspace layouts."""
    if directories and len(directories) > 1:
        err_console.print(ctx.get_usage(), markup=False, highlight=False)
        raise typer.Exit(1)
    directory = directories[0] if directories else None
    abs_dir = Path(os.path.abspath(directory)) if directory is not None else None

    config, config_warnings = load_config(config_path, project_dir=abs_dir)
    if config_warnings:
        display_config_warnings(config_warnings, err_console)

    if dump_config:
        console.print(yaml.dump(config.model_dump(), default_flow_style=False), markup=False)
        raise typer.Exit()

    if verbose > 1:
        err_console.print(f"[dim]Config file: {config_path or get_config_file_path()}[/]")

    if not is_inside_tmux():
        err_console.print("[red]Error:[/] please run inside tmux")
        raise typer.Exit(1)

    if not session:
        session = _first_attr("session_name", "session name")

    commands: list[Command]
    if abs_dir is not None:
        if not window:
            window = default_window_name(str(abs_dir))
        if verbose > 0:
            target = escape(f"{session}:{window}")
            err_console.print(f"[dim]Opening {target} in {escape(str(abs_dir))}[/]", highlight=False)
        try:
            commands = open_window(
                session,
                window,
                abs_dir,
                histfile=config.histfile,
                histfile_name=config.histfile_name,
            )
        except WorkspaceError as e:
            raise _fail("open failed", e) from None
    else:
        if not window:
            window = _first_attr("window_name", "window name")
        if verbose > 0:
            target = escape(f"{session}:{window}")
            err_console.print(f"[dim]Flipping layout of {target}[/]", highlight=False)
        try:
            commands = flip_layout(session, window)
        except WorkspaceError as e:
            raise _fail("failed to flip layouts", e) from None

    if print_commands or config.print_commands:
        typer.echo(" ".join(serialize_commands(commands)))
        return

    try:
        run_commands(commands)
    except WorkspaceError as e:
        raise _fail("failed to run tmux commands", e) from None


if __name__ == "__main__":
    app()
