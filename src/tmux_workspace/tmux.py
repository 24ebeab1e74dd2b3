"""Thin wrapper around the tmux command-line interface."""

import os
import subprocess

from tmux_workspace.errors import TmuxError

# A single tmux command, e.g. ["select-pane", "-t", "main:code.0"]
Command = list[str]

COMMAND_SEPARATOR = ";"


def is_inside_tmux() -> bool:
    """Check if we're running inside a tmux session."""
    return bool(os.environ.get("TMUX"))


def current_pane() -> str | None:
    """Return the id of the pane this process runs in (e.g. ``%3``)."""
    return os.environ.get("TMUX_PANE") or None


def pane_attr(attr: str) -> list[str]:
    """Query a format attribute for every pane of the current window.

    Args:
        attr: The tmux format variable name, without ``#{}`` (e.g. ``window_width``).

    Returns:
        One value per pane, in the order tmux lists them.

    Raises:
        TmuxError: If tmux could not be run or exited non-zero.
    """
    try:
        result = subprocess.run(
            ["tmux", "list-panes", "-F", f"#{{{attr}}}"],
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        raise TmuxError(f"failed to get attribute {attr}: {e}") from e

    if result.returncode != 0:
        raise TmuxError(f"failed to get attribute {attr}: {result.stderr.strip()}")

    return result.stdout.strip().split("\n")


def window_exists(target: str) -> bool:
    """Check if a tmux target (``session`` or ``session:window``) exists.

    Args:
        target: The target to look up.

    Returns:
        True if tmux has-session succeeds for the target, False otherwise.
    """
    try:
        result = subprocess.run(
            ["tmux", "has-session", "-t", target],
            capture_output=True,
            check=False,
        )
    except FileNotFoundError:
        return False
    return result.returncode == 0


def serialize_commands(commands: list[Command]) -> list[str]:
    """Flatten commands into one tmux argument list, separating each with ``;``."""
    args: list[str] = []
    for cmd in commands:
        args.extend(cmd)
        if args and args[-1] != COMMAND_SEPARATOR:
            args.append(COMMAND_SEPARATOR)
    return args


def run_commands(commands: list[Command]) -> None:
    """Run all commands in a single tmux invocation.

    Args:
        commands: The commands to run, in order.

    Raises:
        TmuxError: If tmux could not be run or exited non-zero. The message
            carries tmux's combined stdout and stderr.
    """
    args = serialize_commands(commands)
    try:
        result = subprocess.run(
            ["tmux", *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        raise TmuxError(f"failed to run tmux command {args}: {e}") from e

    if result.returncode != 0:
        raise TmuxError(f"failed to run tmux command {args} ({result.stdout.strip()})")
