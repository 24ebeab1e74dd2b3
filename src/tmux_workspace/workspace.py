"""Build the command sequences that open and flip workspace windows."""

import os
import stat
from pathlib import Path

from tmux_workspace.errors import WorkspaceError
from tmux_workspace.layouts import is_wide_screen, narrow_screen_layout, pane_target, wide_screen_layout
from tmux_workspace.tmux import Command, current_pane, pane_attr, window_exists

DEFAULT_HISTFILE_NAME = ".bash_history"


def absolute_window(session: str, window: str) -> str:
    """Return the session-qualified window name."""
    return f"{session}:{window}"


def default_window_name(directory: str) -> str:
    """Derive a window name from a directory path.

    tmux treats ``.`` as the window/pane separator in targets, so dots are
    replaced by underscores.

    Args:
        directory: The directory the window is opened in.

    Returns:
        The absolute path with every ``.`` replaced by ``_``.
    """
    return os.path.abspath(directory).replace(".", "_")


def open_window(
    session: str,
    window: str,
    directory: Path,
    histfile: bool = True,
    histfile_name: str = DEFAULT_HISTFILE_NAME,
) -> list[Command]:
    """Build the commands for a new three-pane workspace window.

    Args:
        session: The session to open the window in.
        window: The name of the new window.
        directory: Working directory for every pane.
        histfile: Whether to point HISTFILE at a per-directory history file.
        histfile_name: The history file name inside ``directory``.

    Returns:
        Commands creating the window, its two splits and the layout.

    Raises:
        WorkspaceError: If ``directory`` is not a directory or the window exists.
        TmuxError: If the window width could not be queried.
    """
    try:
        mode = directory.stat().st_mode
    except OSError as e:
        raise WorkspaceError(f"failed to stat {directory}: {e}") from e
    if not stat.S_ISDIR(mode):
        raise WorkspaceError(f"not a directory: {directory}")

    abs_win = absolute_window(session, window)
    if window_exists(abs_win):
        raise WorkspaceError(f"session already exists: {abs_win}")

    dir_str = str(directory)
    env: list[str] = ["-e", f"HISTFILE={dir_str}/{histfile_name}"] if histfile else []
    commands: list[Command] = [
        ["new-window", *env, "-c", dir_str, "-t", f"{session}:", "-n", window],
        ["split-window", *env, "-c", dir_str, "-t", abs_win],
        ["split-window", *env, "-c", dir_str, "-t", abs_win],
    ]

    widths = pane_attr("window_width")
    if is_wide_screen(widths[0]):
        return commands + wide_screen_layout(abs_win)
    return commands + narrow_screen_layout(abs_win)


def flip_layout(session: str, window: str) -> list[Command]:
    """Build the commands that flip a workspace window between its two layouts.

    Panes 0 and 1 swap places, the invoking pane keeps focus, and the layout
    the window is not currently in gets applied. Only the window of the
    invoking pane can be flipped, since the focused pane comes from
    ``TMUX_PANE``.

    Raises:
        WorkspaceError: If ``TMUX_PANE`` is unset or the window lacks exactly 3 panes.
        TmuxError: If the pane positions could not be queried.
    """
    pane = current_pane()
    if pane is None:
        raise WorkspaceError("TMUX_PANE is not set")

    abs_win = absolute_window(session, window)
    commands: list[Command] = [
        ["swap-pane", "-s", pane_target(abs_win, 0), "-t", pane_target(abs_win, 1)],
        ["select-pane", "-t", f"{abs_win}.{pane}"],
    ]

    at_bottom = pane_attr("pane_at_bottom")
    if len(at_bottom) != 3:
        raise WorkspaceError(f"expected 3 panes, got: {len(at_bottom)}")

    # Pane 1 above pane 2 means the window is currently narrow
    if at_bottom[1] == "0":
        return commands + wide_screen_layout(abs_win)
    return commands + narrow_screen_layout(abs_win)
