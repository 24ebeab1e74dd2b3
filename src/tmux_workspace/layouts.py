"""Fixed pane layouts for workspace windows.

Both layouts expect a window with exactly three panes, where pane 0 is the
main pane and panes 1 and 2 are secondary.

Narrow (main-vertical)::

    ---------------------
    |          |   1    |
    |    0     |--------|
    |          |   2    |
    ---------------------

Wide (even-horizontal)::

    ----------------------------
    |   0    |   1    |   2    |
    ----------------------------
"""

from tmux_workspace.tmux import Command

# Windows at least this many columns wide get the wide layout
WIDE_SCREEN_MIN_WIDTH = 300


def pane_target(win: str, index: int) -> str:
    """Return the tmux target for pane ``index`` of window ``win``."""
    return f"{win}.{index}"


def narrow_screen_layout(win: str) -> list[Command]:
    """Layout for small screens: main pane left, two panes stacked on the right.

    Args:
        win: The session-qualified window (``session:window``).

    Returns:
        Commands that arrange the panes and focus the main pane.
    """
    return [
        ["select-layout", "-t", win, "main-vertical"],
        ["resize-pane", "-x", "90", "-y", "20", "-t", pane_target(win, 1)],
        ["select-pane", "-t", pane_target(win, 0)],
    ]


def wide_screen_layout(win: str) -> list[Command]:
    """Layout for large (4k-ish) screens: three columns side by side.

    Args:
        win: The session-qualified window (``session:window``).

    Returns:
        Commands that arrange the panes and focus the middle pane.
    """
    return [
        ["select-layout", "-t", win, "even-horizontal"],
        ["resize-pane", "-x", "100", "-t", pane_target(win, 0)],
        ["select-pane", "-t", pane_target(win, 1)],
    ]


def is_wide_screen(width: str) -> bool:
    """Check whether a reported window width calls for the wide layout.

    Non-numeric widths count as narrow.
    """
    try:
        return int(width) >= WIDE_SCREEN_MIN_WIDTH
    except ValueError:
        return False
