"""Exceptions raised by tmux-workspace."""


class WorkspaceError(Exception):
    """A workspace window could not be opened or flipped."""


class TmuxError(WorkspaceError):
    """A tmux invocation failed."""
