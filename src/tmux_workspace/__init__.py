"""Open and flip three-pane tmux workspace windows."""

__version__ = "0.1.0"
