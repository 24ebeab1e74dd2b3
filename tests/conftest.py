"""Shared fixtures for tmux-workspace tests."""

import subprocess
from collections.abc import Iterator
from unittest.mock import patch

import pytest


class FakeTmux:
    """Stand-in for ``subprocess.run`` that answers tmux invocations.

    ``attrs`` maps a list-panes format variable to its per-pane values,
    ``existing`` holds the targets has-session should find, and every other
    invocation is recorded in ``runs`` and answered with ``run_returncode``.
    """

    def __init__(self) -> None:
        self.attrs: dict[str, list[str]] = {}
        self.existing: set[str] = set()
        self.runs: list[list[str]] = []
        self.run_returncode = 0
        self.run_output = ""

    def __call__(self, cmd: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        if cmd[1] == "list-panes":
            attr = cmd[3][2:-1]
            if attr not in self.attrs:
                return subprocess.CompletedProcess(cmd, 1, stdout="", stderr="no server running")
            return subprocess.CompletedProcess(cmd, 0, stdout="\n".join(self.attrs[attr]) + "\n", stderr="")
        if cmd[1] == "has-session":
            return subprocess.CompletedProcess(cmd, 0 if cmd[3] in self.existing else 1, stdout="", stderr="")
        self.runs.append(cmd)
        return subprocess.CompletedProcess(cmd, self.run_returncode, stdout=self.run_output, stderr=None)


@pytest.fixture
def fake_tmux() -> Iterator[FakeTmux]:
    """Patch tmux invocations with a FakeTmux."""
    fake = FakeTmux()
    with patch("tmux_workspace.tmux.subprocess.run", side_effect=fake):
        yield fake
