"""Thin wrapper around the git executable."""

from __future__ import annotations

from .constants import GIT_EXECUTABLE, GIT_PROBE_ARGS
from .runner import CommandRunner
from .types import ToolResult


class GitClient:
    def __init__(self, runner: CommandRunner, executable: str = GIT_EXECUTABLE) -> None:
        self.runner = runner
        self.executable = executable

    def probe(self) -> bool:
        return self.runner.run([self.executable, *GIT_PROBE_ARGS]).ok

    def init(self, cwd: str | None = None) -> ToolResult:
        return self.runner.run([self.executable, "init"], cwd=cwd)
