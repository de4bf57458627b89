"""gh-based repository creation."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import GH_EXECUTABLE, GH_PROBE_ARGS, REPO_SOURCE
from .runner import CommandRunner
from .types import ToolResult, Visibility


class GitHubClient:
    def __init__(
        self,
        runner: CommandRunner,
        executable: str = GH_EXECUTABLE,
        probe_args: Sequence[str] = GH_PROBE_ARGS,
    ) -> None:
        self.runner = runner
        self.executable = executable
        self.probe_args = list(probe_args)

    def probe(self) -> bool:
        return self.runner.run([self.executable, *self.probe_args]).ok

    def create_repo(
        self,
        name: str,
        visibility: Visibility,
        *,
        source: str = REPO_SOURCE,
        cwd: str | None = None,
    ) -> ToolResult:
        """Run `gh repo create <name> --source=<dir> --<visibility>`; stdout is the repo URL."""
        cmd = [self.executable, "repo", "create", name, f"--source={source}", visibility.flag]
        return self.runner.run(cmd, cwd=cwd)
