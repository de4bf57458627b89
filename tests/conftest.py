"""Shared fixtures: a scripted stand-in for the subprocess runner."""

from __future__ import annotations

import logging

import pytest

from ghnew.core.git_client import GitClient
from ghnew.core.github_client import GitHubClient
from ghnew.core.types import ToolResult

OK = ToolResult(True, "", "")


class FakeRunner:
    """Returns scripted results keyed by (executable, first argument) and records every call."""

    def __init__(self, results: dict[tuple[str, ...], ToolResult] | None = None) -> None:
        self.results = dict(results or {})
        self.calls: list[list[str]] = []

    def run(self, cmd: list[str], cwd: str | None = None) -> ToolResult:
        self.calls.append(list(cmd))
        return self.results.get(tuple(cmd[:2]), OK)

    def called(self, *prefix: str) -> bool:
        return any(tuple(c[: len(prefix)]) == prefix for c in self.calls)


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def git(runner: FakeRunner) -> GitClient:
    return GitClient(runner)


@pytest.fixture
def gh(runner: FakeRunner) -> GitHubClient:
    return GitHubClient(runner)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
