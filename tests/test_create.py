"""Unit tests for the confirm -> git init -> gh repo create flow."""

from __future__ import annotations

import pytest

from ghnew.core.errors import CreateFailed, InitFailed
from ghnew.core.types import RepositoryRequest, Stage, ToolResult, Visibility
from ghnew.services.create import confirm, confirmation_prompt, create_repository, success_message

URL = "https://example.com/u/myrepo"


def _answer(line: str):
    return lambda prompt: line


@pytest.fixture
def request_() -> RepositoryRequest:
    return RepositoryRequest(name="myrepo")


@pytest.mark.parametrize("line", ["Y", "yes", "y\n", "Yep\n"])
def test_confirm_accepts(request_: RepositoryRequest, line: str) -> None:
    assert confirm(request_, _answer(line)) is True


@pytest.mark.parametrize("line", ["", "\n", "n", "no", "x", " y"])
def test_confirm_declines(request_: RepositoryRequest, line: str) -> None:
    assert confirm(request_, _answer(line)) is False


def test_prompt_shows_visibility_and_name() -> None:
    prompt = confirmation_prompt(RepositoryRequest(name="tools", visibility=Visibility.public))

    assert prompt == "Are you sure you want to create a public repository with name tools [N/y] "


@pytest.mark.parametrize("line", ["", "n", "no", "x"])
def test_decline_runs_nothing(runner, git, gh, request_: RepositoryRequest, line: str) -> None:
    outcome = create_repository(request_, git=git, gh=gh, ask=_answer(line))

    assert outcome.stage is Stage.cancelled
    assert not outcome.failed
    assert runner.calls == []


def test_success(runner, git, gh, request_: RepositoryRequest) -> None:
    runner.results[("gh", "repo")] = ToolResult(True, f"{URL}\n", "")

    outcome = create_repository(request_, git=git, gh=gh, ask=_answer("y"))

    assert outcome.stage is Stage.succeeded
    assert outcome.url == URL
    assert runner.calls == [
        ["git", "init"],
        ["gh", "repo", "create", "myrepo", "--source=.", "--private"],
    ]


def test_public_flag_is_passed_to_gh(runner, git, gh) -> None:
    request = RepositoryRequest(name="tools", visibility=Visibility.public)

    create_repository(request, git=git, gh=gh, ask=_answer("y"))

    assert runner.calls[-1] == ["gh", "repo", "create", "tools", "--source=.", "--public"]


def test_init_failure_skips_gh(runner, git, gh, request_: RepositoryRequest) -> None:
    runner.results[("git", "init")] = ToolResult(False, "", "fatal: cannot mkdir .git\n")

    outcome = create_repository(request_, git=git, gh=gh, ask=_answer("y"))

    assert outcome.stage is Stage.init_failed
    assert isinstance(outcome.error, InitFailed)
    assert outcome.failed
    assert str(outcome.error) == "Git init failed: fatal: cannot mkdir .git"
    assert not runner.called("gh")


def test_init_failure_without_stderr_still_explains(runner, git, gh, request_: RepositoryRequest) -> None:
    runner.results[("git", "init")] = ToolResult(False, "", "  ")

    outcome = create_repository(request_, git=git, gh=gh, ask=_answer("y"))

    assert outcome.stage is Stage.init_failed
    assert str(outcome.error).startswith("Git init failed: ")
    assert str(outcome.error) != "Git init failed: "


def test_create_failure_reports_stderr(runner, git, gh, request_: RepositoryRequest) -> None:
    runner.results[("gh", "repo")] = ToolResult(False, "", "GraphQL: Name already exists\n")

    outcome = create_repository(request_, git=git, gh=gh, ask=_answer("y"))

    assert outcome.stage is Stage.create_failed
    assert isinstance(outcome.error, CreateFailed)
    assert str(outcome.error) == "Failed to create repository: GraphQL: Name already exists"
    # no rollback of the local init
    assert runner.called("git", "init")


def test_create_failure_without_stderr(runner, git, gh, request_: RepositoryRequest) -> None:
    runner.results[("gh", "repo")] = ToolResult(False, "", "")

    outcome = create_repository(request_, git=git, gh=gh, ask=_answer("y"))

    assert str(outcome.error) == "Failed to create repository: Unknown error"


def test_success_message(request_: RepositoryRequest) -> None:
    message = success_message(request_, URL)

    assert message == f"Repository myrepo with visibility private created successfully! -> {URL}"
