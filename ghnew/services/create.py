"""Confirm, `git init`, then `gh repo create`.

The run is linear and ends in exactly one ``Stage``. There is no rollback:
if ``gh repo create`` fails after ``git init`` succeeded, the local
repository stays initialised and the outcome says so.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.constants import PROMPT_SUFFIX
from ..core.errors import CreateFailed, InitFailed
from ..core.git_client import GitClient
from ..core.github_client import GitHubClient
from ..core.types import RepositoryRequest, RunOutcome, Stage

logger = logging.getLogger(__name__)

# Writes the prompt (no newline) and returns one line of user input.
Ask = Callable[[str], str]


def confirmation_prompt(request: RepositoryRequest) -> str:
    return (
        f"Are you sure you want to create a {request.visibility} repository "
        f"with name {request.name} {PROMPT_SUFFIX}"
    )


def is_yes(answer: str) -> bool:
    return answer[:1].lower() == "y"


def confirm(request: RepositoryRequest, ask: Ask) -> bool:
    return is_yes(ask(confirmation_prompt(request)))


def create_repository(
    request: RepositoryRequest,
    *,
    git: GitClient,
    gh: GitHubClient,
    ask: Ask,
    cwd: str | None = None,
) -> RunOutcome:
    """Drive one run from the confirmation gate to a terminal stage."""
    if not confirm(request, ask):
        logger.info("declined; nothing was created")
        return RunOutcome(Stage.cancelled)

    result = git.init(cwd=cwd)
    if not result.ok:
        return RunOutcome(Stage.init_failed, error=InitFailed(result.stderr))
    logger.info("local repository initialised")

    result = gh.create_repo(request.name, request.visibility, cwd=cwd)
    if not result.ok:
        logger.warning("remote creation failed; local repository is left initialised")
        return RunOutcome(Stage.create_failed, error=CreateFailed(result.stderr))

    url = result.stdout.strip()
    logger.info("created %s -> %s", request.name, url)
    return RunOutcome(Stage.succeeded, url=url)


def success_message(request: RepositoryRequest, url: str) -> str:
    return (
        f"Repository {request.name} with visibility {request.visibility} "
        f"created successfully! -> {url}"
    )
