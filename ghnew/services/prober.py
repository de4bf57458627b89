"""Check that git and gh are installed before touching anything."""

from __future__ import annotations

import logging

from ..core.errors import ToolMissing
from ..core.git_client import GitClient
from ..core.github_client import GitHubClient

logger = logging.getLogger(__name__)


def check(git: GitClient, gh: GitHubClient) -> None:
    """Raise ToolMissing for the first tool that fails to launch or exits non-zero."""
    if not git.probe():
        raise ToolMissing("git")
    if not gh.probe():
        raise ToolMissing("gh")
    logger.info("git and gh are available")
