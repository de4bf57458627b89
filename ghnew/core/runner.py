"""Process runner used by the git and gh wrappers.

Everything that spawns a subprocess goes through a ``CommandRunner`` so the
services can be exercised with a fake in tests.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Protocol

from .types import ToolResult

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    def run(self, cmd: list[str], cwd: str | None = None) -> ToolResult: ...


class SubprocessRunner:
    """Blocking runner. No timeout: a hung tool hangs the caller."""

    def run(self, cmd: list[str], cwd: str | None = None) -> ToolResult:
        logger.debug("running %s (cwd=%s)", " ".join(cmd), cwd or ".")
        try:
            proc = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True)
        except OSError as e:
            # missing executable, permission denied, bad cwd
            logger.debug("failed to launch %s: %s", cmd[0], e)
            return ToolResult(False, "", str(e))

        logger.debug("%s exited with %d", cmd[0], proc.returncode)
        return ToolResult(proc.returncode == 0, proc.stdout or "", proc.stderr or "")
