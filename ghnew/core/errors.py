"""Error taxonomy. Every error is terminal; none is retried."""

from __future__ import annotations

from .constants import CREATE_FALLBACK_ERROR, INIT_FALLBACK_ERROR, TOOL_HINTS


class GhnewError(RuntimeError):
    pass


class ToolMissing(GhnewError):
    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(TOOL_HINTS.get(tool, f"'{tool}' not found or not responding."))


class MissingArgument(GhnewError):
    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(
            f"Not enough arguments given for {flag}. Expected: {flag} <NAME_OF_REPOSITORY>"
        )


class MalformedArgument(GhnewError):
    def __init__(self, flag: str, value: str) -> None:
        self.flag = flag
        self.value = value
        super().__init__(
            f"Repository name should not start with --, got {value!r} after {flag}. "
            "Check the order of your arguments."
        )


class WorkingDirUnresolvable(GhnewError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"Cannot resolve the current working directory: {reason}")


class InitFailed(GhnewError):
    def __init__(self, stderr: str) -> None:
        self.stderr = stderr.strip()
        super().__init__(f"Git init failed: {self.stderr or INIT_FALLBACK_ERROR}")


class CreateFailed(GhnewError):
    def __init__(self, stderr: str) -> None:
        self.stderr = stderr.strip()
        super().__init__(f"Failed to create repository: {self.stderr or CREATE_FALLBACK_ERROR}")
