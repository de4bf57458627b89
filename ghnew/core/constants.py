"""Module holding constants used across ghnew."""

GIT_EXECUTABLE = "git"
GH_EXECUTABLE = "gh"

GIT_PROBE_ARGS = ["help"]
GH_PROBE_ARGS = ["--version"]  # bare `gh` is not a reliable liveness check

REPO_SOURCE = "."
PROMPT_SUFFIX = "[N/y] "

INIT_FALLBACK_ERROR = "unable to create or reinitialize git repository"
CREATE_FALLBACK_ERROR = "Unknown error"

TOOL_HINTS = {
    "git": "Git is not installed (or not on PATH). Install https://git-scm.com/.",
    "gh": "GitHub CLI 'gh' not found. Install https://cli.github.com/ and run 'gh auth login'.",
}
