"""CLI entrypoint: a single Typer command that creates the repository."""

from __future__ import annotations

import sys
from typing import NoReturn

import typer
from typer.core import TyperCommand

from ..config.settings import get_settings
from ..core.errors import GhnewError
from ..core.git_client import GitClient
from ..core.github_client import GitHubClient
from ..core.logging import configure_logging
from ..core.runner import SubprocessRunner
from ..core.types import Stage
from ..services.create import create_repository, success_message
from ..services.prober import check
from ..services.request import build_request, current_dir_name

CANCELLED_MESSAGE = "Repository has NOT been created, have a good day."
RAW_ARGS_KEY = "ghnew.raw_args"

app = typer.Typer(add_completion=False, help="git init the current directory and create it on GitHub.")


class RawArgsCommand(TyperCommand):
    """Keeps argv as given; Click drops a bare `--` before filling ctx.args."""

    def parse_args(self, ctx, args):
        ctx.meta[RAW_ARGS_KEY] = list(args)
        return super().parse_args(ctx, args)


def _ask(prompt: str) -> str:
    typer.echo(prompt, nl=False)
    sys.stdout.flush()
    return sys.stdin.readline()


def _fail(err: GhnewError) -> NoReturn:
    typer.secho(str(err), err=True)
    raise typer.Exit(code=1)


@app.command(
    cls=RawArgsCommand,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def create(ctx: typer.Context):
    """Create a repository named after the current directory.

    Recognised arguments: --name NAME, --public, --private (default private;
    --private wins if both are given). Anything else is ignored.

    Examples:
      ghnew                      # private repo named after the cwd
      ghnew --name tools --public
    """
    s = get_settings()
    configure_logging(s.log_level)

    runner = SubprocessRunner()
    git = GitClient(runner, executable=s.git_executable)
    gh = GitHubClient(runner, executable=s.gh_executable, probe_args=s.gh_probe_args)

    try:
        check(git, gh)
        request = build_request(ctx.meta.get(RAW_ARGS_KEY, ctx.args), current_dir_name())
    except GhnewError as e:
        _fail(e)

    outcome = create_repository(request, git=git, gh=gh, ask=_ask)

    if outcome.stage is Stage.cancelled:
        typer.echo(CANCELLED_MESSAGE)
        return
    if outcome.failed:
        _fail(outcome.error)
    typer.echo(success_message(request, outcome.url or ""))
