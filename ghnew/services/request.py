"""Turn argv and the working directory into a RepositoryRequest."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from ..core.errors import MalformedArgument, MissingArgument, WorkingDirUnresolvable
from ..core.types import RepositoryRequest, Visibility

NAME_FLAG = "--name"
PUBLIC_FLAG = "--public"
PRIVATE_FLAG = "--private"
FLAG_PREFIX = "--"


def current_dir_name() -> str:
    """Final path component of the working directory."""
    try:
        cwd = Path.cwd()
    except OSError as e:  # cwd deleted underneath us
        raise WorkingDirUnresolvable(str(e)) from e

    name = cwd.name
    if not name:
        raise WorkingDirUnresolvable(f"{os.fspath(cwd)!r} has no final path component")
    return name


def _explicit_name(args: Sequence[str]) -> str | None:
    if NAME_FLAG not in args:
        return None

    position = list(args).index(NAME_FLAG)
    if position + 1 >= len(args):
        raise MissingArgument(NAME_FLAG)

    value = args[position + 1]
    if not value.strip():
        raise MissingArgument(NAME_FLAG)
    if value.startswith(FLAG_PREFIX):
        raise MalformedArgument(NAME_FLAG, value)
    return value


def build_request(args: Sequence[str], dir_name: str) -> RepositoryRequest:
    """Build the request from raw tokens. Unrecognised tokens are ignored.

    Only the first ``--name`` counts. ``--public`` and ``--private`` are
    meant to be exclusive; when both appear ``--private`` wins regardless of
    their order (public is applied first, private overrides it).
    """
    explicit = _explicit_name(args)
    name = explicit if explicit is not None else dir_name

    visibility = Visibility.private
    if PUBLIC_FLAG in args:
        visibility = Visibility.public
    if PRIVATE_FLAG in args:
        visibility = Visibility.private

    return RepositoryRequest(name=name, visibility=visibility)
