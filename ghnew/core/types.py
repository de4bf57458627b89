"""Small types and Enums used by ghnew."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from .errors import GhnewError


class Visibility(str, Enum):
    """Hosted repository visibility."""

    public = "public"
    private = "private"

    def __str__(self) -> str:
        return self.value

    @property
    def flag(self) -> str:
        return f"--{self.value}"


class RepositoryRequest(BaseModel):
    """What to create: built once from argv, read-only afterwards."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    visibility: Visibility = Visibility.private


class ToolResult(NamedTuple):
    ok: bool
    stdout: str
    stderr: str


class Stage(str, Enum):
    """Terminal states of a create run."""

    cancelled = "cancelled"
    init_failed = "init_failed"
    create_failed = "create_failed"
    succeeded = "succeeded"


@dataclass(frozen=True)
class RunOutcome:
    stage: Stage
    url: str | None = None
    error: GhnewError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None
