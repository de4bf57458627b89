from __future__ import annotations

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import GH_EXECUTABLE, GH_PROBE_ARGS, GIT_EXECUTABLE

# Load .env once, early
load_dotenv()


class Settings(BaseSettings):
    """Application config (GHNEW_* env vars or .env)."""

    model_config = SettingsConfigDict(env_prefix="GHNEW_", env_file=None, extra="ignore")

    git_executable: str = Field(default=GIT_EXECUTABLE)
    gh_executable: str = Field(default=GH_EXECUTABLE)
    # JSON list in the environment, e.g. GHNEW_GH_PROBE_ARGS='["auth", "status"]'
    gh_probe_args: list[str] = Field(default_factory=lambda: list(GH_PROBE_ARGS))
    log_level: str = Field(default="WARNING")


def get_settings() -> Settings:
    return Settings()
