import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

REPO_DIR_ENV = "GET_NEXT_VERSION_REPO_DIR"
GIT_ENV = "GET_NEXT_VERSION_GIT"
LOG_LEVEL_ENV = "GET_NEXT_VERSION_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    """Process configuration read from the environment."""

    start_dir: Path
    git: str = "git"
    log_level: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ
        start_dir = Path(environ.get(REPO_DIR_ENV) or Path.cwd())
        git = environ.get(GIT_ENV) or "git"

        log_level = None
        level_name = environ.get(LOG_LEVEL_ENV)
        if level_name:
            log_level = logging.getLevelName(level_name.upper())
            if not isinstance(log_level, int):
                raise ValueError(f"{LOG_LEVEL_ENV}={level_name!r} is not a logging level")

        return cls(start_dir=start_dir, git=git, log_level=log_level)
