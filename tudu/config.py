"""Settings loaded from environment variables.

TUDU_TASKS    directory holding the task files (must already exist)
HOME          used for the default directory, $HOME/.tudu
TUDU_LOG_LEVEL  logging level name, WARNING by default
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

ENV_PREFIX = "TUDU"

DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(environ: Mapping[str, str], name: str, default: str = "") -> str:
    v = environ.get(name)
    return default if v is None or v.strip() == "" else v


def _env_path(environ: Mapping[str, str], name: str) -> Optional[Path]:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw)


@dataclass(frozen=True)
class Settings:
    tasks_dir: Optional[Path]
    home: Optional[Path]
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the process environment or an explicit mapping."""
    if environ is None:
        environ = os.environ
    return Settings(
        tasks_dir=_env_path(environ, _k("TASKS")),
        home=_env_path(environ, "HOME"),
        log_level=_env(environ, _k("LOG_LEVEL"), DEFAULT_LOG_LEVEL).upper(),
    )
