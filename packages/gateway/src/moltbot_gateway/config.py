"""
Configuration and environment sourcing for the container mapping.
"""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import dotenv_values


# App metadata
APP_NAME: str = "moltbot-env"
VERSION: str = "0.1.0"

# Names a default .env file for the CLI
ENV_FILE_VAR: str = "MOLTBOT_ENV_FILE"


def load_env_file(path: str | os.PathLike[str]) -> dict[str, str]:
    """Read a .env file into a dict. Keys declared without a value are dropped.

    Raises FileNotFoundError if *path* does not exist.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Env file not found: {path}")
    return {k: v for k, v in dotenv_values(path).items() if v is not None}


def get_default_env_file() -> str | None:
    """Env file named by MOLTBOT_ENV_FILE, if any."""
    return os.environ.get(ENV_FILE_VAR) or None


def snapshot_environ(
    env_file: str | os.PathLike[str] | None = None,
    include_process: bool = True,
) -> dict[str, str]:
    """Take a snapshot of the host environment.

    Values from *env_file* are loaded first; the process environment wins
    over them (the shell env is never overridden).
    """
    snapshot: dict[str, str] = {}
    if env_file is not None:
        snapshot.update(load_env_file(env_file))
    if include_process:
        snapshot.update(os.environ)
    return snapshot
