from __future__ import annotations

import os
from pathlib import Path

from .errors import InvalidPath

LOCK_SUFFIX = ".lock"


def resolve_ini_path(path: str | os.PathLike[str] | None) -> Path:
    if path is None:
        raise InvalidPath("INI file path must not be None")
    raw = os.fspath(path)
    if not raw.strip():
        raise InvalidPath("INI file path must not be empty or whitespace")
    # absolute, but symlinks are left alone
    return Path(os.path.abspath(raw))


def lock_path_for(path: Path) -> Path:
    return path.with_name(path.name + LOCK_SUFFIX)


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path
