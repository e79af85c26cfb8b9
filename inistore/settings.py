from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

_NEWLINES = {"lf": "\n", "crlf": "\r\n"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float | None) -> float | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    if raw.strip().lower() in ("none", "inf", "forever"):
        return None
    value = float(raw)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    # File format
    encoding: str = "utf-8"
    newline: str = "\n"
    trailing_newline: bool = True

    # Locking (None timeout waits forever)
    lock_timeout: float | None = 10.0
    lock_poll_interval: float = 0.05
    use_lock_file: bool = True

    # Debug
    debug: bool = False


def get_settings(env_file: str | os.PathLike[str] | None = None) -> Settings:
    if env_file is not None:
        load_dotenv(env_file)

    encoding = os.getenv("INISTORE_ENCODING", "utf-8").strip() or "utf-8"

    newline_name = os.getenv("INISTORE_NEWLINE", "lf").strip().lower()
    if newline_name not in _NEWLINES:
        raise ValueError(f"INISTORE_NEWLINE must be one of {sorted(_NEWLINES)}, got {newline_name!r}")

    trailing_newline = _env_bool("INISTORE_TRAILING_NEWLINE", True)

    lock_timeout = _env_float("INISTORE_LOCK_TIMEOUT", 10.0)
    lock_poll_interval = _env_float("INISTORE_LOCK_POLL_INTERVAL", 0.05) or 0.05
    use_lock_file = _env_bool("INISTORE_USE_LOCK_FILE", True)

    debug = _env_bool("INISTORE_DEBUG", False)

    return Settings(
        encoding=encoding,
        newline=_NEWLINES[newline_name],
        trailing_newline=trailing_newline,
        lock_timeout=lock_timeout,
        lock_poll_interval=lock_poll_interval,
        use_lock_file=use_lock_file,
        debug=debug,
    )
