from __future__ import annotations

import codecs
import contextlib
import logging
import os
from pathlib import Path

from .errors import StorageError
from .paths import ensure_dir

logger = logging.getLogger(__name__)

# Longest BOM first: the UTF-32 LE BOM starts with the UTF-16 LE one.
_BOMS = (
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)


def decode_text(raw: bytes, encoding: str) -> str:
    """
    Decode file bytes, honoring a byte-order mark when present.

    Without a BOM the configured encoding is used as is.
    """
    for bom, codec in _BOMS:
        if raw.startswith(bom):
            return raw[len(bom):].decode(codec)
    return raw.decode(encoding)


def read_text(path: Path, *, encoding: str = "utf-8") -> str | None:
    """
    Read and decode a text file.

    Returns None when the file does not exist. Any other failure, including
    undecodable content, raises StorageError.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as e:
        logger.warning("INI READ: failed to read %s: %r", path, e)
        raise StorageError(f"Cannot read INI file {path}: {e}") from e

    try:
        return decode_text(raw, encoding)
    except (UnicodeDecodeError, LookupError) as e:
        logger.warning("INI READ: failed to decode %s as %s: %r", path, encoding, e)
        raise StorageError(f"Cannot decode INI file {path}: {e}") from e


def atomic_write_text(path: Path, text: str, *, encoding: str = "utf-8") -> None:
    """
    Atomically write text to disk by writing to a temp file then replacing.
    """
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        ensure_dir(path.parent)
        # newline="" keeps the caller's line endings untouched
        with tmp_path.open("w", encoding=encoding, newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except (OSError, UnicodeEncodeError, LookupError) as e:
        logger.warning("INI SAVE: failed to write %s: %r", path, e)
        with contextlib.suppress(OSError):
            tmp_path.unlink(missing_ok=True)
        raise StorageError(f"Cannot write INI file {path}: {e}") from e
