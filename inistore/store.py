from __future__ import annotations

import contextlib
import logging
import os
import re
from pathlib import Path
from typing import Iterator

from .errors import InvalidName
from .interfaces import ProfileStore
from .locks import exclusive_access
from .model import Document
from .parser import parse
from .paths import resolve_ini_path
from .serializer import render
from .settings import Settings, get_settings
from .text_store import atomic_write_text, read_text

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")
_LINE_BREAKS = ("\n", "\r")

TRUE_TOKENS = frozenset({"true", "1", "yes"})
FALSE_TOKENS = frozenset({"false", "0", "no"})


def parse_leading_int(value: str) -> int:
    """
    Integer value of a stored string, profile-API style.

    Leading whitespace is skipped and anything after the digits is ignored
    ("10apples" -> 10). A string that does not start with an integer is 0.
    """
    m = _LEADING_INT_RE.match(value)
    return int(m.group(1)) if m else 0


def parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    token = value.strip().lower()
    if token in TRUE_TOKENS:
        return True
    if token in FALSE_TOKENS:
        return False
    return default


def _check_key(key: str) -> None:
    if not key:
        raise InvalidName("INI key must not be empty")
    if key != key.strip():
        raise InvalidName(f"INI key must not have surrounding whitespace: {key!r}")
    if "=" in key or any(c in key for c in _LINE_BREAKS):
        raise InvalidName(f"INI key must not contain '=' or line breaks: {key!r}")
    if key[0] in ";[":
        raise InvalidName(f"INI key must not start with ';' or '[': {key!r}")
    if key[0] == "\ufeff":
        # at the top of a file it would be read back as a byte-order mark
        raise InvalidName(f"INI key must not start with a byte-order mark: {key!r}")


def _check_section(section: str | None) -> None:
    if not section:
        return
    if section != section.strip():
        raise InvalidName(f"INI section name must not have surrounding whitespace: {section!r}")
    if any(c in section for c in _LINE_BREAKS):
        raise InvalidName(f"INI section name must not contain line breaks: {section!r}")


def _check_value(value: str) -> None:
    if any(c in value for c in _LINE_BREAKS):
        raise InvalidName(f"INI value must not contain line breaks: {value!r}")


class IniStore(ProfileStore):
    """
    An INI file on disk at a fixed path.

    Nothing is cached between calls: every operation takes the path lock,
    parses the current file, and mutating operations write the whole file
    back before the lock is released.
    """

    def __init__(self, path: str | os.PathLike[str], settings: Settings | None = None):
        self._path = resolve_ini_path(path)
        self._settings = settings if settings is not None else get_settings()

    @property
    def file_path(self) -> Path:
        return self._path

    @property
    def settings(self) -> Settings:
        return self._settings

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r})"

    # -------------------------------------------------------------------
    # load / save
    # -------------------------------------------------------------------
    @contextlib.contextmanager
    def _locked(self) -> Iterator[None]:
        s = self._settings
        with exclusive_access(
            self._path,
            timeout=s.lock_timeout,
            poll_interval=s.lock_poll_interval,
            use_lock_file=s.use_lock_file,
        ):
            yield

    def _load_unlocked(self) -> tuple[Document, bool]:
        text = read_text(self._path, encoding=self._settings.encoding)
        if text is None:
            logger.debug("INI LOAD: %s does not exist, starting empty", self._path)
            return Document(), False
        return parse(text), True

    def _save_unlocked(self, doc: Document) -> None:
        s = self._settings
        text = render(doc, newline=s.newline, trailing_newline=s.trailing_newline)
        atomic_write_text(self._path, text, encoding=s.encoding)
        logger.debug("INI SAVE: wrote %d sections to %s", len(doc.section_names()), self._path)

    def load(self) -> Document:
        """Parse the file under the path lock (empty Document when missing)."""
        with self._locked():
            doc, _ = self._load_unlocked()
            return doc

    @contextlib.contextmanager
    def _mutate(self) -> Iterator[Document]:
        with self._locked():
            doc, existed = self._load_unlocked()
            yield doc
            if not existed and doc.is_empty():
                # nothing to persist, and no reason to create an empty file
                return
            self._save_unlocked(doc)

    # -------------------------------------------------------------------
    # writes
    # -------------------------------------------------------------------
    def write(self, key: str, value: str | None, section: str | None = None) -> bool:
        if value is None:
            return self.delete_key(key, section)
        _check_key(key)
        _check_section(section)
        _check_value(value)
        with self._mutate() as doc:
            doc.set(key, value, section)
        return True

    def delete_key(self, key: str, section: str | None = None) -> bool:
        with self._mutate() as doc:
            if not doc.delete_key(key, section):
                logger.debug("INI DELETE: key %r not in section %r of %s", key, section, self._path)
        return True

    def delete_section(self, section: str | None = None) -> bool:
        with self._mutate() as doc:
            if not doc.delete_section(section):
                logger.debug("INI DELETE: section %r not in %s", section, self._path)
        return True

    # -------------------------------------------------------------------
    # reads
    # -------------------------------------------------------------------
    def _get(self, key: str, section: str | None) -> str | None:
        return self.load().get(key, section)

    def read_string(self, key: str, section: str | None = None, default: str = "") -> str:
        value = self._get(key, section)
        return default if value is None else value

    def read_int(self, key: str, section: str | None = None, default: int = -1) -> int:
        value = self._get(key, section)
        if value is None:
            return default
        # present but unparseable is 0, not the default
        return parse_leading_int(value)

    def read_bool(self, key: str, section: str | None = None, default: bool = False) -> bool:
        return parse_bool(self._get(key, section), default)

    def key_exists(self, key: str, section: str | None = None) -> bool:
        # an empty stored value counts as missing here, unlike read_string
        return len(self.read_string(key, section)) > 0

    def get_all_sections(self) -> list[str]:
        return self.load().section_names()

    def get_all_data_section(self, section: str | None) -> list[str]:
        sect = self.load().section(section)
        if sect is None:
            return []
        return [str(entry) for entry in sect.items()]

    def get_all_keys(self, section: str | None = None) -> list[str]:
        sect = self.load().section(section)
        return [] if sect is None else list(sect.entries)

    def read_all(self) -> dict[str, dict[str, str]]:
        return self.load().to_disk_doc()
