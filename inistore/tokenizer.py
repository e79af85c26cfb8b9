from __future__ import annotations

import enum
import io
import logging
import re
from typing import Iterator, NamedTuple

logger = logging.getLogger(__name__)

_BLANK_RE = re.compile(r"^\s*$")
_COMMENT_RE = re.compile(r"^\s*;")
_SECTION_RE = re.compile(r"^\s*\[(.*)\]\s*$")
_ENTRY_RE = re.compile(r"^\s*([^=]+?)\s*=(.*)$")


class LineKind(enum.Enum):
    BLANK = "blank"
    COMMENT = "comment"
    SECTION = "section"
    ENTRY = "entry"


class Line(NamedTuple):
    kind: LineKind
    lineno: int
    name: str | None = None
    key: str | None = None
    value: str | None = None


def classify(raw: str, lineno: int = 0) -> Line | None:
    """
    Classify one physical line (without its terminator).

    Returns None for malformed lines; callers skip those.
    """
    if _BLANK_RE.match(raw):
        return Line(LineKind.BLANK, lineno)
    if _COMMENT_RE.match(raw):
        return Line(LineKind.COMMENT, lineno)

    m = _SECTION_RE.match(raw)
    if m:
        return Line(LineKind.SECTION, lineno, name=m.group(1).strip())

    m = _ENTRY_RE.match(raw)
    if m:
        key = m.group(1).strip()
        if key:
            # value is kept verbatim after the first "="
            return Line(LineKind.ENTRY, lineno, key=key, value=m.group(2))

    return None


def tokenize(text: str) -> Iterator[Line]:
    """
    Lazily split decoded INI text into classified lines.

    Universal newlines: "\\n", "\\r\\n" and "\\r" all end a line.
    Malformed lines are dropped here and never reach the parser.
    """
    for lineno, raw in enumerate(io.StringIO(text, newline=None), start=1):
        raw = raw.rstrip("\n")
        line = classify(raw, lineno)
        if line is None:
            logger.debug("skipping malformed INI line %d: %r", lineno, raw)
            continue
        yield line
