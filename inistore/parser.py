from __future__ import annotations

from typing import Iterable

from .model import GLOBAL_SECTION, Document
from .tokenizer import Line, LineKind, tokenize


def parse_lines(lines: Iterable[Line]) -> Document:
    doc = Document()
    current = doc.global_section
    for line in lines:
        if line.kind is LineKind.SECTION:
            current = doc.ensure_section(line.name or GLOBAL_SECTION)
        elif line.kind is LineKind.ENTRY:
            current.set(line.key, line.value)
        # blank lines and comments carry no data
    return doc


def parse(text: str) -> Document:
    """
    Build a Document from INI text.

    Never fails on content: lines that are neither a header nor a
    key/value pair are skipped by the tokenizer. A repeated header keeps
    adding to the section it names, and a repeated key overwrites.
    """
    return parse_lines(tokenize(text))
