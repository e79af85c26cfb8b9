from __future__ import annotations

from .model import Document, Section


def _render_section(section: Section) -> list[str]:
    lines = [] if section.is_global else [f"[{section.name}]"]
    lines.extend(str(entry) for entry in section.items())
    return lines


def render(document: Document, *, newline: str = "\n", trailing_newline: bool = True) -> str:
    """
    Render a Document as INI text.

    The global section comes first without a header and only when it has
    entries; named sections follow in order, separated by one blank line.
    """
    blocks: list[list[str]] = []
    for section in document.sections.values():
        if section.is_global and not section.entries:
            continue
        blocks.append(_render_section(section))

    if not blocks:
        return ""

    lines: list[str] = []
    for i, block in enumerate(blocks):
        if i:
            lines.append("")
        lines.extend(block)

    text = newline.join(lines)
    return text + newline if trailing_newline else text
