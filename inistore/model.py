from __future__ import annotations

from typing import Any, Mapping, NamedTuple

from pydantic import BaseModel, Field

GLOBAL_SECTION = ""


def section_name(section: str | None) -> str:
    return GLOBAL_SECTION if section is None else section


class Entry(NamedTuple):
    key: str
    value: str

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


class Section(BaseModel):
    name: str = GLOBAL_SECTION
    entries: dict[str, str] = Field(default_factory=dict)

    @property
    def is_global(self) -> bool:
        return self.name == GLOBAL_SECTION

    def items(self) -> list[Entry]:
        return [Entry(key, value) for key, value in self.entries.items()]

    def get(self, key: str) -> str | None:
        return self.entries.get(key)

    def set(self, key: str, value: str) -> None:
        # dict assignment keeps an existing key where it is
        self.entries[key] = value

    def delete(self, key: str) -> bool:
        return self.entries.pop(key, None) is not None


class Document(BaseModel):
    """
    Ordered INI document.

    The global (unnamed) section always occupies the first slot so that it is
    rendered ahead of every named section.
    """

    sections: dict[str, Section] = Field(
        default_factory=lambda: {GLOBAL_SECTION: Section(name=GLOBAL_SECTION)}
    )

    @classmethod
    def from_disk_doc(cls, doc: Mapping[str, Mapping[str, Any]]) -> "Document":
        out = cls()
        for name, entries in doc.items():
            sect = out.ensure_section(name)
            for key, value in entries.items():
                sect.set(str(key), str(value))
        return out

    def to_disk_doc(self) -> dict[str, dict[str, str]]:
        return {
            name: dict(sect.entries)
            for name, sect in self.sections.items()
            if not (sect.is_global and not sect.entries)
        }

    @property
    def global_section(self) -> Section:
        return self.sections[GLOBAL_SECTION]

    def section(self, name: str | None) -> Section | None:
        return self.sections.get(section_name(name))

    def ensure_section(self, name: str | None) -> Section:
        name = section_name(name)
        sect = self.sections.get(name)
        if sect is None:
            sect = Section(name=name)
            self.sections[name] = sect
        return sect

    def section_names(self) -> list[str]:
        return [name for name in self.sections if name != GLOBAL_SECTION]

    def get(self, key: str, section: str | None = None) -> str | None:
        sect = self.section(section)
        return None if sect is None else sect.get(key)

    def set(self, key: str, value: str, section: str | None = None) -> None:
        self.ensure_section(section).set(key, value)

    def delete_key(self, key: str, section: str | None = None) -> bool:
        sect = self.section(section)
        return False if sect is None else sect.delete(key)

    def delete_section(self, section: str | None = None) -> bool:
        name = section_name(section)
        if name == GLOBAL_SECTION:
            # the slot stays so ordering is unaffected
            had_entries = bool(self.global_section.entries)
            self.global_section.entries.clear()
            return had_entries
        return self.sections.pop(name, None) is not None

    def is_empty(self) -> bool:
        return not self.global_section.entries and not self.section_names()
