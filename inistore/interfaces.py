from __future__ import annotations

from pathlib import Path
from typing import Protocol


class ProfileStore(Protocol):
    """
    Read/write access to one INI file, one locked load(-mutate-save) per call.

    `section=None` (or "") addresses the unnamed global section.
    """

    @property
    def file_path(self) -> Path: ...

    def write(self, key: str, value: str | None, section: str | None = None) -> bool: ...
    def read_string(self, key: str, section: str | None = None, default: str = "") -> str: ...
    def read_int(self, key: str, section: str | None = None, default: int = -1) -> int: ...
    def read_bool(self, key: str, section: str | None = None, default: bool = False) -> bool: ...

    def get_all_sections(self) -> list[str]: ...
    def get_all_data_section(self, section: str | None) -> list[str]: ...
    def get_all_keys(self, section: str | None = None) -> list[str]: ...
    def read_all(self) -> dict[str, dict[str, str]]: ...

    def delete_key(self, key: str, section: str | None = None) -> bool: ...
    def delete_section(self, section: str | None = None) -> bool: ...
    def key_exists(self, key: str, section: str | None = None) -> bool: ...


class AsyncProfileStore(Protocol):
    @property
    def file_path(self) -> Path: ...

    async def write(self, key: str, value: str | None, section: str | None = None) -> bool: ...
    async def read_string(self, key: str, section: str | None = None, default: str = "") -> str: ...
    async def read_int(self, key: str, section: str | None = None, default: int = -1) -> int: ...
    async def read_bool(self, key: str, section: str | None = None, default: bool = False) -> bool: ...

    async def get_all_sections(self) -> list[str]: ...
    async def get_all_data_section(self, section: str | None) -> list[str]: ...
    async def get_all_keys(self, section: str | None = None) -> list[str]: ...
    async def read_all(self) -> dict[str, dict[str, str]]: ...

    async def delete_key(self, key: str, section: str | None = None) -> bool: ...
    async def delete_section(self, section: str | None = None) -> bool: ...
    async def key_exists(self, key: str, section: str | None = None) -> bool: ...
