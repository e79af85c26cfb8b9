from __future__ import annotations

import asyncio
import os
from pathlib import Path

from .interfaces import AsyncProfileStore
from .settings import Settings
from .store import IniStore


class AsyncIniStore(AsyncProfileStore):
    """
    Async wrapper around the disk-backed INI store.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O and lock waits.
    """

    def __init__(self, path: str | os.PathLike[str], settings: Settings | None = None) -> None:
        self._store = IniStore(path, settings)

    @property
    def file_path(self) -> Path:
        return self._store.file_path

    @property
    def sync(self) -> IniStore:
        return self._store

    async def write(self, key: str, value: str | None, section: str | None = None) -> bool:
        return await asyncio.to_thread(self._store.write, key, value, section)

    async def read_string(self, key: str, section: str | None = None, default: str = "") -> str:
        return await asyncio.to_thread(self._store.read_string, key, section, default)

    async def read_int(self, key: str, section: str | None = None, default: int = -1) -> int:
        return await asyncio.to_thread(self._store.read_int, key, section, default)

    async def read_bool(self, key: str, section: str | None = None, default: bool = False) -> bool:
        return await asyncio.to_thread(self._store.read_bool, key, section, default)

    async def get_all_sections(self) -> list[str]:
        return await asyncio.to_thread(self._store.get_all_sections)

    async def get_all_data_section(self, section: str | None) -> list[str]:
        return await asyncio.to_thread(self._store.get_all_data_section, section)

    async def get_all_keys(self, section: str | None = None) -> list[str]:
        return await asyncio.to_thread(self._store.get_all_keys, section)

    async def read_all(self) -> dict[str, dict[str, str]]:
        return await asyncio.to_thread(self._store.read_all)

    async def delete_key(self, key: str, section: str | None = None) -> bool:
        return await asyncio.to_thread(self._store.delete_key, key, section)

    async def delete_section(self, section: str | None = None) -> bool:
        return await asyncio.to_thread(self._store.delete_section, section)

    async def key_exists(self, key: str, section: str | None = None) -> bool:
        return await asyncio.to_thread(self._store.key_exists, key, section)
