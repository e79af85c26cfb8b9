from __future__ import annotations

from .errors import IniStoreError, InvalidName, InvalidPath, LockTimeout, StorageError
from .model import Document, Entry, Section
from .parser import parse
from .repositories import AsyncIniStore
from .serializer import render
from .settings import Settings, get_settings
from .store import IniStore

__all__ = [
    "IniStore",
    "AsyncIniStore",
    "Document",
    "Section",
    "Entry",
    "parse",
    "render",
    "Settings",
    "get_settings",
    "IniStoreError",
    "InvalidPath",
    "InvalidName",
    "StorageError",
    "LockTimeout",
]
