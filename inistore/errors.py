from __future__ import annotations


class IniStoreError(Exception):
    """Base error for INI store operations."""


class InvalidPath(IniStoreError, ValueError):
    """The file path given to a store is empty or blank."""


class InvalidName(IniStoreError, ValueError):
    """A key, section name or value cannot be written without corrupting the file."""


class StorageError(IniStoreError):
    """Reading or writing the backing file failed."""


class LockTimeout(IniStoreError, TimeoutError):
    """Exclusive access to the backing file could not be acquired in time."""
