from __future__ import annotations

import os
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for `import inistore` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Strip INISTORE_* variables so a developer's environment never leaks into tests.
    """
    for name in list(os.environ):
        if name.startswith("INISTORE_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def ini_path(tmp_path: Path) -> Path:
    return tmp_path / "IniFileTest.ini"


@pytest.fixture
def ini(ini_path: Path):
    from inistore import IniStore, Settings

    return IniStore(ini_path, Settings(lock_timeout=5.0))
