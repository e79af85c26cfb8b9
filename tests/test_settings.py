from __future__ import annotations

import os

import pytest

from inistore.settings import Settings, get_settings


def test_defaults():
    assert get_settings() == Settings()


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("INISTORE_ENCODING", "utf-16")
    monkeypatch.setenv("INISTORE_NEWLINE", "CRLF")
    monkeypatch.setenv("INISTORE_TRAILING_NEWLINE", "no")
    monkeypatch.setenv("INISTORE_LOCK_TIMEOUT", "2.5")
    monkeypatch.setenv("INISTORE_USE_LOCK_FILE", "0")
    monkeypatch.setenv("INISTORE_DEBUG", "on")

    s = get_settings()
    assert s.encoding == "utf-16"
    assert s.newline == "\r\n"
    assert s.trailing_newline is False
    assert s.lock_timeout == 2.5
    assert s.use_lock_file is False
    assert s.debug is True


def test_lock_timeout_none_waits_forever(monkeypatch):
    monkeypatch.setenv("INISTORE_LOCK_TIMEOUT", "none")
    assert get_settings().lock_timeout is None


def test_bad_newline_rejected(monkeypatch):
    monkeypatch.setenv("INISTORE_NEWLINE", "cr")
    with pytest.raises(ValueError):
        get_settings()


def test_negative_timeout_rejected(monkeypatch):
    monkeypatch.setenv("INISTORE_LOCK_TIMEOUT", "-1")
    with pytest.raises(ValueError):
        get_settings()


def test_env_file_is_loaded(tmp_path, monkeypatch):
    # load_dotenv writes into os.environ; give it a throwaway copy
    monkeypatch.setattr(os, "environ", dict(os.environ))
    env_file = tmp_path / "inistore.env"
    env_file.write_text("INISTORE_LOCK_TIMEOUT=3\nINISTORE_NEWLINE=crlf\n", encoding="utf-8")
    s = get_settings(env_file)
    assert s.lock_timeout == 3.0
    assert s.newline == "\r\n"
