from __future__ import annotations

from inistore.__main__ import main
from inistore.paths import lock_path_for


def test_demo_walks_every_operation(tmp_path, capsys):
    target = tmp_path / "example.ini"
    assert main([str(target)]) == 0

    out = capsys.readouterr().out
    assert "Database Host = localhost" in out
    assert "Window size = 1920 x 1080" in out
    assert "Missing int with default = 60" in out
    assert "Sections after delete: Database, Logging" in out
    assert "[Database]\nHost=localhost\nPort=5432\nName=app_db\n" in out
    assert not target.exists()
    assert not lock_path_for(target).exists()
