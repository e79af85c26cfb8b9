from __future__ import annotations

import logging
import sys

from .paths import lock_path_for
from .settings import get_settings
from .store import IniStore

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Walk every IniStore operation against a scratch file."""
    argv = sys.argv[1:] if argv is None else argv
    settings = get_settings(argv[1] if len(argv) > 1 else None)
    if settings.debug:
        logging.basicConfig(level=logging.DEBUG)

    ini = IniStore(argv[0] if argv else "example.ini", settings)
    ini.file_path.unlink(missing_ok=True)

    print(f"Working with: {ini.file_path}")

    ini.write("Host", "localhost", "Database")
    ini.write("Port", "5432", "Database")
    ini.write("Name", "app_db", "Database")
    ini.write("Username", "admin", "Database")
    ini.write("Level", "Information", "Logging")
    ini.write("Enabled", "true", "Logging")
    ini.write("Width", "1920", "Window")
    ini.write("Height", "1080", "Window")
    ini.write("Fullscreen", "0", "Window")

    print(f"Database Host = {ini.read_string('Host', 'Database')}")
    print(f"Window size = {ini.read_int('Width', 'Window')} x {ini.read_int('Height', 'Window')}")
    print(f"Missing int with default = {ini.read_int('NonExistent', 'Window', default=60)}")
    print(f"Logging enabled = {ini.read_bool('Enabled', 'Logging')}")
    print(f"Fullscreen = {ini.read_bool('Fullscreen', 'Window')}")
    print(f"Theme (missing) = {ini.read_string('Theme', 'UI', default='dark')!r}")
    print(f"Sections: {', '.join(ini.get_all_sections())}")
    for entry in ini.get_all_data_section("Database"):
        print(f"  {entry}")

    ini.write("Level", "Debug", "Logging")
    print(f"Level after overwrite = {ini.read_string('Level', 'Logging')}")

    ini.delete_key("Username", "Database")
    print(f"Username exists after delete = {ini.key_exists('Username', 'Database')}")

    ini.delete_section("Window")
    print(f"Sections after delete: {', '.join(ini.get_all_sections())}")

    print(ini.file_path.read_text(encoding=settings.encoding))
    ini.file_path.unlink()
    lock_path_for(ini.file_path).unlink(missing_ok=True)
    logger.debug("removed %s", ini.file_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
