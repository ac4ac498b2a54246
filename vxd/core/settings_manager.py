"""Settings manager — reads/writes settings.ini via configparser."""
import codecs
from configparser import ConfigParser
from pathlib import Path

from vxd.core.constants import (
    DEFAULT_ENCODING, DEFAULT_STRICT_TYPES, DEFAULT_WARN_ON_DEGRADE,
)


def is_known_encoding(name: str) -> bool:
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True


class SettingsManager:
    def __init__(self, ini_path: Path) -> None:
        self.ini_path = ini_path
        self.config = ConfigParser(comment_prefixes=("#", ";"), inline_comment_prefixes=("#",))
        if ini_path.exists():
            self.config.read(ini_path, encoding="utf-8")

    # ------------------------------------------------------------------
    # Generic getters
    # ------------------------------------------------------------------
    def get(self, section: str, key: str, fallback: str = "") -> str:
        return self.config.get(section, key, fallback=fallback)

    def getbool(self, section: str, key: str, fallback: bool = False) -> bool:
        return self.config.getboolean(section, key, fallback=fallback)

    def set(self, section: str, key: str, value: str) -> None:
        if not self.config.has_section(section):
            self.config.add_section(section)
        self.config.set(section, key, value)
        self.save()

    def save(self) -> None:
        with open(self.ini_path, "w", encoding="utf-8") as f:
            self.config.write(f)

    # ------------------------------------------------------------------
    # Convenience properties
    # ------------------------------------------------------------------
    @property
    def encoding(self) -> str:
        return self.get("PARSER", "encoding", DEFAULT_ENCODING) or DEFAULT_ENCODING

    @property
    def strict_types(self) -> bool:
        return self.getbool("PARSER", "strict_types", DEFAULT_STRICT_TYPES)

    @property
    def warn_on_degrade(self) -> bool:
        return self.getbool("PARSER", "warn_on_degrade", DEFAULT_WARN_ON_DEGRADE)

    @property
    def files_dir(self) -> Path:
        return Path(self.get("VIEWER", "files_dir", "."))

    @property
    def last_file(self) -> Path | None:
        value = self.get("VIEWER", "last_file", "")
        return Path(value) if value else None
