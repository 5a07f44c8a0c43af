"""
Настройки загрузчика в формате JSON.
Если файл не найден или повреждён – используются настройки по‑умолчанию.
"""

import json
from pathlib import Path
from objkit.utils.logger import logger

DEFAULT_CONFIG = {
    "triangulate": True,
    "flip_textures": True,
}


class LoaderConfig:
    """Опции одного загрузчика (у каждого OBJLoader – свой экземпляр)."""

    def __init__(self, data: dict | None = None):
        self.data = DEFAULT_CONFIG.copy()
        if data:
            self.data.update(data)

    @classmethod
    def from_file(cls, path: str = "objkit.json") -> "LoaderConfig":
        p = Path(path)
        if not p.is_file():
            logger.info(f"[Config] No config file at {p} – using defaults.")
            return cls()
        try:
            with p.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error(f"[Config] Failed to read config {p}: {exc}")
            return cls()
        if not isinstance(data, dict):
            logger.error(f"[Config] Config {p} is not a JSON object – using defaults.")
            return cls()
        logger.info(f"[Config] Loaded configuration from {p}.")
        return cls(data)

    def save(self, path: str = "objkit.json") -> None:
        p = Path(path)
        with p.open("w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=4)
        logger.info(f"[Config] Configuration saved to {p}.")

    @property
    def triangulate(self) -> bool:
        return bool(self["triangulate"])

    @triangulate.setter
    def triangulate(self, value: bool) -> None:
        self["triangulate"] = bool(value)

    @property
    def flip_textures(self) -> bool:
        return bool(self["flip_textures"])

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)

    def copy(self) -> "LoaderConfig":
        return LoaderConfig(self.data)
