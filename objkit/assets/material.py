# -*- coding: utf-8 -*-
"""
Материал из .mtl – отражательные способности (Ka/Kd/Ks), шероховатость
(Ns), прозрачность (d) и до пяти текстурных карт.

Экземпляр общий: все меши, ссылающиеся на материал, держат один и тот же
объект. После разбора файла материал не изменяется.
"""

from __future__ import annotations

from objkit.math.vec import Vec3
from objkit.utils.image_loader import ImageBuffer


class Material:
    """Параметры материала. Незаданные поля – None."""

    # Имя слота → ключевое слово map_* (для сообщений).
    MAP_SLOTS = {
        "ambient_map": "map_Ka",
        "diffuse_map": "map_Kd",
        "specular_map": "map_Ks",
        "roughness_map": "map_Ns",
        "alpha_map": "map_d",
    }

    def __init__(
        self,
        name: str,
        ambient: Vec3 | None = None,
        diffuse: Vec3 | None = None,
        specular: Vec3 | None = None,
        roughness: float | None = None,
        alpha: float | None = None,
    ) -> None:
        self.name = name

        self.ambient = ambient        # Ka
        self.diffuse = diffuse        # Kd
        self.specular = specular      # Ks
        self.roughness = roughness    # Ns
        self.alpha = alpha            # d

        self.ambient_map: ImageBuffer | None = None     # map_Ka
        self.diffuse_map: ImageBuffer | None = None     # map_Kd
        self.specular_map: ImageBuffer | None = None    # map_Ks
        self.roughness_map: ImageBuffer | None = None   # map_Ns
        self.alpha_map: ImageBuffer | None = None       # map_d

    def textures(self) -> dict[str, ImageBuffer]:
        """Только заполненные слоты."""
        return {
            slot: getattr(self, slot)
            for slot in self.MAP_SLOTS
            if getattr(self, slot) is not None
        }

    def _key(self):
        return (
            self.name, self.ambient, self.diffuse, self.specular,
            self.roughness, self.alpha,
            *(getattr(self, slot) for slot in self.MAP_SLOTS),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        maps = ", ".join(self.textures()) or "no maps"
        return f"Material({self.name!r}, Kd={self.diffuse}, {maps})"
