"""
Привязка материала (`usemtl`) к текущему мешу.
"""

from __future__ import annotations

from objkit.assets.material import Material
from objkit.errors import MaterialError


class MaterialLibrary:
    """
    Таблица имя → общий Material. Каждый `mtllib` полностью заменяет
    таблицу (последний выигрывает, без слияния).
    """

    def __init__(self, materials: dict[str, Material] | None = None):
        self._materials: dict[str, Material] = dict(materials or {})
        self.source: str | None = None

    def replace(self, materials: dict[str, Material], source: str | None = None) -> None:
        self._materials = dict(materials)
        self.source = source

    def resolve(self, name: str) -> Material:
        if not self._materials:
            raise MaterialError(f"Material {name!r} used but no material library is loaded")
        try:
            return self._materials[name]
        except KeyError:
            raise MaterialError(
                f"Unknown material {name!r} (library {self.source or '?'})"
            ) from None

    def clear(self) -> None:
        self._materials.clear()
        self.source = None

    def __contains__(self, name: str) -> bool:
        return name in self._materials

    def __len__(self) -> int:
        return len(self._materials)

    def names(self) -> list[str]:
        return list(self._materials)


def bind_material(assembler, library: MaterialLibrary, name: str) -> Material:
    """Найти материал и повесить его на текущий меш сборщика."""
    name = name.strip()
    if not assembler.meshes:
        raise MaterialError(f"usemtl {name!r} before any mesh was created")
    mesh = assembler.current_mesh
    if mesh is None:
        raise MaterialError(f"usemtl {name!r} without a current mesh")
    material = library.resolve(name)
    mesh.material = material
    return material
