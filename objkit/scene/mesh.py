"""
Меш – именованная группа faces с (необязательным) общим материалом.
"""

from __future__ import annotations

from objkit.assets.material import Material
from objkit.parsing.faces import Face


class Mesh:
    """Имя уникально в пределах одной загрузки."""

    def __init__(self, name: str, faces: list[Face] | None = None,
                 material: Material | None = None):
        self.name = name
        self.faces: list[Face] = list(faces or [])
        self.material = material

    @property
    def face_count(self) -> int:
        return len(self.faces)

    def copy(self) -> "Mesh":
        """Faces копируются, материал остаётся общим."""
        return Mesh(self.name, [f.copy() for f in self.faces], self.material)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mesh):
            return NotImplemented
        return (self.name, self.faces, self.material) == (other.name, other.faces, other.material)

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        mat = self.material.name if self.material is not None else None
        return f"Mesh({self.name!r}, faces={len(self.faces)}, material={mat!r})"
