# objkit/scene/snapshot.py
"""
OBJData – итог загрузки: массивы атрибутов (numpy) + упорядоченный
список мешей. Создаётся один раз через OBJLoader.steal() или share().
"""

from __future__ import annotations

import numpy as np

from objkit.assets.material import Material
from objkit.errors import SnapshotError
from objkit.parsing.indices import IndexKind
from objkit.scene.mesh import Mesh


def empty_attribute(width: int) -> np.ndarray:
    return np.zeros((0, width), dtype=np.float32)


class OBJData:
    """Снимок загруженной сцены."""

    def __init__(self,
                 positions: np.ndarray | None = None,
                 normals: np.ndarray | None = None,
                 texcoords: np.ndarray | None = None,
                 colors: np.ndarray | None = None,
                 meshes: list[Mesh] | None = None,
                 name: str = ""):
        self.positions = positions if positions is not None else empty_attribute(3)
        self.normals = normals if normals is not None else empty_attribute(3)
        self.texcoords = texcoords if texcoords is not None else empty_attribute(2)
        self.colors = colors if colors is not None else empty_attribute(3)
        self.meshes: list[Mesh] = list(meshes or [])
        self.name = name

    # -----------------------------------------------------------------
    def _attribute(self, kind: IndexKind) -> np.ndarray:
        return {
            IndexKind.POSITION: self.positions,
            IndexKind.NORMAL: self.normals,
            IndexKind.TEXCOORD: self.texcoords,
            IndexKind.COLOR: self.colors,
        }[kind]

    def validate(self) -> None:
        """Каждый индекс каждого Face должен попадать в свой массив."""
        for mesh in self.meshes:
            for face_no, face in enumerate(mesh.faces):
                for kind, indices in face.attributes().items():
                    if not indices:
                        continue
                    limit = len(self._attribute(kind))
                    for idx in indices:
                        if idx < 0 or idx >= limit:
                            raise SnapshotError(
                                f"Mesh {mesh.name!r} face {face_no}: {kind.value} index "
                                f"{idx} is out of bounds (0..{limit - 1})"
                            )

    # -----------------------------------------------------------------
    def mesh(self, name: str) -> Mesh:
        for m in self.meshes:
            if m.name == name:
                return m
        raise KeyError(name)

    @property
    def mesh_names(self) -> list[str]:
        return [m.name for m in self.meshes]

    @property
    def materials(self) -> list[Material]:
        """Разные материалы в порядке мешей (один объект – один раз)."""
        seen: dict[int, Material] = {}
        for m in self.meshes:
            if m.material is not None:
                seen.setdefault(id(m.material), m.material)
        return list(seen.values())

    @property
    def face_count(self) -> int:
        return sum(len(m.faces) for m in self.meshes)

    def __eq__(self, other) -> bool:
        if not isinstance(other, OBJData):
            return NotImplemented
        return (
            self.name == other.name
            and np.array_equal(self.positions, other.positions)
            and np.array_equal(self.normals, other.normals)
            and np.array_equal(self.texcoords, other.texcoords)
            and np.array_equal(self.colors, other.colors)
            and self.meshes == other.meshes
        )

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return (f"OBJData({self.name!r}, positions={len(self.positions)}, "
                f"normals={len(self.normals)}, texcoords={len(self.texcoords)}, "
                f"meshes={len(self.meshes)})")
