"""
Триангуляция: треугольник остаётся как есть, четырёхугольник режется
по диагонали 0–2. Другие полигоны не поддерживаются (ни ear‑clipping,
ни веер) – вызывающий получает результат с ошибкой и решает сам.
"""

from __future__ import annotations

from objkit.errors import UnsupportedPolygonError
from objkit.parsing.faces import Face

_QUAD_SPLIT = ((0, 1, 2), (0, 2, 3))
SUPPORTED_VERTEX_COUNTS = (3, 4)


class TriangulationResult:
    """Либо список треугольников, либо UnsupportedPolygonError."""

    __slots__ = ("faces", "error")

    def __init__(self, faces: list[Face] | None = None,
                 error: UnsupportedPolygonError | None = None):
        self.faces = faces or []
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> list[Face]:
        if self.error is not None:
            raise self.error
        return self.faces


def check_polygon(face: Face) -> TriangulationResult:
    """Проверить число вершин, ничего не разрезая."""
    if face.num_vertices not in SUPPORTED_VERTEX_COUNTS:
        return TriangulationResult(error=UnsupportedPolygonError(face.num_vertices))
    return TriangulationResult([face.copy()])


def _pick(indices: list[int], corners) -> list[int]:
    # пустой атрибут остаётся пустым
    return [indices[i] for i in corners] if indices else []


def triangulate(face: Face) -> TriangulationResult:
    if face.num_vertices != 4:
        return check_polygon(face)

    triangles = []
    for corners in _QUAD_SPLIT:
        triangles.append(Face(
            position_indices=_pick(face.position_indices, corners),
            normal_indices=_pick(face.normal_indices, corners),
            uv_indices=_pick(face.uv_indices, corners),
            color_indices=_pick(face.color_indices, corners),
        ))
    return TriangulationResult(triangles)
