# objkit/math/vec.py
"""
Маленькие векторы на базе NumPy (float32) – позиции, нормали, цвета, UV.
Это значения без идентичности: сравниваются покомпонентно.
"""

import numpy as np
from typing import Tuple


class Vec3:
    """Вектор‑3 (float32). Используется для Position / Normal / Color."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._v = np.array([x, y, z], dtype=np.float32)

    # -----------------------------------------------------------------
    # свойства (только чтение – значение не меняется после разбора)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    # -----------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __iter__(self):
        return iter(self.to_tuple())

    def __len__(self) -> int:
        return 3

    def as_np(self) -> np.ndarray:
        """Копия 3‑компонентного ndarray (float32)."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())

    def __repr__(self) -> str:
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"


class Vec2:
    """Вектор‑2 (float32) – текстурные координаты."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self._v = np.array([x, y], dtype=np.float32)

    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __iter__(self):
        return iter(self.to_tuple())

    def __len__(self) -> int:
        return 2

    def as_np(self) -> np.ndarray:
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float]:
        return tuple(self._v.tolist())

    def __repr__(self) -> str:
        return f"Vec2({self.x:.3f}, {self.y:.3f})"
