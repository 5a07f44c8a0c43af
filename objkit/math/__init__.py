"""
Математический суб‑пакет: Vec2, Vec3.
"""

from objkit.math.vec import Vec2, Vec3

__all__ = ["Vec2", "Vec3"]
