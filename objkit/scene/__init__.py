"""
Пакет scene – меши, сборщик групп, итоговый снимок OBJData.
"""

from objkit.scene.mesh import Mesh
from objkit.scene.assembler import MeshAssembler, parse_smooth_toggle
from objkit.scene.snapshot import OBJData

__all__ = ["Mesh", "MeshAssembler", "parse_smooth_toggle", "OBJData"]
