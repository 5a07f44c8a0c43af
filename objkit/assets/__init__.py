# objkit/assets/__init__.py
"""Пакет с материалами: запись Material, разбор .mtl, таблица usemtl."""
from objkit.assets.material import Material
from objkit.assets.resolver import MaterialLibrary, bind_material
from objkit.assets.mtl_loader import MTLLoader

__all__ = ["Material", "MaterialLibrary", "bind_material", "MTLLoader"]
