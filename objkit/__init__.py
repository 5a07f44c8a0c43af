"""
objkit – загрузчик Wavefront OBJ/MTL для Python.
Разбирает геометрию (.obj) и материалы (.mtl) в меши и материалы,
готовые для рендера или дальнейшей обработки.
"""

from objkit.utils import logger, Diagnostics, LoaderConfig
from objkit.errors import (
    ObjKitError,
    FileFormatError,
    ParseError,
    InvalidIndexError,
    UnsupportedPolygonError,
    MissingPositionsError,
    MaterialError,
    ImageDecodeError,
    InternalStateError,
    SnapshotError,
)
from objkit.math import Vec2, Vec3
from objkit.parsing import Face
from objkit.scene import Mesh, OBJData
from objkit.assets import Material, MTLLoader
from objkit.utils.image_loader import ImageBuffer, decode_image
from objkit.loader import OBJLoader, load_obj

__version__ = "1.0.0"

__all__ = [
    "OBJLoader",
    "load_obj",
    "MTLLoader",
    "OBJData",
    "Mesh",
    "Face",
    "Material",
    "ImageBuffer",
    "decode_image",
    "Vec2",
    "Vec3",
    "LoaderConfig",
    "Diagnostics",
    "logger",
    "ObjKitError",
    "FileFormatError",
    "ParseError",
    "InvalidIndexError",
    "UnsupportedPolygonError",
    "MissingPositionsError",
    "MaterialError",
    "ImageDecodeError",
    "InternalStateError",
    "SnapshotError",
]
