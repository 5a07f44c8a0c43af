# objkit/loader.py
# -*- coding: utf-8 -*-
"""
Загрузчик Wavefront OBJ.

* Сбрасывает состояние, проверяет расширение `.obj`, открывает файл.
* Каждую строку: strip → классификация → разбор нужным компонентом.
* В конце проверяет, что есть хотя бы одна позиция, и упаковывает
  атрибуты в numpy‑массивы.
* Результат забирается через `steal()` (разрушающе, загрузчик
  сбрасывается) или `share()` (копия, загрузчик сохраняет состояние).

Экземпляр загрузчика не потокобезопасен: одна загрузка – один поток.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import numpy as np

from objkit.assets.mtl_loader import MTLLoader
from objkit.assets.resolver import MaterialLibrary, bind_material
from objkit.errors import (
    FileFormatError,
    MaterialError,
    MissingPositionsError,
    ObjKitError,
    ParseError,
)
from objkit.math.vec import Vec2, Vec3
from objkit.parsing.faces import parse_face
from objkit.parsing.indices import IndexKind
from objkit.parsing.lexer import ObjRecord, classify_obj_line, remainder
from objkit.parsing.numeric import parse_vec2, parse_vec3
from objkit.parsing.triangulate import check_polygon, triangulate
from objkit.scene.assembler import MeshAssembler, parse_smooth_toggle
from objkit.scene.snapshot import OBJData, empty_attribute
from objkit.utils.config import LoaderConfig
from objkit.utils.image_loader import ImageBuffer, decode_image
from objkit.utils.logger import Diagnostics

OBJ_EXTENSION = ".obj"


def _pack(values: list, width: int) -> np.ndarray:
    if not values:
        return empty_attribute(width)
    return np.vstack([v.as_np() for v in values]).astype(np.float32, copy=False)


class OBJLoader:
    """Одна загрузка за раз; перед повторным использованием – reset()."""

    def __init__(self,
                 config: LoaderConfig | None = None,
                 image_decoder: Callable[..., ImageBuffer] = decode_image):
        self.config = config.copy() if config is not None else LoaderConfig()
        self.diagnostics = Diagnostics("OBJLoader")
        self.mtl_loader = MTLLoader(
            self.diagnostics,
            image_decoder=image_decoder,
            flip_textures=self.config.flip_textures,
        )

        self.assembler = MeshAssembler()
        self.materials = MaterialLibrary()

        self.file_path = ""
        self.working_dir = Path(".")
        self.line_no = 0

        # Пока файл читается – списки Vec, после compact() – ndarray.
        self._positions: list[Vec3] | np.ndarray = []
        self._normals: list[Vec3] | np.ndarray = []
        self._texcoords: list[Vec2] | np.ndarray = []
        self._colors: list[Vec3] | np.ndarray = []

    # -----------------------------------------------------------------
    # Конфигурация
    # -----------------------------------------------------------------
    def set_should_triangulate(self, value: bool) -> None:
        self.config.triangulate = value

    # -----------------------------------------------------------------
    # Загрузка
    # -----------------------------------------------------------------
    def load(self, path: str) -> bool:
        """Загрузить файл. False – фатальная ошибка (подробности в errors())."""
        self.reset()
        self.file_path = str(path).strip()
        try:
            self._load()
        except ObjKitError as exc:
            self.diagnostics.error(str(exc))
            return False
        self.diagnostics.info(f"Successfully parsed and loaded data from {self.file_path}")
        return True

    def _load(self) -> None:
        p = Path(self.file_path)
        if p.suffix != OBJ_EXTENSION:
            raise FileFormatError(f"The file {self.file_path} does not have the .obj extension")
        self.working_dir = p.parent

        try:
            f = p.open("r", encoding="utf-8", errors="replace")
        except OSError as exc:
            raise FileFormatError(f"Unable to open {self.file_path}: {exc}") from exc

        with f:
            for raw in f:
                try:
                    self._dispatch(raw.strip())
                except ParseError as exc:
                    raise exc.at(self.file_path, self.line_no)
                self.line_no += 1

        if not self._positions:
            raise MissingPositionsError(
                f".obj file {self.file_path} must include at least 1 position"
            )
        self._compact()

    def _dispatch(self, line: str) -> None:
        match classify_obj_line(line):
            case ObjRecord.POSITION:
                self._positions.append(parse_vec3(line))
            case ObjRecord.NORMAL:
                self._normals.append(parse_vec3(line))
            case ObjRecord.TEXCOORD:
                self._texcoords.append(parse_vec2(line))
            case ObjRecord.FACE:
                self._parse_face(line)
            case ObjRecord.SMOOTH_SHADING:
                self._parse_smooth_shading(remainder(line))
            case ObjRecord.GROUP | ObjRecord.NAMED_OBJECT:
                self.assembler.make_group(remainder(line))
            case ObjRecord.MATERIAL_LIB:
                self._load_material_library(remainder(line))
            case ObjRecord.USE_MATERIAL:
                bind_material(self.assembler, self.materials, remainder(line))
            case ObjRecord.COMMENT | ObjRecord.BLANK:
                pass
            case ObjRecord.UNKNOWN:
                self.diagnostics.warn(
                    f"Encountered unknown line identifier in file {self.file_path} "
                    f"at line {self.line_no}."
                )

    # -----------------------------------------------------------------
    def _counts(self) -> dict[IndexKind, int]:
        return {
            IndexKind.POSITION: len(self._positions),
            IndexKind.NORMAL: len(self._normals),
            IndexKind.TEXCOORD: len(self._texcoords),
            IndexKind.COLOR: len(self._colors),
        }

    def _syntax_error(self, message: str) -> None:
        self.diagnostics.error(
            f"Invalid syntax encountered in file {self.file_path} at line {self.line_no} ({message})"
        )

    def _parse_face(self, line: str) -> None:
        face = parse_face(line, self._counts(), on_error=self._syntax_error)
        if self.config.triangulate:
            result = triangulate(face)
        else:
            result = check_polygon(face)
        self.assembler.push_faces(result.unwrap())

    def _parse_smooth_shading(self, word: str) -> None:
        enabled = parse_smooth_toggle(word)
        if enabled is None:
            self.diagnostics.warn(
                f"Could not parse file {self.file_path} line {self.line_no} "
                f"due to unknown word {word!r}"
            )
            return
        self.assembler.set_smooth_shading(enabled)

    def _load_material_library(self, rel_path: str) -> None:
        if not rel_path:
            raise ParseError("mtllib without a file path")
        mtl_path = self.working_dir / rel_path
        if not self.mtl_loader.load(str(mtl_path)):
            raise MaterialError(
                f"Failed to load material library {mtl_path} referenced from "
                f"{self.file_path} at line {self.line_no}"
            )
        self.materials.replace(self.mtl_loader.steal_materials(), source=str(mtl_path))

    def _compact(self) -> None:
        self._positions = _pack(self._positions, 3)
        self._normals = _pack(self._normals, 3)
        self._texcoords = _pack(self._texcoords, 2)
        self._colors = _pack(self._colors, 3)

    # -----------------------------------------------------------------
    # Результат
    # -----------------------------------------------------------------
    def _array(self, values, width: int) -> np.ndarray:
        if isinstance(values, np.ndarray):
            return values
        return _pack(values, width)

    def steal(self) -> OBJData:
        """Забрать данные (без копирования) и сбросить загрузчик."""
        data = OBJData(
            positions=self._array(self._positions, 3),
            normals=self._array(self._normals, 3),
            texcoords=self._array(self._texcoords, 2),
            colors=self._array(self._colors, 3),
            meshes=list(self.assembler.meshes.values()),
            name=Path(self.file_path).name,
        )
        data.validate()
        self.reset()
        return data

    def share(self) -> OBJData:
        """Копия данных; загрузчик сохраняет своё состояние."""
        data = OBJData(
            positions=self._array(self._positions, 3).copy(),
            normals=self._array(self._normals, 3).copy(),
            texcoords=self._array(self._texcoords, 2).copy(),
            colors=self._array(self._colors, 3).copy(),
            meshes=[m.copy() for m in self.assembler.meshes.values()],
            name=Path(self.file_path).name,
        )
        data.validate()
        return data

    def reset(self) -> None:
        self.line_no = 0
        self.file_path = ""
        self.working_dir = Path(".")
        self._positions = []
        self._normals = []
        self._texcoords = []
        self._colors = []
        self.assembler.reset()
        self.materials.clear()
        self.mtl_loader.reset()
        self.diagnostics.clear()

    # -----------------------------------------------------------------
    # Диагностика
    # -----------------------------------------------------------------
    def has_error(self) -> bool:
        return self.diagnostics.has_error()

    def has_warning(self) -> bool:
        return self.diagnostics.has_warning()

    def errors(self) -> list[str]:
        return self.diagnostics.errors()

    def warnings(self) -> list[str]:
        return self.diagnostics.warnings()

    def infos(self) -> list[str]:
        return self.diagnostics.infos()


def load_obj(path: str, config: LoaderConfig | None = None, **kwargs) -> OBJData:
    """Загрузить и сразу забрать OBJData; при ошибке – ObjKitError."""
    loader = OBJLoader(config, **kwargs)
    if not loader.load(path):
        errors = loader.errors()
        raise ObjKitError(errors[-1] if errors else f"Failed to load {path}")
    return loader.steal()
