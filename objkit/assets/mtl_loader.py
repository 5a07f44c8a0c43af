# objkit/assets/mtl_loader.py
"""
Построчный разбор .mtl:

    newmtl <name>                 – новый материал (имя уникально в файле)
    Ka / Kd / Ks  r g b           – отражательные способности
    Ns / d        value           – шероховатость, прозрачность
    map_Ka/Kd/Ks/Ns/d  <path>     – текстура, путь относительно .mtl

Неизвестные строки – предупреждение, разбор продолжается.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from objkit.assets.material import Material
from objkit.errors import FileFormatError, ImageDecodeError, MaterialError, ObjKitError, ParseError
from objkit.parsing.lexer import MtlRecord, classify_mtl_line, keyword, remainder
from objkit.parsing.numeric import parse_float, parse_vec3
from objkit.utils.image_loader import ImageBuffer, decode_image
from objkit.utils.logger import Diagnostics

MTL_EXTENSION = ".mtl"

_VECTOR_FIELDS = {
    MtlRecord.AMBIENT: "ambient",
    MtlRecord.DIFFUSE: "diffuse",
    MtlRecord.SPECULAR: "specular",
}
_SCALAR_FIELDS = {
    MtlRecord.ROUGHNESS: "roughness",
    MtlRecord.ALPHA: "alpha",
}
_MAP_FIELDS = {
    MtlRecord.AMBIENT_MAP: "ambient_map",
    MtlRecord.DIFFUSE_MAP: "diffuse_map",
    MtlRecord.SPECULAR_MAP: "specular_map",
    MtlRecord.ROUGHNESS_MAP: "roughness_map",
    MtlRecord.ALPHA_MAP: "alpha_map",
}


class MTLLoader:
    """Загрузчик материалов; диагностика общая с OBJLoader."""

    def __init__(self,
                 diagnostics: Diagnostics | None = None,
                 image_decoder: Callable[..., ImageBuffer] = decode_image,
                 flip_textures: bool = True):
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics("MTLLoader")
        self.image_decoder = image_decoder
        self.flip_textures = flip_textures

        self.materials: dict[str, Material] = {}
        self.current_name: str | None = None
        self.file_path = ""
        self.working_dir = Path(".")
        self.line_no = 0

    # -----------------------------------------------------------------
    def load(self, path: str) -> bool:
        """Разобрать файл. False – фатальная ошибка (см. diagnostics)."""
        self.reset()
        self.file_path = str(path).strip()
        try:
            self._load()
        except ObjKitError as exc:
            self.diagnostics.error(str(exc))
            return False
        self.diagnostics.info(
            f"Loaded {len(self.materials)} material(s) from {self.file_path}"
        )
        return True

    def _load(self) -> None:
        p = Path(self.file_path)
        if p.suffix != MTL_EXTENSION:
            raise FileFormatError(f"The file {self.file_path} does not have the .mtl extension")
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

    def _dispatch(self, line: str) -> None:
        record = classify_mtl_line(line)
        match record:
            case MtlRecord.NEW_MATERIAL:
                self._new_material(remainder(line))
            case MtlRecord.AMBIENT | MtlRecord.DIFFUSE | MtlRecord.SPECULAR:
                setattr(self._current(record), _VECTOR_FIELDS[record], parse_vec3(line))
            case MtlRecord.ROUGHNESS | MtlRecord.ALPHA:
                setattr(self._current(record), _SCALAR_FIELDS[record], parse_float(line))
            case (MtlRecord.AMBIENT_MAP | MtlRecord.DIFFUSE_MAP | MtlRecord.SPECULAR_MAP
                  | MtlRecord.ROUGHNESS_MAP | MtlRecord.ALPHA_MAP):
                self._set_image_map(record, remainder(line))
            case MtlRecord.COMMENT | MtlRecord.BLANK:
                pass
            case MtlRecord.UNKNOWN:
                self.diagnostics.warn(
                    f"Unknown identifier encountered in {self.file_path} at line {self.line_no}"
                )

    # -----------------------------------------------------------------
    def _new_material(self, name: str) -> None:
        if not name:
            raise ParseError("newmtl without a material name")
        if name in self.materials:
            raise MaterialError(
                f"Material {name!r} defined twice in {self.file_path} at line {self.line_no}"
            )
        self.materials[name] = Material(name)
        self.current_name = name

    def _current(self, record: MtlRecord) -> Material:
        if self.current_name is None:
            raise MaterialError(
                f"{keyword(record)} before any newmtl in {self.file_path} at line {self.line_no}"
            )
        return self.materials[self.current_name]

    def _set_image_map(self, record: MtlRecord, rel_path: str) -> None:
        material = self._current(record)
        if not rel_path:
            raise ParseError(f"{keyword(record)} without a texture path")

        slot = _MAP_FIELDS[record]
        try:
            image = self.image_decoder(str(self.working_dir / rel_path), flip=self.flip_textures)
        except ImageDecodeError as exc:
            self.diagnostics.warn(
                f"{keyword(record)} of material {material.name!r} skipped "
                f"({self.file_path} line {self.line_no}): {exc}"
            )
            return

        if getattr(material, slot) is not None:
            self.diagnostics.warn(
                f"Defined two {keyword(record)} image maps in file {self.file_path} "
                f"at line {self.line_no}"
            )
        setattr(material, slot, image)

    # -----------------------------------------------------------------
    def steal_materials(self) -> dict[str, Material]:
        """Отдать таблицу материалов; загрузчик остаётся пустым."""
        materials, self.materials = self.materials, {}
        self.current_name = None
        return materials

    def reset(self) -> None:
        self.materials = {}
        self.current_name = None
        self.file_path = ""
        self.working_dir = Path(".")
        self.line_no = 0
