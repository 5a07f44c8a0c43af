# objkit/parsing/lexer.py
"""
Классификатор строк OBJ/MTL.

Строка (уже без пробелов по краям) сопоставляется с упорядоченной
таблицей ключевых слов. Ключевое слово совпадает только если после
него идёт разделитель: "v 1 2 3" – позиция, а голое "v" – UNKNOWN.
Функции чистые и тотальные: никогда не бросают исключений.
"""

from __future__ import annotations

from enum import Enum


class ObjRecord(Enum):
    POSITION = "v"
    NORMAL = "vn"
    TEXCOORD = "vt"
    FACE = "f"
    GROUP = "g"
    NAMED_OBJECT = "o"
    SMOOTH_SHADING = "s"
    MATERIAL_LIB = "mtllib"
    USE_MATERIAL = "usemtl"
    COMMENT = "#"
    BLANK = ""
    UNKNOWN = "unknown"


class MtlRecord(Enum):
    NEW_MATERIAL = "newmtl"
    AMBIENT_MAP = "map_Ka"
    DIFFUSE_MAP = "map_Kd"
    SPECULAR_MAP = "map_Ks"
    ROUGHNESS_MAP = "map_Ns"
    ALPHA_MAP = "map_d"
    AMBIENT = "Ka"
    DIFFUSE = "Kd"
    SPECULAR = "Ks"
    ROUGHNESS = "Ns"
    ALPHA = "d"
    COMMENT = "#"
    BLANK = ""
    UNKNOWN = "unknown"


# Разделитель после ключевого слова исключает ложные совпадения
# ("vn" никогда не станет "v").
_OBJ_KEYWORDS = (
    ObjRecord.POSITION,
    ObjRecord.NORMAL,
    ObjRecord.TEXCOORD,
    ObjRecord.FACE,
    ObjRecord.GROUP,
    ObjRecord.NAMED_OBJECT,
    ObjRecord.SMOOTH_SHADING,
    ObjRecord.MATERIAL_LIB,
    ObjRecord.USE_MATERIAL,
)

_MTL_KEYWORDS = (
    MtlRecord.NEW_MATERIAL,
    MtlRecord.AMBIENT_MAP,
    MtlRecord.DIFFUSE_MAP,
    MtlRecord.SPECULAR_MAP,
    MtlRecord.ROUGHNESS_MAP,
    MtlRecord.ALPHA_MAP,
    MtlRecord.AMBIENT,
    MtlRecord.DIFFUSE,
    MtlRecord.SPECULAR,
    MtlRecord.ROUGHNESS,
    MtlRecord.ALPHA,
)

_SEPARATORS = (" ", "\t")


def _has_keyword(line: str, keyword: str) -> bool:
    return (
        len(line) > len(keyword)
        and line.startswith(keyword)
        and line[len(keyword)] in _SEPARATORS
    )


def _classify(line: str, table, blank, comment, unknown):
    if not line:
        return blank
    if line.startswith("#"):
        return comment
    for kind in table:
        if _has_keyword(line, kind.value):
            return kind
    return unknown


def classify_obj_line(line: str) -> ObjRecord:
    """Тип строки .obj файла."""
    return _classify(line, _OBJ_KEYWORDS, ObjRecord.BLANK, ObjRecord.COMMENT, ObjRecord.UNKNOWN)


def classify_mtl_line(line: str) -> MtlRecord:
    """Тип строки .mtl файла."""
    return _classify(line, _MTL_KEYWORDS, MtlRecord.BLANK, MtlRecord.COMMENT, MtlRecord.UNKNOWN)


def keyword(kind: ObjRecord | MtlRecord) -> str:
    """Ключевое слово записи – для сообщений диагностики."""
    return kind.value


def remainder(line: str) -> str:
    """Всё после ключевого слова, без пробелов по краям."""
    parts = line.split(maxsplit=1)
    return parts[1].strip() if len(parts) > 1 else ""
