"""
Пакет parsing – классификатор строк, числа, индексы, face‑записи,
триангуляция.
"""

from objkit.parsing.lexer import ObjRecord, MtlRecord, classify_obj_line, classify_mtl_line
from objkit.parsing.numeric import parse_floats, parse_vec2, parse_vec3, parse_float
from objkit.parsing.indices import IndexKind, resolve_index
from objkit.parsing.faces import Face, FaceSyntax, detect_syntax, parse_face
from objkit.parsing.triangulate import TriangulationResult, triangulate, check_polygon

__all__ = [
    "ObjRecord", "MtlRecord", "classify_obj_line", "classify_mtl_line",
    "parse_floats", "parse_vec2", "parse_vec3", "parse_float",
    "IndexKind", "resolve_index",
    "Face", "FaceSyntax", "detect_syntax", "parse_face",
    "TriangulationResult", "triangulate", "check_polygon",
]
