# objkit/parsing/faces.py
"""
Face‑записи OBJ.

Поддерживаются четыре синтаксиса вершины:
    v          – только позиция
    v/vt       – позиция + UV
    v//vn      – позиция + нормаль (UV пропущен)
    v/vt/vn    – позиция + UV + нормаль

Синтаксис определяется по первой вершине и применяется ко всем
остальным вершинам строки. Если у более поздней вершины разделитель
не '/', но все числа на месте – это ошибка в журнале, а разбор
продолжается.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable

from objkit.errors import ParseError
from objkit.parsing.indices import IndexCounts, IndexKind, resolve_index

DELIMITER = "/"


class Face:
    """
    Полигон – четыре параллельных списка абсолютных индексов.
    `position_indices` обязателен, остальные либо пусты, либо той же длины.
    """

    __slots__ = ("position_indices", "normal_indices", "uv_indices", "color_indices")

    def __init__(self,
                 position_indices: list[int] | None = None,
                 normal_indices: list[int] | None = None,
                 uv_indices: list[int] | None = None,
                 color_indices: list[int] | None = None):
        self.position_indices = list(position_indices or [])
        self.normal_indices = list(normal_indices or [])
        self.uv_indices = list(uv_indices or [])
        self.color_indices = list(color_indices or [])

    @property
    def num_vertices(self) -> int:
        return len(self.position_indices)

    def attributes(self) -> dict[IndexKind, list[int]]:
        return {
            IndexKind.POSITION: self.position_indices,
            IndexKind.NORMAL: self.normal_indices,
            IndexKind.TEXCOORD: self.uv_indices,
            IndexKind.COLOR: self.color_indices,
        }

    def copy(self) -> "Face":
        return Face(self.position_indices, self.normal_indices,
                    self.uv_indices, self.color_indices)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Face):
            return NotImplemented
        return self.attributes() == other.attributes()

    def __repr__(self) -> str:
        parts = [f"v={self.position_indices}"]
        if self.uv_indices:
            parts.append(f"vt={self.uv_indices}")
        if self.normal_indices:
            parts.append(f"vn={self.normal_indices}")
        if self.color_indices:
            parts.append(f"c={self.color_indices}")
        return f"Face({', '.join(parts)})"


class FaceSyntax(Enum):
    POSITION = "v"
    POSITION_UV = "v/vt"
    POSITION_NORMAL = "v//vn"
    POSITION_UV_NORMAL = "v/vt/vn"


# Разделитель ловим как «любой символ, кроме цифры и знака», чтобы
# отличить неверный разделитель от неверной формы вершины.
# Индексы – группы n0..n2, разделители – s0..s1.
def _num(i: int) -> str:
    return rf"(?P<n{i}>[+-]?\d+)"


def _sep(i: int) -> str:
    return rf"(?P<s{i}>[^\d+-])"


_PATTERNS = {
    FaceSyntax.POSITION: re.compile(rf"^{_num(0)}$"),
    FaceSyntax.POSITION_UV: re.compile(rf"^{_num(0)}{_sep(0)}{_num(1)}$"),
    FaceSyntax.POSITION_NORMAL: re.compile(rf"^{_num(0)}{_sep(0)}{_sep(1)}{_num(1)}$"),
    FaceSyntax.POSITION_UV_NORMAL: re.compile(rf"^{_num(0)}{_sep(0)}{_num(1)}{_sep(1)}{_num(2)}$"),
}

# Какие атрибуты несут числовые группы каждого синтаксиса.
_LAYOUT = {
    FaceSyntax.POSITION: (IndexKind.POSITION,),
    FaceSyntax.POSITION_UV: (IndexKind.POSITION, IndexKind.TEXCOORD),
    FaceSyntax.POSITION_NORMAL: (IndexKind.POSITION, IndexKind.NORMAL),
    FaceSyntax.POSITION_UV_NORMAL: (IndexKind.POSITION, IndexKind.TEXCOORD, IndexKind.NORMAL),
}


def detect_syntax(token: str) -> FaceSyntax:
    """Синтаксис по первой вершине строки."""
    if DELIMITER * 2 in token:
        return FaceSyntax.POSITION_NORMAL
    count = token.count(DELIMITER)
    if count >= 2:
        return FaceSyntax.POSITION_UV_NORMAL
    if count == 1:
        return FaceSyntax.POSITION_UV
    return FaceSyntax.POSITION


def _split_vertex(token: str, syntax: FaceSyntax) -> tuple[list[int], list[str]]:
    match = _PATTERNS[syntax].match(token)
    if match is None:
        raise ParseError(f"Vertex {token!r} does not match face syntax {syntax.value}")
    groups = match.groupdict()
    numbers = [int(groups[k]) for k in sorted(groups) if k.startswith("n")]
    separators = [groups[k] for k in sorted(groups) if k.startswith("s")]
    return numbers, separators


def parse_face(line: str,
               counts: IndexCounts,
               on_error: Callable[[str], None] | None = None) -> Face:
    """
    Разобрать строку `f ...` в Face с абсолютными индексами.

    `counts` – текущие длины массивов (для отрицательных индексов).
    `on_error` получает сообщения о неверных разделителях.
    """
    tokens = line.split()[1:]
    if not tokens:
        raise ParseError("Face record has no vertices")

    syntax = detect_syntax(tokens[0])
    layout = _LAYOUT[syntax]
    face = Face()
    targets = face.attributes()

    for token in tokens:
        numbers, separators = _split_vertex(token, syntax)
        bad = [s for s in separators if s != DELIMITER]
        if bad and on_error is not None:
            on_error(f"Invalid delimiter {' or '.join(repr(s) for s in bad)} in vertex {token!r}")
        for kind, value in zip(layout, numbers):
            targets[kind].append(resolve_index(value, counts[kind], kind))
    return face
