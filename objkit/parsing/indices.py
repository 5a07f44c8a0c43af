"""
Перевод индексов из face‑записей OBJ (1‑based или отрицательных)
в абсолютные индексы с нуля.
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping

from objkit.errors import InvalidIndexError


class IndexKind(Enum):
    POSITION = "position"
    NORMAL = "normal"
    TEXCOORD = "texcoord"
    COLOR = "color"


# Текущая длина каждого массива на момент разбора строки f.
IndexCounts = Mapping[IndexKind, int]


def resolve_index(token: int, current_length: int, kind: IndexKind = IndexKind.POSITION) -> int:
    """
    token > 0  →  token - 1
    token < 0  →  current_length - |token|  (длина *на момент* разбора)
    token == 0 →  InvalidIndexError

    Границы здесь не проверяются – это делает OBJData.validate().
    """
    if token > 0:
        return token - 1
    if token < 0:
        return current_length + token
    raise InvalidIndexError(f"Zero {kind.value} index is not allowed")
