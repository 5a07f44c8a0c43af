# objkit/errors.py
"""
Иерархия исключений загрузчика.

Все «фатальные» ситуации (прерывающие загрузку) – наследники `ObjKitError`.
`OBJLoader.load()` перехватывает их, пишет сообщение в диагностику и
возвращает False.
"""

from __future__ import annotations


class ObjKitError(RuntimeError):
    """Базовый класс всех ошибок objkit."""


class FileFormatError(ObjKitError):
    """Неверное расширение файла или файл невозможно открыть."""


class ParseError(ObjKitError):
    """Некорректная строка (числа, индексы, синтаксис face)."""

    def __init__(self, message: str, path: str | None = None, line: int | None = None):
        self.reason = message
        self.path = path
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        if self.path is None or self.line is None:
            return self.reason
        return f"{self.reason} in {self.path} at line {self.line}"

    def at(self, path: str, line: int) -> "ParseError":
        """Привязать ошибку к файлу и строке (0‑based)."""
        self.path = path
        self.line = line
        self.args = (self._format(),)
        return self


class InvalidIndexError(ParseError):
    """Индекс вершины равен 0 – в формате OBJ это не определено."""


class UnsupportedPolygonError(ParseError):
    """Поддерживаются только треугольники и четырёхугольники."""

    def __init__(self, vertex_count: int):
        self.vertex_count = vertex_count
        super().__init__(
            f"Only triangles and quads are supported, got a face with {vertex_count} vertices"
        )


class MissingPositionsError(ObjKitError):
    """В файле нет ни одной строки `v`."""


class MaterialError(ObjKitError):
    """Ошибки материалов: неизвестное имя, дубликат newmtl и т.п."""


class ImageDecodeError(ObjKitError):
    """Текстуру не удалось найти или декодировать."""


class InternalStateError(ObjKitError):
    """Нарушено внутреннее предусловие (например, face без текущего меша)."""


class SnapshotError(ObjKitError):
    """Индекс в Face выходит за пределы массива при создании снимка."""
