"""
Разбор 1, 2 или 3 чисел с плавающей точкой после ключевого слова.

Разбор строгий: не хватает поля, лишний «хвост» или не‑число –
`ParseError`.
"""

from objkit.errors import ParseError
from objkit.math.vec import Vec2, Vec3


def parse_floats(line: str, arity: int) -> list[float]:
    if arity not in (1, 2, 3):
        raise ValueError(f"Unsupported arity: {arity}")

    tokens = line.split()[1:]          # первый токен – ключевое слово
    if len(tokens) < arity:
        raise ParseError(f"Expected {arity} numeric field(s), got {len(tokens)}")
    if len(tokens) > arity:
        raise ParseError(f"Unexpected trailing content {' '.join(tokens[arity:])!r}")

    values = []
    for tok in tokens:
        try:
            values.append(float(tok))
        except ValueError:
            raise ParseError(f"Invalid numeric field {tok!r}") from None
    return values


def parse_vec3(line: str) -> Vec3:
    return Vec3(*parse_floats(line, 3))


def parse_vec2(line: str) -> Vec2:
    return Vec2(*parse_floats(line, 2))


def parse_float(line: str) -> float:
    return parse_floats(line, 1)[0]
