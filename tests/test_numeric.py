# -*- coding: utf-8 -*-
import pytest

from objkit.errors import ParseError
from objkit.math.vec import Vec2, Vec3
from objkit.parsing.numeric import parse_float, parse_floats, parse_vec2, parse_vec3


def test_parse_vec3():
    assert parse_vec3("v 1.5 -2 3e2") == Vec3(1.5, -2.0, 300.0)


def test_parse_vec2_and_float():
    assert parse_vec2("vt 0.25 0.75") == Vec2(0.25, 0.75)
    assert parse_float("Ns 12.5") == pytest.approx(12.5)


def test_extra_whitespace_is_fine():
    assert parse_floats("v   1\t2    3", 3) == [1.0, 2.0, 3.0]


@pytest.mark.parametrize("line, arity", [
    ("v 1 2", 3),
    ("v 1 2 3 4", 3),
    ("v 1 two 3", 3),
    ("vt 0.5", 2),
    ("d", 1),
    ("Ns 1 # comment", 1),
])
def test_strict_failures(line, arity):
    with pytest.raises(ParseError):
        parse_floats(line, arity)


def test_unsupported_arity():
    with pytest.raises(ValueError):
        parse_floats("v 1 2 3 4", 4)
