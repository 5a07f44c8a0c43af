# -*- coding: utf-8 -*-
import pytest

from objkit.errors import InvalidIndexError, ParseError
from objkit.parsing.faces import Face, FaceSyntax, detect_syntax, parse_face
from objkit.parsing.indices import IndexKind


def counts(positions=4, normals=4, texcoords=4, colors=0):
    return {
        IndexKind.POSITION: positions,
        IndexKind.NORMAL: normals,
        IndexKind.TEXCOORD: texcoords,
        IndexKind.COLOR: colors,
    }


@pytest.mark.parametrize("token, syntax", [
    ("1", FaceSyntax.POSITION),
    ("1/2", FaceSyntax.POSITION_UV),
    ("1//2", FaceSyntax.POSITION_NORMAL),
    ("1/2/3", FaceSyntax.POSITION_UV_NORMAL),
])
def test_detect_syntax(token, syntax):
    assert detect_syntax(token) is syntax


def test_positions_only():
    face = parse_face("f 1 2 3", counts())
    assert face.position_indices == [0, 1, 2]
    assert face.normal_indices == []
    assert face.uv_indices == []
    assert face.num_vertices == 3


def test_position_uv():
    face = parse_face("f 1/4 2/3 3/2", counts())
    assert face.position_indices == [0, 1, 2]
    assert face.uv_indices == [3, 2, 1]
    assert face.normal_indices == []


def test_position_normal():
    face = parse_face("f 1//2 2//2 3//2 4//2", counts())
    assert face.position_indices == [0, 1, 2, 3]
    assert face.normal_indices == [1, 1, 1, 1]
    assert face.uv_indices == []


def test_position_uv_normal():
    face = parse_face("f 1/1/1 2/2/1 3/3/1", counts())
    assert face == Face([0, 1, 2], normal_indices=[0, 0, 0], uv_indices=[0, 1, 2])


def test_relative_indices_use_current_counts():
    face = parse_face("f -3/-1 -2/-1 -1/-1", counts(positions=3, texcoords=2))
    assert face.position_indices == [0, 1, 2]
    assert face.uv_indices == [1, 1, 1]


def test_bad_delimiter_is_reported_but_used():
    messages = []
    face = parse_face("f 1/1/1 2\\2\\2 3/3/3", counts(), on_error=messages.append)
    assert face.position_indices == [0, 1, 2]
    assert face.normal_indices == [0, 1, 2]
    assert len(messages) == 1
    assert messages[0].startswith("Invalid delimiter")


def test_vertex_with_wrong_shape_is_fatal():
    with pytest.raises(ParseError):
        parse_face("f 1/1/1 2/2 3/3/3", counts())


def test_non_integer_index_is_fatal():
    with pytest.raises(ParseError):
        parse_face("f 1 2 x", counts())


def test_zero_index_is_fatal():
    with pytest.raises(InvalidIndexError):
        parse_face("f 0 1 2", counts())


def test_empty_face_is_fatal():
    with pytest.raises(ParseError):
        parse_face("f", counts())


def test_face_copy_is_independent():
    face = Face([0, 1, 2], uv_indices=[0, 1, 2])
    other = face.copy()
    other.position_indices.append(3)
    assert face.position_indices == [0, 1, 2]


def test_digit_like_separator_is_reported_but_used():
    messages = []
    face = parse_face("f 1/1 2²1 3/1", counts(), on_error=messages.append)
    assert face.position_indices == [0, 1, 2]
    assert face.uv_indices == [0, 0, 0]
    assert len(messages) == 1
    assert messages[0].startswith("Invalid delimiter")


def test_digit_like_separators_in_normal_syntax():
    messages = []
    face = parse_face("f 1//1 2²³1", counts(), on_error=messages.append)
    assert face.normal_indices == [0, 0]
    assert len(messages) == 1
