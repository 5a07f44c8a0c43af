# -*- coding: utf-8 -*-
"""
conftest.py – фикстуры: маленькие .obj/.mtl/.png файлы во временной папке.
"""

from pathlib import Path
import textwrap

import numpy as np
import pytest
from PIL import Image

from objkit import OBJLoader


@pytest.fixture
def write(tmp_path):
    """write("a.obj", text) → Path; отступы текста убираются."""
    def _write(name: str, text: str) -> Path:
        p = tmp_path / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(textwrap.dedent(text).lstrip("\n"), encoding="utf-8")
        return p
    return _write


@pytest.fixture
def png(tmp_path):
    """png("tex.png", h, w, mode) → Path; строки картинки – разные цвета."""
    def _png(name: str, height: int = 2, width: int = 3, mode: str = "RGB") -> Path:
        channels = {"L": 1, "RGB": 3, "RGBA": 4}[mode]
        pixels = np.zeros((height, width, channels), dtype=np.uint8)
        for row in range(height):
            pixels[row, :, :] = 10 * (row + 1)
        if channels == 1:
            pixels = pixels[:, :, 0]
        p = tmp_path / name
        p.parent.mkdir(parents=True, exist_ok=True)
        Image.fromarray(pixels).save(p)
        return p
    return _png


@pytest.fixture
def loader():
    return OBJLoader()


TRIANGLE = """
    g tri
    v 0 0 0
    v 1 0 0
    v 0 1 0
    f 1 2 3
"""


@pytest.fixture
def triangle_obj(write):
    return write("triangle.obj", TRIANGLE)
