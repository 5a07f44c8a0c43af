# -*- coding: utf-8 -*-
import json
import logging

import numpy as np
import pytest

from objkit.errors import ImageDecodeError
from objkit.utils import DEFAULT_CONFIG, Diagnostics, LoaderConfig, Severity
from objkit.utils.image_loader import decode_image


def test_diagnostics_ordered_by_severity(caplog):
    diag = Diagnostics("test")
    with caplog.at_level(logging.INFO, logger="objkit"):
        diag.info("one")
        diag.warn("two")
        diag.error("three")
        diag.record(Severity.WARNING, "four")
    assert diag.infos() == ["one"]
    assert diag.warnings() == ["two", "four"]
    assert diag.errors() == ["three"]
    assert diag.has_error() and diag.has_warning()
    assert "[test] three" in caplog.text
    diag.clear()
    assert not diag.has_error() and len(diag) == 0


def test_diagnostics_returns_copies():
    diag = Diagnostics()
    diag.error("x")
    diag.errors().append("y")
    assert diag.errors() == ["x"]


def test_config_defaults():
    cfg = LoaderConfig()
    assert cfg.triangulate is True
    assert cfg.flip_textures is True
    assert cfg["missing"] is None
    assert cfg.get("missing", 3) == 3


def test_config_round_trip(tmp_path):
    path = tmp_path / "objkit.json"
    cfg = LoaderConfig({"triangulate": False})
    cfg.save(str(path))
    assert json.loads(path.read_text(encoding="utf-8"))["triangulate"] is False
    assert LoaderConfig.from_file(str(path)).triangulate is False


def test_config_missing_or_broken_file_falls_back(tmp_path):
    assert LoaderConfig.from_file(str(tmp_path / "none.json")).data == DEFAULT_CONFIG
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert LoaderConfig.from_file(str(broken)).data == DEFAULT_CONFIG


def test_config_copy_is_independent():
    cfg = LoaderConfig()
    other = cfg.copy()
    other.triangulate = False
    assert cfg.triangulate is True


def test_decode_image_flips_rows(png):
    path = png("rows.png", height=2, width=3)
    flipped = decode_image(str(path))
    assert (flipped.width, flipped.height, flipped.channels) == (3, 2, 3)
    assert flipped.as_np()[0, 0, 0] == 20
    straight = decode_image(str(path), flip=False)
    assert straight.as_np()[0, 0, 0] == 10
    assert len(straight.data) == 3 * 2 * 3


def test_decode_image_keeps_alpha(png):
    img = decode_image(str(png("alpha.png", height=1, width=1, mode="RGBA")))
    assert img.channels == 4
    assert np.all(img.as_np() == 10)


def test_decode_image_errors(tmp_path):
    with pytest.raises(ImageDecodeError):
        decode_image(str(tmp_path / "none.png"))
    junk = tmp_path / "junk.png"
    junk.write_bytes(b"not an image")
    with pytest.raises(ImageDecodeError):
        decode_image(str(junk))
