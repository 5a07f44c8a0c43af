# -*- coding: utf-8 -*-
import numpy as np
import pytest

from objkit.assets.material import Material
from objkit.assets.mtl_loader import MTLLoader
from objkit.errors import ImageDecodeError
from objkit.math.vec import Vec3
from objkit.utils.logger import Diagnostics

MATERIALS = """
    # two materials
    newmtl red
    Ka 0.1 0.0 0.0
    Kd 1.0 0.0 0.0
    Ks 0.5 0.5 0.5
    Ns 10
    d 0.75

    newmtl plain
    Kd 0.2 0.2 0.2
"""


def test_parses_fields(write):
    path = write("scene.mtl", MATERIALS)
    mtl = MTLLoader()
    assert mtl.load(str(path))
    red = mtl.materials["red"]
    assert red.ambient == Vec3(0.1, 0.0, 0.0)
    assert red.diffuse == Vec3(1.0, 0.0, 0.0)
    assert red.specular == Vec3(0.5, 0.5, 0.5)
    assert red.roughness == pytest.approx(10.0)
    assert red.alpha == pytest.approx(0.75)
    plain = mtl.materials["plain"]
    assert plain.ambient is None and plain.roughness is None
    assert plain.diffuse == Vec3(0.2, 0.2, 0.2)


def test_wrong_extension(write):
    path = write("scene.txt", MATERIALS)
    mtl = MTLLoader()
    assert not mtl.load(str(path))
    assert "extension" in mtl.diagnostics.errors()[0]


def test_missing_file(tmp_path):
    mtl = MTLLoader()
    assert not mtl.load(str(tmp_path / "nope.mtl"))
    assert mtl.diagnostics.has_error()


def test_duplicate_newmtl_is_fatal(write):
    path = write("dup.mtl", """
        newmtl a
        newmtl a
    """)
    mtl = MTLLoader()
    assert not mtl.load(str(path))
    assert "defined twice" in mtl.diagnostics.errors()[0]


def test_bad_number_reports_line(write):
    path = write("bad.mtl", """
        newmtl a
        Kd 1 1
    """)
    mtl = MTLLoader()
    assert not mtl.load(str(path))
    assert "at line 1" in mtl.diagnostics.errors()[0]


def test_property_before_newmtl_is_fatal(write):
    path = write("orphan.mtl", "Kd 1 1 1\n")
    mtl = MTLLoader()
    assert not mtl.load(str(path))
    assert "before any newmtl" in mtl.diagnostics.errors()[0]


def test_unknown_lines_warn(write):
    path = write("extra.mtl", """
        newmtl a
        illum 2
        Ni 1.45
    """)
    mtl = MTLLoader()
    assert mtl.load(str(path))
    assert len(mtl.diagnostics.warnings()) == 2
    assert not mtl.diagnostics.has_error()


def test_texture_maps_relative_to_mtl(write, png):
    png("textures/diffuse.png", height=2, width=3)
    png("textures/alpha.png", height=4, width=4, mode="L")
    png("textures/ambient.png", height=1, width=2)
    png("textures/rough.png", height=5, width=1, mode="L")
    png("textures/spec.png", height=3, width=3, mode="RGBA")
    path = write("scene.mtl", """
        newmtl tex
        map_Kd textures/diffuse.png
        map_d textures/alpha.png
        map_Ka textures/ambient.png
        map_Ns textures/rough.png
        map_Ks textures/spec.png
    """)
    mtl = MTLLoader()
    assert mtl.load(str(path))
    tex = mtl.materials["tex"]
    assert (tex.diffuse_map.width, tex.diffuse_map.height, tex.diffuse_map.channels) == (3, 2, 3)
    assert tex.diffuse_map.name == "diffuse.png"
    assert (tex.alpha_map.name, tex.alpha_map.channels) == ("alpha.png", 1)
    assert (tex.ambient_map.name, tex.ambient_map.width, tex.ambient_map.height) == ("ambient.png", 2, 1)
    assert (tex.roughness_map.name, tex.roughness_map.height) == ("rough.png", 5)
    assert (tex.specular_map.name, tex.specular_map.channels) == ("spec.png", 4)
    assert set(tex.textures()) == set(Material.MAP_SLOTS)
    assert not mtl.diagnostics.has_warning()


def test_texture_redefinition_warns_last_wins(write, png):
    png("a.png", height=1, width=1)
    png("b.png", height=2, width=2)
    path = write("twice.mtl", """
        newmtl m
        map_Ks a.png
        map_Ks b.png
    """)
    mtl = MTLLoader()
    assert mtl.load(str(path))
    assert mtl.materials["m"].specular_map.name == "b.png"
    assert any("two map_Ks" in w for w in mtl.diagnostics.warnings())


def test_missing_texture_warns_and_skips(write):
    path = write("missing.mtl", """
        newmtl m
        map_Kd nowhere.png
    """)
    mtl = MTLLoader()
    assert mtl.load(str(path))
    assert mtl.materials["m"].diffuse_map is None
    assert mtl.diagnostics.has_warning()


def test_custom_decoder_receives_resolved_path(write, tmp_path):
    calls = []

    def decoder(path, flip=True):
        calls.append((path, flip))
        raise ImageDecodeError("nope")

    path = write("custom.mtl", "newmtl m\nmap_Ka sub/a.png\n")
    mtl = MTLLoader(Diagnostics(), image_decoder=decoder, flip_textures=False)
    assert mtl.load(str(path))
    assert calls == [(str(tmp_path / "sub" / "a.png"), False)]


def test_steal_materials_empties_loader(write):
    mtl = MTLLoader()
    mtl.load(str(write("scene.mtl", MATERIALS)))
    stolen = mtl.steal_materials()
    assert set(stolen) == {"red", "plain"}
    assert mtl.materials == {}


def test_decoder_failure_is_not_reported_as_open_error(write):
    def decoder(path, flip=True):
        raise PermissionError(path)

    path = write("perm.mtl", "newmtl m\nmap_Kd a.png\n")
    mtl = MTLLoader(image_decoder=decoder)
    with pytest.raises(PermissionError):
        mtl.load(str(path))
    assert not any("Unable to open" in e for e in mtl.diagnostics.errors())
