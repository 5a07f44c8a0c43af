#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Пример: загрузить .obj и вывести сводку (меши, материалы, диагностика).

    python examples/inspect_obj.py examples/assets/cube.obj [--no-triangulate]
"""

from __future__ import annotations

import sys
from pathlib import Path

import objkit as ok
from objkit.utils import logger


def describe(data: ok.OBJData) -> None:
    logger.info(f"{data.name}: {len(data.positions)} positions, "
                f"{len(data.normals)} normals, {len(data.texcoords)} texcoords")
    for mesh in data.meshes:
        mat = mesh.material.name if mesh.material is not None else "-"
        logger.info(f"  mesh {mesh.name!r}: {len(mesh.faces)} faces, material {mat}")
    for mat in data.materials:
        maps = ", ".join(f"{slot}={img.width}x{img.height}" for slot, img in mat.textures().items())
        logger.info(f"  material {mat.name!r}: Kd={mat.diffuse} {maps}")


def main(argv: list[str]) -> int:
    if not argv:
        default = Path(__file__).parent / "assets" / "cube.obj"
        argv = [str(default)]

    cfg = ok.LoaderConfig()
    if "--no-triangulate" in argv:
        cfg.triangulate = False
    paths = [a for a in argv if not a.startswith("--")]

    status = 0
    for path in paths:
        loader = ok.OBJLoader(cfg)
        if not loader.load(path):
            for msg in loader.errors():
                logger.error(msg)
            status = 1
            continue
        for msg in loader.warnings():
            logger.warning(msg)
        describe(loader.steal())
    return status


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
