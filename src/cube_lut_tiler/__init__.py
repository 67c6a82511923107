# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Cube LUT Tiler - .cube 3D LUT parsing and 2D texture tiling.

A Python package that parses .cube lookup tables and repacks the 3D cube into
a 2D tiled image (blue slices side by side) ready for GPU sampling.

Simple usage:
    import cube_lut_tiler
    result = cube_lut_tiler.import_cube_lut("grade.cube")
    texture = result.main_object  # None if the file was rejected
"""

__version__ = "0.1.0"
__author__ = "Fuse Technical Group"

from .importer import CubeLutImporter, ImportResult, import_cube_lut
from .lut import (
    CubeLutParser,
    CubeParseError,
    LutTiler,
    ParseFailure,
    ParseSuccess,
    TiledImage,
)
from .texture import LutTexture

__all__ = [
    "CubeLutImporter",
    "CubeLutParser",
    "CubeParseError",
    "ImportResult",
    "LutTexture",
    "LutTiler",
    "ParseFailure",
    "ParseSuccess",
    "TiledImage",
    "import_cube_lut",
]
