# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Cube LUT parsing and 3D to 2D tiling."""

from .cube_parser import (
    MAX_LUT_SIZE,
    MIN_LUT_SIZE,
    Color,
    CubeLutParser,
    CubeTable,
    ParseFailure,
    ParseResult,
    ParseSuccess,
    parse_cube,
)
from .errors import (
    CubeParseError,
    MalformedDataRowError,
    MalformedSizeDirectiveError,
    PrematureEndOfFileError,
    TableSizeMismatchError,
)
from .tiler import LutTiler, TiledImage, tile_lut

__all__ = [
    "MAX_LUT_SIZE",
    "MIN_LUT_SIZE",
    "Color",
    "CubeLutParser",
    "CubeParseError",
    "CubeTable",
    "LutTiler",
    "MalformedDataRowError",
    "MalformedSizeDirectiveError",
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "PrematureEndOfFileError",
    "TableSizeMismatchError",
    "TiledImage",
    "parse_cube",
    "tile_lut",
]
