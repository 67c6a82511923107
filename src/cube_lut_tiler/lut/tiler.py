# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Repack a flat 3D LUT table into a 2D tiled image for GPU sampling."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

import numpy as np

from .cube_parser import CubeTable

IndexT = TypeVar("IndexT", int, np.ndarray)


def flat_to_coords(index: IndexT, size: int) -> tuple[IndexT, IndexT, IndexT]:
    """Decompose a flat table index into (x, y, z) cube coordinates.

    Args:
        index: Flat index, or array of indices, in [0, size^3)
        size: Edge length of the cube

    Returns:
        Tuple (x, y, z) where x varies fastest
    """
    x = index % size
    y = (index // size) % size
    z = index // (size * size)
    return x, y, z


def coords_to_flat(x: IndexT, y: IndexT, z: IndexT, size: int) -> IndexT:
    """Recombine cube coordinates into a flat table index."""
    return x + y * size + z * size * size


def tiled_index(index: IndexT, size: int) -> IndexT:
    """Map a flat table index to its flat index in the tiled image.

    Each z slice becomes a size x size tile; tiles sit side by side in a
    single row band of width size * size.

    Args:
        index: Flat table index, or array of indices, in [0, size^3)
        size: Edge length of the cube

    Returns:
        Destination index in the (size * size) x size image buffer
    """
    x, y, z = flat_to_coords(index, size)
    width = size * size
    # Shift x by a full tile width for every z slice
    target_x = x + z * size
    return target_x + y * width


@dataclass(frozen=True)
class TiledImage:
    """2D tiled LUT image with a flat, row-major RGB pixel buffer."""

    width: int
    height: int
    pixels: np.ndarray

    @property
    def lut_size(self) -> int:
        return self.height

    def as_image(self) -> np.ndarray:
        """Return the pixels as a (height, width, 3) array view."""
        return self.pixels.reshape(self.height, self.width, 3)


class LutTiler:
    """Lay out the z slices of a 3D LUT horizontally in one 2D image."""

    def __init__(self, dtype: Any = np.float32) -> None:
        """Initialize the tiler.

        Args:
            dtype: Data type of the output pixel buffer (default: float32)
        """
        self.dtype = np.dtype(dtype)

    def tile(
        self, size: int, colors: CubeTable | Sequence[Sequence[float]] | np.ndarray
    ) -> TiledImage:
        """Remap size^3 colors in table order into a tiled image.

        The input length is expected to be exactly size^3; that is guaranteed
        by the parser and is not checked again here. Samples are copied
        without clipping or interpolation, but are stored in the tiler's
        dtype; with the default float32 the parser's double-precision values
        are rounded to single precision, as a float RGBA texture would.

        Args:
            size: Edge length of the cube
            colors: Table samples in file order (red varies fastest)

        Returns:
            TiledImage of width size * size and height size
        """
        if isinstance(colors, CubeTable):
            source = colors.to_array(self.dtype)
        else:
            source = np.asarray(colors, dtype=self.dtype).reshape(-1, 3)

        width = size * size
        destination = np.empty((width * size, 3), dtype=self.dtype)

        source_index = np.arange(size**3)
        destination[tiled_index(source_index, size)] = source

        return TiledImage(width=width, height=size, pixels=destination)


def tile_lut(
    size: int, colors: CubeTable | Sequence[Sequence[float]] | np.ndarray
) -> TiledImage:
    """Tile a table with a default float32 LutTiler."""
    return LutTiler().tile(size, colors)
