# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""RGBA float texture built from a tiled LUT image."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from .lut.tiler import TiledImage

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ["rgb", "rgba", "bgr", "bgra"]


class TextureFormatError(ValueError):
    """Exception raised when texture data is invalid."""

    pass


class LutTexture:
    """2D RGBA float32 texture holding a tiled LUT."""

    def __init__(self, name: str, data: np.ndarray) -> None:
        """Initialize the texture.

        Args:
            name: Name the texture is registered under
            data: Pixel data with shape (height, width, 4), float32

        Raises:
            TextureFormatError: If the pixel data is invalid
        """
        if not name:
            raise ValueError(f"Invalid texture name: {name!r}")
        self.name = name
        self.data = data
        self.validate()
        self.height, self.width = data.shape[:2]

    @classmethod
    def from_tiled_image(cls, image: TiledImage, name: str = "lut") -> LutTexture:
        """Create a texture from a tiled image, filling alpha with 1.0.

        Args:
            image: Tiled RGB image
            name: Texture name (default: "lut")

        Returns:
            RGBA float32 texture of the image's dimensions
        """
        rgba = np.ones((image.height, image.width, 4), dtype=np.float32)
        rgba[:, :, :3] = image.as_image()
        return cls(name, rgba)

    @property
    def lut_size(self) -> int:
        return self.height

    def validate(self) -> None:
        """Validate texture data format and dimensions.

        Raises:
            TextureFormatError: If texture data is invalid
        """
        data = self.data
        if not isinstance(data, np.ndarray):
            raise TextureFormatError(f"Expected numpy array, got {type(data)}")

        if data.ndim != 3:
            raise TextureFormatError(
                f"Expected 3D array (height, width, channels), got {data.ndim}D: {data.shape}"
            )

        height, width, channels = data.shape

        if width != height * height:
            raise TextureFormatError(
                f"Dimension mismatch: expected width {height * height} for height {height}, got {width}"
            )

        if channels != 4:
            raise TextureFormatError(
                f"Unsupported channel count: {channels}. Expected 4 (RGBA)"
            )

        if data.dtype != np.float32:
            raise TextureFormatError(
                f"Unsupported data type: {data.dtype}. Only float32 is supported to preserve precision."
            )

        if np.any(~np.isfinite(data)):
            raise TextureFormatError("float32 contains non-finite values (NaN/Inf)")

        # HDR and creative LUTs can leave [0,1]
        if data.size and (np.any(data < 0) or np.any(data > 1)):
            logger.debug(
                "LUT contains values outside [0,1] range: [%.3f, %.3f]",
                data.min(),
                data.max(),
            )

    def convert_format(self, target_format: str) -> np.ndarray:
        """Return a copy of the pixel data in the target channel order.

        Args:
            target_format: One of 'rgb', 'rgba', 'bgr', 'bgra'

        Returns:
            Converted pixel data

        Raises:
            ValueError: If the format is not supported
        """
        target_format = target_format.lower()

        if target_format == "rgb":
            return self.data[:, :, :3].copy()
        if target_format == "rgba":
            return self.data.copy()
        if target_format == "bgr":
            return self.data[:, :, [2, 1, 0]]
        if target_format == "bgra":
            return self.data[:, :, [2, 1, 0, 3]]
        raise ValueError(f"Unsupported format: {target_format}")

    def save(self, path: str | Path, target_format: str = "rgba") -> Path:
        """Write the texture to a .npy file.

        Args:
            path: Output file path
            target_format: Channel order to write (default: 'rgba')

        Returns:
            Path that was written
        """
        path = Path(path)
        if path.suffix != ".npy":
            path = path.with_suffix(".npy")
        np.save(path, self.convert_format(target_format))
        logger.info(f"Saved {self.width}x{self.height} {target_format} texture to {path}")
        return path
