# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Import .cube files as tiled LUT textures."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .lut.cube_parser import CubeLutParser, ParseFailure
from .lut.tiler import LutTiler
from .texture import LutTexture

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Outcome of importing one .cube file."""

    path: Path
    objects: dict[str, LutTexture] = field(default_factory=dict)
    main_object: LutTexture | None = None
    errors: list[str] = field(default_factory=list)
    title: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.main_object is not None and not self.errors

    def add_object(self, name: str, texture: LutTexture) -> None:
        self.objects[name] = texture

    def set_main_object(self, texture: LutTexture) -> None:
        self.main_object = texture

    def log_import_error(self, message: str) -> None:
        logger.error(f"Failed to import {self.path}: {message}")
        self.errors.append(message)


class CubeLutImporter:
    """Read a .cube file, tile it and register the resulting texture."""

    def __init__(
        self,
        parser: CubeLutParser | None = None,
        tiler: LutTiler | None = None,
        object_name: str = "lut",
    ) -> None:
        """Initialize the importer.

        Args:
            parser: Parser to use (default: CubeLutParser with standard bounds)
            tiler: Tiler to use (default: float32 LutTiler)
            object_name: Name the texture is registered under (default: "lut")
        """
        self.parser = parser or CubeLutParser()
        self.tiler = tiler or LutTiler()
        self.object_name = object_name

    def import_asset(self, path: str | Path) -> ImportResult:
        """Import a .cube file.

        Args:
            path: Path to the .cube file

        Returns:
            ImportResult with the texture as main object, or with errors and
            no objects if the file could not be read or parsed
        """
        result = ImportResult(path=Path(path))

        try:
            text = result.path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            result.log_import_error(f"Could not read file: {e}")
            return result

        parsed = self.parser.parse_text(text)
        if isinstance(parsed, ParseFailure):
            result.log_import_error(parsed.message)
            return result

        size, table = parsed.unwrap()
        image = self.tiler.tile(size, table)
        texture = LutTexture.from_tiled_image(image, self.object_name)

        result.title = parsed.title
        result.add_object(self.object_name, texture)
        result.set_main_object(texture)

        logger.info(
            f"Imported {size}x{size}x{size} LUT from {result.path} as {image.width}x{image.height} texture"
        )
        return result

    def get_status(self) -> dict[str, Any]:
        """Get importer configuration.

        Returns:
            Dictionary with status information
        """
        return {
            "object_name": self.object_name,
            "min_size": self.parser.min_size,
            "max_size": self.parser.max_size,
            "dtype": str(self.tiler.dtype),
        }


def import_cube_lut(path: str | Path) -> ImportResult:
    """Import a .cube file with the default importer."""
    return CubeLutImporter().import_asset(path)
