#!/usr/bin/env python3
"""Basic usage examples for cube-lut-tiler."""

import tempfile
from pathlib import Path

import numpy as np

from cube_lut_tiler import CubeLutParser, LutTiler, ParseFailure, import_cube_lut


def build_identity_cube(size: int = 16, gamma: float = 1.0) -> str:
    """Build the text of a .cube file with an optional gamma curve."""
    lines = ['TITLE "Example"', f"LUT_3D_SIZE {size}"]
    scale = size - 1
    for b in range(size):
        for g in range(size):
            for r in range(size):
                rgb = np.power(np.array([r, g, b]) / scale, 1.0 / gamma)
                lines.append(" ".join(f"{v:.6f}" for v in rgb))
    return "\n".join(lines) + "\n"


def example_parse_and_tile() -> None:
    """Example: Parse .cube text and tile it."""
    print("=== Parse and Tile ===")

    result = CubeLutParser().parse_text(build_identity_cube(gamma=2.2))
    if isinstance(result, ParseFailure):
        print(f"Parse failed: {result.message}")
        return

    size, table = result.unwrap()
    print(f"Parsed {size}x{size}x{size} LUT with {len(table)} samples")

    image = LutTiler().tile(size, table)
    print(f"Tiled image: {image.width}x{image.height} pixels")
    print(f"Range: [{image.pixels.min():.3f}, {image.pixels.max():.3f}]")


def example_parse_error() -> None:
    """Example: Report a line-numbered diagnostic."""
    print("\n=== Parse Error ===")

    text = build_identity_cube().replace("LUT_3D_SIZE 16", "LUT_3D_SIZE 15")
    result = CubeLutParser().parse_text(text)
    if isinstance(result, ParseFailure):
        print(f"Rejected: {result.message} (line {result.line_number})")


def example_import_file() -> None:
    """Example: Import a .cube file as an RGBA texture."""
    print("\n=== Import File ===")

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "example.cube"
        path.write_text(build_identity_cube(), encoding="utf-8")

        result = import_cube_lut(path)
        texture = result.main_object
        if texture is None:
            print(f"Import failed: {result.errors}")
            return

        print(f"Texture '{texture.name}': {texture.data.shape} {texture.data.dtype}")
        written = texture.save(Path(tmp) / "example.npy", "bgra")
        print(f"Saved to {written.name}")


if __name__ == "__main__":
    example_parse_and_tile()
    example_parse_error()
    example_import_file()
