# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Command-line interface for cube-lut-tiler."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .importer import CubeLutImporter
from .texture import SUPPORTED_FORMATS


def configure_logging(verbose: bool, info_logging: bool) -> None:
    """Configure root logging for CLI runs.

    Args:
        verbose: Enable debug logging
        info_logging: Enable info-level logging
    """
    if verbose:
        log_level = logging.DEBUG
    elif info_logging:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING  # Quiet mode - only warnings and errors

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@click.command()
@click.argument("cube_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the tiled texture to this .npy file",
)
@click.option(
    "--format",
    "target_format",
    type=click.Choice(SUPPORTED_FORMATS, case_sensitive=False),
    default="rgba",
    show_default=True,
    help="Channel order of the written texture",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose (debug) logging")
@click.option("--info-logging", is_flag=True, help="Enable info-level logging")
@click.version_option(version=__version__)
def main(
    cube_file: Path,
    output: Path | None,
    target_format: str,
    verbose: bool,
    info_logging: bool,
) -> None:
    """Cube LUT Tiler - Convert .cube 3D LUTs into 2D tiled GPU textures.

    Parses CUBE_FILE, lays its blue slices side by side in a
    (size*size) x size RGBA float texture and optionally saves it.
    """
    configure_logging(verbose, info_logging)
    convert_cli(cube_file, output, target_format)


def convert_cli(cube_file: Path, output: Path | None, target_format: str) -> None:
    """Import a .cube file and report or save the resulting texture."""
    importer = CubeLutImporter()
    result = importer.import_asset(cube_file)

    if not result.succeeded or result.main_object is None:
        for error in result.errors:
            click.echo(f"Error: {cube_file}: {error}", err=True)
        sys.exit(1)

    texture = result.main_object
    size = texture.lut_size
    click.echo(
        f"{cube_file.name}: {size}x{size}x{size} LUT -> "
        f"{texture.width}x{texture.height} texture"
    )
    if result.title:
        click.echo(f"Title: {result.title}")

    if output is not None:
        try:
            written = texture.save(output, target_format)
        except OSError as e:
            click.echo(f"Error: could not write {output}: {e}", err=True)
            sys.exit(1)
        click.echo(f"Saved {target_format.lower()} texture to {written}")


if __name__ == "__main__":
    main()
