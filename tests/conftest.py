# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Shared fixtures for .cube test data."""

from collections.abc import Callable

import pytest


def identity_rows(size: int) -> list[str]:
    """Identity LUT data rows in .cube order (red varies fastest)."""
    scale = size - 1
    return [
        f"{r / scale:.6f} {g / scale:.6f} {b / scale:.6f}"
        for b in range(size)
        for g in range(size)
        for r in range(size)
    ]


def build_cube_lines(
    size: int = 16, rows: list[str] | None = None, header: list[str] | None = None
) -> list[str]:
    """Build the lines of a .cube file."""
    if header is None:
        header = ['TITLE "Identity"', f"LUT_3D_SIZE {size}"]
    if rows is None:
        rows = identity_rows(size)
    return header + rows


@pytest.fixture
def cube_lines() -> Callable[..., list[str]]:
    """Factory fixture returning .cube file lines."""
    return build_cube_lines
