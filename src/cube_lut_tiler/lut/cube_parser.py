# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Parser for .cube 3D LUT text files."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import NamedTuple, Union, overload

import numpy as np

from .errors import (
    CubeParseError,
    MalformedDataRowError,
    MalformedSizeDirectiveError,
    PrematureEndOfFileError,
    TableSizeMismatchError,
)

logger = logging.getLogger(__name__)

MIN_LUT_SIZE = 16
MAX_LUT_SIZE = 128

TITLE_DIRECTIVE = "TITLE"
SIZE_DIRECTIVE = "LUT_3D_SIZE"
DOMAIN_DIRECTIVE_PREFIX = "DOMAIN_"

# Invariant-culture literals only: no locale separators, no digit grouping
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
# Samples end up in float32 textures
_FLOAT32_MAX = float(np.finfo(np.float32).max)
# Only CR, LF and CRLF end a line
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class Color(NamedTuple):
    """Single RGB sample of a LUT."""

    r: float
    g: float
    b: float


@dataclass(frozen=True)
class CubeTable:
    """Immutable table of LUT samples in file order (red varies fastest)."""

    size: int
    colors: tuple[Color, ...]

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self.colors)

    @overload
    def __getitem__(self, index: int) -> Color: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Color, ...]: ...

    def __getitem__(self, index: int | slice) -> Color | tuple[Color, ...]:
        return self.colors[index]

    def to_array(self, dtype: np.dtype | type = np.float32) -> np.ndarray:
        """Return the samples as a (size^3, 3) array in file order.

        Args:
            dtype: Output data type (default: float32)

        Returns:
            Array with one RGB row per sample
        """
        if not self.colors:
            return np.zeros((0, 3), dtype=dtype)
        return np.asarray(self.colors, dtype=dtype).reshape(-1, 3)


@dataclass(frozen=True)
class ParseSuccess:
    """Successful parse: the declared cube size and its table."""

    size: int
    table: CubeTable
    title: str | None = None
    ok: bool = field(default=True, init=False)

    def unwrap(self) -> tuple[int, CubeTable]:
        """Return the parsed (size, table) pair."""
        return self.size, self.table


@dataclass(frozen=True)
class ParseFailure:
    """Failed parse carrying the diagnostic error."""

    error: CubeParseError
    ok: bool = field(default=False, init=False)

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def line_number(self) -> int | None:
        return self.error.line_number

    def unwrap(self) -> tuple[int, CubeTable]:
        """Raise the carried error; a failed parse has no table."""
        raise self.error


ParseResult = Union[ParseSuccess, ParseFailure]


def filter_line(line: str) -> str:
    """Trim whitespace and drop everything from the first '#' onward.

    Args:
        line: Raw line from the .cube file

    Returns:
        The meaningful part of the line, possibly empty
    """
    return line.strip().split("#", 1)[0].strip()


class CubeLutParser:
    """Parse .cube text into a validated table of RGB samples."""

    def __init__(
        self, min_size: int = MIN_LUT_SIZE, max_size: int = MAX_LUT_SIZE
    ) -> None:
        """Initialize the parser.

        Args:
            min_size: Smallest accepted LUT_3D_SIZE (default: 16)
            max_size: Largest accepted LUT_3D_SIZE (default: 128)
        """
        if min_size < 1:
            raise ValueError("Minimum LUT size must be at least 1")
        if max_size < min_size:
            raise ValueError(
                f"Maximum LUT size {max_size} is smaller than minimum {min_size}"
            )
        self.min_size = min_size
        self.max_size = max_size

    def parse(self, lines: Iterable[str]) -> ParseResult:
        """Parse .cube lines.

        Malformed input never raises; the first problem found is returned as
        a ParseFailure and no partial table is produced.

        Args:
            lines: Lines of the .cube file in order

        Returns:
            ParseSuccess with the size and table, or ParseFailure
        """
        try:
            size, colors, title = self._parse_lines(lines)
        except CubeParseError as e:
            logger.debug(f"Cube parse failed: {e}")
            return ParseFailure(e)

        logger.debug(f"Parsed {size}x{size}x{size} LUT ({len(colors)} samples)")
        return ParseSuccess(size, CubeTable(size, tuple(colors)), title)

    def parse_text(self, text: str) -> ParseResult:
        """Parse the full contents of a .cube file.

        Args:
            text: File contents

        Returns:
            ParseSuccess or ParseFailure, as for parse()
        """
        return self.parse(_LINE_BREAK.split(text))

    def _parse_lines(
        self, lines: Iterable[str]
    ) -> tuple[int, list[Color], str | None]:
        size = -1
        expected_count = -1
        title: str | None = None
        colors: list[Color] = []

        for line_number, raw_line in enumerate(lines):
            line = filter_line(raw_line)

            if not line:
                continue

            if line.startswith(TITLE_DIRECTIVE):
                title = line[len(TITLE_DIRECTIVE) :].strip().strip('"')
                continue

            if line.startswith(SIZE_DIRECTIVE):
                size = self._parse_size(line, line_number)
                expected_count = size**3
                if len(colors) > expected_count:
                    raise self._size_mismatch(expected_count, len(colors), line_number)
                continue

            if line.startswith(DOMAIN_DIRECTIVE_PREFIX):
                # Domain bounds are not supported
                continue

            colors.append(self._parse_row(line, line_number))

            if 0 <= expected_count < len(colors):
                raise self._size_mismatch(expected_count, len(colors), line_number)

        if size < 0:
            raise TableSizeMismatchError(
                f"Wrong table size - Expected {SIZE_DIRECTIVE} directive, "
                f"got {len(colors)} elements"
            )

        if len(colors) < expected_count:
            raise PrematureEndOfFileError(
                f"Premature end of file - Expected {expected_count} elements, "
                f"got {len(colors)}"
            )

        return size, colors, title

    def _parse_size(self, line: str, line_number: int) -> int:
        value = line[len(SIZE_DIRECTIVE) :].lstrip()

        if not _INT_PATTERN.fullmatch(value):
            raise MalformedSizeDirectiveError(
                f"Invalid data on line {line_number}", line_number
            )

        size = int(value)
        if size < self.min_size or size > self.max_size:
            raise MalformedSizeDirectiveError(
                f"LUT size out of range on line {line_number}: {size} "
                f"(expected {self.min_size}-{self.max_size})",
                line_number,
            )
        return size

    def _parse_row(self, line: str, line_number: int) -> Color:
        row = line.split()

        if len(row) != 3 or not all(_FLOAT_PATTERN.fullmatch(t) for t in row):
            raise MalformedDataRowError(
                f"Invalid data on line {line_number}", line_number
            )

        r, g, b = (float(t) for t in row)
        if max(abs(r), abs(g), abs(b)) > _FLOAT32_MAX:
            raise MalformedDataRowError(
                f"Invalid data on line {line_number}", line_number
            )
        return Color(r, g, b)

    @staticmethod
    def _size_mismatch(
        expected: int, actual: int, line_number: int
    ) -> TableSizeMismatchError:
        return TableSizeMismatchError(
            f"Wrong table size - Expected {expected} elements, got {actual} "
            f"by line {line_number}",
            line_number,
        )


def parse_cube(lines: Iterable[str]) -> ParseResult:
    """Parse .cube lines with the default size bounds."""
    return CubeLutParser().parse(lines)
