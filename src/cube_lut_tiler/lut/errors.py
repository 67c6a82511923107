# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Exceptions describing why a .cube file could not be parsed."""

from __future__ import annotations


class CubeParseError(ValueError):
    """Base exception for .cube parse failures.

    Attributes:
        message: Human-readable diagnostic
        line_number: 0-based index of the offending line, or None when the
            problem was only detectable at end of input
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number


class MalformedSizeDirectiveError(CubeParseError):
    """Exception raised when LUT_3D_SIZE is missing a value, non-integer, or out of range."""

    pass


class MalformedDataRowError(CubeParseError):
    """Exception raised when a data row is not three valid floats."""

    pass


class TableSizeMismatchError(CubeParseError):
    """Exception raised when the row count does not match the declared cube size."""

    pass


class PrematureEndOfFileError(TableSizeMismatchError):
    """Exception raised when input ends before size^3 rows were read."""

    pass
