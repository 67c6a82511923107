# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests for the .cube parser."""

from collections.abc import Callable

import numpy as np
import pytest

from cube_lut_tiler.lut.cube_parser import (
    Color,
    CubeLutParser,
    ParseFailure,
    ParseSuccess,
    filter_line,
    parse_cube,
)
from cube_lut_tiler.lut.errors import (
    CubeParseError,
    MalformedDataRowError,
    MalformedSizeDirectiveError,
    PrematureEndOfFileError,
    TableSizeMismatchError,
)

LinesFactory = Callable[..., list[str]]

SMALL_ROWS = [f"{i}.0 {i}.5 {i}.25" for i in range(8)]


def small_parser() -> CubeLutParser:
    """Parser accepting tiny cubes for hand-checked tables."""
    return CubeLutParser(min_size=2, max_size=4)


class TestFilterLine:
    """Test cases for line cleanup."""

    def test_strips_whitespace(self) -> None:
        """Test leading and trailing whitespace is removed."""
        assert filter_line("  0.1 0.2 0.3 \t\n") == "0.1 0.2 0.3"

    def test_strips_trailing_comment(self) -> None:
        """Test everything from '#' onward is dropped."""
        assert filter_line("0.1 0.2 0.3 # comment") == "0.1 0.2 0.3"

    def test_comment_only_line_is_empty(self) -> None:
        """Test a full-line comment becomes empty."""
        assert filter_line("   # Created by a grading app") == ""


class TestCubeLutParserInit:
    """Test cases for parser configuration."""

    def test_default_bounds(self) -> None:
        """Test default size bounds."""
        parser = CubeLutParser()
        assert parser.min_size == 16
        assert parser.max_size == 128

    def test_invalid_min_size(self) -> None:
        """Test minimum size must be positive."""
        with pytest.raises(ValueError, match="Minimum LUT size must be at least 1"):
            CubeLutParser(min_size=0)

    def test_inverted_bounds(self) -> None:
        """Test maximum below minimum is rejected."""
        with pytest.raises(ValueError, match="smaller than minimum"):
            CubeLutParser(min_size=32, max_size=16)


class TestCubeLutParserSuccess:
    """Test cases for well-formed input."""

    def test_minimal_size_16(self, cube_lines: LinesFactory) -> None:
        """Test a size 16 file with exactly 4096 rows parses."""
        result = CubeLutParser().parse(cube_lines(16))

        assert isinstance(result, ParseSuccess)
        assert result.ok is True
        assert result.size == 16
        assert len(result.table) == 4096
        assert result.table.size == 16

    def test_values_in_file_order(self, cube_lines: LinesFactory) -> None:
        """Test rows are stored in file order with red varying fastest."""
        result = CubeLutParser().parse(cube_lines(16))
        size, table = result.unwrap()

        assert table[0] == Color(0.0, 0.0, 0.0)
        assert table[1] == pytest.approx((1 / 15, 0.0, 0.0), abs=1e-6)
        assert table[size] == pytest.approx((0.0, 1 / 15, 0.0), abs=1e-6)
        assert table[size * size] == pytest.approx((0.0, 0.0, 1 / 15), abs=1e-6)
        assert table[-1] == Color(1.0, 1.0, 1.0)

    def test_title_is_reported(self, cube_lines: LinesFactory) -> None:
        """Test the TITLE text is kept without quotes."""
        result = parse_cube(cube_lines(16))
        assert isinstance(result, ParseSuccess)
        assert result.title == "Identity"

    def test_title_is_optional(self, cube_lines: LinesFactory) -> None:
        """Test files without TITLE parse."""
        result = parse_cube(cube_lines(16, header=["LUT_3D_SIZE 16"]))
        assert isinstance(result, ParseSuccess)
        assert result.title is None

    def test_trailing_comment_ignored(self, cube_lines: LinesFactory) -> None:
        """Test a row with a trailing comment parses like the bare row."""
        rows = ["0.1 0.2 0.3"] * 4096
        commented = ["0.1 0.2 0.3 # comment"] + rows[1:]

        plain = parse_cube(cube_lines(16, rows=rows))
        with_comment = parse_cube(cube_lines(16, rows=commented))

        assert plain.unwrap() == with_comment.unwrap()

    def test_blank_lines_and_comments_skipped(self, cube_lines: LinesFactory) -> None:
        """Test blank and comment-only lines are ignored."""
        header = [
            "# Created by hand",
            "",
            'TITLE "Commented"',
            "   ",
            "LUT_3D_SIZE 16  # cube edge",
            "#",
        ]
        result = parse_cube(cube_lines(16, header=header))
        assert isinstance(result, ParseSuccess)
        assert len(result.table) == 4096

    def test_domain_directives_skipped(self, cube_lines: LinesFactory) -> None:
        """Test DOMAIN_MIN and DOMAIN_MAX are ignored."""
        header = [
            "LUT_3D_SIZE 16",
            "DOMAIN_MIN 0.0 0.0 0.0",
            "DOMAIN_MAX 1.0 1.0 1.0",
        ]
        result = parse_cube(cube_lines(16, header=header))
        assert isinstance(result, ParseSuccess)

    def test_second_size_directive_overwrites_first(
        self, cube_lines: LinesFactory
    ) -> None:
        """Test the last LUT_3D_SIZE wins."""
        header = ["LUT_3D_SIZE 17", "LUT_3D_SIZE 16"]
        result = parse_cube(cube_lines(16, header=header))
        assert isinstance(result, ParseSuccess)
        assert result.size == 16

    def test_rows_before_size_directive_counted(self) -> None:
        """Test data rows preceding LUT_3D_SIZE still count."""
        result = small_parser().parse([*SMALL_ROWS, "LUT_3D_SIZE 2"])
        assert isinstance(result, ParseSuccess)
        assert result.table[7] == Color(7.0, 7.5, 7.25)

    def test_float_literal_forms(self) -> None:
        """Test exponents, signs and bare fractions parse."""
        rows = ["1e-3 +0.5 .25", "-1.5E2 2. 0"] + SMALL_ROWS[2:]
        result = small_parser().parse(["LUT_3D_SIZE 2", *rows])

        size, table = result.unwrap()
        assert size == 2
        assert table[0] == Color(0.001, 0.5, 0.25)
        assert table[1] == Color(-150.0, 2.0, 0.0)

    def test_values_outside_unit_range_kept(self) -> None:
        """Test HDR values are copied verbatim."""
        rows = ["4.5 -0.25 12.0"] + SMALL_ROWS[1:]
        _, table = small_parser().parse(["LUT_3D_SIZE 2", *rows]).unwrap()
        assert table[0] == Color(4.5, -0.25, 12.0)

    def test_extra_whitespace_between_tokens(self) -> None:
        """Test tabs and repeated spaces separate tokens."""
        rows = ["0.0\t0.5   1.0"] + SMALL_ROWS[1:]
        _, table = small_parser().parse(["LUT_3D_SIZE 2", *rows]).unwrap()
        assert table[0] == Color(0.0, 0.5, 1.0)

    def test_parse_text_windows_line_endings(self) -> None:
        """Test parse_text handles CRLF input."""
        text = "\r\n".join(["LUT_3D_SIZE 2", *SMALL_ROWS]) + "\r\n"
        result = small_parser().parse_text(text)
        assert isinstance(result, ParseSuccess)
        assert len(result.table) == 8

    def test_parse_text_form_feed_inside_comment(
        self, cube_lines: LinesFactory
    ) -> None:
        """Test only CR and LF split lines, so a form feed stays in its comment."""
        lines = cube_lines(16)
        lines[2] += " # note\x0c0.5 0.5 0.5"
        result = CubeLutParser().parse_text("\n".join(lines))

        assert isinstance(result, ParseSuccess)
        assert len(result.table) == 4096
        assert result.table[0] == Color(0.0, 0.0, 0.0)

    def test_parse_text_line_numbers_ignore_unicode_separators(self) -> None:
        """Test U+2028 and vertical tab do not shift reported line numbers."""
        text = "\n".join(
            ['TITLE "a b\x0bc\u2028d"', "LUT_3D_SIZE 2", "1.0 2.0", *SMALL_ROWS]
        )
        result = small_parser().parse_text(text)

        assert isinstance(result, ParseFailure)
        assert isinstance(result.error, MalformedDataRowError)
        assert result.line_number == 2

    def test_table_to_array(self) -> None:
        """Test the table converts to a (size^3, 3) float32 array."""
        _, table = small_parser().parse(["LUT_3D_SIZE 2", *SMALL_ROWS]).unwrap()
        array = table.to_array()

        assert array.shape == (8, 3)
        assert array.dtype == np.float32
        assert np.allclose(array[3], [3.0, 3.5, 3.25])

    def test_color_is_immutable(self) -> None:
        """Test colors cannot be changed after parsing."""
        color = Color(0.1, 0.2, 0.3)
        with pytest.raises(AttributeError):
            color.r = 1.0  # type: ignore[misc]


class TestCubeLutParserSizeDirective:
    """Test cases for LUT_3D_SIZE validation."""

    def test_size_below_minimum(self, cube_lines: LinesFactory) -> None:
        """Test LUT_3D_SIZE 15 is rejected."""
        result = parse_cube(cube_lines(16, header=['TITLE "x"', "LUT_3D_SIZE 15"]))

        assert isinstance(result, ParseFailure)
        assert result.ok is False
        assert isinstance(result.error, MalformedSizeDirectiveError)
        assert result.line_number == 1
        assert "LUT size out of range" in result.message

    def test_size_above_maximum(self) -> None:
        """Test LUT_3D_SIZE 129 is rejected."""
        result = parse_cube(["LUT_3D_SIZE 129"])
        assert isinstance(result, ParseFailure)
        assert isinstance(result.error, MalformedSizeDirectiveError)

    def test_size_bounds_inclusive(self) -> None:
        """Test both bounds are accepted."""
        rows_2 = SMALL_ROWS
        rows_4 = ["0 0 0"] * 64

        assert small_parser().parse(["LUT_3D_SIZE 2", *rows_2]).ok
        assert small_parser().parse(["LUT_3D_SIZE 4", *rows_4]).ok

    @pytest.mark.parametrize("value", ["", "abc", "16.0", "16 16", "0x10"])
    def test_non_integer_size(self, value: str) -> None:
        """Test non-integer size values are rejected with the line number."""
        result = parse_cube(["# header", f"LUT_3D_SIZE {value}"])

        assert isinstance(result, ParseFailure)
        assert isinstance(result.error, MalformedSizeDirectiveError)
        assert result.message == "Invalid data on line 1"
        assert result.line_number == 1

    def test_size_after_overfull_table(self) -> None:
        """Test a size directive smaller than rows already read fails there."""
        result = small_parser().parse([*SMALL_ROWS, "0 0 0", "LUT_3D_SIZE 2"])

        assert isinstance(result, ParseFailure)
        assert isinstance(result.error, TableSizeMismatchError)
        assert result.line_number == 9


class TestCubeLutParserDataRows:
    """Test cases for data row validation."""

    def test_two_tokens(self, cube_lines: LinesFactory) -> None:
        """Test a row with two values fails at its line."""
        rows = ["0 0 0"] * 10 + ["1.0 2.0"] + ["0 0 0"] * 4085
        result = parse_cube(cube_lines(16, rows=rows))

        assert isinstance(result, ParseFailure)
        assert isinstance(result.error, MalformedDataRowError)
        assert result.line_number == 12
        assert result.message == "Invalid data on line 12"

    @pytest.mark.parametrize(
        "row",
        [
            "0.1 0.2 0.3 0.4",
            "0.1 0.2 abc",
            "0,1 0,2 0,3",
            "1e400 0 0",
            "nan 0 0",
            "inf 0 0",
            "1_0 0 0",
            "LUT_1D_SIZE 16",
        ],
    )
    def test_invalid_rows(self, row: str) -> None:
        """Test malformed rows are rejected."""
        result = small_parser().parse(["LUT_3D_SIZE 2", row, *SMALL_ROWS[1:]])

        assert isinstance(result, ParseFailure)
        assert isinstance(result.error, MalformedDataRowError)
        assert result.line_number == 1

    def test_first_error_wins(self) -> None:
        """Test parsing stops at the first malformed line."""
        result = small_parser().parse(["LUT_3D_SIZE 2", "1 2", "bad", *SMALL_ROWS])
        assert isinstance(result, ParseFailure)
        assert result.line_number == 1


class TestCubeLutParserTableSize:
    """Test cases for row count validation."""

    def test_missing_row(self, cube_lines: LinesFactory) -> None:
        """Test 4095 rows for size 16 fails as premature end of file."""
        rows = ["0 0 0"] * 4095
        result = parse_cube(cube_lines(16, rows=rows))

        assert isinstance(result, ParseFailure)
        assert isinstance(result.error, PrematureEndOfFileError)
        assert isinstance(result.error, TableSizeMismatchError)
        assert result.line_number is None
        assert "Premature end of file" in result.message

    def test_extra_row(self, cube_lines: LinesFactory) -> None:
        """Test an extra row fails at the line it appears on."""
        rows = ["0 0 0"] * 4097
        result = parse_cube(cube_lines(16, rows=rows))

        assert isinstance(result, ParseFailure)
        assert isinstance(result.error, TableSizeMismatchError)
        assert not isinstance(result.error, PrematureEndOfFileError)
        assert result.line_number == 2 + 4096
        assert "Expected 4096 elements, got 4097" in result.message

    def test_missing_size_directive(self) -> None:
        """Test a file without LUT_3D_SIZE fails with a size mismatch."""
        result = parse_cube(SMALL_ROWS)

        assert isinstance(result, ParseFailure)
        assert isinstance(result.error, TableSizeMismatchError)
        assert not isinstance(result.error, PrematureEndOfFileError)
        assert "Wrong table size" in result.message

    def test_empty_input(self) -> None:
        """Test empty input fails."""
        result = parse_cube([])
        assert isinstance(result, ParseFailure)
        assert isinstance(result.error, TableSizeMismatchError)

    def test_unwrap_failure_raises(self) -> None:
        """Test unwrap on a failure raises the carried error."""
        result = parse_cube(["LUT_3D_SIZE 15"])
        with pytest.raises(CubeParseError, match="LUT size out of range"):
            result.unwrap()

    def test_errors_are_value_errors(self) -> None:
        """Test parse errors can be caught as ValueError."""
        result = parse_cube([])
        assert isinstance(result, ParseFailure)
        assert isinstance(result.error, ValueError)
