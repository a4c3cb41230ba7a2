# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the text summary diagram."""

import pytest

from hdrhist import HDRHist
from hdrhist.constants import U64_MAX
from hdrhist.models import QuantileBracket
from hdrhist.summary import format_scientific, render_summary

_SUMMARY_TICKS = (
    "╰ "
    "[    0.25     "
    "     0.5      "
    "     0.75     "
    "]--- 0.95  ---"
    "---- 0.99  ---"
    "---- 0.999 ---"
    "----| max     "
    "╯"
)


class TestFormatScientific:
    """Tests for format_scientific()."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, "0.000000e0"),
            (2, "2.000000e0"),
            (10, "1.000000e1"),
            (1_015_808, "1.015808e6"),
            (123_456_789, "1.234568e8"),
            (U64_MAX, "1.844674e19"),
        ],
    )  # fmt: skip
    def test_format(self, value: int, expected: str) -> None:
        assert format_scientific(value) == expected


class TestRenderSummary:
    """Tests for render_summary() and HDRHist.summary_string()."""

    def test_boundary_diagram(self, boundary_hist: HDRHist) -> None:
        lines = boundary_hist.summary_string().split("\n")
        assert len(lines) == 3
        assert lines[0] == (
            "╭ "
            + "  2.000000e0  "
            + "  3.000000e0  " * 5
            + "  5.000000e0  "
            + "╮"
        )
        assert lines[1] == (
            "| "
            + "  3.000000e0  "
            + "  4.000000e0  " * 5
            + "  6.000000e0  "
            + "|"
        )
        assert lines[2] == _SUMMARY_TICKS

    def test_rows_are_aligned(self, lognormal_samples: list[int]) -> None:
        hist = HDRHist.from_values([*lognormal_samples, U64_MAX - 1])
        lines = hist.summary_string().split("\n")
        assert len({len(line) for line in lines}) == 1

    def test_empty_histogram(self, empty_hist: HDRHist) -> None:
        text = empty_hist.summary_string()
        assert text
        assert text.count("0.000000e0") == 14
        assert text.split("\n")[2] == _SUMMARY_TICKS
        assert not text.endswith("\n")

    def test_custom_brackets(self) -> None:
        text = render_summary([QuantileBracket(0.5, 10, 11)])
        assert text == (
            "╭   1.000000e1  ╮\n"
            "|   1.100000e1  |\n"
            "╰      0.5      ╯"
        )
