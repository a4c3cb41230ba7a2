# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Text rendering of summary quantile brackets.

The diagram has three rows: lower bounds, upper bounds, and a tick row::

    ╭  2.000000e0   3.000000e0  ...  5.000000e0  ╮
    |  3.000000e0   4.000000e0  ...  6.000000e0  |
    ╰ [    0.25          0.5    ... ---| max     ╯
"""

from collections.abc import Iterable

from hdrhist.models import QuantileBracket

_COLUMN_WIDTH = 11


def format_scientific(value: float) -> str:
    """Format ``value`` with six decimals and a bare exponent, e.g. ``2.000000e0``."""
    mantissa, exponent = f"{value:.6e}".split("e")
    return f"{mantissa}e{int(exponent)}"


def _tick(quantile: float) -> str:
    if quantile == 0.25:
        return "["
    if quantile == 0.95:
        return "]"
    if quantile < 0.95:
        return " "
    return "-"


def _label(quantile: float) -> str:
    if quantile < 0.95:
        return f"    {quantile:<5}    "
    if quantile != 1.0:
        return f"--- {quantile:<5} ---"
    return "---| max     "


def render_summary(brackets: Iterable[QuantileBracket]) -> str:
    """Render quantile brackets as a fixed-width box-drawing diagram.

    Args:
        brackets: Brackets to render, usually from ``HDRHist.summary()``.

    Returns:
        Three newline-separated rows without a trailing newline.
    """
    values_lower = ["╭ "]
    values_upper = ["| "]
    points = ["╰ "]
    for quantile, lower, upper in brackets:
        points.append(_tick(quantile))
        points.append(_label(quantile))
        values_lower.append(f"  {format_scientific(lower):^{_COLUMN_WIDTH}} ")
        values_upper.append(f"  {format_scientific(upper):^{_COLUMN_WIDTH}} ")

    return "".join(
        [
            *values_lower,
            "╮\n",
            *values_upper,
            "|\n",
            *points,
            "╯",
        ]
    )
