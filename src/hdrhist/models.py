# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Value types produced by the histogram read path, and exportable reports.

The read path yields lightweight ``NamedTuple`` instances so results compare
equal to plain tuples and cost nothing to build. :class:`HistogramReport` is
the pydantic model written by ``hdrhist summary --output-file``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from hdrhist.histogram import HDRHist


class CcdfPoint(NamedTuple):
    """One point of the complementary cumulative distribution function."""

    value: int
    """Exclusive upper bound of the cell, i.e. the first value of the next cell."""
    probability: float
    """Estimated fraction of samples greater than or equal to ``value``."""
    count: int
    """Number of samples recorded in this exact cell."""


class BoundPoint(NamedTuple):
    """A (value, probability) pair of an upper or lower ccdf bound curve."""

    value: int
    probability: float


class QuantileBracket(NamedTuple):
    """The value at ``quantile`` lies in ``[lower_bound, upper_bound)``."""

    quantile: float
    lower_bound: int
    upper_bound: int


class HDRHistBaseModel(BaseModel):
    """Base model for all exported hdrhist models."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class QuantileEstimate(HDRHistBaseModel):
    """Serializable form of a :class:`QuantileBracket`."""

    quantile: float = Field(
        ..., ge=0.0, le=1.0, description="Requested quantile in [0, 1]"
    )
    lower_bound: int = Field(
        ..., ge=0, description="Inclusive lower bound of the quantile value"
    )
    upper_bound: int = Field(
        ..., ge=0, description="Exclusive upper bound of the quantile value"
    )

    @classmethod
    def from_bracket(cls, bracket: QuantileBracket) -> QuantileEstimate:
        return cls(
            quantile=bracket.quantile,
            lower_bound=bracket.lower_bound,
            upper_bound=bracket.upper_bound,
        )


class HistogramReport(HDRHistBaseModel):
    """Summary of a histogram suitable for JSON export."""

    precision_bits: int = Field(
        ..., ge=1, description="Sub-bucket precision bits (P) of the histogram"
    )
    total_count: int = Field(..., ge=0, description="Total number of recorded samples")
    quantiles: list[QuantileEstimate] = Field(
        default_factory=list,
        description="Summary quantile brackets in ascending quantile order",
    )

    @classmethod
    def from_histogram(cls, histogram: HDRHist) -> HistogramReport:
        """Build a report from the histogram's summary quantiles."""
        return cls(
            precision_bits=histogram.precision_bits,
            total_count=histogram.total_count,
            quantiles=[
                QuantileEstimate.from_bracket(bracket)
                for bracket in histogram.summary()
            ],
        )
