# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Fixed-memory, constant-time HDR histogram for unsigned 64-bit samples."""

from hdrhist.exceptions import (
    HDRHistError,
    InvalidLogLevelError,
    InvalidPrecisionError,
    InvalidQuantileError,
    PrecisionMismatchError,
    SampleInputError,
    SampleParseError,
    SampleRangeError,
)
from hdrhist.histogram import HDRHist, combine_all
from hdrhist.models import (
    BoundPoint,
    CcdfPoint,
    HistogramReport,
    QuantileBracket,
    QuantileEstimate,
)
from hdrhist.reader import ingest, read_samples

__all__ = [
    "BoundPoint",
    "CcdfPoint",
    "HDRHist",
    "HDRHistError",
    "HistogramReport",
    "InvalidLogLevelError",
    "InvalidPrecisionError",
    "InvalidQuantileError",
    "PrecisionMismatchError",
    "QuantileBracket",
    "QuantileEstimate",
    "SampleInputError",
    "SampleParseError",
    "SampleRangeError",
    "combine_all",
    "ingest",
    "read_samples",
]
