# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Fixed-memory HDR histogram for unsigned 64-bit samples.

This module provides:
- HDRHist: constant-time insertion into a fixed grid of counters
- ccdf reconstruction, upper/lower bound curves, and quantile brackets
- combine_all: fold per-worker histograms into one

Bucket layout (``P`` = precision bits, ``S = 2**P`` sub-buckets per bucket):

    bucket 0        [0, 2**P)                  one counter per value
    bucket k > 0    [2**(k+P-1), 2**(k+P))      S cells of width 2**(k-1)

Every ``u64`` lands in exactly one cell, and values sharing a cell differ by
at most ``1 / 2**P`` relative to the smaller one, regardless of magnitude.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Iterator
from fractions import Fraction
from itertools import pairwise

import numpy as np

from hdrhist.constants import (
    DEFAULT_PRECISION_BITS,
    MAX_PRECISION_BITS,
    MIN_PRECISION_BITS,
    SUMMARY_QUANTILES,
    U64_BITS,
    U64_MAX,
)
from hdrhist.exceptions import (
    InvalidPrecisionError,
    InvalidQuantileError,
    PrecisionMismatchError,
    SampleRangeError,
)
from hdrhist.logging import HDRHistLogger
from hdrhist.models import BoundPoint, CcdfPoint, QuantileBracket
from hdrhist.summary import render_summary

_logger = HDRHistLogger(__name__)


class HDRHist:
    """An HDR histogram collecting ``u64`` samples with ``precision_bits`` of resolution.

    The counter grid is allocated once at construction and never grows.
    :meth:`add_value` is O(1); every read operation is O(number of cells) and
    returns a lazy generator that restarts from the grid on each call.

    Args:
        precision_bits: Sub-bucket precision bits (P). Fixed for the lifetime
            of the histogram.

    Raises:
        InvalidPrecisionError: If ``precision_bits`` is outside of [1, 16].
    """

    __slots__ = (
        "_precision_bits",
        "_sub_buckets",
        "_sub_mask",
        "_num_buckets",
        "_counts",
    )

    def __init__(self, precision_bits: int = DEFAULT_PRECISION_BITS) -> None:
        if (
            isinstance(precision_bits, bool)
            or not isinstance(precision_bits, numbers.Integral)
            or not MIN_PRECISION_BITS <= precision_bits <= MAX_PRECISION_BITS
        ):
            raise InvalidPrecisionError(
                precision_bits, MIN_PRECISION_BITS, MAX_PRECISION_BITS
            )
        precision_bits = int(precision_bits)
        self._precision_bits = precision_bits
        self._sub_buckets = 1 << precision_bits
        self._sub_mask = self._sub_buckets - 1
        self._num_buckets = U64_BITS - precision_bits + 1
        self._counts = np.zeros(
            (self._num_buckets, self._sub_buckets), dtype=np.uint64
        )

    @classmethod
    def from_values(
        cls, values: Iterable[int], precision_bits: int = DEFAULT_PRECISION_BITS
    ) -> HDRHist:
        """Create a histogram and record every value from ``values``."""
        histogram = cls(precision_bits)
        histogram.add_values(values)
        return histogram

    @property
    def precision_bits(self) -> int:
        return self._precision_bits

    @property
    def num_buckets(self) -> int:
        return self._num_buckets

    @property
    def sub_buckets(self) -> int:
        return self._sub_buckets

    @property
    def total_count(self) -> int:
        """Total number of recorded samples, which may exceed ``2**64 - 1``."""
        return int(self._counts.astype(object).sum())

    @property
    def counts(self) -> np.ndarray:
        """Read-only view of the ``(num_buckets, sub_buckets)`` counter grid."""
        view = self._counts.view()
        view.flags.writeable = False
        return view

    # =========================================================================
    # Write path
    # =========================================================================

    @staticmethod
    def _check_sample(value: int) -> int:
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise SampleRangeError(value)
        value = int(value)
        if not 0 <= value <= U64_MAX:
            raise SampleRangeError(value)
        return value

    def _locate(self, value: int) -> tuple[int, int]:
        index = value.bit_length() - self._precision_bits
        if index <= 0:
            # value < 2**P: bucket 0 stores every value in its own cell
            return 0, value
        return index, (value >> (index - 1)) & self._sub_mask

    def locate(self, value: int) -> tuple[int, int]:
        """Return the ``(bucket_index, sub_bucket)`` cell that ``value`` is counted in.

        Raises:
            SampleRangeError: If ``value`` is not an integer in [0, 2**64).
        """
        return self._locate(self._check_sample(value))

    def add_value(self, value: int, count: int = 1) -> None:
        """Record a sample. Constant time, never allocates.

        Counters saturate at ``2**64 - 1`` instead of wrapping around.

        Args:
            value: The sample to record.
            count: Number of copies of ``value`` to record (defaults to 1).

        Raises:
            SampleRangeError: If ``value`` is not an integer in [0, 2**64).
            TypeError: If ``count`` is not an integer.
            ValueError: If ``count`` is negative or larger than ``2**64 - 1``.
        """
        index, sub_bucket = self._locate(self._check_sample(value))
        if isinstance(count, bool) or not isinstance(count, numbers.Integral):
            raise TypeError(f"count must be an integer, got {count!r}")
        count = int(count)
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count > U64_MAX:
            raise ValueError(f"count must be at most 2**64 - 1, got {count}")
        # Python ints keep the sum exact; numpy 1.x promotes uint64 + int to float64
        current = int(self._counts[index, sub_bucket])
        self._counts[index, sub_bucket] = min(current + count, U64_MAX)

    def add_values(self, values: Iterable[int]) -> None:
        """Record every sample from ``values``, in order."""
        for value in values:
            self.add_value(value)

    # =========================================================================
    # Combination
    # =========================================================================

    def copy(self) -> HDRHist:
        """Return an independent histogram with the same counters."""
        histogram = HDRHist(self._precision_bits)
        np.copyto(histogram._counts, self._counts)
        return histogram

    def _merge_from(self, other: HDRHist) -> None:
        if other._precision_bits != self._precision_bits:
            raise PrecisionMismatchError(self._precision_bits, other._precision_bits)
        saturated = other._counts > (np.uint64(U64_MAX) - self._counts)
        np.add(self._counts, other._counts, out=self._counts)
        self._counts[saturated] = np.uint64(U64_MAX)

    def combined(self, other: HDRHist) -> HDRHist:
        """Return a new histogram whose counters are the sum of both histograms.

        No normalization is applied: the result is skewed towards whichever
        input recorded more samples. Neither input is modified.

        Raises:
            PrecisionMismatchError: If the histograms have different precision bits.
        """
        histogram = self.copy()
        histogram._merge_from(other)
        _logger.debug(
            lambda: f"Combined histograms into {histogram.total_count} samples"
        )
        return histogram

    def __add__(self, other: object) -> HDRHist:
        if not isinstance(other, HDRHist):
            return NotImplemented
        return self.combined(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HDRHist):
            return NotImplemented
        return self._precision_bits == other._precision_bits and np.array_equal(
            self._counts, other._counts
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(precision_bits={self._precision_bits}, "
            f"total_count={self.total_count})"
        )

    # =========================================================================
    # Read path
    # =========================================================================

    def bucket_bounds(self, index: int, sub_bucket: int) -> tuple[int, int]:
        """Return the ``[lower, upper)`` value range counted by a cell.

        The upper bound saturates at ``2**64 - 1`` for the last cell of the grid.

        Raises:
            IndexError: If the cell is outside of the grid.
        """
        if not (
            0 <= index < self._num_buckets and 0 <= sub_bucket < self._sub_buckets
        ):
            raise IndexError(
                f"Cell ({index}, {sub_bucket}) is outside of the "
                f"{self._num_buckets}x{self._sub_buckets} grid"
            )
        if index == 0:
            return sub_bucket, sub_bucket + 1
        base = 1 << (index + self._precision_bits - 1)
        shift = index - 1
        lower = base + (sub_bucket << shift)
        upper = min(base + ((sub_bucket + 1) << shift), U64_MAX)
        return lower, upper

    def _cells(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(lower, upper, count)`` from the first populated cell to one past the last."""
        flat = self._counts.ravel()
        populated = np.flatnonzero(flat)
        if populated.size == 0:
            return
        first, last = int(populated[0]), int(populated[-1])
        # one zero-count sentinel past the last populated cell closes its range
        stop = min(last + 2, flat.size)
        for position in range(first, stop):
            index, sub_bucket = divmod(position, self._sub_buckets)
            lower, upper = self.bucket_bounds(index, sub_bucket)
            yield lower, upper, int(flat[position])

    def ccdf(self) -> Iterator[CcdfPoint]:
        """Yield the complementary cumulative distribution function of the samples.

        Each :class:`CcdfPoint` carries the exclusive upper bound of a cell as
        ``value``, the estimated fraction of samples ``>= value`` as
        ``probability``, and the number of samples in that cell as ``count``.
        Values are strictly increasing and probabilities non-increasing. The
        last point is a zero-count sentinel closing the highest populated cell.

        Probabilities are computed as ``(total + 1 - seen) / (total + 1)``: the
        ``+1`` keeps headroom for values not yet observed, so the maximum is
        never reported with probability 0. An empty histogram yields nothing.
        """
        denominator = self.total_count + 1
        seen = 0
        for _, upper, count in self._cells():
            seen += count
            yield CcdfPoint(upper, (denominator - seen) / denominator, count)

    def ccdf_upper_bound(self) -> Iterator[BoundPoint]:
        """Yield points whose linear interpolation never underestimates the ccdf.

        Each value is paired with the previous point's probability, so all
        actual quantile values lie below the reported curve.
        """
        for previous, current in pairwise(self.ccdf()):
            yield BoundPoint(current.value, previous.probability)

    def ccdf_lower_bound(self) -> Iterator[BoundPoint]:
        """Yield points whose linear interpolation never overestimates the ccdf.

        Each probability is paired with the previous point's value, so all
        actual quantile values lie above the reported curve.
        """
        for previous, current in pairwise(self.ccdf()):
            yield BoundPoint(previous.value, current.probability)

    @staticmethod
    def _check_quantile(quantile: float) -> float:
        if isinstance(quantile, bool) or not isinstance(quantile, numbers.Real):
            raise InvalidQuantileError(quantile)
        quantile = float(quantile)
        if math.isnan(quantile) or not 0.0 <= quantile <= 1.0:
            raise InvalidQuantileError(quantile)
        return quantile

    def quantiles(self, quantiles: Iterable[float]) -> Iterator[QuantileBracket]:
        """Yield a ``(quantile, lower_bound, upper_bound)`` bracket per requested quantile.

        The value at each quantile lies in ``[lower_bound, upper_bound)``: the
        range of the first cell whose cumulative count reaches
        ``quantile * total``. Brackets are produced in input order. The walk
        over the cells only moves forward and restarts when a smaller quantile
        follows a larger one.

        An empty histogram yields ``(quantile, 0, 0)`` for every request.

        Raises:
            InvalidQuantileError: If a quantile is NaN or outside of [0, 1].
        """
        total = self.total_count
        cells = self._cells()
        lower = upper = seen = 0
        started = False
        previous_rank = 0
        for quantile in quantiles:
            quantile = self._check_quantile(quantile)
            if total == 0:
                yield QuantileBracket(quantile, 0, 0)
                continue

            # exact integer rank: float(total) may round above total past 2**53
            rank = min(math.ceil(Fraction(quantile) * total), total)
            if rank < previous_rank:
                cells = self._cells()
                lower = upper = seen = 0
                started = False
            previous_rank = rank

            while not started or seen < rank:
                cell = next(cells, None)
                if cell is None:
                    break
                lower, upper, count = cell
                seen += count
                started = True
            yield QuantileBracket(quantile, lower, upper)

    def summary(self) -> Iterator[QuantileBracket]:
        """Yield brackets for the 0.25, 0.5, 0.75, 0.95, 0.99, 0.999 and 1.0 quantiles."""
        return self.quantiles(SUMMARY_QUANTILES)

    def summary_string(self) -> str:
        """Render :meth:`summary` as a three-row text diagram."""
        return render_summary(self.summary())


def combine_all(histograms: Iterable[HDRHist]) -> HDRHist:
    """Sum any number of histograms with the same precision into a new histogram.

    This is the intended way to merge per-worker histograms without sharing a
    histogram (and a lock) on the insertion path.

    Raises:
        ValueError: If ``histograms`` is empty.
        PrecisionMismatchError: If the histograms have different precision bits.
    """
    iterator = iter(histograms)
    first = next(iterator, None)
    if first is None:
        raise ValueError("combine_all() requires at least one histogram")

    result = first.copy()
    merged = 1
    for histogram in iterator:
        result._merge_from(histogram)
        merged += 1
    _logger.debug(
        lambda: f"Combined {merged} histograms into {result.total_count} samples"
    )
    return result
