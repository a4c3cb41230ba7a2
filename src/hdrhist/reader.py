# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Line-oriented reading of unsigned integer samples."""

from collections.abc import Iterator
from typing import TextIO

from hdrhist.constants import U64_MAX
from hdrhist.exceptions import SampleInputError, SampleParseError
from hdrhist.histogram import HDRHist
from hdrhist.logging import HDRHistLogger

_logger = HDRHistLogger(__name__)


def parse_sample(text: str, line_number: int) -> int:
    """Parse one decimal ``u64`` sample, raising SampleParseError on anything else."""
    # int() also accepts "+5", "1_000" and non-ASCII digits; samples are plain decimals
    if not (text.isascii() and text.isdigit()):
        raise SampleParseError(line_number, text)
    value = int(text)
    if value > U64_MAX:
        raise SampleParseError(line_number, text)
    return value


def read_samples(stream: TextIO) -> Iterator[int]:
    """Yield one sample per non-blank line of ``stream``.

    Args:
        stream: Text stream with one unsigned integer per line.

    Raises:
        SampleParseError: If a line is not an unsigned 64-bit integer.
        SampleInputError: If reading from ``stream`` fails.
    """
    line_number = 0
    lines = iter(stream)
    while True:
        try:
            line = next(lines)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            raise SampleInputError(line_number, e) from e
        line_number += 1

        text = line.strip()
        if not text:
            continue
        yield parse_sample(text, line_number)


def ingest(histogram: HDRHist, stream: TextIO) -> int:
    """Add every sample from ``stream`` to ``histogram``.

    Samples read before a failing line stay recorded in ``histogram``.

    Returns:
        The number of samples added.
    """
    added = 0
    try:
        for value in read_samples(stream):
            histogram.add_value(value)
            added += 1
    finally:
        _logger.debug(lambda: f"Added {added} samples from {_stream_name(stream)}")
    return added


def _stream_name(stream: TextIO) -> str:
    return str(getattr(stream, "name", "<stream>"))
