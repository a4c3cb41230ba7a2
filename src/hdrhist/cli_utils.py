# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Helpers shared by the hdrhist command line."""

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.panel import Panel

from hdrhist.environment import Environment
from hdrhist.exceptions import HDRHistError, SampleInputError
from hdrhist.histogram import HDRHist
from hdrhist.logging import HDRHistLogger, setup_rich_logging
from hdrhist.reader import ingest

_logger = HDRHistLogger(__name__)

error_console = Console(stderr=True)


@contextmanager
def exit_on_error(title: str = "Error") -> Iterator[None]:
    """Print hdrhist errors as a Rich panel on stderr and exit with status 1.

    Unexpected exceptions are logged with their traceback before exiting.
    """
    try:
        yield
    except HDRHistError as e:
        error_console.print(
            Panel(str(e), title=title, border_style="red", title_align="left")
        )
        raise SystemExit(1) from e
    except Exception as e:
        _logger.exception(f"Unexpected error: {e!r}")
        error_console.print(
            Panel(repr(e), title=title, border_style="red", title_align="left")
        )
        raise SystemExit(1) from e


def configure_logging(log_level: str | None = None) -> None:
    """Set up Rich logging from the flag, falling back to the environment.

    Raises:
        InvalidLogLevelError: If the level name is not recognized.
    """
    setup_rich_logging(
        log_level or Environment.LOGGING.LEVEL,
        rich_tracebacks=Environment.LOGGING.RICH_TRACEBACKS,
    )


def load_histogram(
    input_file: Path | None, precision_bits: int | None = None
) -> HDRHist:
    """Build a histogram from ``input_file``, or from stdin when it is None."""
    histogram = HDRHist(
        precision_bits
        if precision_bits is not None
        else Environment.HISTOGRAM.PRECISION_BITS
    )
    if input_file is None:
        _ingest_stream(histogram, sys.stdin)
    else:
        try:
            with input_file.open(encoding="utf-8") as stream:
                _ingest_stream(histogram, stream)
        except OSError as e:
            raise SampleInputError(0, e) from e
    return histogram


def _ingest_stream(histogram: HDRHist, stream: TextIO) -> None:
    added = ingest(histogram, stream)
    _logger.info(
        f"Recorded {added} samples (precision_bits={histogram.precision_bits})"
    )
