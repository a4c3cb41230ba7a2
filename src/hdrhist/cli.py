# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Main CLI entry point for hdrhist.

Samples are read one unsigned integer per line from a file or stdin. Data
goes to stdout; logs and errors go to stderr.
"""

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console
from rich.table import Table

from hdrhist.cli_utils import configure_logging, exit_on_error, load_histogram
from hdrhist.enums import CcdfBound
from hdrhist.environment import Environment
from hdrhist.histogram import HDRHist
from hdrhist.logging import HDRHistLogger
from hdrhist.models import HistogramReport, QuantileBracket

_logger = HDRHistLogger(__name__)

app = App(name="hdrhist", help="Fixed-memory HDR histogram for u64 samples")

console = Console()

PrecisionBits = Annotated[
    int | None,
    Parameter(
        name=("--precision-bits", "-p"),
        help="Sub-bucket precision bits. Defaults to HDRHIST_HISTOGRAM_PRECISION_BITS.",
    ),
]
LogLevel = Annotated[
    str | None,
    Parameter(
        name="--log-level",
        help="Log level. Defaults to HDRHIST_LOGGING_LEVEL.",
    ),
]


@app.command(name="ccdf")
def ccdf(
    input_file: Path | None = None,
    *,
    precision_bits: PrecisionBits = None,
    bound: CcdfBound = CcdfBound.EXACT,
    log_level: LogLevel = None,
) -> None:
    """Print the ccdf of the samples, one tab-separated point per line.

    Args:
        input_file: File with one sample per line. Reads stdin if omitted.
        precision_bits: Sub-bucket precision bits.
        bound: Print exact (value, probability, count) triples, or the upper or
            lower bound (value, probability) curve.
        log_level: Log level.
    """
    with exit_on_error(title="Error Computing ccdf"):
        configure_logging(log_level)
        histogram = load_histogram(input_file, precision_bits)
        if bound == CcdfBound.EXACT:
            for value, probability, count in histogram.ccdf():
                print(f"{value}\t{probability}\t{count}")
        else:
            points = (
                histogram.ccdf_upper_bound()
                if bound == CcdfBound.UPPER
                else histogram.ccdf_lower_bound()
            )
            for value, probability in points:
                print(f"{value}\t{probability}")


app.default(ccdf)


@app.command(name="summary")
def summary(
    input_file: Path | None = None,
    *,
    output_file: Path | None = None,
    precision_bits: PrecisionBits = None,
    log_level: LogLevel = None,
) -> None:
    """Print a text diagram of the summary quantiles.

    Args:
        input_file: File with one sample per line. Reads stdin if omitted.
        output_file: Optional path to also write the summary as JSON.
        precision_bits: Sub-bucket precision bits.
        log_level: Log level.
    """
    with exit_on_error(title="Error Computing Summary"):
        configure_logging(log_level)
        histogram = load_histogram(input_file, precision_bits)
        print(histogram.summary_string())

        if output_file:
            report = HistogramReport.from_histogram(histogram)
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(report.model_dump_json(indent=2))
            _logger.info(f"Summary report saved to {output_file}")


def _build_quantiles_table(brackets: list[QuantileBracket]) -> Table:
    table = Table(title="Quantile Estimates")
    table.add_column("Quantile", justify="right", style="cyan", no_wrap=True)
    table.add_column("Lower Bound", justify="right", style="green", no_wrap=True)
    table.add_column("Upper Bound", justify="right", style="green", no_wrap=True)
    for quantile, lower, upper in brackets:
        table.add_row(f"{quantile:g}", f"{lower:,}", f"{upper:,}")
    return table


@app.command(name="quantiles")
def quantiles(
    requested: list[float],
    *,
    input_file: Path | None = None,
    precision_bits: PrecisionBits = None,
    log_level: LogLevel = None,
) -> None:
    """Print [lower, upper) brackets for the requested quantiles.

    Args:
        requested: Quantiles between 0 and 1, e.g. 0.5 0.99.
        input_file: File with one sample per line. Reads stdin if omitted.
        precision_bits: Sub-bucket precision bits.
        log_level: Log level.
    """
    with exit_on_error(title="Error Computing Quantiles"):
        configure_logging(log_level)
        histogram = load_histogram(input_file, precision_bits)
        brackets = list(histogram.quantiles(requested))
        console.print(_build_quantiles_table(brackets))


@app.command(name="buckets")
def buckets(
    *,
    limit: int = 4096,
    precision_bits: PrecisionBits = None,
    log_level: LogLevel = None,
) -> None:
    """Show which cell each value in [0, limit) is counted in.

    Args:
        limit: Number of values to list, starting at 0.
        precision_bits: Sub-bucket precision bits.
        log_level: Log level.
    """
    with exit_on_error(title="Error Listing Buckets"):
        configure_logging(log_level)
        histogram = HDRHist(
            precision_bits
            if precision_bits is not None
            else Environment.HISTOGRAM.PRECISION_BITS
        )
        for value in range(max(limit, 0)):
            index, low_bits = histogram.locate(value)
            print(
                f"{value} [{value:b}] msb={value.bit_length()} "
                f"index={index} low_bits={low_bits:b}"
            )
