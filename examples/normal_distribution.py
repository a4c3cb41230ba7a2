# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Record normally distributed durations and print their ccdf.

Samples are drawn from N(10, 3) seconds, converted to nanoseconds, and
negative draws are discarded, as callers must quantize to u64 themselves.

Usage:
    python examples/normal_distribution.py --samples 1000000 > ccdf.tsv
"""

import argparse

import numpy as np

from hdrhist import HDRHist

NANOS_PER_SECOND = 1_000_000_000


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--samples", type=int, default=1_000_000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--batch-size", type=int, default=100_000)
    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)
    histogram = HDRHist()

    remaining = args.samples
    while remaining > 0:
        batch = min(remaining, args.batch_size)
        values = rng.normal(10.0, 3.0, size=batch) * NANOS_PER_SECOND
        histogram.add_values(int(value) for value in values if value >= 0)
        remaining -= batch

    for value, probability, count in histogram.ccdf():
        print(f"{value}\t{probability}\t{count}")


if __name__ == "__main__":
    main()
