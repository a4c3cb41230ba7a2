# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures for testing hdrhist.

This file contains fixtures that are automatically discovered by pytest
and made available to test functions in the same directory and subdirectories.
"""

import logging
from collections.abc import Generator

import numpy as np
import pytest

from hdrhist import HDRHist
from tests.harness.samples import BOUNDARY_SAMPLES


@pytest.fixture
def empty_hist() -> HDRHist:
    """An empty histogram with the default precision."""
    return HDRHist()


@pytest.fixture
def boundary_hist() -> HDRHist:
    """Histogram holding the quantile boundary samples."""
    hist = HDRHist()
    for value, count in BOUNDARY_SAMPLES.items():
        for _ in range(count):
            hist.add_value(value)
    return hist


@pytest.fixture
def lognormal_samples() -> list[int]:
    """Seeded, heavy-tailed integer samples spanning several orders of magnitude."""
    rng = np.random.default_rng(seed=1234)
    return [int(v) for v in rng.lognormal(mean=10.0, sigma=2.5, size=5000)]


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """Restore the root logger's handlers and level after a test reconfigures it."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
