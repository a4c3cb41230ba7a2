# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

U64_BITS = 64
U64_MAX = (1 << U64_BITS) - 1

DEFAULT_PRECISION_BITS = 4
MIN_PRECISION_BITS = 1
# 2**16 sub-buckets per bucket is already ~25 MB of counters.
MAX_PRECISION_BITS = 16

SUMMARY_QUANTILES: tuple[float, ...] = (0.25, 0.50, 0.75, 0.95, 0.99, 0.999, 1.0)

LOG_LEVELS: tuple[str, ...] = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
