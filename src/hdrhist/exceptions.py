# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0


class HDRHistError(Exception):
    """Base class for all exceptions raised by hdrhist."""


class InvalidPrecisionError(HDRHistError, ValueError):
    """Exception raised when a histogram is configured with unsupported precision bits."""

    def __init__(self, precision_bits: int, minimum: int, maximum: int) -> None:
        self.precision_bits = precision_bits
        super().__init__(
            f"precision_bits must be between {minimum} and {maximum}, got {precision_bits!r}"
        )


class SampleRangeError(HDRHistError, ValueError):
    """Exception raised when a sample is not an unsigned 64-bit integer."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Sample must be an integer in [0, 2**64), got {value!r}")


class InvalidQuantileError(HDRHistError, ValueError):
    """Exception raised when a requested quantile is outside of [0, 1]."""

    def __init__(self, quantile: float) -> None:
        self.quantile = quantile
        super().__init__(f"Quantile must be between 0 and 1, got {quantile!r}")


class PrecisionMismatchError(HDRHistError, ValueError):
    """Exception raised when combining histograms with different precision bits."""

    def __init__(self, left: int, right: int) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot combine histograms with different precision bits ({left} != {right})"
        )


class SampleParseError(HDRHistError):
    """Exception raised when an input line is not an unsigned 64-bit integer."""

    def __init__(self, line_number: int, text: str) -> None:
        self.line_number = line_number
        self.text = text
        super().__init__(f"parse error on line {line_number}: {text!r}")


class SampleInputError(HDRHistError):
    """Exception raised when the input stream fails while reading samples."""

    def __init__(
        self, line_number: int, error: OSError | UnicodeDecodeError
    ) -> None:
        self.line_number = line_number
        self.error = error
        super().__init__(f"io error after line {line_number}: {error}")


class InvalidLogLevelError(HDRHistError, ValueError):
    """Exception raised when a log level name is not recognized."""

    def __init__(self, level: str, choices: tuple[str, ...]) -> None:
        self.level = level
        super().__init__(
            f"Log level must be one of {', '.join(choices)}, got {level!r}"
        )
