# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Logging helpers for hdrhist.

Library code logs through :class:`HDRHistLogger`, which behaves like a regular
:class:`logging.Logger` but also accepts callables as messages so that
expensive f-strings are only built when the level is enabled::

    _logger = HDRHistLogger(__name__)
    _logger.debug(lambda: f"Combined {len(histograms)} histograms")

The CLI calls :func:`setup_rich_logging` once at startup to render records
with Rich on stderr, leaving stdout free for data output.
"""

import logging
from collections.abc import Callable

from rich.console import Console
from rich.logging import RichHandler

from hdrhist.constants import LOG_LEVELS
from hdrhist.exceptions import InvalidLogLevelError

_TRACE = logging.DEBUG - 5
_DEBUG = logging.DEBUG

logging.addLevelName(_TRACE, "TRACE")

MessageT = str | Callable[[], str]


class HDRHistLogger:
    """Logger wrapper supporting lazy messages and a TRACE level."""

    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def _log(self, level: int, msg: MessageT, *args, **kwargs) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if callable(msg):
            msg = msg()
        # stacklevel=3 attributes the record to the caller, not this wrapper
        self._logger.log(level, msg, *args, stacklevel=3, **kwargs)

    def trace(self, msg: MessageT, *args, **kwargs) -> None:
        self._log(_TRACE, msg, *args, **kwargs)

    def debug(self, msg: MessageT, *args, **kwargs) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: MessageT, *args, **kwargs) -> None:
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: MessageT, *args, **kwargs) -> None:
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: MessageT, *args, **kwargs) -> None:
        self._log(logging.ERROR, msg, *args, **kwargs)

    def exception(self, msg: MessageT, *args, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, msg, *args, **kwargs)


_logger = HDRHistLogger(__name__)


def setup_rich_logging(level: str = "WARNING", rich_tracebacks: bool = True) -> None:
    """Set up Rich logging on the root logger.

    Existing root handlers are replaced so repeated calls (e.g. from tests)
    do not duplicate output.

    Args:
        level: Logging level name (e.g., "DEBUG", "INFO", "TRACE").
        rich_tracebacks: Whether to render exception tracebacks with Rich.

    Raises:
        InvalidLogLevelError: If ``level`` is not a known level name.
    """
    if level.upper() not in LOG_LEVELS:
        raise InvalidLogLevelError(level, LOG_LEVELS)
    level = level.upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for existing_handler in root_logger.handlers[:]:
        root_logger.removeHandler(existing_handler)

    rich_handler = RichHandler(
        rich_tracebacks=rich_tracebacks,
        show_path=True,
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        tracebacks_show_locals=False,
        log_time_format="%H:%M:%S.%f",
        omit_repeated_times=False,
    )
    rich_handler.setLevel(level)
    root_logger.addHandler(rich_handler)

    _logger.debug(f"Logging initialized with level: {level}")
