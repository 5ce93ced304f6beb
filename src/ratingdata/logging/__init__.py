# This file is part of ratingdata.
# Copyright (C) 2026 ratingdata contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Logging and timing support.
"""

from ._proxy import get_logger
from .config import LoggingConfig, basic_logging
from .stopwatch import Stopwatch
from .tracing import trace, tracing_active

__all__ = [
    "LoggingConfig",
    "basic_logging",
    "get_logger",
    "trace",
    "tracing_active",
    "Stopwatch",
]
