# This file is part of ratingdata.
# Copyright (C) 2026 ratingdata contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Logging pipeline configuration.
"""

from __future__ import annotations

import logging
import os
import re
import sys
import warnings
from pathlib import Path
from typing import Literal

import structlog

from .tracing import activate_tracing

LVL_TRACE = 5
CORE_PROCESSORS = [
    structlog.processors.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.MaybeTimeStamper(fmt="iso"),
]

_active_config: LoggingConfig | None = None


def active_logging_config() -> LoggingConfig | None:
    """
    Get the currently-active logging configuration.
    """
    return _active_config


def basic_logging(level: int = logging.INFO):
    """
    Simple one-function logging configuration for scripts.
    """
    cfg = LoggingConfig()
    cfg.level = level
    cfg.apply()


class LoggingConfig:  # pragma: nocover
    """
    Configuration for ratingdata logging.

    If unconfigured, the package emits its messages directly to
    :mod:`structlog` and :mod:`logging`, which you can configure any way you
    wish; this class is a convenience for applications.
    """

    level: int = logging.INFO
    stream: Literal["text", "json"] = "text"
    file: Path | None = None
    file_level: int | None = None

    def __init__(self):
        if ev_level := _env_level("RD_LOG_LEVEL"):
            self.level = ev_level

        if ev_file := os.environ.get("RD_LOG_FILE", None):
            self.file = Path(ev_file)

        if ev_level := _env_level("RD_LOG_FILE_LEVEL"):
            self.file_level = ev_level

    @property
    def effective_level(self) -> int:
        if self.file_level is not None and self.file_level < self.level:
            return self.file_level
        else:
            return self.level

    def set_verbose(self, verbose: bool | int = True):
        """
        Enable verbose logging.  ``True`` or ``1`` turns on ``DEBUG``-level
        logs, and ``2`` or greater turns on tracing.
        """
        if isinstance(verbose, int) and verbose > 1:
            self.level = LVL_TRACE
        elif verbose:
            self.level = logging.DEBUG
        else:
            self.level = logging.INFO

    def set_log_file(self, path: os.PathLike[str], level: int | None = None):
        """
        Configure a (JSON) log file.
        """
        self.file = Path(path)
        self.file_level = level

    def apply(self):
        """
        Apply the configuration.
        """
        global _active_config

        root = logging.getLogger()

        term = logging.StreamHandler(sys.stderr)
        term.setLevel(self.level)
        if self.stream == "json":
            proc_fmt = structlog.processors.JSONRenderer()
        else:
            proc_fmt = structlog.dev.ConsoleRenderer(colors=False)

        eff_lvl = self.effective_level
        structlog.configure(
            processors=CORE_PROCESSORS + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            wrapper_class=structlog.make_filtering_bound_logger(max(eff_lvl, logging.DEBUG)),
            logger_factory=structlog.stdlib.LoggerFactory(),
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                proc_fmt,
            ],
            foreign_pre_chain=CORE_PROCESSORS,
        )
        term.setFormatter(formatter)
        root.addHandler(term)
        if eff_lvl <= LVL_TRACE:
            activate_tracing("debug")

        if self.file:
            file_level = self.file_level if self.file_level is not None else self.level
            file = logging.FileHandler(self.file, mode="w")
            ffmt = structlog.stdlib.ProcessorFormatter(
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.ExceptionPrettyPrinter(),
                    structlog.processors.JSONRenderer(),
                ],
                foreign_pre_chain=CORE_PROCESSORS,
            )
            file.setFormatter(ffmt)
            file.setLevel(file_level)
            root.addHandler(file)

        root.setLevel(eff_lvl)

        _active_config = self


def _env_level(name: str) -> int | None:
    ev_level = os.environ.get(name, None)
    if ev_level:
        ev_level = ev_level.strip().upper()
        lmap = logging.getLevelNamesMapping()
        if re.match(r"^\d+$", ev_level):
            return int(ev_level)
        elif ev_level == "TRACE":
            return LVL_TRACE
        elif ev_level in lmap:
            return lmap[ev_level]
        else:
            warnings.warn(f"{name} set to invalid value {ev_level}")
    return None
