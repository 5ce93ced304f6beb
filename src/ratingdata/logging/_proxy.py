# This file is part of ratingdata.
# Copyright (C) 2026 ratingdata contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

from __future__ import annotations

import logging
from typing import Any

import structlog
from structlog._config import BoundLoggerLazyProxy

QUIET_LEVEL = logging.WARNING
"Minimum level emitted while structlog is unconfigured."
_quiet_wrapper = structlog.make_filtering_bound_logger(QUIET_LEVEL)


def get_logger(name: str, *, remove_private: bool = True, **init_vals: Any) -> Any:
    """
    Get a lazy logger for a ratingdata module.

    Until the application configures structlog (for example with
    :func:`~ratingdata.logging.basic_logging`), loggers only pass warnings and
    errors, so index construction and eviction messages stay out of the way.

    Args:
        name:
            The logger name, usually ``__name__``.
        remove_private:
            Whether to cut the name at its first private (``_``-prefixed)
            component.
        init_vals:
            Context values bound into every message.
    """
    if remove_private:
        name = public_logger_name(name)
    return _StoreLogger(None, logger_factory_args=[name], initial_values=init_vals)


def public_logger_name(name: str) -> str:
    "Strip private module components (``ratingdata.logging._proxy`` → ``ratingdata.logging``)."
    parts = name.split(".")
    for pos, part in enumerate(parts):
        if part.startswith("_"):
            return ".".join(parts[:pos])
    return name


class _StoreLogger(BoundLoggerLazyProxy):
    def bind(self, **new_values: Any):
        # re-checked on every bind so configuring late still takes effect
        self._wrapper_class = None if structlog.is_configured() else _quiet_wrapper
        return super().bind(**new_values)
