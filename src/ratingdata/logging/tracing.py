# This file is part of ratingdata.
# Copyright (C) 2026 ratingdata contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Fine-grained trace logging.
"""

from __future__ import annotations

import os
from typing import Any, Literal

__trace_debug = os.environ.get("RD_TRACE", "no").lower()
_tracing_active: bool | Literal["debug"] = (
    "debug" if __trace_debug == "debug" else __trace_debug in ("1", "yes", "true")
)


def tracing_active() -> bool:
    """
    Query whether tracing is active.
    """
    return bool(_tracing_active)


def activate_tracing(active: bool | Literal["debug"] = True) -> None:
    """
    Mark tracing as active (or inactive).  Usually only called from
    :class:`~ratingdata.logging.LoggingConfig`.

    Args:
        active:
            The global tracing state.  If ``"debug"``, trace messages are
            emitted at DEBUG level.
    """
    global _tracing_active
    _tracing_active = active


def trace(logger: Any, *args: Any, **kwargs: Any):
    """
    Emit a trace-level message, if tracing is enabled.  Trace messages are
    finer-grained than debug messages (e.g. one per rating event).
    """
    if not _tracing_active:
        return

    if _tracing_active == "debug":
        logger.debug(*args, **kwargs)
    else:
        meth = getattr(logger, "trace", None)
        if meth is not None:
            meth(*args, **kwargs)
        else:
            logger.debug(*args, **kwargs)
