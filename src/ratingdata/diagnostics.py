# This file is part of ratingdata.
# Copyright (C) 2026 ratingdata contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Warning and error classes for rating data.
"""


class DataWarning(UserWarning):
    """
    Warning raised for detectable problems with input data.
    """

    pass


class DataError(Exception):
    """
    Error raised for detectable problems with input data.
    """

    pass


class ConfigWarning(UserWarning):
    """
    Warning raised for detectable problems with configuration.
    """

    pass
