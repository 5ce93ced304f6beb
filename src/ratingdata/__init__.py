# This file is part of ratingdata.
# Copyright (C) 2026 ratingdata contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Rating data with lazily-built user and item indexes.
"""

from ratingdata.data import IndexedRatingStore, RatingCollection, RatingEvent

__version__ = "0.1.0"
__all__ = ["IndexedRatingStore", "RatingCollection", "RatingEvent"]
