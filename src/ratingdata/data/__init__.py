# This file is part of ratingdata.
# Copyright (C) 2026 ratingdata contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Rating data structures.
"""

from .ratings import RatingCollection
from .routing import EvictionSource, LookupSource, choose_eviction, choose_lookup
from .store import IndexedRatingStore
from .types import EntityKind, IndexState, RatingEvent

__all__ = [
    "RatingEvent",
    "RatingCollection",
    "IndexedRatingStore",
    "IndexState",
    "EntityKind",
    "LookupSource",
    "EvictionSource",
    "choose_lookup",
    "choose_eviction",
]
