# This file is part of ratingdata.
# Copyright (C) 2026 ratingdata contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Selection of which structure to scan for lookups and evictions.

These are pure functions of what is available, so the tie-break policies can
be checked without building a store.
"""

# pyright: strict
from __future__ import annotations

from typing_extensions import Literal, TypeAlias

LookupSource: TypeAlias = Literal["user", "item", "all", "none"]
"Structure to scan when finding a single rating."
EvictionSource: TypeAlias = Literal["primary", "all", "secondary", "none"]
"""
Structure to collect candidates from when evicting an entity.  The *primary*
index is the one grouped by the evicted entity's kind (``by_user`` when
removing a user); the *secondary* index is the other one.
"""


def choose_lookup(user_count: int | None, item_count: int | None, has_all: bool) -> LookupSource:
    """
    Pick the cheapest structure for finding the rating of a user and item.

    Args:
        user_count:
            The number of ratings in the user's slot of the by-user index, or
            ``None`` if that index is absent or the user is out of range.
        item_count:
            The number of ratings in the item's slot of the by-item index, or
            ``None`` if unavailable.
        has_all:
            Whether the unsorted collection is available.

    Returns:
        The smaller of the two candidate slots, preferring the user slot on a
        tie; the full collection if neither slot is usable; or ``"none"``.
    """
    if user_count is not None and (item_count is None or user_count <= item_count):
        return "user"
    elif item_count is not None:
        return "item"
    elif has_all:
        return "all"
    else:
        return "none"


def choose_eviction(has_primary: bool, has_all: bool, has_secondary: bool) -> EvictionSource:
    """
    Pick where to collect the ratings of an entity being evicted.  Exactly one
    source is used, in priority order: the entity's own index, then the full
    collection, then a scan of every slot in the other index.
    """
    if has_primary:
        return "primary"
    elif has_all:
        return "all"
    elif has_secondary:
        return "secondary"
    else:
        return "none"
