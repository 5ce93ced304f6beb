# This file is part of ratingdata.
# Copyright (C) 2026 ratingdata contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Basic data types used in rating data representations.
"""

# pyright: strict
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from typing_extensions import Literal, TypeAlias

EntityKind: TypeAlias = Literal["user", "item"]
"The kinds of entity a derived index can group by."


@dataclass(frozen=True, slots=True)
class RatingEvent:
    """
    A single observed rating: a user, an item, and a rating value.

    Events are immutable and have no identity beyond their field values, so
    two events with the same fields compare (and are removed) as equal.  IDs
    are dense non-negative integers; they are not validated here, and the
    layer that builds events is responsible for rejecting negative IDs.
    """

    user_id: int
    "The user's numeric ID."
    item_id: int
    "The item's numeric ID."
    rating: float
    "The rating value."

    def entity_id(self, kind: EntityKind) -> int:
        "Get the ID of the user or item this event belongs to."
        if kind == "user":
            return self.user_id
        else:
            return self.item_id


class IndexState(Enum):
    """
    Materialization state of a derived index.

    An index starts out :attr:`ABSENT` and moves to :attr:`PRESENT` the first
    time it is read (or explicitly ensured).  There is no transition back.
    """

    ABSENT = "absent"
    "The index has not been built; mutations skip it."
    PRESENT = "present"
    "The index exists and is kept in sync with every mutation."
