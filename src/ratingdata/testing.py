# This file is part of ratingdata.
# Copyright (C) 2026 ratingdata contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Test utilities for rating data.  This module relies on Hypothesis.
"""

import hypothesis.strategies as st

from ratingdata.data import RatingEvent

__all__ = ["rating_events", "rating_lists"]


@st.composite
def rating_events(draw: st.DrawFn, max_user: int = 20, max_item: int = 30) -> RatingEvent:
    """
    Hypothesis strategy for single rating events with small IDs (so users and
    items repeat).
    """
    user = draw(st.integers(0, max_user))
    item = draw(st.integers(0, max_item))
    rating = draw(st.sampled_from([0.5, 1.0, 1.5, 2.0, 2.5, 3.0, 3.5, 4.0, 4.5, 5.0]))
    return RatingEvent(user, item, rating)


def rating_lists(
    min_size: int = 0, max_size: int = 100, max_user: int = 20, max_item: int = 30
) -> st.SearchStrategy[list[RatingEvent]]:
    """
    Hypothesis strategy for lists of rating events.
    """
    return st.lists(
        rating_events(max_user=max_user, max_item=max_item), min_size=min_size, max_size=max_size
    )
