# This file is part of ratingdata.
# Copyright (C) 2026 ratingdata contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Ordered, mutable collections of rating events.
"""

from __future__ import annotations

from typing import Iterable, Iterator, overload

import numpy as np
import pandas as pd

from ratingdata.random import RNGInput, random_generator

from .types import RatingEvent


class RatingCollection:
    """
    An ordered sequence of rating events with a running total, so the average
    rating is available in constant time.

    Iteration, indexing, and :func:`len` reflect the current internal order,
    which is insertion order until :meth:`shuffle` is called.

    Args:
        events:
            Initial rating events to append, in order.
    """

    _events: list[RatingEvent]
    _total: float

    def __init__(self, events: Iterable[RatingEvent] | None = None):
        self._events = []
        self._total = 0.0
        if events is not None:
            self.extend(events)

    def append(self, event: RatingEvent):
        """
        Add a rating event to the end of the collection.
        """
        self._events.append(event)
        self._total += event.rating

    def extend(self, events: Iterable[RatingEvent]):
        """
        Append several rating events, in order.
        """
        for event in events:
            self.append(event)

    def remove(self, event: RatingEvent) -> bool:
        """
        Remove the first event equal to ``event``.

        Returns:
            ``True`` if an event was removed, ``False`` if no matching event
            was present (in which case the collection is unchanged).
        """
        try:
            self._events.remove(event)
        except ValueError:
            return False

        self._total -= event.rating
        return True

    def find(self, user_id: int, item_id: int) -> RatingEvent | None:
        """
        Find the first rating for a user and item.

        Returns:
            The matching event, or ``None`` if there is no such rating.
        """
        for event in self._events:
            if event.user_id == user_id and event.item_id == item_id:
                return event
        return None

    def average(self) -> float:
        """
        Get the average rating value.  The average of an empty collection is
        NaN.
        """
        if not self._events:
            return np.nan
        return self._total / len(self._events)

    @property
    def total(self) -> float:
        "The sum of the rating values."
        return self._total

    def count(self) -> int:
        "Get the number of ratings."
        return len(self._events)

    def shuffle(self, rng: RNGInput = None):
        """
        Shuffle the rating events in place with a Fisher-Yates shuffle.

        Args:
            rng:
                The random generator or seed.  Defaults to the global
                generator (see :func:`ratingdata.random.random_generator`).
        """
        rng = random_generator(rng)
        events = self._events
        for i in range(len(events) - 1, 0, -1):
            j = int(rng.integers(0, i + 1))
            events[i], events[j] = events[j], events[i]

    def to_df(self) -> pd.DataFrame:
        """
        Convert the ratings to a data frame with ``user_id``, ``item_id``, and
        ``rating`` columns, in the collection's current order.
        """
        return pd.DataFrame(
            {
                "user_id": np.array([e.user_id for e in self._events], dtype=np.int64),
                "item_id": np.array([e.item_id for e in self._events], dtype=np.int64),
                "rating": np.array([e.rating for e in self._events], dtype=np.float64),
            }
        )

    def __len__(self):
        return len(self._events)

    def __iter__(self) -> Iterator[RatingEvent]:
        return iter(self._events)

    def __contains__(self, event: object) -> bool:
        return event in self._events

    @overload
    def __getitem__(self, pos: int) -> RatingEvent: ...
    @overload
    def __getitem__(self, pos: slice) -> list[RatingEvent]: ...
    def __getitem__(self, pos: int | slice) -> RatingEvent | list[RatingEvent]:
        return self._events[pos]

    def __repr__(self):
        return f"<RatingCollection of {len(self._events)} ratings>"
