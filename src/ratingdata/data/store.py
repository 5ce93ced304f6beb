# This file is part of ratingdata.
# Copyright (C) 2026 ratingdata contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Rating storage with lazily-built user and item indexes.
"""

from __future__ import annotations

import warnings
from typing import Iterable, Iterator

import numpy as np
import pandas as pd

from ratingdata.diagnostics import DataError, DataWarning
from ratingdata.logging import Stopwatch, get_logger, trace
from ratingdata.random import RNGInput

from .ratings import RatingCollection
from .routing import EvictionSource, choose_eviction, choose_lookup
from .types import EntityKind, IndexState, RatingEvent

_log = get_logger(__name__)


class IndexedRatingStore:
    """
    Storage for rating data, accessible in unsorted, user-wise, and item-wise
    order.

    The store initially keeps only the unsorted ratings (:attr:`all`).  The
    by-user and by-item indexes are built from them the first time they are
    read (or when :meth:`ensure_by_user` / :meth:`ensure_by_item` is called),
    and from then on every mutation is applied to each index that exists.
    Indexes are never discarded once built.

    The store is not thread-safe; callers sharing it across threads must
    serialize access themselves, treating index construction as a write.
    """

    _all: RatingCollection
    _by_user: list[RatingCollection] | None = None
    _by_item: list[RatingCollection] | None = None
    _max_user_id: int = 0
    _max_item_id: int = 0
    _has_ratings: bool = False

    def __init__(self, ratings: Iterable[RatingEvent] | None = None):
        self._all = RatingCollection()
        if ratings is not None:
            self.add_ratings(ratings)

    @classmethod
    def from_df(
        cls,
        df: pd.DataFrame,
        *,
        user_col: str = "user_id",
        item_col: str = "item_id",
        rating_col: str = "rating",
    ) -> IndexedRatingStore:
        """
        Create a store from a data frame of ratings, adding them in row order.

        Args:
            df:
                The rating data.
            user_col:
                The column containing (non-negative integer) user IDs.
            item_col:
                The column containing (non-negative integer) item IDs.
            rating_col:
                The column containing rating values.

        Raises:
            DataError:
                if a column is missing, the IDs are missing, non-integer, or
                negative, or the ratings are non-numeric or non-finite.

        Warns:
            DataWarning:
                if the frame rates the same item more than once for a user.
                All such rows are kept.
        """
        for col in (user_col, item_col, rating_col):
            if col not in df.columns:
                raise DataError(f"rating frame has no column {col}")

        for col in (user_col, item_col):
            ids = df[col]
            if ids.isna().any():
                raise DataError(f"column {col} has missing IDs")
            if not pd.api.types.is_integer_dtype(ids.dtype):
                raise DataError(f"column {col} has non-integer type {ids.dtype}")
            if (ids < 0).any():
                raise DataError(f"column {col} has negative IDs")

        ratings = df[rating_col]
        if not pd.api.types.is_numeric_dtype(ratings.dtype) or pd.api.types.is_bool_dtype(
            ratings.dtype
        ):
            raise DataError(f"column {rating_col} has non-numeric type {ratings.dtype}")
        if not np.isfinite(ratings.to_numpy(dtype=np.float64, na_value=np.nan)).all():
            raise DataError(f"column {rating_col} has missing or non-finite ratings")

        n_dup = df.duplicated([user_col, item_col]).sum()
        if n_dup:
            warnings.warn(
                f"rating frame has {n_dup} repeated user-item pairs", DataWarning, stacklevel=2
            )

        _log.debug("loading ratings from frame", n_rows=len(df))
        store = cls()
        store.add_ratings(
            RatingEvent(int(u), int(i), float(r))
            for u, i, r in zip(
                df[user_col].to_numpy(), df[item_col].to_numpy(), df[rating_col].to_numpy()
            )
        )
        return store

    @property
    def all(self) -> RatingCollection:
        "All ratings, in current (insertion or shuffled) order."
        return self._all

    @property
    def by_user(self) -> list[RatingCollection]:
        """
        Ratings grouped by user ID, building the index if needed.
        """
        return self.ensure_by_user()

    @property
    def by_item(self) -> list[RatingCollection]:
        """
        Ratings grouped by item ID, building the index if needed.
        """
        return self.ensure_by_item()

    @property
    def user_index_state(self) -> IndexState:
        "Whether the by-user index has been built."
        return IndexState.ABSENT if self._by_user is None else IndexState.PRESENT

    @property
    def item_index_state(self) -> IndexState:
        "Whether the by-item index has been built."
        return IndexState.ABSENT if self._by_item is None else IndexState.PRESENT

    @property
    def max_user_id(self) -> int:
        "The largest user ID ever added (not lowered by removals)."
        return self._max_user_id

    @property
    def max_item_id(self) -> int:
        "The largest item ID ever added (not lowered by removals)."
        return self._max_item_id

    def count(self) -> int:
        "Get the number of ratings."
        return self._all.count()

    def average(self) -> float:
        "Get the average rating (NaN if the store is empty)."
        return self._all.average()

    def ensure_by_user(self) -> list[RatingCollection]:
        """
        Build the by-user index if it does not exist yet.
        It has a slot for every user ID up to :attr:`max_user_id`.

        Returns:
            The by-user index (the same list on every call).
        """
        if self._by_user is None:
            self._by_user = self._build_index("user")
        return self._by_user

    def ensure_by_item(self) -> list[RatingCollection]:
        """
        Build the by-item index if it does not exist yet.
        It has a slot for every item ID up to :attr:`max_item_id`.

        Returns:
            The by-item index (the same list on every call).
        """
        if self._by_item is None:
            self._by_item = self._build_index("item")
        return self._by_item

    def _build_index(self, kind: EntityKind) -> list[RatingCollection]:
        log = _log.bind(entity=kind, n_ratings=len(self._all))
        log.debug("building rating index")
        timer = Stopwatch()
        index: list[RatingCollection] = []
        if self._has_ratings:
            # slots for every ID ever added, even if its ratings were removed
            _reserve(index, self._max_user_id if kind == "user" else self._max_item_id)
        for event in self._all:
            eid = event.entity_id(kind)
            _reserve(index, eid)
            index[eid].append(event)
        timer.stop()
        log.debug("built rating index", n_slots=len(index), time=str(timer))
        return index

    def _index(self, kind: EntityKind) -> list[RatingCollection] | None:
        if kind == "user":
            return self._by_user
        else:
            return self._by_item

    def reserve_user(self, user_id: int):
        """
        Make room for a user in the by-user index, if it exists.
        """
        if self._by_user is not None:
            _reserve(self._by_user, user_id)

    def reserve_item(self, item_id: int):
        """
        Make room for an item in the by-item index, if it exists.
        """
        if self._by_item is not None:
            _reserve(self._by_item, item_id)

    def add_rating(self, event: RatingEvent):
        """
        Add a rating to the store and to every index that has been built.
        """
        if self._by_user is not None:
            _reserve(self._by_user, event.user_id)
            self._by_user[event.user_id].append(event)
        if self._by_item is not None:
            _reserve(self._by_item, event.item_id)
            self._by_item[event.item_id].append(event)
        self._all.append(event)
        self._has_ratings = True

        if event.user_id > self._max_user_id:
            self._max_user_id = event.user_id
        if event.item_id > self._max_item_id:
            self._max_item_id = event.item_id
        trace(_log, "added rating", user=event.user_id, item=event.item_id)

    def add_ratings(self, events: Iterable[RatingEvent]):
        """
        Add several ratings, in order.
        """
        for event in events:
            self.add_rating(event)

    def remove_rating(self, event: RatingEvent) -> bool:
        """
        Remove the first rating equal to ``event`` from the store and from
        every index that has been built.  Indexes without a slot for the
        event's user or item are skipped.

        Returns:
            Whether a matching rating was found in the store.
        """
        if (slot := _slot(self._by_user, event.user_id)) is not None:
            slot.remove(event)
        if (slot := _slot(self._by_item, event.item_id)) is not None:
            slot.remove(event)
        found = self._all.remove(event)
        trace(_log, "removed rating", user=event.user_id, item=event.item_id, found=found)
        return found

    def remove_user(self, user_id: int) -> int:
        """
        Remove a user and all their ratings.

        Returns:
            The number of ratings removed.
        """
        return self._evict("user", user_id)

    def remove_item(self, item_id: int) -> int:
        """
        Remove an item and all its ratings.

        Returns:
            The number of ratings removed.
        """
        return self._evict("item", item_id)

    def _evict(self, kind: EntityKind, eid: int) -> int:
        other: EntityKind = "item" if kind == "user" else "user"
        source = choose_eviction(
            self._index(kind) is not None, self._all is not None, self._index(other) is not None
        )
        candidates = self._eviction_candidates(kind, eid, source)
        for event in candidates:
            self.remove_rating(event)

        _log.debug("evicted %s", kind, id=eid, source=source, n_removed=len(candidates))
        return len(candidates)

    def _eviction_candidates(
        self, kind: EntityKind, eid: int, source: EvictionSource
    ) -> list[RatingEvent]:
        """
        Collect the ratings of a user or item from a single source.
        """
        match source:
            case "primary":
                slot = _slot(self._index(kind), eid)
                return list(slot) if slot is not None else []
            case "all":
                return [e for e in self._all if e.entity_id(kind) == eid]
            case "secondary":
                index = self._index("item" if kind == "user" else "user")
                assert index is not None
                return [e for slot in index for e in slot if e.entity_id(kind) == eid]
            case _:
                return []

    def find_rating(self, user_id: int, item_id: int) -> RatingEvent | None:
        """
        Find the rating for a user and item, scanning whichever built index
        has the fewer ratings for them (the user's on a tie), or all ratings
        if neither index can be used.

        Returns:
            The first matching rating, or ``None`` if there is none.
        """
        user_slot = _slot(self._by_user, user_id)
        item_slot = _slot(self._by_item, item_id)
        source = choose_lookup(
            len(user_slot) if user_slot is not None else None,
            len(item_slot) if item_slot is not None else None,
            self._all is not None,
        )
        match source:
            case "user":
                assert user_slot is not None
                return user_slot.find(user_id, item_id)
            case "item":
                assert item_slot is not None
                return item_slot.find(user_id, item_id)
            case "all":
                return self._all.find(user_id, item_id)
            case _:
                return None

    def shuffle(self, rng: RNGInput = None):
        """
        Shuffle the order of :attr:`all`.  The per-user and per-item indexes
        keep their order.
        """
        self._all.shuffle(rng)

    def to_df(self) -> pd.DataFrame:
        """
        Get all ratings as a data frame, in current order.
        """
        return self._all.to_df()

    def __len__(self):
        return len(self._all)

    def __iter__(self) -> Iterator[RatingEvent]:
        return iter(self._all)

    def __repr__(self):
        return "<IndexedRatingStore of {} ratings (by user: {}, by item: {})>".format(
            len(self._all), self.user_index_state.value, self.item_index_state.value
        )


def _reserve(index: list[RatingCollection], eid: int):
    while eid >= len(index):
        index.append(RatingCollection())


def _slot(index: list[RatingCollection] | None, eid: int) -> RatingCollection | None:
    if index is not None and 0 <= eid < len(index):
        return index[eid]
    else:
        return None
