# This file is part of ratingdata.
# Copyright (C) 2026 ratingdata contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Property tests for consistency between the rating store's views.
"""

from collections import Counter

import hypothesis.strategies as st
from hypothesis import given
from pytest import approx

from ratingdata.data import IndexedRatingStore, RatingEvent
from ratingdata.testing import rating_lists

INDEX_CHOICES = st.sampled_from(["", "u", "i", "ui"])


def _materialize(store: IndexedRatingStore, indexes: str):
    if "u" in indexes:
        store.ensure_by_user()
    if "i" in indexes:
        store.ensure_by_item()


def _check_consistent(store: IndexedRatingStore):
    users = store.by_user
    items = store.by_item
    for u, slot in enumerate(users):
        assert Counter(slot) == Counter(e for e in store.all if e.user_id == u)
    for i, slot in enumerate(items):
        assert Counter(slot) == Counter(e for e in store.all if e.item_id == i)

    assert Counter(e for slot in users for e in slot) == Counter(store.all)
    assert Counter(e for slot in items for e in slot) == Counter(store.all)
    for e in store.all:
        assert len(users) > e.user_id
        assert len(items) > e.item_id


@given(rating_lists())
def test_index_equivalence(events: list[RatingEvent]):
    store = IndexedRatingStore(events)
    _check_consistent(store)


@given(rating_lists(), rating_lists())
def test_lazy_parity(first: list[RatingEvent], second: list[RatingEvent]):
    early = IndexedRatingStore(first)
    early.ensure_by_user()
    early.ensure_by_item()
    early.add_ratings(second)

    late = IndexedRatingStore(first)
    late.add_ratings(second)

    assert len(early.by_user) == len(late.by_user)
    assert len(early.by_item) == len(late.by_item)
    for a, b in zip(early.by_user, late.by_user):
        assert Counter(a) == Counter(b)
    for a, b in zip(early.by_item, late.by_item):
        assert Counter(a) == Counter(b)


@given(rating_lists(min_size=1), st.data(), INDEX_CHOICES)
def test_removal_consistency(events: list[RatingEvent], data, indexes: str):
    store = IndexedRatingStore(events)
    _materialize(store, indexes)
    ev = data.draw(st.sampled_from(events))
    n_copies = events.count(ev)

    assert store.remove_rating(ev)
    assert Counter(store.all)[ev] == n_copies - 1
    assert store.count() == len(events) - 1
    assert Counter(store.by_user[ev.user_id])[ev] == n_copies - 1
    assert Counter(store.by_item[ev.item_id])[ev] == n_copies - 1
    _check_consistent(store)


@given(rating_lists(), st.integers(0, 20), INDEX_CHOICES)
def test_bulk_user_eviction(events: list[RatingEvent], user: int, indexes: str):
    store = IndexedRatingStore(events)
    _materialize(store, indexes)
    max_user = store.max_user_id

    removed = store.remove_user(user)
    assert removed == sum(1 for e in events if e.user_id == user)
    assert all(e.user_id != user for e in store.all)
    assert store.max_user_id == max_user
    _check_consistent(store)


@given(rating_lists(), st.integers(0, 30), INDEX_CHOICES)
def test_bulk_item_eviction(events: list[RatingEvent], item: int, indexes: str):
    store = IndexedRatingStore(events)
    _materialize(store, indexes)
    max_item = store.max_item_id

    removed = store.remove_item(item)
    assert removed == sum(1 for e in events if e.item_id == item)
    assert all(e.item_id != item for e in store.all)
    assert store.max_item_id == max_item
    _check_consistent(store)


@given(rating_lists(min_size=1), INDEX_CHOICES)
def test_watermark_after_removing_max(events: list[RatingEvent], indexes: str):
    store = IndexedRatingStore(events)
    _materialize(store, indexes)
    top = max(e.user_id for e in events)
    assert store.max_user_id == top

    store.remove_user(top)
    assert store.max_user_id == top
    store.add_rating(RatingEvent(0, 0, 1.0))
    assert store.max_user_id == top


@given(rating_lists(), INDEX_CHOICES)
def test_shuffle_permutation(events: list[RatingEvent], indexes: str):
    store = IndexedRatingStore(events)
    _materialize(store, indexes)
    store.shuffle()
    assert Counter(store.all) == Counter(events)
    _check_consistent(store)


@given(rating_lists(), st.integers(0, 20), st.integers(0, 30), INDEX_CHOICES)
def test_find_matches_scan(events: list[RatingEvent], user: int, item: int, indexes: str):
    store = IndexedRatingStore(events)
    _materialize(store, indexes)
    found = store.find_rating(user, item)
    matches = [e for e in events if e.user_id == user and e.item_id == item]
    if matches:
        assert found in matches
    else:
        assert found is None


@given(rating_lists(min_size=1), st.data())
def test_average_tracks_removals(events: list[RatingEvent], data):
    store = IndexedRatingStore(events)
    ev = data.draw(st.sampled_from(events))
    store.remove_rating(ev)

    rest = list(events)
    rest.remove(ev)
    if rest:
        assert store.average() == approx(sum(e.rating for e in rest) / len(rest))
    else:
        assert store.count() == 0


@given(rating_lists(), rating_lists(), st.integers(0, 20))
def test_lazy_parity_with_eviction(
    first: list[RatingEvent], second: list[RatingEvent], user: int
):
    early = IndexedRatingStore(first)
    early.ensure_by_user()
    early.ensure_by_item()
    early.remove_user(user)
    early.add_ratings(second)

    late = IndexedRatingStore(first)
    late.remove_user(user)
    late.add_ratings(second)

    assert len(early.by_user) == len(late.by_user)
    assert len(early.by_item) == len(late.by_item)
    for a, b in zip(early.by_user, late.by_user):
        assert Counter(a) == Counter(b)
    for a, b in zip(early.by_item, late.by_item):
        assert Counter(a) == Counter(b)
