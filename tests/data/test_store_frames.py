# This file is part of ratingdata.
# Copyright (C) 2026 ratingdata contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Tests for converting rating stores to and from data frames.
"""

import numpy as np
import pandas as pd

from pytest import raises, warns

from ratingdata.data import IndexedRatingStore, IndexState, RatingEvent
from ratingdata.diagnostics import DataError, DataWarning


def test_from_df():
    df = pd.DataFrame(
        {"user_id": [0, 0, 2], "item_id": [1, 3, 1], "rating": [4.0, 3.5, 2.0]}
    )
    store = IndexedRatingStore.from_df(df)

    assert store.count() == 3
    assert list(store.all) == [
        RatingEvent(0, 1, 4.0),
        RatingEvent(0, 3, 3.5),
        RatingEvent(2, 1, 2.0),
    ]
    assert store.max_user_id == 2
    assert store.max_item_id == 3
    assert store.user_index_state == IndexState.ABSENT
    assert all(isinstance(e.user_id, int) for e in store.all)


def test_from_df_columns():
    df = pd.DataFrame({"user": [5], "movie": [7], "score": [1.0]})
    store = IndexedRatingStore.from_df(df, user_col="user", item_col="movie", rating_col="score")
    assert list(store.all) == [RatingEvent(5, 7, 1.0)]


def test_from_df_missing_column():
    df = pd.DataFrame({"user_id": [0], "item_id": [1]})
    with raises(DataError, match="rating"):
        IndexedRatingStore.from_df(df)


def test_from_df_negative_ids():
    df = pd.DataFrame({"user_id": [0, -1], "item_id": [1, 1], "rating": [1.0, 2.0]})
    with raises(DataError, match="negative"):
        IndexedRatingStore.from_df(df)


def test_from_df_missing_ids():
    df = pd.DataFrame(
        {
            "user_id": pd.array([0, None], dtype="Int64"),
            "item_id": [1, 1],
            "rating": [1.0, 2.0],
        }
    )
    with raises(DataError, match="missing"):
        IndexedRatingStore.from_df(df)


def test_from_df_float_ids():
    df = pd.DataFrame({"user_id": [0.5], "item_id": [1], "rating": [1.0]})
    with raises(DataError, match="non-integer"):
        IndexedRatingStore.from_df(df)


def test_to_df_roundtrip_order():
    store = IndexedRatingStore(
        [RatingEvent(3, 1, 2.0), RatingEvent(0, 0, 5.0), RatingEvent(1, 4, 3.0)]
    )
    df = store.to_df()
    assert np.all(df["user_id"].to_numpy() == [3, 0, 1])
    assert np.all(df["rating"].to_numpy() == [2.0, 5.0, 3.0])
    assert df["user_id"].dtype == np.int64


def test_from_df_nan_rating():
    df = pd.DataFrame({"user_id": [0, 1, 2], "item_id": [0, 0, 0], "rating": [1.0, np.nan, 3.0]})
    with raises(DataError, match="non-finite"):
        IndexedRatingStore.from_df(df)


def test_from_df_infinite_rating():
    df = pd.DataFrame({"user_id": [0], "item_id": [0], "rating": [np.inf]})
    with raises(DataError, match="non-finite"):
        IndexedRatingStore.from_df(df)


def test_from_df_string_rating():
    df = pd.DataFrame({"user_id": [0, 1], "item_id": [0, 0], "rating": ["good", "bad"]})
    with raises(DataError, match="non-numeric"):
        IndexedRatingStore.from_df(df)


def test_from_df_repeated_pairs():
    df = pd.DataFrame({"user_id": [0, 0, 1], "item_id": [4, 4, 4], "rating": [1.0, 2.0, 3.0]})
    with warns(DataWarning, match="1 repeated"):
        store = IndexedRatingStore.from_df(df)

    assert store.count() == 3
    assert store.find_rating(0, 4) == RatingEvent(0, 4, 1.0)
