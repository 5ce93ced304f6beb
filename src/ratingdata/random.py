# This file is part of ratingdata.
# Copyright (C) 2026 ratingdata contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Utilities to manage randomness (e.g. for shuffling rating data).
"""

# pyright: strict
from __future__ import annotations

from hashlib import md5
from typing import Any, Sequence

import numpy as np
from numpy.random import Generator, SeedSequence, default_rng
from typing_extensions import TypeAlias

SeedLike: TypeAlias = int | Sequence[int] | np.random.SeedSequence
"""
Type for RNG seeds (see `SPEC 7`_).

.. _SPEC 7: https://scientific-python.org/specs/spec-0007/
"""

RNGLike: TypeAlias = np.random.Generator | np.random.BitGenerator
"Type for random number generators as inputs."

RNGInput: TypeAlias = SeedLike | RNGLike | None
"Type for RNG inputs."

_global_seed: SeedSequence | None = None
_global_rng: Generator | None = None


def init_global_rng(seed: RNGInput, *, seed_stdlib: bool = True, seed_numpy: bool = True):
    """
    Set the global default RNG.

    Args:
        seed:
            The seed to set.
        seed_stdlib:
            If ``True``, also seed the Python standard library RNG.
        seed_numpy:
            If ``True``, also seed the legacy NumPy global RNG.
    """
    global _global_rng, _global_seed

    if isinstance(seed, (np.random.Generator, np.random.BitGenerator)):
        _global_rng = default_rng(seed)
        int_seed = _global_rng.integers(np.iinfo("i4").max)
    else:
        _global_seed = make_seed(seed)
        int_seed = _global_seed.generate_state(1)[0]
        _global_rng = default_rng(_global_seed)

    if seed_stdlib:
        import random

        random.seed(int(int_seed))

    if seed_numpy:
        np.random.seed(int_seed)


def random_generator(seed: RNGInput = None) -> Generator:
    """
    Create a a random generator with the given seed, falling back to a global
    generator if no seed is provided.  If no global generator has been
    configured with :func:`init_global_rng`, it returns a fresh random RNG.
    """
    if seed is None and _global_rng is not None:
        return _global_rng
    else:
        return default_rng(seed)


def make_seed(
    *keys: SeedSequence | int | str | bytes | Sequence[int] | np.integer[Any] | None,
) -> SeedSequence:
    """
    Make an RNG seed from input keys, allowing strings as seed material.
    """
    seed: list[int] = []
    for key in keys:
        if key is None:
            continue
        elif isinstance(key, SeedSequence):
            ent = key.entropy
            if ent is None:
                continue
            elif isinstance(ent, int):
                seed.append(ent)
            else:
                seed += ent
        elif isinstance(key, np.integer):
            seed.append(key.item())
        elif isinstance(key, int):
            seed.append(key)
        elif isinstance(key, str):
            seed.append(_bytes_seed(key.encode("utf8")))
        elif isinstance(key, bytes):
            seed.append(_bytes_seed(key))
        elif isinstance(key, Sequence):  # type: ignore
            seed += key
        else:  # pragma: nocover
            raise TypeError(f"invalid key input: {key}")

    return SeedSequence(seed)


def _bytes_seed(key: bytes) -> int:
    digest = md5(key).digest()
    arr = np.frombuffer(digest, np.int32)
    return abs(np.bitwise_xor.reduce(arr).item())
