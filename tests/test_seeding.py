# Copyright (c) 2026 image-kmeans contributors
# SPDX-License-Identifier: MIT

"""Tests for initial center selection (uniform and greedy)."""

from types import MappingProxyType

import numpy as np
import pytest

from imagekmeans.schema import Color, InitMethod
from imagekmeans.cluster.seeding import greedy_seeds, seed_centers, uniform_seeds
from imagekmeans.cluster.working_set import WorkingSet, build_working_set


class _ScriptedRng:
    """Stands in for numpy's Generator with fixed outputs."""

    def __init__(self, integer=0, draws=()):
        self._integer = integer
        self._draws = iter(draws)

    def integers(self, high):
        assert 0 <= self._integer < high
        return self._integer

    def random(self):
        return next(self._draws)


def _working(*rgbs):
    return build_working_set(np.array(rgbs, dtype=np.int64))


def _palette_working():
    return _working(
        (0, 0, 0), (10, 200, 30), (250, 250, 250), (90, 20, 160), (255, 0, 0),
    )


def _line_working():
    """Working list A=(0,0,0), B=(3,0,0), C=(10,0,0), in that order."""
    return _working(
        (0, 0, 0), (0, 0, 0), (0, 0, 0),
        (3, 0, 0), (3, 0, 0),
        (10, 0, 0),
    )


class TestUniformSeeds:

    def test_distinct_members(self):
        working = _palette_working()
        seeds = uniform_seeds(working, 3, np.random.default_rng(0))
        assert len(seeds) == 3
        assert len(set(seeds)) == 3
        assert set(seeds) <= set(working.colors)

    def test_k_larger_than_working_set(self):
        working = _palette_working()
        seeds = uniform_seeds(working, 10, np.random.default_rng(0))
        assert sorted(seeds) == sorted(working.colors)

    def test_zero_k(self):
        assert uniform_seeds(_palette_working(), 0, np.random.default_rng(0)) == ()


class TestGreedySeeds:

    def test_distinct_members(self):
        working = _palette_working()
        seeds = greedy_seeds(working, 4, np.random.default_rng(1))
        assert len(seeds) == 4
        assert len(set(seeds)) == 4
        assert set(seeds) <= set(working.colors)

    def test_pool_exhausted(self):
        working = _palette_working()
        seeds = greedy_seeds(working, 9, np.random.default_rng(1))
        assert sorted(seeds) == sorted(working.colors)

    def test_reproducible_with_same_seed(self):
        working = _palette_working()
        a = greedy_seeds(working, 3, np.random.default_rng(42))
        b = greedy_seeds(working, 3, np.random.default_rng(42))
        assert a == b

    def test_zero_k(self):
        assert greedy_seeds(_palette_working(), 0, np.random.default_rng(0)) == ()

    def test_weights_are_linear_distances(self):
        """B (distance 3) holds 3/13 of the mass, not 9/109 as with squared weights."""
        working = _line_working()
        seeds = greedy_seeds(working, 2, _ScriptedRng(integer=0, draws=[0.2]))
        assert seeds == (Color(0, 0, 0), Color(3, 0, 0))

    def test_draw_past_first_bucket(self):
        working = _line_working()
        seeds = greedy_seeds(working, 2, _ScriptedRng(integer=0, draws=[0.5]))
        assert seeds == (Color(0, 0, 0), Color(10, 0, 0))

    def test_distance_to_nearest_chosen_center(self):
        """After A and C, B is 3 from A; D=(12,0,0) is 2 from C."""
        working = _working(
            (0, 0, 0), (0, 0, 0), (0, 0, 0), (0, 0, 0),
            (10, 0, 0), (10, 0, 0), (10, 0, 0),
            (3, 0, 0), (3, 0, 0),
            (12, 0, 0),
        )
        # Round 1 from A: C=10, B=3, D=12 -> cumulative 0.4, 0.52, 1.0
        # Round 2 from A, C: B=3, D=2 -> cumulative 0.6, 1.0
        seeds = greedy_seeds(working, 3, _ScriptedRng(integer=0, draws=[0.1, 0.7]))
        assert seeds == (Color(0, 0, 0), Color(10, 0, 0), Color(12, 0, 0))

    def test_zero_distance_mass_falls_back_to_random_pick(self):
        c = Color(5, 5, 5)
        points = np.array([[5, 5, 5], [5, 5, 5]], dtype=np.int64)
        working = WorkingSet(
            colors=(c, c),
            counts=MappingProxyType({c: 2}),
            points=points,
            weights=np.array([1, 1], dtype=np.int64),
        )
        seeds = greedy_seeds(working, 2, _ScriptedRng(integer=0))
        assert seeds == (c, c)


class TestSeedCenters:

    @pytest.mark.parametrize("method", list(InitMethod))
    def test_dispatch(self, method):
        working = _palette_working()
        seeds = seed_centers(working, 2, method, np.random.default_rng(5))
        assert len(seeds) == 2
        assert set(seeds) <= set(working.colors)
