# Copyright (c) 2026 image-kmeans contributors
# SPDX-License-Identifier: MIT

"""
Initial center selection.

Two strategies over the working color list:
1. Uniform: k distinct working colors sampled without replacement
2. Greedy (k-means++ style): each next center is drawn with probability
   proportional to its distance from the nearest center chosen so far

The greedy strategy weights candidates by plain distance, not squared
distance as in textbook k-means++.

Both take an explicit ``numpy.random.Generator``; nothing here touches a
global random source.
"""

from __future__ import annotations

import logging

import numpy as np

from imagekmeans.schema import Color, InitMethod
from imagekmeans.cluster.distance import pairwise_distances
from imagekmeans.cluster.working_set import WorkingSet

logger = logging.getLogger(__name__)


def uniform_seeds(
    working: WorkingSet,
    k: int,
    rng: np.random.Generator,
) -> tuple[Color, ...]:
    """
    Sample ``min(k, len(working))`` distinct working colors.

    No ordering is guaranteed beyond "no repeats".
    """
    n = min(max(k, 0), len(working))
    if n == 0:
        return ()
    picked = rng.choice(len(working), size=n, replace=False)
    return tuple(working.colors[int(i)] for i in picked)


def greedy_seeds(
    working: WorkingSet,
    k: int,
    rng: np.random.Generator,
) -> tuple[Color, ...]:
    """
    Distance-weighted greedy seeding.

    The first center is uniform at random. Each round recomputes, for every
    remaining candidate, the distance to its nearest chosen center, turns
    those distances into a cumulative distribution and picks the first
    candidate whose cumulative probability exceeds a uniform draw in [0, 1).

    If all remaining candidates sit at distance 0 from a chosen center, a
    remaining candidate is picked uniformly instead.

    Args:
        working: Working set to draw centers from
        k: Number of centers wanted
        rng: Random generator

    Returns:
        Up to ``k`` distinct working colors, in pick order. Shorter than
        ``k`` when the working set runs out.
    """
    if k <= 0 or len(working) == 0:
        return ()

    remaining = np.arange(len(working))
    first = int(rng.integers(len(working)))
    chosen = [first]
    remaining = remaining[remaining != first]

    while len(chosen) < k and len(remaining) > 0:
        dists = pairwise_distances(
            working.points[remaining],
            working.points[chosen],
        ).min(axis=1)

        total = float(dists.sum())
        if total == 0.0:
            logger.debug(
                "Zero distance mass over %d candidates; picking at random",
                len(remaining),
            )
            pos = int(rng.integers(len(remaining)))
        else:
            cumulative = np.cumsum(dists)
            cumulative /= cumulative[-1]
            draw = rng.random()
            pos = int(np.searchsorted(cumulative, draw, side="right"))

        chosen.append(int(remaining[pos]))
        remaining = np.delete(remaining, pos)

    return tuple(working.colors[i] for i in chosen)


def seed_centers(
    working: WorkingSet,
    k: int,
    method: InitMethod,
    rng: np.random.Generator,
) -> tuple[Color, ...]:
    """Pick initial centers with the requested strategy."""
    if method == InitMethod.RANDOM:
        seeds = uniform_seeds(working, k, rng)
    elif method == InitMethod.KMEANS_PLUS_PLUS:
        seeds = greedy_seeds(working, k, rng)
    else:
        raise ValueError(f"Unknown init method: {method!r}")

    logger.debug("Seeded %d of %d requested centers (%s)", len(seeds), k, method.value)
    return seeds
