# Copyright (c) 2026 image-kmeans contributors
# SPDX-License-Identifier: MIT

"""
Lloyd-style refinement over the working set.

Each round assigns every working color to its nearest center, then replaces
each center with a real member color: the member closest to the cluster's
count-weighted mean, with distances divided by the member's own count so
frequent colors are favored. Centers therefore always stay on colors that
actually occur in the image.

The loop runs a fixed number of rounds. The movement check compares the
average center shift against zero, which a sum of distances never goes below.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from imagekmeans.schema import Color, FALLBACK_COLOR
from imagekmeans.cluster.distance import (
    array_to_colors,
    colors_to_array,
    nearest_index,
    pairwise_distances,
)
from imagekmeans.cluster.working_set import WorkingSet

logger = logging.getLogger(__name__)


# Round index at which refinement stops (rounds 0..10 inclusive)
LAST_ITERATION = 10

# Average shift that counts as converged
CONVERGENCE_SHIFT = 0.0


def assign(
    points: NDArray[np.int64],
    centers: NDArray[np.int64],
) -> NDArray[np.int64]:
    """
    Label each point with the index of its nearest center.

    Ties within the distance tolerance go to the earliest center.

    Args:
        points: (N, 3) working colors
        centers: (K, 3) current centers, K >= 1

    Returns:
        (N,) array of center indices
    """
    return nearest_index(pairwise_distances(points, centers))


def snap_centroid(
    members: NDArray[np.int64],
    weights: NDArray[np.int64],
) -> Color:
    """
    Pick the member color that represents a cluster.

    Computes the weighted mean (integer division truncating toward zero),
    then returns the member minimizing ``distance_to_mean / weight``. The
    first member wins on an exact tie.

    Args:
        members: (M, 3) member colors, M >= 1
        weights: (M,) occurrence counts, each >= 1

    Returns:
        One of ``members`` as a Color
    """
    total = int(weights.sum())
    sums = np.sum(members * weights[:, np.newaxis], axis=0)
    mean = np.sign(sums) * (np.abs(sums) // total)

    diff = members - mean
    dist_to_mean = np.sqrt(np.sum(diff * diff, axis=1, dtype=np.float64))
    best = int(np.argmin(dist_to_mean / weights))

    r, g, b = members[best]
    return Color(int(r), int(g), int(b))


def recompute_centers(
    working: WorkingSet,
    centers: NDArray[np.int64],
) -> tuple[NDArray[np.int64], float]:
    """
    One assign + recompute round.

    Args:
        working: Working set being clustered
        centers: (K, 3) current centers, K >= 1

    Returns:
        (new_centers, wcss) where ``wcss`` is the sum over distinct working
        colors of the squared distance to their new center
    """
    labels = assign(working.points, centers)

    new_centers = []
    for j in range(len(centers)):
        mask = labels == j
        if not np.any(mask):
            new_centers.append(FALLBACK_COLOR)
            continue
        new_centers.append(snap_centroid(working.points[mask], working.weights[mask]))

    new_array = colors_to_array(new_centers)

    diff = working.points - new_array[labels]
    wcss = float(np.sum(diff * diff))

    return new_array, wcss


def refine(
    seeds: tuple[Color, ...],
    working: WorkingSet,
) -> tuple[tuple[Color, ...], float]:
    """
    Run the refinement loop from the given seeds.

    Args:
        seeds: Initial centers (any length, may be empty)
        working: Working set being clustered

    Returns:
        (centers, wcss) from the final round. No seeds gives ``((), 0.0)``.
    """
    if not seeds:
        return (), 0.0

    centers = colors_to_array(seeds)
    wcss = 0.0
    iteration = 0

    while True:
        new_centers, wcss = recompute_centers(working, centers)

        moved = np.sqrt(np.sum((new_centers - centers) ** 2, axis=1, dtype=np.float64))
        shift = float(moved.sum()) / len(new_centers)
        centers = new_centers

        if shift < CONVERGENCE_SHIFT or iteration == LAST_ITERATION:
            break
        iteration += 1

    logger.debug(
        "Refined %d centers in %d rounds, wcss=%.1f",
        len(centers), iteration + 1, wcss,
    )
    return array_to_colors(centers), wcss
