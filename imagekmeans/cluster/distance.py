# Copyright (c) 2026 image-kmeans contributors
# SPDX-License-Identifier: MIT

"""
RGB distance and quantization primitives.

Distances are plain Euclidean in integer RGB space. Every "nearest" decision
in the engine goes through ``nearest_index`` so that float rounding can never
split a tie differently in different places.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from imagekmeans.schema import Color


# Two distances closer than this are treated as equal; first match wins.
DISTANCE_TOLERANCE = 0.1


def quantize_array(pixels: NDArray[np.int64], factor: int) -> NDArray[np.int64]:
    """
    Reduce channel precision: each channel becomes ``(v // factor) * factor``.

    A factor <= 1 returns ``pixels`` unchanged.
    """
    if factor <= 1:
        return pixels
    return (pixels // factor) * factor


def pairwise_distances(
    points: NDArray[np.int64],
    centers: NDArray[np.int64],
) -> NDArray[np.float64]:
    """
    Distance from every point to every center.

    Args:
        points: (N, 3) integer array
        centers: (K, 3) integer array

    Returns:
        (N, K) float array
    """
    diff = points[:, np.newaxis, :] - centers[np.newaxis, :, :]
    return np.sqrt(np.sum(diff * diff, axis=2, dtype=np.float64))


def nearest_index(distances: NDArray[np.float64]) -> NDArray[np.int64]:
    """
    Row-wise argmin with a tolerance.

    For each row, returns the first column whose distance is within
    ``DISTANCE_TOLERANCE`` of the row minimum.

    Args:
        distances: (N, K) array with K >= 1

    Returns:
        (N,) array of column indices
    """
    row_min = distances.min(axis=1, keepdims=True)
    within = np.abs(distances - row_min) < DISTANCE_TOLERANCE
    # argmax on booleans returns the first True
    return np.argmax(within, axis=1)


def colors_to_array(colors) -> NDArray[np.int64]:
    """Pack a sequence of Colors into a (N, 3) int64 array."""
    if len(colors) == 0:
        return np.empty((0, 3), dtype=np.int64)
    return np.array([c.as_tuple() for c in colors], dtype=np.int64)


def array_to_colors(points: NDArray[np.int64]) -> tuple[Color, ...]:
    """Unpack a (N, 3) integer array into Colors."""
    return tuple(Color(int(r), int(g), int(b)) for r, g, b in points)
