# Copyright (c) 2026 image-kmeans contributors
# SPDX-License-Identifier: MIT

"""
Working set construction: quantize, tally, rank, truncate.

Large images contain far more pixels than distinct colors worth clustering.
The working set is the deduplicated list of (quantized) colors ordered by how
often they occur, optionally cut down to the ``top_num`` most frequent. All
seeding and refinement runs over this list, never over raw pixels.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

import numpy as np
from numpy.typing import NDArray

from imagekmeans.errors import InvalidInputError
from imagekmeans.schema import Color, Config
from imagekmeans.cluster.distance import array_to_colors, quantize_array

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class WorkingSet:
    """
    Immutable snapshot of the colors a run clusters over.

    Attributes:
        colors: Distinct working colors, most frequent first
        counts: Occurrence count of every distinct quantized color, including
            any cut by ``top_num``
        points: Read-only (n, 3) int64 array, aligned with ``colors``
        weights: Read-only (n,) int64 array of counts, aligned with ``colors``
    """
    colors: tuple[Color, ...]
    counts: Mapping[Color, int]
    points: NDArray[np.int64]
    weights: NDArray[np.int64]

    def __len__(self) -> int:
        return len(self.colors)


def build_working_set(
    pixels: NDArray[np.int64],
    config: Optional[Config] = None,
) -> WorkingSet:
    """
    Quantize and frequency-rank a flat pixel array.

    Ties in count keep the order in which the colors were first encountered.

    Args:
        pixels: (N, 3) integer array of RGB values. Not modified.
        config: Quantization and top-N settings (defaults if None)

    Returns:
        WorkingSet for this configuration

    Raises:
        InvalidInputError: If there are no pixels.
    """
    cfg = config or Config()

    if len(pixels) == 0:
        raise InvalidInputError("Cannot build a working set from an empty color source")

    quantized = quantize_array(np.asarray(pixels, dtype=np.int64), cfg.factor)

    unique, first_seen, counts = np.unique(
        quantized, axis=0, return_index=True, return_counts=True
    )

    # First-encountered order, then a stable sort by descending count
    by_appearance = np.argsort(first_seen, kind="stable")
    unique = unique[by_appearance]
    counts = counts[by_appearance]
    ranked = np.argsort(-counts, kind="stable")
    unique = unique[ranked]
    counts = counts[ranked].astype(np.int64)

    all_colors = array_to_colors(unique)
    tally = MappingProxyType(
        {color: int(count) for color, count in zip(all_colors, counts)}
    )

    keep = len(all_colors) if cfg.top_num is None else min(cfg.top_num, len(all_colors))
    points = unique[:keep].copy()
    weights = counts[:keep].copy()
    points.setflags(write=False)
    weights.setflags(write=False)

    logger.debug(
        "Working set: %d pixels -> %d distinct colors (factor=%d), keeping %d",
        len(quantized), len(all_colors), cfg.factor, keep,
    )

    return WorkingSet(
        colors=all_colors[:keep],
        counts=tally,
        points=points,
        weights=weights,
    )
