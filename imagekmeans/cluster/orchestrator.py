# Copyright (c) 2026 image-kmeans contributors
# SPDX-License-Identifier: MIT

"""
Run orchestration: fixed-k runs, k sweeps and elbow selection.

``ImageKmeans`` is the session object. It owns the pixel colors of one image
and keeps the working set, seed list and results of its last call; every
call rebuilds all three from scratch.
"""

from __future__ import annotations

import logging
import time
from typing import Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from imagekmeans.errors import InvalidInputError
from imagekmeans.schema import Color, Config, InitMethod, RunResult
from imagekmeans.cluster.distance import DISTANCE_TOLERANCE
from imagekmeans.cluster.refine import refine
from imagekmeans.cluster.seeding import seed_centers
from imagekmeans.cluster.source import ImageSource, load_colors
from imagekmeans.cluster.working_set import WorkingSet, build_working_set

logger = logging.getLogger(__name__)


# Largest k tried when deriving k automatically (sweep covers 1..MAX_DERIVED_K)
MAX_DERIVED_K = 10


def sweep_k(
    working: WorkingSet,
    seeds: Sequence[Color],
    max_k: int = MAX_DERIVED_K,
) -> tuple[RunResult, ...]:
    """
    Refine with the first ``i`` seeds for every ``i`` in 1..max_k.

    Returns:
        One RunResult per k, in increasing k order
    """
    return tuple(_run(working, seeds, i) for i in range(1, max_k + 1))


def select_elbow(wcss: Sequence[float]) -> int:
    """
    Index of the elbow in a WCSS-vs-k curve.

    Point ``i`` sits at ``(i + 1, wcss[i])``. The reference chord runs from
    ``(1, wcss[0])`` to ``(len(wcss) + 1, wcss[-1])``, one step past the
    last point. The point farthest from that chord wins; distances within
    ``DISTANCE_TOLERANCE`` of the maximum resolve to the earliest index.

    Raises:
        ValueError: If ``wcss`` is empty.
    """
    if len(wcss) == 0:
        raise ValueError("Cannot select an elbow from an empty WCSS curve")

    y = np.asarray(wcss, dtype=np.float64)
    x = np.arange(1, len(y) + 1, dtype=np.float64)

    x1, y1 = 1.0, y[0]
    x2, y2 = float(len(y) + 1), y[-1]

    num = np.abs((y2 - y1) * x - (x2 - x1) * y + x2 * y1 - y2 * x1)
    denom = np.sqrt((y2 - y1) ** 2 + (x2 - x1) ** 2)
    distances = num / denom

    within = np.abs(distances - distances.max()) < DISTANCE_TOLERANCE
    return int(np.argmax(within))


def _run(working: WorkingSet, seeds: Sequence[Color], num_ks: int) -> RunResult:
    """Refine from the first ``num_ks`` seeds."""
    max_ks = min(num_ks, len(seeds))
    clusters, wcss = refine(tuple(seeds[:max_ks]), working)
    return RunResult(ks=num_ks, clusters=clusters, wcss=wcss)


def _resolve_rng(
    seed: Optional[int],
    rng: Optional[np.random.Generator],
) -> np.random.Generator:
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


class ImageKmeans:
    """
    K-means palette session for one image.

    Example:
        >>> km = ImageKmeans("photo.png", seed=7)
        >>> result = km.with_derived_k_number()
        >>> result.ks, result.hex_colors
        (4, ('#1B2A3C', '#E8E2D4', '#7A5B3E', '#C23B22'))
    """

    def __init__(
        self,
        image: ImageSource,
        *,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Args:
            image: Any source accepted by ``load_colors``
            seed: Seed for a fresh ``numpy.random.default_rng``
            rng: Generator to use instead (``seed`` is then ignored)
        """
        colors = load_colors(image)
        colors.setflags(write=False)
        self._colors: NDArray[np.int64] = colors
        self._rng = _resolve_rng(seed, rng)
        self._working: Optional[WorkingSet] = None
        self._initial_ks: tuple[Color, ...] = ()
        self._results: tuple[RunResult, ...] = ()

    @property
    def colors(self) -> NDArray[np.int64]:
        """Read-only (N, 3) array of the image's pixel colors."""
        return self._colors

    @property
    def working_set(self) -> Optional[WorkingSet]:
        """Working set of the last call (None before the first call)."""
        return self._working

    @property
    def initial_ks(self) -> tuple[Color, ...]:
        """Seed list of the last call."""
        return self._initial_ks

    @property
    def results(self) -> tuple[RunResult, ...]:
        """Results of the last call: one for fixed k, the whole sweep for derived k."""
        return self._results

    def with_fixed_k_number(
        self,
        k_number: int,
        init_method: InitMethod = InitMethod.KMEANS_PLUS_PLUS,
        config: Optional[Config] = None,
    ) -> RunResult:
        """
        Cluster into ``k_number`` colors.

        When the working set has fewer distinct colors than ``k_number``
        the result holds fewer clusters.

        Raises:
            InvalidInputError: If ``k_number`` < 1.
        """
        if k_number < 1:
            raise InvalidInputError(f"k must be >= 1, got {k_number}")

        start = time.perf_counter()
        working = self._set_working_colors(config)

        if k_number > len(working):
            logger.warning(
                "Requested k=%d but only %d distinct working colors; "
                "returning fewer clusters",
                k_number, len(working),
            )

        self._initial_ks = seed_centers(working, k_number, init_method, self._rng)
        result = _run(working, self._initial_ks, k_number)
        self._results = (result,)

        logger.debug(
            "Fixed k=%d run finished in %.1f ms (wcss=%.1f)",
            k_number, (time.perf_counter() - start) * 1000, result.wcss,
        )
        return result

    def with_derived_k_number(
        self,
        init_method: InitMethod = InitMethod.KMEANS_PLUS_PLUS,
        config: Optional[Config] = None,
    ) -> RunResult:
        """
        Run k = 1..10 and return the run at the elbow of the WCSS curve.

        Seeds are drawn once for k = 10; the run for k = i uses the first
        ``i`` of them. The full sweep is kept in ``results``.

        Greedy seeding spreads the first few seeds across distinct clusters,
        so the knee lands on the natural cluster count. Uniform seeding can
        put two early seeds in one cluster, which flattens the curve and may
        place the elbow a step or two past the knee.
        """
        start = time.perf_counter()
        working = self._set_working_colors(config)

        self._initial_ks = seed_centers(working, MAX_DERIVED_K, init_method, self._rng)
        self._results = sweep_k(working, self._initial_ks, MAX_DERIVED_K)

        best = select_elbow([r.wcss for r in self._results])
        result = self._results[best]

        logger.debug(
            "Derived k=%d from sweep in %.1f ms",
            result.ks, (time.perf_counter() - start) * 1000,
        )
        return result

    def _set_working_colors(self, config: Optional[Config]) -> WorkingSet:
        self._working = build_working_set(self._colors, config)
        return self._working


def run_fixed_k(
    image: ImageSource,
    k: int,
    *,
    init_method: InitMethod = InitMethod.KMEANS_PLUS_PLUS,
    config: Optional[Config] = None,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> RunResult:
    """One fixed-k run on a fresh session."""
    session = ImageKmeans(image, seed=seed, rng=rng)
    return session.with_fixed_k_number(k, init_method, config)


def run_derived_k(
    image: ImageSource,
    *,
    init_method: InitMethod = InitMethod.KMEANS_PLUS_PLUS,
    config: Optional[Config] = None,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> RunResult:
    """One auto-k run on a fresh session."""
    session = ImageKmeans(image, seed=seed, rng=rng)
    return session.with_derived_k_number(init_method, config)
