# Copyright (c) 2026 image-kmeans contributors
# SPDX-License-Identifier: MIT

"""
Main palette extraction API.

This is the primary entry point for image-kmeans.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from imagekmeans.schema import Config, InitMethod, RunResult
from imagekmeans.cluster.orchestrator import ImageKmeans
from imagekmeans.cluster.source import ImageSource


def extract_palette(
    image: ImageSource,
    *,
    k: Optional[int] = None,  # None = derive k from the WCSS elbow
    init_method: InitMethod = InitMethod.KMEANS_PLUS_PLUS,
    quantize_fact: Optional[int] = None,  # None/1 = exact colors
    top_num: Optional[int] = None,  # None = cluster every distinct color
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> RunResult:
    """
    Extract a k-means color palette from an image.

    Args:
        image: One of:
            - Path to an image file (str or Path), decoded with Pillow
            - NumPy array of shape (H, W, 3), (H, W, 4) or (N, 3)
            - Sequence of Color or (r, g, b) triples
        k: Number of palette colors. When None, k = 1..10 are all tried
            and the run at the elbow of the WCSS curve is returned.
        init_method: Seeding strategy (default: KMEANS_PLUS_PLUS)
        quantize_fact: Reduce channel precision by this factor before
            clustering. Values <= 0 are treated as 1.
        top_num: Only cluster the most frequent ``top_num`` colors.
            Bounds cost on large photos and keeps rare noise out of seeding.
        seed: Seed for reproducible runs
        rng: Generator to use instead of ``seed``

    Returns:
        RunResult whose clusters are real image colors (after quantization)

    Example:
        >>> from imagekmeans import extract_palette
        >>> result = extract_palette("image.png", k=5, seed=1)
        >>> result.hex_colors
        ('#F6C767', '#1D2B53', '#FFFFFF', '#7E2553', '#008751')
    """
    config = Config(quantize_fact=quantize_fact, top_num=top_num)
    session = ImageKmeans(image, seed=seed, rng=rng)

    if k is None:
        return session.with_derived_k_number(init_method, config)
    return session.with_fixed_k_number(k, init_method, config)
