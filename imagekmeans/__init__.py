# Copyright (c) 2026 image-kmeans contributors
# SPDX-License-Identifier: MIT

"""
image-kmeans -- k-means color palette extraction for images.

Clusters an image's pixel colors into k representative colors, each one a
color that actually occurs in the image, and can pick k itself from the
elbow of the WCSS curve.

Quick start::

    from imagekmeans import extract_palette

    result = extract_palette("image.png")        # k chosen automatically
    result = extract_palette("image.png", k=5)   # fixed k
    result.hex_colors
    result.to_json()
"""

from __future__ import annotations

import logging

__version__ = "2.0.0"

from imagekmeans.cluster import ImageKmeans, extract_palette
from imagekmeans.errors import ImageKmeansError, InvalidInputError
from imagekmeans.schema import (
    Color,
    Config,
    InitMethod,
    RunResult,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "extract_palette",
    "ImageKmeans",
    "RunResult",
    # Types (commonly needed)
    "Color",
    "Config",
    "InitMethod",
    # Errors
    "ImageKmeansError",
    "InvalidInputError",
    # Version
    "__version__",
]
