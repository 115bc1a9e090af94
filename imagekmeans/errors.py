# Copyright (c) 2026 image-kmeans contributors
# SPDX-License-Identifier: MIT

"""
Exception types raised by image-kmeans.

Input problems subclass ``ValueError`` so callers catching the built-in
still see them. Degenerate-but-recoverable situations (fewer distinct colors
than requested clusters, zero distance mass while seeding) are handled where
they occur and are only logged.
"""


class ImageKmeansError(Exception):
    """Base class for all image-kmeans errors."""


class InvalidInputError(ImageKmeansError, ValueError):
    """The caller supplied input the engine cannot cluster.

    Raised for an empty color source, a non-positive ``k`` on a fixed-k
    request, a ``top_num`` below 1, or a pixel array of the wrong shape.
    """
