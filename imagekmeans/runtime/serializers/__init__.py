# Copyright (c) 2026 image-kmeans contributors
# SPDX-License-Identifier: MIT

"""
Serializers for RunResult delivery.

All serializers preserve the result exactly -- no rounding of colors,
no reordering of clusters.
"""

from imagekmeans.runtime.serializers.block import BlockFormat, to_context_block

__all__ = [
    "BlockFormat",
    "to_context_block",
]
