# Copyright (c) 2026 image-kmeans contributors
# SPDX-License-Identifier: MIT

"""
Delivery runtime for image-kmeans.

Serialization of RunResult data for reports and logs.
The delivery layer never modifies result content.
"""

from imagekmeans.runtime.serializers import BlockFormat, to_context_block

__all__ = [
    "to_context_block",
    "BlockFormat",
]
