# Copyright (c) 2026 image-kmeans contributors
# SPDX-License-Identifier: MIT

"""
Schema definitions for k-means runs.

All types in this module are immutable (frozen dataclasses).
Once a run result is produced it is superseded, never altered.
"""

from imagekmeans.schema.run_result import (
    FALLBACK_COLOR,
    Color,
    Config,
    InitMethod,
    RunResult,
)

__all__ = [
    # Core types
    "Color",
    "FALLBACK_COLOR",
    # Run configuration
    "Config",
    "InitMethod",
    # Run output
    "RunResult",
]
