# Copyright (c) 2026 image-kmeans contributors
# SPDX-License-Identifier: MIT

"""
Clustering core for image-kmeans.

Working-set construction, seeding, refinement and k selection.
Everything here operates on integer RGB colors; no color-space conversion.
"""

from imagekmeans.cluster.extract import extract_palette
from imagekmeans.cluster.orchestrator import (
    ImageKmeans,
    run_derived_k,
    run_fixed_k,
    select_elbow,
)
from imagekmeans.cluster.source import load_colors
from imagekmeans.cluster.working_set import WorkingSet, build_working_set

__all__ = [
    "extract_palette",
    "ImageKmeans",
    "run_fixed_k",
    "run_derived_k",
    "select_elbow",
    "load_colors",
    "WorkingSet",
    "build_working_set",
]
