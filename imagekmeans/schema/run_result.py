# Copyright (c) 2026 image-kmeans contributors
# SPDX-License-Identifier: MIT

"""
RunResult schema for k-means palette extraction.

Design principles:
- Immutable: All types are frozen dataclasses
- Structural: Colors compare, hash and sort by their channel tuple
- Real colors: Every centroid in a result is a color that occurs in the
  clustered working set (the all-black empty-cluster fallback aside)
- Serializable: JSON-ready, matching the field names ``ks``/``clusters``/``wcss``

RGB only. Channels are integers conceptually in [0, 255]; the range is not
enforced so quantized or synthetic inputs pass through unchanged.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from imagekmeans.errors import InvalidInputError


# =============================================================================
# Core Color Type
# =============================================================================


@dataclass(frozen=True, slots=True, order=True)
class Color:
    """
    A single RGB color.

    Attributes:
        r: Red channel [0-255]
        g: Green channel [0-255]
        b: Blue channel [0-255]
    """
    r: int
    g: int
    b: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        """
        Hex string like "#F6C767".

        Channels outside [0, 255] are clamped for display only.
        """
        r, g, b = (min(255, max(0, int(v))) for v in self.as_tuple())
        return f"#{r:02X}{g:02X}{b:02X}"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """Deserialize from dictionary."""
        return cls(r=int(data["r"]), g=int(data["g"]), b=int(data["b"]))


# Centroid assigned to a cluster that received no colors
FALLBACK_COLOR = Color(0, 0, 0)


# =============================================================================
# Run Configuration
# =============================================================================


class InitMethod(Enum):
    """
    How the initial ``k`` centers are picked from the working colors.
    """
    RANDOM = "random"                      # uniform sample, no repeats
    KMEANS_PLUS_PLUS = "kmeans_plus_plus"  # greedy, distance-weighted


@dataclass(frozen=True)
class Config:
    """Configuration for building the working color set."""

    # Channel values are mapped to floor(v / f) * f before counting.
    # None, 1, or any value <= 0 means no quantization.
    quantize_fact: Optional[int] = None

    # Only cluster the top_num most frequent (quantized) colors.
    # None means all distinct colors.
    top_num: Optional[int] = None

    def __post_init__(self) -> None:
        """Reject a top_num that would leave nothing to cluster."""
        if self.top_num is not None and self.top_num < 1:
            raise InvalidInputError(
                f"top_num must be >= 1 when given, got {self.top_num}"
            )

    @property
    def factor(self) -> int:
        """Effective quantization factor (always >= 1)."""
        if self.quantize_fact is None or self.quantize_fact <= 0:
            return 1
        return int(self.quantize_fact)


# =============================================================================
# Run Result
# =============================================================================


@dataclass(frozen=True, slots=True)
class RunResult:
    """
    Outcome of one k-means run.

    Attributes:
        ks: The number of clusters requested for this run
        clusters: Final centroids, in seed order. May hold fewer than ``ks``
            colors when the working set has fewer distinct colors.
        wcss: Within-cluster sum of squares: squared distance from each
            distinct working color to its centroid, summed over clusters
    """
    ks: int
    clusters: tuple[Color, ...]
    wcss: float

    def __post_init__(self) -> None:
        """Validate result structure."""
        if self.wcss < 0.0:
            raise ValueError(f"wcss must be >= 0, got {self.wcss}")
        if len(self.clusters) > self.ks:
            raise ValueError(
                f"Run for k={self.ks} cannot hold {len(self.clusters)} clusters"
            )

    @property
    def hex_colors(self) -> tuple[str, ...]:
        """Centroids as hex strings, in cluster order."""
        return tuple(c.hex for c in self.clusters)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "ks": self.ks,
            "clusters": [c.to_dict() for c in self.clusters],
            "wcss": self.wcss,
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> RunResult:
        """Deserialize from dictionary."""
        return cls(
            ks=int(data["ks"]),
            clusters=tuple(Color.from_dict(c) for c in data["clusters"]),
            wcss=float(data["wcss"]),
        )

    @classmethod
    def from_json(cls, json_str: str) -> RunResult:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
