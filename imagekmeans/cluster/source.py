# Copyright (c) 2026 image-kmeans contributors
# SPDX-License-Identifier: MIT

"""
Pixel sources.

Turns the inputs callers actually have (an image file, a decoded array,
a list of colors) into the flat (N, 3) RGB array the engine clusters.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from imagekmeans.errors import InvalidInputError
from imagekmeans.schema import Color

ImageSource = Union[str, Path, NDArray, Sequence[Color], Sequence[Sequence[int]]]


def load_colors(image: ImageSource) -> NDArray[np.int64]:
    """
    Flatten an image source into an ordered (N, 3) int64 RGB array.

    Accepts:
        - Path to an image file (str or Path), decoded with Pillow and
          converted to RGB
        - NumPy array of shape (H, W, 3), (H, W, 4) or (N, 3). An alpha
          channel is dropped.
        - Sequence of Color or (r, g, b) triples

    Channel values are not range-checked.

    Raises:
        InvalidInputError: If the source holds no pixels or has a bad shape.
        TypeError: If the source type is not supported.
    """
    if isinstance(image, (str, Path)):
        pixels = _load_file(image)
    elif isinstance(image, np.ndarray):
        pixels = _from_array(image)
    elif isinstance(image, Sequence):
        pixels = _from_sequence(image)
    else:
        raise TypeError(
            f"Expected file path, numpy array or color sequence, got {type(image)}"
        )

    if len(pixels) == 0:
        raise InvalidInputError("Color source is empty")

    return pixels


def _load_file(path: Union[str, Path]) -> NDArray[np.int64]:
    """Decode an image file with Pillow."""
    try:
        from PIL import Image
    except ImportError as e:
        raise ImportError(
            "Pillow is required for image loading. "
            "Install with: pip install Pillow"
        ) from e

    with Image.open(path) as img:
        if img.mode != "RGB":
            img = img.convert("RGB")
        pixels = np.array(img, dtype=np.uint8)

    return pixels.reshape(-1, 3).astype(np.int64)


def _from_array(pixels: NDArray) -> NDArray[np.int64]:
    if pixels.ndim == 3 and pixels.shape[2] in (3, 4):
        flat = pixels.reshape(-1, pixels.shape[2])
    elif pixels.ndim == 2 and pixels.shape[1] in (3, 4):
        flat = pixels
    else:
        raise InvalidInputError(
            f"Expected (H, W, 3), (H, W, 4) or (N, 3) array, got shape {pixels.shape}"
        )
    return np.array(flat[:, :3], dtype=np.int64)


def _from_sequence(colors: Sequence) -> NDArray[np.int64]:
    if len(colors) == 0:
        return np.empty((0, 3), dtype=np.int64)

    rows = [c.as_tuple() if isinstance(c, Color) else tuple(c) for c in colors]
    if any(len(row) != 3 for row in rows):
        raise InvalidInputError("Every color must have exactly 3 channels")
    return np.array(rows, dtype=np.int64)
