# Copyright (c) 2026 image-kmeans contributors
# SPDX-License-Identifier: MIT

"""
Context block serializer for RunResults.

Formats a RunResult as a structured block (XML, JSON, or Markdown) that can
be written into a report or a log next to the image it describes.
"""

from __future__ import annotations

import json
from enum import Enum

from imagekmeans.schema import RunResult


class BlockFormat(Enum):
    """Block format options."""

    XML = "xml"
    JSON = "json"
    MARKDOWN = "markdown"


def to_context_block(
    result: RunResult,
    *,
    format: BlockFormat = BlockFormat.JSON,
    tag_name: str = "palette",
) -> str:
    """Serialize a RunResult as a context block.

    Args:
        result: The RunResult to serialize.
        format: Block format (XML, JSON, or MARKDOWN).
        tag_name: Wrapper tag / key name for the block.

    Returns:
        Formatted block string.

    Example (XML)::

        <palette ks="2" wcss="0.0" source="imagekmeans">
          <color r="0" g="0" b="0" hex="#000000"/>
          <color r="255" g="255" b="255" hex="#FFFFFF"/>
        </palette>
    """
    if format == BlockFormat.XML:
        return _to_xml(result, tag_name)
    elif format == BlockFormat.JSON:
        return _to_json(result, tag_name)
    else:
        return _to_markdown(result, tag_name)


def _to_xml(result: RunResult, tag_name: str) -> str:
    """Generate XML block."""
    lines = [
        f'<{tag_name} ks="{result.ks}" wcss="{result.wcss:.1f}" source="imagekmeans">'
    ]
    for c in result.clusters:
        lines.append(f'  <color r="{c.r}" g="{c.g}" b="{c.b}" hex="{c.hex}"/>')
    lines.append(f"</{tag_name}>")
    return "\n".join(lines)


def _to_json(result: RunResult, tag_name: str) -> str:
    """Generate JSON block with wrapper."""
    data = result.to_dict()
    data["hex"] = list(result.hex_colors)
    return json.dumps({tag_name: data}, indent=2)


def _to_markdown(result: RunResult, tag_name: str) -> str:
    """Generate markdown block with code fence."""
    lines = [
        f"<!-- {tag_name} -->",
        "```json",
        json.dumps(result.to_dict(), indent=2),
        "```",
        f"<!-- /{tag_name} -->",
    ]
    return "\n".join(lines)
