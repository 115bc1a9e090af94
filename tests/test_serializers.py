# Copyright (c) 2026 image-kmeans contributors
# SPDX-License-Identifier: MIT

"""Tests for the runtime context block serializer."""

import json

import pytest

from imagekmeans.schema import Color, RunResult
from imagekmeans.runtime import BlockFormat, to_context_block


@pytest.fixture
def result():
    return RunResult(
        ks=3,
        clusters=(Color(0, 0, 0), Color(255, 255, 255)),
        wcss=12.5,
    )


class TestContextBlockXML:

    def test_wrapper_and_colors(self, result):
        block = to_context_block(result, format=BlockFormat.XML)
        lines = block.splitlines()
        assert lines[0] == '<palette ks="3" wcss="12.5" source="imagekmeans">'
        assert '  <color r="0" g="0" b="0" hex="#000000"/>' in lines
        assert '  <color r="255" g="255" b="255" hex="#FFFFFF"/>' in lines
        assert lines[-1] == "</palette>"

    def test_custom_tag(self, result):
        block = to_context_block(result, format=BlockFormat.XML, tag_name="colors")
        assert block.startswith("<colors ")
        assert block.endswith("</colors>")


class TestContextBlockJSON:

    def test_default_is_json(self, result):
        data = json.loads(to_context_block(result))
        assert list(data) == ["palette"]
        assert data["palette"]["ks"] == 3
        assert data["palette"]["hex"] == ["#000000", "#FFFFFF"]

    def test_clusters_preserved(self, result):
        data = json.loads(to_context_block(result, format=BlockFormat.JSON))
        clusters = tuple(Color.from_dict(c) for c in data["palette"]["clusters"])
        assert clusters == result.clusters


class TestContextBlockMarkdown:

    def test_fenced_json(self, result):
        block = to_context_block(result, format=BlockFormat.MARKDOWN)
        lines = block.splitlines()
        assert lines[0] == "<!-- palette -->"
        assert lines[1] == "```json"
        assert lines[-2] == "```"
        assert lines[-1] == "<!-- /palette -->"
        body = json.loads("\n".join(lines[2:-2]))
        assert RunResult.from_dict(body) == result


class TestBlockContent:

    def test_json_block_holds_only_result_data(self, result):
        data = json.loads(to_context_block(result))["palette"]
        assert set(data) == {"ks", "clusters", "wcss", "hex"}

    def test_module_docs_describe_report_use(self):
        from imagekmeans.runtime.serializers import block

        assert "report" in block.__doc__
        assert "prompt" not in block.__doc__.lower()
