"""Tests for CLI formatters."""

import json

import yaml

from pattern_catalog.cli.formatters import (
    format_demo_details,
    format_demo_list,
    format_header,
    format_results,
)
from pattern_catalog.domain.demo import DemoResult, PatternCategory, PatternDemo

RESULTS = [
    DemoResult(name="first-demo", category=PatternCategory.BEHAVIORAL, lines=("one", "two")),
    DemoResult(name="second", category=PatternCategory.STRUCTURAL, lines=("three",)),
]

DEMOS = [
    PatternDemo(name="first-demo", run=lambda: [], category=PatternCategory.BEHAVIORAL, summary="First"),
    PatternDemo(name="second", run=lambda: [], category=PatternCategory.STRUCTURAL, summary="Second"),
]


class TestResultFormatting:
    """Test formatting of demo run results."""

    def test_text_with_headers(self):
        output = format_results(RESULTS, "text")

        assert output == "== First Demo ==\none\ntwo\n\n== Second ==\nthree"

    def test_text_without_headers(self):
        output = format_results(RESULTS, "text", show_headers=False)

        assert output == "one\ntwo\n\nthree"

    def test_json(self):
        data = json.loads(format_results(RESULTS, "json"))

        assert data[0] == {"name": "first-demo", "category": "behavioral", "lines": ["one", "two"]}
        assert data[1]["lines"] == ["three"]

    def test_yaml(self):
        data = yaml.safe_load(format_results(RESULTS, "yaml"))

        assert [item["name"] for item in data] == ["first-demo", "second"]

    def test_no_results(self):
        assert format_results([], "text") == ""


class TestListFormatting:
    """Test formatting of the catalog listing."""

    def test_empty_listing(self):
        assert format_demo_list([], "text") == "No pattern demos registered."

    def test_text_listing(self):
        lines = format_demo_list(DEMOS, "text").splitlines()

        assert len(lines) == 2
        assert lines[0].split() == ["first-demo", "behavioral"]
        assert lines[1].split() == ["second", "structural"]

    def test_json_listing(self):
        data = json.loads(format_demo_list(DEMOS, "json"))

        assert data[1] == {"name": "second", "title": "Second", "category": "structural", "summary": "Second"}

    def test_table_listing(self):
        output = format_demo_list(DEMOS, "table")

        assert "Name" in output
        assert "first-demo" in output
        assert "Structural" in output


def test_format_header():
    assert format_header("Proxy") == "== Proxy =="


def test_demo_details_text():
    output = format_demo_details(DEMOS[0], "text")

    assert output.splitlines() == ["== First Demo ==", "Category: Behavioral", "", "First"]


def test_demo_details_yaml():
    data = yaml.safe_load(format_demo_details(DEMOS[1], "yaml"))

    assert data["category"] == "structural"
