"""Tests for demo value objects and the trace collector."""

from dataclasses import FrozenInstanceError

import pytest

from pattern_catalog.domain.demo import DemoResult, PatternCategory, PatternDemo, Trace


def test_trace_collects_lines_in_order():
    trace = Trace()

    trace.emit("first")
    trace.blank()
    trace.emit("second")

    assert trace.lines == ["first", "", "second"]
    assert len(trace) == 3


def test_trace_splits_multiline_text():
    trace = Trace()

    trace.emit("a\nb\n")

    assert list(trace) == ["a", "b", ""]


def test_trace_lines_is_a_copy():
    trace = Trace()
    trace.emit("x")

    trace.lines.append("y")

    assert trace.lines == ["x"]


def test_pattern_demo_title_and_dict():
    demo = PatternDemo(
        name="chain-of-responsibility",
        run=lambda: [],
        category=PatternCategory.BEHAVIORAL,
        summary="Handlers in a chain",
    )

    assert demo.title == "Chain Of Responsibility"
    assert demo.to_dict() == {
        "name": "chain-of-responsibility",
        "title": "Chain Of Responsibility",
        "category": "behavioral",
        "summary": "Handlers in a chain",
    }


def test_pattern_demo_is_immutable():
    demo = PatternDemo(name="state", run=lambda: [])

    with pytest.raises(FrozenInstanceError):
        demo.name = "other"


def test_demo_result_to_dict():
    result = DemoResult(name="proxy", category=PatternCategory.STRUCTURAL, lines=("a", "b"))

    assert result.title == "Proxy"
    assert result.to_dict() == {"name": "proxy", "category": "structural", "lines": ["a", "b"]}


def test_categories_in_presentation_order():
    assert [category.value for category in PatternCategory] == ["behavioral", "creational", "structural"]
    assert PatternCategory.CREATIONAL.display_name == "Creational"
    assert all(category.description for category in PatternCategory)
