"""Tests for the default catalog registration."""

import pytest

from pattern_catalog.domain.core.exceptions import CatalogSealedError, DuplicateNameError
from pattern_catalog.domain.demo import PatternCategory
from pattern_catalog.registry import PatternCatalog, create_default_catalog
from pattern_catalog.registry.registration import (
    register_behavioral_patterns,
    register_creational_patterns,
)

BEHAVIORAL = [
    "chain-of-responsibility",
    "command",
    "interpreter",
    "iterator",
    "mediator",
    "memento",
    "observer",
    "state",
    "strategy",
    "template-method",
    "visitor",
]
CREATIONAL = ["abstract-factory", "builder", "factory-method", "prototype", "singleton"]
STRUCTURAL = ["adapter", "bridge", "composite", "decorator", "facade", "flyweight", "proxy"]


def test_default_catalog_contains_all_demos_in_presentation_order(default_catalog):
    assert default_catalog.names() == BEHAVIORAL + CREATIONAL + STRUCTURAL
    assert len(default_catalog) == 23


def test_default_catalog_is_sealed(default_catalog):
    assert default_catalog.is_sealed
    with pytest.raises(CatalogSealedError):
        default_catalog.register("extra", lambda: [])


def test_categories_are_assigned(default_catalog):
    assert [demo.name for demo in default_catalog.by_category(PatternCategory.CREATIONAL)] == CREATIONAL
    assert [demo.name for demo in default_catalog.by_category(PatternCategory.STRUCTURAL)] == STRUCTURAL


def test_every_demo_has_summary(default_catalog):
    for demo in default_catalog:
        assert demo.summary, demo.name
        assert demo.summary.startswith("The "), demo.name


def test_category_selection_keeps_presentation_order():
    catalog = create_default_catalog([PatternCategory.STRUCTURAL, PatternCategory.BEHAVIORAL])

    assert catalog.names() == BEHAVIORAL + STRUCTURAL


def test_registering_a_family_twice_fails():
    catalog = PatternCatalog()
    register_creational_patterns(catalog)

    with pytest.raises(DuplicateNameError):
        register_creational_patterns(catalog)


def test_family_registrar_returns_names():
    catalog = PatternCatalog()

    assert register_behavioral_patterns(catalog) == BEHAVIORAL


def test_run_all_is_idempotent(default_catalog):
    first = default_catalog.run_all()
    second = default_catalog.run_all()

    assert first == second
    assert all(result.lines for result in first)
