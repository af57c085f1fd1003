import pytest

from pattern_catalog.domain.demo import PatternCategory
from pattern_catalog.registry import PatternCatalog, create_default_catalog


@pytest.fixture
def empty_catalog():
    return PatternCatalog()


@pytest.fixture
def default_catalog():
    return create_default_catalog()


@pytest.fixture
def sample_catalog():
    """Catalog with two trivial demos, unsealed."""
    catalog = PatternCatalog()
    catalog.register("first", lambda: ["one", "two"], category=PatternCategory.BEHAVIORAL)
    catalog.register("second", lambda: ["three"], category=PatternCategory.STRUCTURAL)
    return catalog
