"""Pattern catalog registry."""

from .pattern_registry import PatternCatalog
from .registration import create_default_catalog

__all__ = [
    "PatternCatalog",
    "create_default_catalog",
]
