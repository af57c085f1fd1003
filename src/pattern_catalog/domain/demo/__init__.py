"""Demo value objects and trace collection."""

from .trace import Trace
from .value_objects import DemoFunction, DemoResult, PatternCategory, PatternDemo

__all__ = [
    "DemoFunction",
    "DemoResult",
    "PatternCategory",
    "PatternDemo",
    "Trace",
]
