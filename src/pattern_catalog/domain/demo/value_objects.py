# src/pattern_catalog/domain/demo/value_objects.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Tuple

DemoFunction = Callable[[], List[str]]


def title_for(name: str) -> str:
    """Display title for a kebab-case demo name ('factory-method' -> 'Factory Method')."""
    return " ".join(part.capitalize() for part in name.split("-"))


class PatternCategory(str, Enum):
    """Pattern family enumeration, in presentation order."""
    BEHAVIORAL = "behavioral"
    CREATIONAL = "creational"
    STRUCTURAL = "structural"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def description(self) -> str:
        return _CATEGORY_DESCRIPTIONS[self]


_CATEGORY_DESCRIPTIONS = {
    PatternCategory.BEHAVIORAL: (
        "Behavioral design patterns identify common communication patterns "
        "between objects and realize these patterns, increasing flexibility "
        "in carrying out this communication."
    ),
    PatternCategory.CREATIONAL: (
        "Creational design patterns deal with object creation mechanisms, "
        "trying to create objects in a manner suitable to the situation."
    ),
    PatternCategory.STRUCTURAL: (
        "Structural design patterns ease the design by identifying a simple "
        "way to realize relationships between entities."
    ),
}


@dataclass(frozen=True)
class PatternDemo:
    """A named, runnable demonstration of one design pattern."""
    name: str
    run: DemoFunction = field(compare=False)
    category: PatternCategory = PatternCategory.BEHAVIORAL
    summary: str = ""

    @property
    def title(self) -> str:
        return title_for(self.name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "category": self.category.value,
            "summary": self.summary,
        }


@dataclass(frozen=True)
class DemoResult:
    """Captured output of a single demo run."""
    name: str
    category: PatternCategory
    lines: Tuple[str, ...] = ()

    @property
    def title(self) -> str:
        return title_for(self.name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "category": self.category.value,
            "lines": list(self.lines),
        }
