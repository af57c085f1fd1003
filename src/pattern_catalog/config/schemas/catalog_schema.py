"""Catalog presentation configuration schema."""
from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator

from pattern_catalog.domain.demo.value_objects import PatternCategory


class OutputFormat(str, Enum):
    """Output format enumeration."""
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"


class CatalogConfig(BaseModel):
    """How demos are selected and presented."""

    output_format: OutputFormat = Field(OutputFormat.TEXT, description="Default output format")
    show_headers: bool = Field(True, description="Print a header line before each demo")
    categories: List[PatternCategory] = Field(
        default_factory=lambda: list(PatternCategory),
        description="Pattern families included when running everything",
    )

    @field_validator("categories")
    @classmethod
    def validate_categories(cls, v: List[PatternCategory]) -> List[PatternCategory]:
        """Keep presentation order and drop duplicates."""
        if not v:
            raise ValueError("At least one category must be enabled")
        return [category for category in PatternCategory if category in v]
