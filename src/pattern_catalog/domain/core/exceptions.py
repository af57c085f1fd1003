# src/pattern_catalog/domain/core/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all catalog errors."""
    pass


class DuplicateNameError(DomainException):
    """Raised when a demo name is registered twice."""
    def __init__(self, name: str):
        super().__init__(f"Pattern demo '{name}' is already registered")
        self.name = name


class NotFoundError(DomainException):
    """Raised when a requested demo is not registered."""
    def __init__(self, name: str, available: Optional[List[str]] = None):
        super().__init__(f"Pattern demo '{name}' not found")
        self.name = name
        self.available = available or []


class CatalogSealedError(DomainException):
    """Raised when registering into a catalog that has been sealed."""
    def __init__(self, name: str):
        super().__init__(f"Cannot register '{name}': catalog is sealed")
        self.name = name


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details
