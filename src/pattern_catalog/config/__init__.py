"""Configuration package."""

from .manager import ConfigurationManager
from .schemas import (
    AppConfig,
    CatalogConfig,
    LogDestination,
    LoggingConfig,
    LogLevel,
    OutputFormat,
)

__all__ = [
    "AppConfig",
    "CatalogConfig",
    "ConfigurationManager",
    "LogDestination",
    "LogLevel",
    "LoggingConfig",
    "OutputFormat",
]
