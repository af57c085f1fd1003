"""Configuration schemas package."""

from .app_schema import AppConfig
from .catalog_schema import CatalogConfig, OutputFormat
from .logging_schema import LogDestination, LoggingConfig, LogLevel

__all__ = [
    "AppConfig",
    "CatalogConfig",
    "LogDestination",
    "LogLevel",
    "LoggingConfig",
    "OutputFormat",
]
