"""Package metadata and naming constants."""

PACKAGE_NAME = "pattern-catalog"
__version__ = "1.0.0"
DESCRIPTION = "Catalogue of classic design patterns with runnable demos"

# Environment variable prefix used for configuration overrides
ENV_PREFIX = "PATTERN_CATALOG"
