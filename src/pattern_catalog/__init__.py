"""Pattern Catalog - Root Package.

An educational catalogue of classic object-oriented design patterns. Every
pattern is a small, self-contained demo that exercises one capability
interface through two or more variants and produces a deterministic trace.

Key Components:
    - domain: Demo value objects, trace collector and exception taxonomy
    - patterns: Behavioral, Creational and Structural demos
    - registry: The ordered pattern catalog and its registration functions
    - config: Configuration schemas and loading
    - infrastructure: Logging setup
    - cli: Command-line entry point and output formatters

Usage:
    The catalogue is typically used through the command-line interface:

    >>> pattern-catalog
    >>> pattern-catalog run observer state
    >>> pattern-catalog list --format table
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME
