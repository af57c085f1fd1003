"""Pattern Registry - ordered catalog of runnable pattern demos.

This module implements the registry pattern for demo lookup: demos are
registered once under a unique name, kept in presentation order, and run by
name or all together.
"""

import threading
from typing import Callable, Dict, Iterator, List, Optional

from pattern_catalog.domain.core.exceptions import (
    CatalogSealedError,
    DuplicateNameError,
    NotFoundError,
)
from pattern_catalog.domain.demo import DemoFunction, DemoResult, PatternCategory, PatternDemo
from pattern_catalog.infrastructure.logging.logger import get_logger

LineWriter = Callable[[str], None]


class PatternCatalog:
    """
    Registry of pattern demos keyed by name.

    Insertion order is presentation order. Once sealed the catalog accepts no
    further registrations, and nothing is ever removed.
    """

    def __init__(self):
        """Initialize an empty, unsealed catalog."""
        self._demos: Dict[str, PatternDemo] = {}
        self._sealed = False
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    def register(self,
                 name: str,
                 run: DemoFunction,
                 category: PatternCategory = PatternCategory.BEHAVIORAL,
                 summary: str = "") -> PatternDemo:
        """
        Register a demo under a unique name.

        Args:
            name: Identifier for the demo (e.g., 'observer', 'factory-method')
            run: Zero-argument callable returning the demo's output lines
            category: Pattern family the demo belongs to
            summary: One-paragraph description of the pattern

        Returns:
            The registered PatternDemo

        Raises:
            DuplicateNameError: If name is already registered
            CatalogSealedError: If the catalog has been sealed
        """
        with self._registration_lock:
            if self._sealed:
                raise CatalogSealedError(name)
            if name in self._demos:
                raise DuplicateNameError(name)

            demo = PatternDemo(name=name, run=run, category=category, summary=summary)
            self._demos[name] = demo
            self._logger.debug("Registered pattern demo", name=name, category=category.value)
            return demo

    def seal(self) -> None:
        """Freeze the catalog; later registrations raise CatalogSealedError."""
        with self._registration_lock:
            self._sealed = True

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def get(self, name: str) -> PatternDemo:
        """
        Get a registered demo.

        Raises:
            NotFoundError: If name is not registered
        """
        demo = self._demos.get(name)
        if demo is None:
            raise NotFoundError(name, available=self.names())
        return demo

    def names(self) -> List[str]:
        """Registered demo names in presentation order."""
        return list(self._demos.keys())

    def by_category(self, category: PatternCategory) -> List[PatternDemo]:
        """Registered demos of one family, in presentation order."""
        return [demo for demo in self._demos.values() if demo.category == category]

    def run(self, name: str, writer: Optional[LineWriter] = None) -> DemoResult:
        """
        Run a single demo by name.

        Args:
            name: Demo identifier
            writer: Optional callable receiving each output line

        Returns:
            DemoResult holding the captured lines

        Raises:
            NotFoundError: If name is not registered
        """
        return self._execute(self.get(name), writer)

    def run_all(self, writer: Optional[LineWriter] = None) -> List[DemoResult]:
        """
        Run every demo in registration order.

        Args:
            writer: Optional callable receiving each output line

        Returns:
            One DemoResult per demo, in presentation order
        """
        return [self._execute(demo, writer) for demo in self._demos.values()]

    def _execute(self, demo: PatternDemo, writer: Optional[LineWriter]) -> DemoResult:
        self._logger.info("Running pattern demo", name=demo.name)
        lines = tuple(demo.run())
        if writer is not None:
            for line in lines:
                writer(line)
        self._logger.debug("Pattern demo finished", name=demo.name, line_count=len(lines))
        return DemoResult(name=demo.name, category=demo.category, lines=lines)

    def __contains__(self, name: object) -> bool:
        return name in self._demos

    def __iter__(self) -> Iterator[PatternDemo]:
        return iter(list(self._demos.values()))

    def __len__(self) -> int:
        return len(self._demos)
