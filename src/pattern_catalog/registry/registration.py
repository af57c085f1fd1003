"""Pattern registration functions - one per pattern family.

Families are registered in presentation order: Behavioral, Creational,
Structural.
"""

from types import ModuleType
from typing import Iterable, List, Optional, Sequence, Tuple

from pattern_catalog.domain.demo import PatternCategory
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.patterns.behavioral import (
    chain_of_responsibility,
    command,
    interpreter,
    iterator,
    mediator,
    memento,
    observer,
    state,
    strategy,
    template_method,
    visitor,
)
from pattern_catalog.patterns.creational import (
    abstract_factory,
    builder,
    factory_method,
    prototype,
    singleton,
)
from pattern_catalog.patterns.structural import (
    adapter,
    bridge,
    composite,
    decorator,
    facade,
    flyweight,
    proxy,
)
from pattern_catalog.registry.pattern_registry import PatternCatalog

DemoModules = Sequence[Tuple[str, ModuleType]]

BEHAVIORAL_DEMOS: DemoModules = (
    ("chain-of-responsibility", chain_of_responsibility),
    ("command", command),
    ("interpreter", interpreter),
    ("iterator", iterator),
    ("mediator", mediator),
    ("memento", memento),
    ("observer", observer),
    ("state", state),
    ("strategy", strategy),
    ("template-method", template_method),
    ("visitor", visitor),
)

CREATIONAL_DEMOS: DemoModules = (
    ("abstract-factory", abstract_factory),
    ("builder", builder),
    ("factory-method", factory_method),
    ("prototype", prototype),
    ("singleton", singleton),
)

STRUCTURAL_DEMOS: DemoModules = (
    ("adapter", adapter),
    ("bridge", bridge),
    ("composite", composite),
    ("decorator", decorator),
    ("facade", facade),
    ("flyweight", flyweight),
    ("proxy", proxy),
)



def _register_modules(catalog: PatternCatalog,
                      category: PatternCategory,
                      demos: DemoModules) -> List[str]:
    for name, module in demos:
        catalog.register(name, module.run, category=category, summary=module.SUMMARY)
    return [name for name, _ in demos]


def register_behavioral_patterns(catalog: PatternCatalog) -> List[str]:
    """Register Behavioral demos."""
    return _register_modules(catalog, PatternCategory.BEHAVIORAL, BEHAVIORAL_DEMOS)


def register_creational_patterns(catalog: PatternCatalog) -> List[str]:
    """Register Creational demos."""
    return _register_modules(catalog, PatternCategory.CREATIONAL, CREATIONAL_DEMOS)


def register_structural_patterns(catalog: PatternCatalog) -> List[str]:
    """Register Structural demos."""
    return _register_modules(catalog, PatternCategory.STRUCTURAL, STRUCTURAL_DEMOS)


_REGISTRARS = {
    PatternCategory.BEHAVIORAL: register_behavioral_patterns,
    PatternCategory.CREATIONAL: register_creational_patterns,
    PatternCategory.STRUCTURAL: register_structural_patterns,
}


def create_default_catalog(categories: Optional[Iterable[PatternCategory]] = None) -> PatternCatalog:
    """
    Build and seal the catalog.

    Args:
        categories: Families to include. Defaults to all of them. Presentation
            order is always Behavioral, Creational, Structural.

    Returns:
        Sealed PatternCatalog
    """
    selected = set(categories) if categories is not None else set(PatternCategory)
    catalog = PatternCatalog()

    for category in PatternCategory:
        if category in selected:
            _REGISTRARS[category](catalog)

    catalog.seal()
    get_logger(__name__).debug("Pattern catalog built", demo_count=len(catalog))
    return catalog
