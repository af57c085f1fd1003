"""Flyweight: one shared developer per language."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List

from pattern_catalog.domain.demo import Trace

SUMMARY = (
    "The flyweight pattern is used to minimize memory usage or computational "
    "expenses by sharing as much as possible with other similar objects."
)


class Developer(ABC):
    @abstractmethod
    def write_code(self) -> str:
        pass


class SwiftDeveloper(Developer):
    def write_code(self) -> str:
        return "Swift Developer writes Swift code..."


class ObjCDeveloper(Developer):
    def write_code(self) -> str:
        return "ObjC Developer writes Objective-C code..."


class Language(str, Enum):
    SWIFT = "Swift"
    OBJC = "ObjC"


_DEVELOPER_TYPES = {
    Language.SWIFT: SwiftDeveloper,
    Language.OBJC: ObjCDeveloper,
}


class DeveloperFactory:
    """Hands out cached developers, hiring only on the first request per language."""

    def __init__(self, trace: Trace):
        self.trace = trace
        self._developers: Dict[Language, Developer] = {}

    def developer(self, language: Language) -> Developer:
        if language not in self._developers:
            self.trace.emit(f"Hiring {language.value} developer")
            self._developers[language] = _DEVELOPER_TYPES[language]()
        return self._developers[language]

    @property
    def hired_count(self) -> int:
        return len(self._developers)


def run() -> List[str]:
    trace = Trace()
    factory = DeveloperFactory(trace)

    developers = [factory.developer(Language.SWIFT) for _ in range(3)]
    developers += [factory.developer(Language.OBJC) for _ in range(3)]

    for developer in developers:
        trace.emit(developer.write_code())
    return trace.lines
