"""Factory Method: hiring a developer by language."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List

SUMMARY = (
    "The factory pattern is used to replace class constructors, abstracting "
    "the process of object generation so that the type of the object "
    "instantiated can be determined at run-time."
)


class Developer(ABC):
    @abstractmethod
    def write_code(self) -> str:
        pass


class ObjCDeveloper(Developer):
    def write_code(self) -> str:
        return "ObjC developer writes Objective C code..."


class SwiftDeveloper(Developer):
    def write_code(self) -> str:
        return "Swift developer writes Swift code..."


class DeveloperFactory(ABC):
    @abstractmethod
    def new_developer(self) -> Developer:
        pass


class ObjCDeveloperFactory(DeveloperFactory):
    def new_developer(self) -> Developer:
        return ObjCDeveloper()


class SwiftDeveloperFactory(DeveloperFactory):
    def new_developer(self) -> Developer:
        return SwiftDeveloper()


class Language(str, Enum):
    OBJC = "objc"
    SWIFT = "swift"

    def factory(self) -> DeveloperFactory:
        if self is Language.OBJC:
            return ObjCDeveloperFactory()
        return SwiftDeveloperFactory()


def run() -> List[str]:
    lines = []
    for language in (Language.SWIFT, Language.OBJC):
        developer = language.factory().new_developer()
        lines.append(developer.write_code())
    return lines
