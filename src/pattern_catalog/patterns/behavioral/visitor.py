"""Visitor: developers of different seniority writing the same project."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from pattern_catalog.domain.demo import Trace

SUMMARY = (
    "The visitor pattern is used to separate a relatively complex set of "
    "structured data classes from the functionality that may be performed "
    "upon the data that they hold."
)


class Developer(ABC):
    """Visitor: one operation per project element type."""

    def __init__(self, trace: Trace):
        self.trace = trace

    @abstractmethod
    def create_class(self, element: "ProjectClass") -> None:
        pass

    @abstractmethod
    def create_database(self, element: "Database") -> None:
        pass

    @abstractmethod
    def create_test(self, element: "Test") -> None:
        pass


class ProjectElement(ABC):
    @abstractmethod
    def be_written(self, developer: Developer) -> None:
        pass


class ProjectClass(ProjectElement):
    def be_written(self, developer: Developer) -> None:
        developer.create_class(self)


class Database(ProjectElement):
    def be_written(self, developer: Developer) -> None:
        developer.create_database(self)


class Test(ProjectElement):
    def be_written(self, developer: Developer) -> None:
        developer.create_test(self)


class Project(ProjectElement):
    def __init__(self, elements: Sequence[ProjectElement] = ()):
        self.elements = list(elements) or [ProjectClass(), Database(), Test()]

    def be_written(self, developer: Developer) -> None:
        for element in self.elements:
            element.be_written(developer)


class JuniorDeveloper(Developer):
    def create_class(self, element: ProjectClass) -> None:
        self.trace.emit("Writing poor class...")

    def create_database(self, element: Database) -> None:
        self.trace.emit("Drop database...")

    def create_test(self, element: Test) -> None:
        self.trace.emit("Creating not reliable test...")


class SeniorDeveloper(Developer):
    def create_class(self, element: ProjectClass) -> None:
        self.trace.emit("Rewriting class after junior...")

    def create_database(self, element: Database) -> None:
        self.trace.emit("Fixing database...")

    def create_test(self, element: Test) -> None:
        self.trace.emit("Creating reliable test...")


def run() -> List[str]:
    trace = Trace()
    project = Project()

    trace.emit("Junior in Action")
    project.be_written(JuniorDeveloper(trace))
    trace.blank()
    trace.emit("Senior in Action")
    project.be_written(SeniorDeveloper(trace))
    return trace.lines
