"""Abstract Factory: assembling a project team from one family."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List

SUMMARY = (
    "The abstract factory pattern is used to provide a client with a set of "
    "related or dependant objects. The \"family\" of objects created by the "
    "factory are determined at run-time."
)


class Developer(ABC):
    @abstractmethod
    def write_code(self) -> str:
        pass


class Tester(ABC):
    @abstractmethod
    def test_code(self) -> str:
        pass


class ProjectManager(ABC):
    @abstractmethod
    def manage_project(self) -> str:
        pass


class ProjectTeamFactory(ABC):
    @abstractmethod
    def developer(self) -> Developer:
        pass

    @abstractmethod
    def tester(self) -> Tester:
        pass

    @abstractmethod
    def project_manager(self) -> ProjectManager:
        pass


# Banking family

class SwiftDeveloper(Developer):
    def write_code(self) -> str:
        return "Swift developer writes banking code in Swift..."


class QATester(Tester):
    def test_code(self) -> str:
        return "QA tester tests banking code..."


class BankingPM(ProjectManager):
    def manage_project(self) -> str:
        return "BankingPM manages banking project..."


class BankingTeamFactory(ProjectTeamFactory):
    def developer(self) -> Developer:
        return SwiftDeveloper()

    def tester(self) -> Tester:
        return QATester()

    def project_manager(self) -> ProjectManager:
        return BankingPM()


# Website family

class PhpDeveloper(Developer):
    def write_code(self) -> str:
        return "Php developer writes website code in php..."


class ManualTester(Tester):
    def test_code(self) -> str:
        return "Manual tester tests website..."


class WebsitePM(ProjectManager):
    def manage_project(self) -> str:
        return "WebsitePM manages website project..."


class WebsiteTeamFactory(ProjectTeamFactory):
    def developer(self) -> Developer:
        return PhpDeveloper()

    def tester(self) -> Tester:
        return ManualTester()

    def project_manager(self) -> ProjectManager:
        return WebsitePM()


class ProjectFamily(str, Enum):
    BANK = "bank"
    WEBSITE = "website"

    @property
    def project_name(self) -> str:
        return _PROJECT_NAMES[self]

    def factory(self) -> ProjectTeamFactory:
        return _FACTORIES[self]()


_PROJECT_NAMES = {
    ProjectFamily.BANK: "Bank business online",
    ProjectFamily.WEBSITE: "Auction site",
}

_FACTORIES = {
    ProjectFamily.BANK: BankingTeamFactory,
    ProjectFamily.WEBSITE: WebsiteTeamFactory,
}


def team_output(family: ProjectFamily) -> List[str]:
    """What the developer, tester and manager of one family report."""
    factory = family.factory()
    return [
        factory.developer().write_code(),
        factory.tester().test_code(),
        factory.project_manager().manage_project(),
    ]


def create_project(family: ProjectFamily) -> List[str]:
    return [f"Creating project {family.project_name}"] + team_output(family)


def run() -> List[str]:
    return create_project(ProjectFamily.BANK) + create_project(ProjectFamily.WEBSITE)
