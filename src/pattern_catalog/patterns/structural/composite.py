"""Composite: a team treated like the developers it contains."""

from abc import ABC, abstractmethod
from typing import List

SUMMARY = (
    "The composite pattern is used to create hierarchical, recursive tree "
    "structures of related objects where any element of the structure may be "
    "accessed and utilised in a standard manner."
)


class Developer(ABC):
    @abstractmethod
    def write_code(self) -> List[str]:
        pass


class SwiftDeveloper(Developer):
    def write_code(self) -> List[str]:
        return ["Swift Developer writes Swift code..."]


class ObjCDeveloper(Developer):
    def write_code(self) -> List[str]:
        return ["ObjC Developer writes Objective-C code..."]


class Team(Developer):
    """A team is itself a Developer, so teams can nest."""

    def __init__(self):
        self.developers: List[Developer] = []

    def add_developer(self, developer: Developer) -> None:
        self.developers.append(developer)

    def write_code(self) -> List[str]:
        lines = []
        for developer in self.developers:
            lines.extend(developer.write_code())
        return lines

    def create_project(self) -> List[str]:
        return self.write_code()


class BankTeam(Team):
    pass


def run() -> List[str]:
    team = BankTeam()
    for _ in range(4):
        team.add_developer(ObjCDeveloper())
    team.add_developer(SwiftDeveloper())
    return team.create_project()
