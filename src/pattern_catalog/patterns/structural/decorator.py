"""Decorator: a developer's job extended by composed responsibilities."""

from abc import ABC, abstractmethod
from typing import Callable, List, Sequence

SUMMARY = (
    "The decorator pattern is used to extend or alter the functionality of "
    "objects at run-time by wrapping them in an object of a decorator class. "
    "This provides a flexible alternative to using inheritance to modify "
    "behaviour."
)

Enhancement = Callable[[str], str]


class Developer(ABC):
    @abstractmethod
    def make_job(self) -> str:
        pass


class SwiftDeveloper(Developer):
    def make_job(self) -> str:
        return "Write Swift code"


def adds(duty: str) -> Enhancement:
    """Enhancement appending one duty to the job description."""
    def enhance(job: str) -> str:
        return f"{job} & {duty}"
    return enhance


senior_swift_developer = adds("Make code review")
swift_team_lead = adds("Send week report")


class DecoratedDeveloper(Developer):
    """Applies enhancements in order over the wrapped developer's job."""

    def __init__(self, developer: Developer, enhancements: Sequence[Enhancement]):
        self.developer = developer
        self.enhancements = list(enhancements)

    def make_job(self) -> str:
        job = self.developer.make_job()
        for enhance in self.enhancements:
            job = enhance(job)
        return job


def run() -> List[str]:
    developer = DecoratedDeveloper(
        SwiftDeveloper(), [senior_swift_developer, swift_team_lead]
    )
    return [developer.make_job()]
