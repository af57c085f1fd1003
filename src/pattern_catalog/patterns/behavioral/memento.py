"""Memento: saving a project and rolling it back."""

from dataclasses import dataclass
from typing import List

from pattern_catalog.domain.demo import Trace

SUMMARY = (
    "The memento pattern is used to capture the current state of an object "
    "and store it in such a manner that it can be restored at a later time "
    "without breaking the rules of encapsulation."
)


@dataclass(frozen=True)
class Save:
    version: str
    code: str


class Project:
    def __init__(self, version: str, code: str):
        self.version = version
        self.code = code

    def save(self) -> Save:
        return Save(version=self.version, code=self.code)

    def load(self, save: Save) -> None:
        self.version = save.version
        self.code = save.code

    def description(self) -> str:
        return f"Project version = {self.version}: \n'{self.code}'\n"


class GithubRepo:
    """Caretaker: keeps a save without looking inside it."""

    def __init__(self, save: Save):
        self.save = save


def run() -> List[str]:
    trace = Trace()

    trace.emit("Creating new project. Version 1.0")
    project = Project(version="1.0", code="let index = 0")
    trace.emit(project.description())

    trace.emit("Saving current version to github")
    github = GithubRepo(project.save())

    trace.emit("Updating project to Version 1.1")
    trace.emit("Writing poor code...")
    trace.emit("Set version 1.1")
    project.version = "1.1"
    project.code = "let index = 0\nindex = 5"
    trace.emit(project.description())

    trace.emit("Something went wrong")
    trace.emit("Rolling back to Version 1.0")
    project.load(github.save)
    trace.emit("Project after rollback")
    trace.emit(project.description())
    return trace.lines
