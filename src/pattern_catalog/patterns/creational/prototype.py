"""Prototype: cloning a project instead of constructing it again."""

import copy
from dataclasses import dataclass
from typing import List

SUMMARY = (
    "The prototype pattern is used to instantiate a new object by copying all "
    "of the properties of an existing object, creating an independent clone. "
    "This practise is particularly useful when the construction of a new "
    "object is inefficient."
)


@dataclass
class Project:
    id: int
    name: str
    source: str

    def clone(self) -> "Project":
        return copy.copy(self)

    def describe(self) -> str:
        return f"Project #{self.id} {self.name}: {self.source}"


class ProjectFactory:
    def __init__(self, project: Project):
        self.project = project

    def clone_project(self) -> Project:
        return self.project.clone()


def run() -> List[str]:
    master = Project(id=1, name="Playground.swift", source="let sourceCode = SourceCode()")
    factory = ProjectFactory(master)
    clone = factory.clone_project()
    clone.name = "Playground copy.swift"

    return [
        f"Master: {master.describe()}",
        f"Clone: {clone.describe()}",
        f"Clone is a separate object: {clone is not master}",
    ]
