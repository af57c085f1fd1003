"""Proxy: a placeholder that loads the real project on first use."""

from abc import ABC, abstractmethod
from typing import List, Optional

from pattern_catalog.domain.demo import Trace

SUMMARY = (
    "The proxy pattern is used to provide a surrogate or placeholder object, "
    "which references an underlying object."
)


class Project(ABC):
    @abstractmethod
    def run(self) -> None:
        pass


class RealProject(Project):
    def __init__(self, url: str, trace: Trace):
        self.url = url
        self.trace = trace
        self.load()

    def load(self) -> None:
        self.trace.emit(f"Loading project from url {self.url} ...")

    def run(self) -> None:
        self.trace.emit(f"Running project {self.url} ...")


class ProxyProject(Project):
    def __init__(self, url: str, trace: Trace):
        self.url = url
        self.trace = trace
        self.real_project: Optional[RealProject] = None

    def run(self) -> None:
        if self.real_project is None:
            self.real_project = RealProject(self.url, self.trace)
        self.real_project.run()


def run() -> List[str]:
    trace = Trace()
    project = ProxyProject("https://github.com/zsergey/realProject", trace)
    project.run()
    project.run()
    return trace.lines
