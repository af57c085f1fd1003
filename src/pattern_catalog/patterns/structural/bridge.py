"""Bridge: programs decoupled from the developers who write them."""

from abc import ABC, abstractmethod
from typing import List

SUMMARY = (
    "The bridge pattern is used to separate the abstract elements of a class "
    "from the implementation details, providing the means to replace the "
    "implementation details without modifying the abstraction."
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


class Program(ABC):
    title = "Program"

    def __init__(self, developer: Developer):
        self.developer = developer

    def develop(self) -> List[str]:
        return [f"{self.title} development in progress...", self.developer.write_code()]


class BankSystem(Program):
    title = "Bank System"


class StockExchange(Program):
    title = "Stock Exchange"


def run() -> List[str]:
    programs: List[Program] = [
        BankSystem(ObjCDeveloper()),
        StockExchange(SwiftDeveloper()),
    ]
    lines = []
    for program in programs:
        lines.extend(program.develop())
    return lines
