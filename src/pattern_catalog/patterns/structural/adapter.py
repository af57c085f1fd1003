"""Adapter: exposing an app's object API as a database interface."""

from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.domain.demo import Trace

SUMMARY = (
    "The adapter pattern is used to provide a link between two otherwise "
    "incompatible types by wrapping the \"adaptee\" with a class that supports "
    "the interface required by the client."
)


class Database(ABC):
    @abstractmethod
    def insert(self) -> None:
        pass

    @abstractmethod
    def update(self) -> None:
        pass

    @abstractmethod
    def select(self) -> None:
        pass

    @abstractmethod
    def remove(self) -> None:
        pass


class SwiftApp:
    """Adaptee with its own vocabulary."""

    def __init__(self, trace: Trace):
        self.trace = trace

    def save_object(self) -> None:
        self.trace.emit("Saving Swift Object...")

    def update_object(self) -> None:
        self.trace.emit("Updating Swift Object...")

    def load_object(self) -> None:
        self.trace.emit("Loading Swift Object...")

    def delete_object(self) -> None:
        self.trace.emit("Deleting Swift Object...")


class SwiftAppDatabaseAdapter(Database):
    def __init__(self, app: SwiftApp):
        self.app = app

    def insert(self) -> None:
        self.app.save_object()

    def update(self) -> None:
        self.app.update_object()

    def select(self) -> None:
        self.app.load_object()

    def remove(self) -> None:
        self.app.delete_object()


class DatabaseManager:
    def __init__(self, database: Database):
        self.database = database

    def run(self) -> None:
        self.database.insert()
        self.database.update()
        self.database.select()
        self.database.remove()


def run() -> List[str]:
    trace = Trace()
    DatabaseManager(SwiftAppDatabaseAdapter(SwiftApp(trace))).run()
    return trace.lines
