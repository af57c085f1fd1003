"""Command: database operations wrapped in command objects."""

from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.domain.demo import Trace

SUMMARY = (
    "The command pattern is used to express a request, including the call to "
    "be made and all of its required parameters, in a command object. The "
    "command may then be executed immediately or held for later use."
)


class Database:
    """Receiver of every command."""

    def __init__(self, trace: Trace):
        self.trace = trace

    def insert(self) -> None:
        self.trace.emit("Inserting record...")

    def update(self) -> None:
        self.trace.emit("Updating record...")

    def select(self) -> None:
        self.trace.emit("Reading record...")

    def delete(self) -> None:
        self.trace.emit("Deleting record...")


class Command(ABC):
    def __init__(self, database: Database):
        self.database = database

    @abstractmethod
    def execute(self) -> None:
        pass


class InsertCommand(Command):
    def execute(self) -> None:
        self.database.insert()


class UpdateCommand(Command):
    def execute(self) -> None:
        self.database.update()


class SelectCommand(Command):
    def execute(self) -> None:
        self.database.select()


class DeleteCommand(Command):
    def execute(self) -> None:
        self.database.delete()


class Developer:
    """Invoker holding one command per operation."""

    def __init__(self, insert: Command, update: Command, select: Command, delete: Command):
        self.insert = insert
        self.update = update
        self.select = select
        self.delete = delete

    def insert_record(self) -> None:
        self.insert.execute()

    def update_record(self) -> None:
        self.update.execute()

    def select_record(self) -> None:
        self.select.execute()

    def delete_record(self) -> None:
        self.delete.execute()


def run() -> List[str]:
    trace = Trace()
    database = Database(trace)
    developer = Developer(
        insert=InsertCommand(database),
        update=UpdateCommand(database),
        select=SelectCommand(database),
        delete=DeleteCommand(database),
    )

    developer.insert_record()
    developer.update_record()
    developer.select_record()
    developer.delete_record()
    return trace.lines
