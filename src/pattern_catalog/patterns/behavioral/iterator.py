"""Iterator: walking a developer's skills without exposing the storage."""

from abc import ABC, abstractmethod
from typing import Iterator as PyIterator
from typing import List

SUMMARY = (
    "The iterator pattern is used to provide a standard interface for "
    "traversing a collection of items in an aggregate object without the "
    "need to understand its underlying structure."
)


class Iterator(ABC):
    @abstractmethod
    def has_next(self) -> bool:
        pass

    @abstractmethod
    def next(self) -> str:
        pass

    def __iter__(self) -> PyIterator[str]:
        while self.has_next():
            yield self.next()


class Collection(ABC):
    @abstractmethod
    def get_iterator(self) -> Iterator:
        pass


class SkillIterator(Iterator):
    def __init__(self, data: List[str]):
        self._data = list(data)
        self._index = 0

    def has_next(self) -> bool:
        return self._index < len(self._data)

    def next(self) -> str:
        if not self.has_next():
            raise IndexError("Iterator is exhausted")
        result = self._data[self._index]
        self._index += 1
        return result


class SwiftDeveloper(Collection):
    def __init__(self, name: str, skills: List[str]):
        self.name = name
        self._skills = list(skills)

    def get_iterator(self) -> Iterator:
        return SkillIterator(self._skills)


def run() -> List[str]:
    developer = SwiftDeveloper("Sergey Zapuhlyak", ["Swift", "ObjC", "Sketch", "PM"])
    iterator = developer.get_iterator()

    lines = [f"Developer {developer.name}", "Skills"]
    while iterator.has_next():
        lines.append(iterator.next())
    return lines
