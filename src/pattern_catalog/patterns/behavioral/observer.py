"""Observer: a job board notifying its subscribers of vacancy changes."""

import json
from abc import ABC, abstractmethod
from typing import Dict, List

from pattern_catalog.domain.demo import Trace

SUMMARY = (
    "The observer pattern is used to allow an object to publish changes to its "
    "state. Other objects subscribe to be immediately notified of any changes."
)


class Observer(ABC):
    name: str

    @abstractmethod
    def handle_event(self, vacancies: List[str]) -> None:
        pass


class Observed(ABC):
    @abstractmethod
    def add_observer(self, observer: Observer) -> None:
        pass

    @abstractmethod
    def remove_observer(self, observer: Observer) -> None:
        pass

    @abstractmethod
    def notify_observers(self) -> None:
        pass


class Subscriber(Observer):
    def __init__(self, name: str, trace: Trace):
        self.name = name
        self.trace = trace
        self.received: List[List[str]] = []

    def handle_event(self, vacancies: List[str]) -> None:
        self.received.append(list(vacancies))
        self.trace.emit(f"Dear {self.name}. We have some changes in vacancies:\n{json.dumps(vacancies)}\n")


class HeadHunter(Observed):
    """Publisher owning a mapping of subscriber identity to observer."""

    def __init__(self):
        self.vacancies: List[str] = []
        self._subscribers: Dict[int, Observer] = {}

    @property
    def subscribers(self) -> List[Observer]:
        return list(self._subscribers.values())

    def add_vacancy(self, vacancy: str) -> None:
        self.vacancies.append(vacancy)
        self.notify_observers()

    def remove_vacancy(self, vacancy: str) -> None:
        if vacancy in self.vacancies:
            self.vacancies.remove(vacancy)
            self.notify_observers()

    def add_observer(self, observer: Observer) -> None:
        self._subscribers[id(observer)] = observer

    def remove_observer(self, observer: Observer) -> None:
        self._subscribers.pop(id(observer), None)

    def notify_observers(self) -> None:
        for subscriber in list(self._subscribers.values()):
            subscriber.handle_event(self.vacancies)


def run() -> List[str]:
    trace = Trace()
    hh = HeadHunter()
    hh.add_vacancy("Swift Developer")
    hh.add_vacancy("ObjC Developer")

    zsergey = Subscriber("Sergey Zapuhlyak", trace)
    azimin = Subscriber("Alex Zimin", trace)

    hh.add_observer(zsergey)
    hh.add_observer(azimin)

    hh.add_vacancy("C++ Developer")

    hh.remove_observer(azimin)
    hh.remove_vacancy("ObjC Developer")
    return trace.lines
