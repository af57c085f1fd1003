"""Strategy: swapping a developer's activity at run-time."""

from abc import ABC, abstractmethod
from typing import List

SUMMARY = (
    "The strategy pattern is used to create an interchangeable family of "
    "algorithms from which the required process is chosen at run-time."
)


class Activity(ABC):
    @abstractmethod
    def just_do_it(self) -> str:
        pass


class Coding(Activity):
    def just_do_it(self) -> str:
        return "Writing code..."


class Reading(Activity):
    def just_do_it(self) -> str:
        return "Reading book..."


class Sleeping(Activity):
    def just_do_it(self) -> str:
        return "Sleeping..."


class Training(Activity):
    def just_do_it(self) -> str:
        return "Training..."


class Developer:
    def __init__(self, activity: Activity):
        self.activity = activity

    def execute_activity(self) -> str:
        return self.activity.just_do_it()


def run() -> List[str]:
    developer = Developer(Sleeping())
    lines = [developer.execute_activity()]
    for activity in (Training(), Coding(), Reading(), Sleeping()):
        developer.activity = activity
        lines.append(developer.execute_activity())
    return lines
