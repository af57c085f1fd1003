"""State: a developer whose behaviour follows a daily activity cycle."""

from enum import Enum
from typing import List

SUMMARY = (
    "The state pattern is used to alter the behaviour of an object as its "
    "internal state changes. The pattern allows the class for an object to "
    "apparently change at run-time."
)

ITERATIONS = 10


class Activity(Enum):
    SLEEPING = "Sleeping..."
    TRAINING = "Training..."
    CODING = "Writing code..."
    READING = "Reading book..."

    def just_do_it(self) -> str:
        return self.value

    @property
    def next(self) -> "Activity":
        return _TRANSITIONS[self]


# Round-robin cycle, no terminal state
_TRANSITIONS = {
    Activity.SLEEPING: Activity.TRAINING,
    Activity.TRAINING: Activity.CODING,
    Activity.CODING: Activity.READING,
    Activity.READING: Activity.SLEEPING,
}


class Developer:
    def __init__(self, activity: Activity = Activity.SLEEPING):
        self.activity = activity

    def change_activity(self) -> None:
        self.activity = self.activity.next

    def just_do_it(self) -> str:
        return self.activity.just_do_it()


def simulate(steps: int, start: Activity = Activity.SLEEPING) -> Activity:
    """Return the activity reached after advancing ``steps`` times from ``start``."""
    developer = Developer(start)
    for _ in range(steps):
        developer.change_activity()
    return developer.activity


def run() -> List[str]:
    developer = Developer(Activity.SLEEPING)
    lines = []
    for _ in range(ITERATIONS):
        lines.append(developer.just_do_it())
        developer.change_activity()
    return lines
