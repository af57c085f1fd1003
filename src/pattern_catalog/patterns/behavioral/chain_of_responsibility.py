"""Chain of Responsibility: notifiers that forward a message down a chain."""

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import List, Optional

from pattern_catalog.domain.demo import Trace

SUMMARY = (
    "The chain of responsibility pattern is used to process varied requests, "
    "each of which may be dealt with by a different handler."
)


class Priority(IntEnum):
    ROUTINE = 0
    IMPORTANT = 1
    AS_SOON_AS_POSSIBLE = 2


class Notifier(ABC):
    """
    A channel rated for messages up to its own priority.

    Every notifier in the chain sees the message: it writes it when the
    message level does not exceed its priority, then hands it on.
    """

    def __init__(self, trace: Trace, priority: Priority, next_notifier: Optional["Notifier"] = None):
        self.trace = trace
        self.priority = priority
        self.next_notifier = next_notifier

    def notify_manager(self, message: str, level: Priority) -> None:
        if self.priority >= level:
            self.write(message)
        if self.next_notifier is not None:
            self.next_notifier.notify_manager(message, level)

    @abstractmethod
    def write(self, message: str) -> None:
        pass


class SimpleReportNotifier(Notifier):
    def write(self, message: str) -> None:
        self.trace.emit(f"Notifying using simple report: {message}")


class EmailNotifier(Notifier):
    def write(self, message: str) -> None:
        self.trace.emit(f"Sending email: {message}")


class SMSNotifier(Notifier):
    def write(self, message: str) -> None:
        self.trace.emit(f"Sending sms to manager: {message}")


def build_chain(trace: Trace) -> Notifier:
    """Report -> Email -> SMS, in increasing priority."""
    sms = SMSNotifier(trace, Priority.AS_SOON_AS_POSSIBLE)
    email = EmailNotifier(trace, Priority.IMPORTANT, next_notifier=sms)
    return SimpleReportNotifier(trace, Priority.ROUTINE, next_notifier=email)


def run() -> List[str]:
    trace = Trace()
    chain = build_chain(trace)

    chain.notify_manager("Everything is OK", Priority.ROUTINE)
    chain.notify_manager("Something went wrong", Priority.IMPORTANT)
    chain.notify_manager("Houston, we've had a problem here!", Priority.AS_SOON_AS_POSSIBLE)
    return trace.lines
