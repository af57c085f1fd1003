"""Interpreter: boolean expressions over a developer's skill description."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

SUMMARY = "The interpreter pattern is used to evaluate sentences in a language."


class Expression(ABC):
    @abstractmethod
    def interpret(self, context: str) -> bool:
        pass


@dataclass(frozen=True)
class TerminalExpression(Expression):
    data: str

    def interpret(self, context: str) -> bool:
        return self.data in context


@dataclass(frozen=True)
class AndExpression(Expression):
    left: Expression
    right: Expression

    def interpret(self, context: str) -> bool:
        return self.left.interpret(context) and self.right.interpret(context)


@dataclass(frozen=True)
class OrExpression(Expression):
    left: Expression
    right: Expression

    def interpret(self, context: str) -> bool:
        return self.left.interpret(context) or self.right.interpret(context)


def apple_expression() -> Expression:
    """Objective-C or Swift."""
    return OrExpression(TerminalExpression("Objective-C"), TerminalExpression("Swift"))


def java_ee_expression() -> Expression:
    """Java and Spring."""
    return AndExpression(TerminalExpression("Java"), TerminalExpression("Spring"))


def run() -> List[str]:
    is_apple = apple_expression().interpret("Swift")
    knows_java_ee = java_ee_expression().interpret("Java Spring")
    return [
        f"Is Developer an Apple Developer {str(is_apple).lower()}",
        f"Does developer knows Java EE {str(knows_java_ee).lower()}",
    ]
