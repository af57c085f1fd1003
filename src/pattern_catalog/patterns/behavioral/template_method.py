"""Template Method: pages sharing a header/footer skeleton."""

from abc import ABC, abstractmethod
from typing import List

SUMMARY = (
    "The template method pattern is used to define the program skeleton of an "
    "algorithm in an operation, deferring some steps to subclasses. It lets one "
    "redefine certain steps of an algorithm without changing the algorithm's "
    "structure."
)


class WebsiteTemplate(ABC):
    def show_page(self) -> List[str]:
        return ["Header", self.show_page_content(), "Footer"]

    @abstractmethod
    def show_page_content(self) -> str:
        pass


class WelcomePage(WebsiteTemplate):
    def show_page_content(self) -> str:
        return "Welcome"


class NewsPage(WebsiteTemplate):
    def show_page_content(self) -> str:
        return "News"


def run() -> List[str]:
    return WelcomePage().show_page() + [""] + NewsPage().show_page()
