"""Builder: a director assembling websites step by step."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

SUMMARY = (
    "The builder pattern is used to create complex objects with constituent "
    "parts that must be created in the same order or using a specific "
    "algorithm. An external class controls the construction algorithm."
)


class Cms(str, Enum):
    WORDPRESS = "wordpress"
    ALFRESCO = "alfresco"


@dataclass
class Website:
    name: Optional[str] = None
    cms: Optional[Cms] = None
    price: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        return None not in (self.name, self.cms, self.price)

    def describe(self) -> Optional[str]:
        """One-line description, or None while parts are missing."""
        if not self.is_complete:
            return None
        return f"Name {self.name}, cms {self.cms.value}, price {self.price}"


class WebsiteBuilder(ABC):
    def __init__(self):
        self.website: Optional[Website] = None

    def create_website(self) -> None:
        self.website = Website()

    @abstractmethod
    def build_name(self) -> None:
        pass

    @abstractmethod
    def build_cms(self) -> None:
        pass

    @abstractmethod
    def build_price(self) -> None:
        pass


class VisitCardWebsiteBuilder(WebsiteBuilder):
    def build_name(self) -> None:
        self.website.name = "Visit Card"

    def build_cms(self) -> None:
        self.website.cms = Cms.WORDPRESS

    def build_price(self) -> None:
        self.website.price = 500


class EnterpriseWebsiteBuilder(WebsiteBuilder):
    def build_name(self) -> None:
        self.website.name = "Enterprise website"

    def build_cms(self) -> None:
        self.website.cms = Cms.ALFRESCO

    def build_price(self) -> None:
        self.website.price = 10000


class Director:
    """Owns the construction order; builders only supply the parts."""

    def __init__(self, builder: WebsiteBuilder):
        self.builder = builder

    def build_website(self) -> Website:
        self.builder.create_website()
        self.builder.build_name()
        self.builder.build_cms()
        self.builder.build_price()
        return self.builder.website


def run() -> List[str]:
    lines = []
    for builder in (VisitCardWebsiteBuilder(), EnterpriseWebsiteBuilder()):
        website = Director(builder).build_website()
        lines.append(website.describe())
    return lines
