"""Mediator: users talk through a chat instead of to each other."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from pattern_catalog.domain.demo import Trace

SUMMARY = (
    "The mediator pattern is used to reduce coupling between classes that "
    "communicate with each other. Instead of classes communicating directly, "
    "and thus requiring knowledge of their implementation, the classes send "
    "messages via a mediator object."
)


class Chat(ABC):
    @abstractmethod
    def send_message(self, message: str, sender: "User") -> None:
        pass


class User:
    """A chat participant."""

    def __init__(self, user_id: int, name: str, chat: Chat, trace: Trace):
        self.user_id = user_id
        self.name = name
        self.chat = chat
        self.trace = trace

    def send_message(self, message: str) -> None:
        self.chat.send_message(message, self)

    def get_message(self, message: str) -> None:
        self.trace.emit(f"{self.name} received message: {message}")


class Admin(User):
    pass


class Client(User):
    pass


class Telegram(Chat):
    """Mediator owning the admin and a mapping of client id to client."""

    def __init__(self):
        self.admin: Optional[Admin] = None
        self._clients: Dict[int, Client] = {}

    def add_client(self, client: Client) -> None:
        registered = self._clients.get(client.user_id)
        if registered is not None and registered is not client:
            raise ValueError(f"Client id {client.user_id} is already taken by {registered.name}")
        self._clients[client.user_id] = client

    def remove_client(self, client: Client) -> None:
        if self._clients.get(client.user_id) is client:
            del self._clients[client.user_id]

    @property
    def clients(self) -> List[Client]:
        return list(self._clients.values())

    def send_message(self, message: str, sender: User) -> None:
        for client in self._clients.values():
            if client is not sender:
                client.get_message(message)
        if self.admin is not None and self.admin is not sender:
            self.admin.get_message(message)


def run() -> List[str]:
    trace = Trace()
    telegram = Telegram()
    admin = Admin(1, "Pavel Durov", telegram, trace)
    zsergey = Client(2, "Sergey Zapuhlyak", telegram, trace)
    azimin = Client(3, "Alex Zimin", telegram, trace)
    telegram.admin = admin
    telegram.add_client(zsergey)
    telegram.add_client(azimin)

    zsergey.send_message("Hello, I am Sergey Zapuhlyak")
    admin.send_message("I am Administrator!")
    return trace.lines
