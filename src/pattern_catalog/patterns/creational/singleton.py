"""Singleton: one game instance shared by every player."""

from typing import List

SUMMARY = (
    "The singleton pattern ensures that only one object of a particular class "
    "is ever created. All further references to objects of the singleton "
    "class refer to the same underlying instance. There are very few "
    "applications, do not overuse this pattern!"
)


class Game:
    """
    The shared instance is built once by the composition root and handed to
    everyone who needs it, rather than reached through a class attribute.
    """

    def __init__(self, session_id: int):
        self.session_id = session_id
        self.players: List[str] = []

    def join(self, player: str) -> None:
        self.players.append(player)


class Player:
    def __init__(self, name: str, game: Game):
        self.name = name
        self.game = game
        game.join(name)

    def describe(self) -> str:
        return f"{self.name} plays in game #{self.game.session_id}"


def run() -> List[str]:
    game = Game(session_id=1)

    first = Player("Player One", game)
    second = Player("Player Two", game)

    return [
        first.describe(),
        second.describe(),
        f"Players share one game: {first.game is second.game}",
        f"Players in game: {', '.join(game.players)}",
    ]
