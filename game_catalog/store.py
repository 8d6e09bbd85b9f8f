"""In-memory catalog store backing the games endpoints."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from threading import Lock
from typing import Iterable, Optional

from .models import CreateGameRequest, Game, UpdateGameRequest

logger = logging.getLogger(__name__)

SEED_GAMES: tuple[Game, ...] = (
    Game(
        id=1,
        name="GOW",
        genre="Fantasy",
        price=Decimal("19.99"),
        release_date=date(2008, 2, 1),
    ),
    Game(
        id=2,
        name="RDR",
        genre="RPG",
        price=Decimal("69.69"),
        release_date=date(1999, 12, 25),
    ),
    Game(
        id=3,
        name="Witcher",
        genre="Magic",
        price=Decimal("69.420"),
        release_date=date(2000, 1, 1),
    ),
)


class GameNotFoundError(LookupError):
    """Raised when no catalog entry carries the requested id."""


class DuplicateGameError(ValueError):
    """Raised when appending a game whose id is already taken."""


class GameStore:
    """Ordered, process-local collection of games.

    Entries are only ever appended or replaced in place, never removed.
    ``_next_id`` stays one past the highest id ever stored, so ``create``
    never reuses an id even when ``append`` was handed arbitrary ids. For a
    store seeded with ids ``1..n`` this is the same as ``len(store) + 1``.
    Every read-then-write sequence runs under ``_lock``.
    """

    def __init__(self, games: Iterable[Game] = ()) -> None:
        self._games: list[Game] = []
        self._next_id = 1
        self._lock = Lock()
        for game in games:
            self.append(game)

    @classmethod
    def seeded(cls) -> "GameStore":
        return cls(SEED_GAMES)

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)

    def list_all(self) -> list[Game]:
        with self._lock:
            return list(self._games)

    def find_by_id(self, game_id: int) -> Optional[Game]:
        with self._lock:
            return self._find(game_id)

    def append(self, game: Game) -> Game:
        with self._lock:
            self._append(game)
        return game

    def create(self, request: CreateGameRequest) -> Game:
        """Assign the next id to ``request`` and append the resulting game."""
        with self._lock:
            game = Game(id=self._next_id, **request.model_dump())
            self._append(game)
        logger.info("Created game id=%s name='%s'", game.id, game.name)
        return game

    def update(self, game_id: int, request: UpdateGameRequest) -> Game:
        with self._lock:
            for index, existing in enumerate(self._games):
                if existing.id == game_id:
                    game = Game(id=game_id, **request.model_dump())
                    self._games[index] = game
                    break
            else:
                raise GameNotFoundError(f"No game with id {game_id}")
        logger.info("Updated game id=%s name='%s'", game.id, game.name)
        return game

    def reset(self, games: Iterable[Game] = SEED_GAMES) -> None:
        """Replace the contents with ``games`` (the seed records by default).

        Raises ``DuplicateGameError`` if ``games`` repeats an id; the store is
        left untouched in that case.
        """
        replacement = GameStore(games)
        with self._lock:
            self._games = replacement._games
            self._next_id = replacement._next_id
        logger.debug("Catalog reset to %d games", len(replacement._games))

    def _append(self, game: Game) -> None:
        if self._find(game.id) is not None:
            raise DuplicateGameError(f"Game id {game.id} already exists")
        self._games.append(game)
        self._next_id = max(self._next_id, game.id + 1)

    def _find(self, game_id: int) -> Optional[Game]:
        for game in self._games:
            if game.id == game_id:
                return game
        return None
