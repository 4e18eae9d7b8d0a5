"""Game state: moving the player, collecting items and reaching the exit."""

from __future__ import annotations

import enum

from mazerunner.gamemap import (
    COLLECTIBLE,
    EXIT,
    FLOOR,
    PLAYER,
    WALL,
    GameMap,
    Position,
)

KEY_ESCAPE = 65307
KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364

_KEY_MOVES: dict[int, tuple[bool, int]] = {
    KEY_W: (False, -1),
    KEY_UP: (False, -1),
    KEY_A: (True, -1),
    KEY_LEFT: (True, -1),
    KEY_S: (False, 1),
    KEY_DOWN: (False, 1),
    KEY_D: (True, 1),
    KEY_RIGHT: (True, 1),
}


class Outcome(enum.Enum):
    """What a key press or a move led to."""

    BLOCKED = "blocked"
    MOVED = "moved"
    COLLECTED = "collected"
    WON = "won"
    QUIT = "quit"


class Game:
    """A running game on a validated map."""

    def __init__(self, game_map: GameMap) -> None:
        self.game_map = game_map
        self.moves = 0
        self.finished = False

    @property
    def position(self) -> Position:
        return self.game_map.player_position

    @property
    def collectibles_left(self) -> int:
        return self.game_map.collectibles

    def tile_at(self, position: Position) -> str:
        """Return the tile shown at ``position``, with the player drawn on top."""
        if position == self.position:
            return PLAYER
        tile = self.game_map.tile(position)
        return FLOOR if tile == PLAYER else tile

    def move(self, horizontal: bool, length: int) -> Outcome:
        """Try to move the player by ``length`` cells along one axis."""
        if self.finished:
            raise RuntimeError("the game is over")
        current = self.position
        if horizontal:
            target = Position(current.x + length, current.y)
        else:
            target = Position(current.x, current.y + length)
        if self.game_map.tile(target) == WALL:
            return Outcome.BLOCKED
        self.game_map.player_position = target

        tile = self.game_map.tile(target)
        outcome = Outcome.MOVED
        if tile == COLLECTIBLE:
            self.game_map.set_tile(target, FLOOR)
            self.game_map.collectibles -= 1
            outcome = Outcome.COLLECTED
        elif tile == EXIT and self.game_map.collectibles == 0:
            self.finished = True
            return Outcome.WON
        self.moves += 1
        return outcome

    def handle_key(self, key: int) -> Outcome | None:
        """React to a key code; unknown keys are ignored and give None."""
        if key == KEY_ESCAPE:
            return Outcome.QUIT
        step = _KEY_MOVES.get(key)
        if step is None:
            return None
        return self.move(*step)