"""Drawing the board with pygame and running the game from the command line."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

import pygame

from mazerunner.game import (
    KEY_A,
    KEY_D,
    KEY_DOWN,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_S,
    KEY_UP,
    KEY_W,
    Game,
    Outcome,
)
from mazerunner.gamemap import (
    COLLECTIBLE,
    EXIT,
    PLAYER,
    WALL,
    MapError,
    Position,
    load_map,
)
from mazerunner.xpm import TRANSPARENT, XpmError, XpmImage, read_xpm_file

WINDOW_TITLE = "so_long"
TEXTURES_ENV = "MAZERUNNER_TEXTURES"
DEFAULT_TEXTURES = "textures"
_COUNTER_POSITION = (32, 10)
_COUNTER_COLOR = (0, 0, 1)

# Checked in this order when reporting a texture that failed to load.
_TEXTURE_FILES = (
    ("wall", "wall.xpm"),
    ("exit", "exit.xpm"),
    ("player", "player.xpm"),
    ("floor", "floor.xpm"),
    ("collectibles", "collectibles.xpm"),
)


@dataclass
class Textures:
    """The five block images used to draw the board."""

    wall: pygame.Surface
    floor: pygame.Surface
    player: pygame.Surface
    collectibles: pygame.Surface
    exit: pygame.Surface

    @property
    def block_size(self) -> int:
        return self.wall.get_width()

    def for_tile(self, tile: str) -> pygame.Surface:
        if tile == WALL:
            return self.wall
        if tile == COLLECTIBLE:
            return self.collectibles
        if tile == EXIT:
            return self.exit
        if tile == PLAYER:
            return self.player
        return self.floor


def image_to_surface(image: XpmImage) -> pygame.Surface:
    """Convert a decoded XPM image into an RGBA surface."""
    data = bytearray()
    for row in image.pixels:
        for color in row:
            if color == TRANSPARENT:
                data += b"\x00\x00\x00\x00"
            else:
                data += bytes(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF, 0xFF))
    surface = pygame.image.frombuffer(bytes(data), (image.width, image.height), "RGBA")
    return surface.copy()


def load_textures(directory: str | PathLike[str]) -> Textures:
    """Load every block image from ``directory``."""
    base = Path(directory)
    loaded: dict[str, pygame.Surface] = {}
    for key, filename in _TEXTURE_FILES:
        try:
            loaded[key] = image_to_surface(read_xpm_file(base / filename))
        except XpmError as exc:
            raise XpmError(f"Error in {filename} file") from exc
    return Textures(**loaded)


def parse_args(argv: list[str]) -> str:
    """Return the map path from the command-line arguments."""
    if len(argv) != 1:
        raise ValueError("Error Invalid number of args")
    if not argv[0]:
        raise ValueError("Map is null")
    return argv[0]


def draw_board(surface: pygame.Surface, game: Game, textures: Textures) -> None:
    """Draw every tile, the player and the move counter onto ``surface``."""
    size = textures.block_size
    game_map = game.game_map
    for y in range(game_map.height):
        for x in range(game_map.width):
            texture = textures.for_tile(game.tile_at(Position(x, y)))
            surface.blit(texture, (x * size, y * size))
    surface.blit(textures.wall, (0, 0))
    if pygame.font.get_init():
        font = pygame.font.Font(None, 18)
        text = font.render(str(game.moves), True, _COUNTER_COLOR)
        surface.blit(text, _COUNTER_POSITION)


_PYGAME_KEYS = {
    pygame.K_ESCAPE: KEY_ESCAPE,
    pygame.K_w: KEY_W,
    pygame.K_a: KEY_A,
    pygame.K_s: KEY_S,
    pygame.K_d: KEY_D,
    pygame.K_UP: KEY_UP,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_RIGHT: KEY_RIGHT,
}


def run(game: Game, textures: Textures) -> int:
    """Open a window and play until the player quits or wins."""
    pygame.init()
    try:
        size = textures.block_size
        screen = pygame.display.set_mode(
            (game.game_map.width * size, game.game_map.height * size)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        draw_board(screen, game, textures)
        pygame.display.flip()
        print(f"Move number: {game.moves}")
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type != pygame.KEYDOWN:
                continue
            key = _PYGAME_KEYS.get(event.key)
            if key is None:
                continue
            outcome = game.handle_key(key)
            if outcome is Outcome.QUIT:
                return 0
            if outcome is Outcome.WON:
                print("You won")
                return 0
            if outcome in (Outcome.MOVED, Outcome.COLLECTED):
                draw_board(screen, game, textures)
                pygame.display.flip()
                print(f"Move number: {game.moves}")
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Load the map named on the command line and play it."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        path = parse_args(argv)
        game = Game(load_map(path))
        textures = load_textures(os.environ.get(TEXTURES_ENV, DEFAULT_TEXTURES))
    except (ValueError, MapError, XpmError) as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        return run(game, textures)
    except pygame.error:
        print("Error : Failed to open new window", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())