"""Drawing a game on a pygame surface, and the command that plays a map."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence

import pygame

from .game import ESCAPE_KEY, Game, MoveResult
from .maps import MapError, load_map

TILE_SIZE = 64
TEXTURE_DIR = "textures"
TEXTURE_SUFFIX = ".xpm"
TITLE = "so_long"
TILES = ("0", "1", "C", "E", "P")
EXIT_STATUS = 1

_BACKGROUND = "0"
_CLEAR_COLOUR = (0, 0, 0)


class Renderer:
    """Draws a game's tiles onto a surface, one image per tile kind.

    Every cell gets the background image first; walls, collectibles,
    the exit and the player are drawn over it.
    """

    def __init__(
        self,
        surface: pygame.Surface,
        images: Mapping[str, pygame.Surface],
        tile_size: int = TILE_SIZE,
    ) -> None:
        if tile_size <= 0:
            raise ValueError("tile_size must be positive")
        missing = [tile for tile in TILES if tile not in images]
        if missing:
            raise ValueError(f"no image for tiles: {', '.join(missing)}")
        self.surface = surface
        self.images = dict(images)
        self.tile_size = tile_size

    @classmethod
    def load(
        cls,
        surface: pygame.Surface,
        directory: str | os.PathLike[str] = TEXTURE_DIR,
        tile_size: int = TILE_SIZE,
    ) -> Renderer:
        """Build a renderer from the texture files <tile>.xpm in directory."""
        images = {
            tile: pygame.image.load(os.path.join(directory, tile + TEXTURE_SUFFIX))
            for tile in TILES
        }
        return cls(surface, images, tile_size)

    def draw(self, game: Game) -> None:
        """Clear the surface and draw every tile of the game."""
        self.surface.fill(_CLEAR_COLOUR)
        background = self.images[_BACKGROUND]
        for row, col, tile in game.cells():
            position = (col * self.tile_size, row * self.tile_size)
            self.surface.blit(background, position)
            if tile != _BACKGROUND and tile in self.images:
                self.surface.blit(self.images[tile], position)


def window_size(game: Game, tile_size: int = TILE_SIZE) -> tuple[int, int]:
    """Pixel width and height of a window showing the whole map."""
    if tile_size <= 0:
        raise ValueError("tile_size must be positive")
    return game.width * tile_size, game.height * tile_size


def run(path: str | os.PathLike[str]) -> MoveResult:
    """Validate the map at path and play it in a window until it ends."""
    rows = load_map(path)
    game = Game.from_rows(rows)
    pygame.init()
    try:
        surface = pygame.display.set_mode(window_size(game))
        pygame.display.set_caption(TITLE)
        renderer = Renderer.load(surface)
        renderer.draw(game)
        pygame.display.flip()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return MoveResult.QUIT
            if event.type != pygame.KEYDOWN:
                continue
            key = ESCAPE_KEY if event.key == pygame.K_ESCAPE else event.key
            result = game.handle_key(key)
            if result is None:
                continue
            if result in (MoveResult.WON, MoveResult.QUIT):
                return result
            renderer.draw(game)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Play the map named on the command line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1 or not args[0]:
        sys.stderr.write("Error: Bad arguments\n")
        return EXIT_STATUS
    try:
        run(args[0])
    except MapError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return EXIT_STATUS
    except (OSError, pygame.error) as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return EXIT_STATUS
    return EXIT_STATUS


if __name__ == "__main__":
    sys.exit(main())