import sys
import logging
import pygame

from tilepath.config import (
    FPS,
    BACKGROUND_COLOR,
    FLOOR_COLOR,
    WALL_COLOR,
    SPRITE_COLOR,
)
from tilepath.tilemap import TileMap
from tilepath.overlay import PathOverlay
from tilepath.walker import Sprite, PathWalker

logger = logging.getLogger(__name__)


def draw_map(screen, tile_map):
    """Draw floor and collide tiles."""
    size = tile_map.tile_size
    for y in range(tile_map.height):
        for x in range(tile_map.width):
            color = WALL_COLOR if tile_map.is_collidable(x, y) else FLOOR_COLOR
            pygame.draw.rect(screen, color, (x * size, y * size, size - 1, size - 1))


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    # Initialize Pygame
    pygame.init()
    tile_map = TileMap()
    size = tile_map.tile_size
    screen = pygame.display.set_mode((tile_map.width * size, tile_map.height * size))
    pygame.display.set_caption("A* Tile Path Demo")
    clock = pygame.time.Clock()

    # D toggles diagonal movement
    allow_diagonal = False
    finder = tile_map.pathfinder(allow_diagonal=allow_diagonal)
    overlay = PathOverlay(tile_size=size)
    start = (1, 1)
    sprite = Sprite(*tile_map.tile_center(start), name="walker")
    walker = None
    path = []

    running = True
    while running:
        # Delta time (in seconds)
        dt = clock.tick(FPS) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_d:
                allow_diagonal = not allow_diagonal
                finder = tile_map.pathfinder(allow_diagonal=allow_diagonal)
                logger.info("Diagonal movement %s", "on" if allow_diagonal else "off")
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                here = (int(sprite.x // size), int(sprite.y // size))
                goal = (event.pos[0] // size, event.pos[1] // size)
                result = finder.find_path(here, goal)
                if result.found:
                    path = result.path
                    walker = PathWalker(sprite, path, tile_size=size)
                else:
                    logger.info("No route to %s (%s)", goal, result.reason)

        if walker is not None:
            walker.update(dt)
            if walker.finished:
                walker = None
                path = []

        screen.fill(BACKGROUND_COLOR)
        draw_map(screen, tile_map)
        overlay.draw(screen, path)
        pygame.draw.circle(
            screen, SPRITE_COLOR, (int(sprite.x), int(sprite.y)), size // 3
        )
        pygame.display.flip()

    # Clean up
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
