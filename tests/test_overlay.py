import pygame

from tilepath.overlay import PathOverlay
from tilepath.config import PATH_FILL_COLOR


def test_default_fill_color_from_config():
    overlay = PathOverlay()
    r, g, b, a = PATH_FILL_COLOR
    assert overlay.fill_color == pygame.Color(
        round(r * 255), round(g * 255), round(b * 255), round(a * 255)
    )


def test_set_fill_color_clamps_channels():
    overlay = PathOverlay()
    overlay.set_fill_color(2.0, -1.0, 0.5, 1.0)
    assert overlay.fill_color == pygame.Color(255, 0, 128, 255)


def test_draw_fills_only_path_tiles():
    surface = pygame.Surface((64, 64))
    surface.fill((0, 0, 0))
    overlay = PathOverlay(tile_size=32, fill_color=(1.0, 0.0, 0.0, 1.0))
    overlay.draw(surface, [(1, 0), (1, 1)])
    assert surface.get_at((40, 10)) == pygame.Color(255, 0, 0, 255)
    assert surface.get_at((40, 50)) == pygame.Color(255, 0, 0, 255)
    assert surface.get_at((10, 10)) == pygame.Color(0, 0, 0, 255)
    assert surface.get_at((10, 50)) == pygame.Color(0, 0, 0, 255)


def test_draw_blends_translucent_color():
    surface = pygame.Surface((32, 32))
    surface.fill((0, 0, 0))
    overlay = PathOverlay(tile_size=32, fill_color=(0.0, 0.0, 1.0, 0.5))
    overlay.draw(surface, [(0, 0)])
    blue = surface.get_at((16, 16)).b
    assert 100 < blue < 160


def test_draw_empty_path_leaves_surface_untouched():
    surface = pygame.Surface((32, 32))
    surface.fill((9, 9, 9))
    PathOverlay(tile_size=32).draw(surface, [])
    assert surface.get_at((5, 5)) == pygame.Color(9, 9, 9, 255)
