import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from tetris_board import COLS, ROWS
from tetris_config import CONFIG
from tetris_game import Game, GameState
from tetris_render import Layout, RenderAssets, STATUS_TEXT


@pytest.fixture(scope="module")
def assets():
    pygame.init()
    layout = Layout.from_config()
    yield RenderAssets(layout, pygame.font.Font(None, 20))
    pygame.quit()


def test_layout_fits_board_and_panel():
    layout = Layout.from_config()
    cell = CONFIG["CELL_SIZE"]
    assert layout.board_rect.size == (COLS * cell, ROWS * cell)
    assert layout.panel_rect.left > layout.board_rect.right
    assert layout.size[0] > layout.panel_rect.right
    assert layout.cell_rect(2, 3).topleft == (layout.board_rect.x + 2 * cell, layout.board_rect.y + 3 * cell)


def test_status_text_for_every_state():
    assert set(STATUS_TEXT) == set(GameState)


def test_board_surface_shows_locked_cells(assets, fixed_rng):
    g = Game(rng=fixed_rng(["O"]))
    g.start()
    g.hard_drop()
    assets.rebuild_board_surface(g.board)
    c = assets.layout.cell
    assert assets.board_surface.get_at((4 * c + 5, 19 * c + 5)) == pygame.Color(240, 240, 0, 255)
    assert assets.board_surface.get_at((0 * c + 5, 19 * c + 5)).a == 0


def test_draw_paints_active_piece(assets, fixed_rng):
    g = Game(rng=fixed_rng(["I"]))
    g.start()
    screen = pygame.Surface(assets.layout.size)
    assets.draw(screen, g)
    x, y = assets.layout.cell_rect(3, 0).move(5, 5).topleft
    assert tuple(screen.get_at((x, y)))[:3] == (0, 240, 240)
    centre = assets.layout.board_rect.center
    before = tuple(screen.get_at(centre))
    g.toggle_pause()
    assets.draw(screen, g)
    assert tuple(screen.get_at(centre)) != before
