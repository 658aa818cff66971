
import logging
import sys

import pygame
from tetris_config import CONFIG
from tetris_game import Game, GameState
from tetris_input import Action
from tetris_render import Layout, RenderAssets

logger = logging.getLogger(__name__)

KEY_BINDINGS = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_UP: Action.ROTATE_CW,
    pygame.K_x: Action.ROTATE_CW,
    pygame.K_z: Action.ROTATE_CCW,
    pygame.K_SPACE: Action.HARD_DROP,
    pygame.K_p: Action.PAUSE,
    pygame.K_r: Action.RESTART,
    pygame.K_RETURN: Action.START,
}


def create_window(layout, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode(layout.size, flags, vsync=1)
    except (TypeError, pygame.error):
        logger.debug("vsync unavailable, falling back to plain window")
        return pygame.display.set_mode(layout.size, flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    layout = Layout.from_config()
    screen = create_window(layout)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 24)
    big_font = pygame.font.SysFont(None, 48)
    render = RenderAssets(layout, font, big_font)
    clock = pygame.time.Clock()

    game = Game()
    drawn_version = None

    while True:
        clock.tick_busy_loop(CONFIG["FPS"])
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                action = KEY_BINDINGS.get(e.key)
                if action is not None:
                    game.key_down(action)
                elif game.state is GameState.READY:
                    game.start()
            if e.type == pygame.KEYUP:
                action = KEY_BINDINGS.get(e.key)
                if action is not None:
                    game.key_up(action)

        game.frame(pygame.time.get_ticks())

        if game.board_version != drawn_version:
            render.rebuild_board_surface(game.board)
            drawn_version = game.board_version
        render.draw(screen, game)
        pygame.display.flip()


if __name__ == '__main__':
    main()
