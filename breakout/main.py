import logging
import sys

import pygame

from breakout.render import Renderer
from breakout.state import GameState

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Breakout Game"

# Held arrow keys resend KEYDOWN after KEY_REPEAT_DELAY ms, then every
# KEY_REPEAT_INTERVAL ms; each repeat is one PADDLE_STEP jump.
KEY_REPEAT_DELAY = 150
KEY_REPEAT_INTERVAL = 30


def handle_event(state, event):
    """Apply one pygame event to the state. Returns False on quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_LEFT:
            state.move_left()
        elif event.key == pygame.K_RIGHT:
            state.move_right()
        elif event.key == pygame.K_RETURN:
            state.restart()
    return True


def open_window():
    pygame.init()
    screen = pygame.display.set_mode((GameState.SCREEN_WIDTH, GameState.SCREEN_HEIGHT))
    pygame.display.set_caption(WINDOW_TITLE)
    pygame.key.set_repeat(KEY_REPEAT_DELAY, KEY_REPEAT_INTERVAL)
    return screen


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    screen = open_window()
    clock = pygame.time.Clock()

    state = GameState()
    renderer = Renderer(screen)
    logger.info("Starting %s at %d FPS", WINDOW_TITLE, GameState.FPS)

    running = True
    while running:
        for event in pygame.event.get():
            if not handle_event(state, event):
                running = False

        state.advance()
        renderer.draw(state)
        pygame.display.flip()
        clock.tick(GameState.FPS)

    print(f"\nFinal Score: {state.score}")
    print(f"Level Reached: {state.level}")
    print(f"Total Steps: {state.steps}")

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
