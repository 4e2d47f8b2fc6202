import pygame
import pygame.gfxdraw


class Renderer:
    """Draws a GameState onto a pygame surface.

    The renderer only reads from the state it is given.
    """

    # Colors
    COLOR_BG = (0, 0, 0)
    COLOR_PADDLE = (255, 255, 255)
    COLOR_BALL = (255, 255, 255)
    COLOR_BRICK = (0, 255, 0)
    COLOR_POWERUP = (255, 255, 0)
    COLOR_TEXT = (255, 255, 255)

    def __init__(self, surface):
        pygame.font.init()
        self.surface = surface
        self.font_hud = pygame.font.SysFont("arial", 20, bold=True)
        self.font_large = pygame.font.SysFont("arial", 36, bold=True)
        self.font_small = pygame.font.SysFont("arial", 18)

    def draw(self, state):
        self.surface.fill(self.COLOR_BG)

        # Paddle
        pygame.draw.rect(self.surface, self.COLOR_PADDLE, state.paddle_rect)

        # Ball
        radius = state.BALL_SIZE // 2
        cx, cy = int(state.ball_x) + radius, int(state.ball_y) + radius
        pygame.gfxdraw.filled_circle(self.surface, cx, cy, radius, self.COLOR_BALL)
        pygame.gfxdraw.aacircle(self.surface, cx, cy, radius, self.COLOR_BALL)

        # Bricks
        for row in range(state.BRICK_ROWS):
            for col in range(state.BRICK_COLS):
                if state.bricks[row, col]:
                    pygame.draw.rect(self.surface, self.COLOR_BRICK, state.brick_rect(row, col))

        # Power-ups
        for p_up in state.powerups:
            pygame.draw.rect(self.surface, self.COLOR_POWERUP, p_up)

        self._draw_ui(state)

    def _draw_ui(self, state):
        width, height = state.SCREEN_WIDTH, state.SCREEN_HEIGHT

        # Text positions are baselines in screen space; blit from the top-left.
        self._blit_baseline(self.font_hud, f"Score: {state.score}", (10, 20))
        self._blit_baseline(self.font_hud, f"Lives: {state.lives}", (10, 50))
        self._blit_baseline(self.font_hud, f"Level: {state.level}", (width - 100, 20))

        if state.game_over:
            end_text = self.font_large.render("Game Over!", True, self.COLOR_TEXT)
            self.surface.blit(end_text, end_text.get_rect(center=(width / 2, height / 2 - 10)))
            prompt = self.font_small.render("Press Enter to Restart", True, self.COLOR_TEXT)
            self.surface.blit(prompt, prompt.get_rect(center=(width / 2, height / 2 + 25)))

    def _blit_baseline(self, font, text, pos):
        surf = font.render(text, True, self.COLOR_TEXT)
        self.surface.blit(surf, (pos[0], pos[1] - font.get_ascent()))
