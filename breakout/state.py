import logging

import numpy as np
import pygame
from gymnasium.utils import seeding

logger = logging.getLogger(__name__)


class GameState:
    """All mutable data of one Breakout session.

    ``advance()`` runs one fixed tick of the simulation. ``move_left()``,
    ``move_right()`` and ``restart()`` are the input mutators; their effect
    becomes visible to the next ``advance()`` call. Renderers read the
    attributes directly and must not write to them.
    """

    # --- Screen ---
    SCREEN_WIDTH = 600
    SCREEN_HEIGHT = 400
    FPS = 60

    # --- Paddle ---
    PADDLE_WIDTH_INITIAL = 100
    PADDLE_WIDTH_MIN = 50
    PADDLE_SHRINK = 10
    PADDLE_GROWTH = 20
    PADDLE_HEIGHT = 20
    PADDLE_BOTTOM_OFFSET = 20
    PADDLE_STEP = 15

    # --- Ball ---
    BALL_SIZE = 20
    BALL_SPEED_INITIAL = (5, 5)

    # --- Bricks ---
    BRICK_ROWS = 5
    BRICK_COLS = 10
    BRICK_WIDTH = 60
    BRICK_HEIGHT = 30
    BRICK_GAP = 5
    BRICK_POINTS = 10

    # --- Power-ups ---
    POWERUP_CHANCE = 0.2
    POWERUP_SIZE = 20
    POWERUP_FALL_SPEED = 3

    INITIAL_LIVES = 3

    # Ball top edge must be below this line to bounce off the paddle.
    PADDLE_BOUNCE_LINE = SCREEN_HEIGHT - PADDLE_HEIGHT - BALL_SIZE - 20
    # Ball top edge below this line is a lost ball.
    BALL_DROP_LINE = SCREEN_HEIGHT - BALL_SIZE

    def __init__(self, np_random=None):
        if np_random is None:
            np_random, _ = seeding.np_random()
        self.np_random = np_random

        self.paddle_x = 0
        self.paddle_width = 0
        self.ball_x = 0
        self.ball_y = 0
        self.ball_vel = None
        self.bricks = None
        self.powerups = None
        self.score = 0
        self.lives = 0
        self.level = 0
        self.steps = 0
        self.game_over = False

        self._reset_session()

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def paddle_y(self):
        return self.SCREEN_HEIGHT - self.PADDLE_HEIGHT - self.PADDLE_BOTTOM_OFFSET

    @property
    def paddle_rect(self):
        return pygame.Rect(self.paddle_x, self.paddle_y, self.paddle_width, self.PADDLE_HEIGHT)

    @property
    def ball_rect(self):
        return pygame.Rect(self.ball_x, self.ball_y, self.BALL_SIZE, self.BALL_SIZE)

    def brick_rect(self, row, col):
        return pygame.Rect(
            col * (self.BRICK_WIDTH + self.BRICK_GAP),
            row * (self.BRICK_HEIGHT + self.BRICK_GAP),
            self.BRICK_WIDTH,
            self.BRICK_HEIGHT,
        )

    @property
    def bricks_left(self):
        return int(np.count_nonzero(self.bricks))

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def move_left(self):
        self.paddle_x -= self.PADDLE_STEP

    def move_right(self):
        self.paddle_x += self.PADDLE_STEP

    def restart(self):
        """Start a new session. Only honoured once the game is over."""
        if not self.game_over:
            return False
        self._reset_session()
        logger.info("Game restarted")
        return True

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------
    def advance(self):
        """Run one tick and return the number of bricks cleared by it."""
        if self.game_over:
            return 0

        self.steps += 1

        self.ball_x += self.ball_vel[0]
        self.ball_y += self.ball_vel[1]

        self._clamp_paddle()
        self._handle_wall_collisions()
        self._handle_paddle_collision()
        cleared = self._handle_brick_collisions()
        self._handle_ball_drop()
        self._update_powerups()

        if not self.bricks.any():
            self._next_level()

        return cleared

    def _clamp_paddle(self):
        self.paddle_x = max(0, min(self.paddle_x, self.SCREEN_WIDTH - self.paddle_width))

    def _handle_wall_collisions(self):
        if self.ball_x < 0 or self.ball_x > self.SCREEN_WIDTH - self.BALL_SIZE:
            self.ball_vel[0] = -self.ball_vel[0]
        if self.ball_y < 0:
            self.ball_vel[1] = -self.ball_vel[1]

    def _handle_paddle_collision(self):
        # Flat bounce: only vy changes, wherever the ball lands on the paddle.
        if (
            self.ball_y > self.PADDLE_BOUNCE_LINE
            and self.ball_x + self.BALL_SIZE > self.paddle_x
            and self.ball_x < self.paddle_x + self.paddle_width
        ):
            self.ball_vel[1] = -self.ball_vel[1]

    def _handle_brick_collisions(self):
        # Only the ball's top-left corner is tested, and every matching cell
        # counts, so a single tick may clear more than one brick.
        cleared = 0
        for row in range(self.BRICK_ROWS):
            for col in range(self.BRICK_COLS):
                if not self.bricks[row, col]:
                    continue
                cell = self.brick_rect(row, col)
                if cell.left < self.ball_x < cell.right and cell.top < self.ball_y < cell.bottom:
                    self.bricks[row, col] = False
                    self.ball_vel[1] = -self.ball_vel[1]
                    self.score += self.BRICK_POINTS
                    cleared += 1
                    if self.np_random.random() < self.POWERUP_CHANCE:
                        self._spawn_powerup(cell.left + self.BRICK_WIDTH // 2, cell.top)
        return cleared

    def _handle_ball_drop(self):
        if self.ball_y <= self.BALL_DROP_LINE:
            return
        self.lives -= 1
        if self.lives == 0:
            self.game_over = True
            logger.info("Game over at level %d with score %d", self.level, self.score)
        else:
            logger.info("Ball lost, %d lives left", self.lives)
            self._reset_ball()

    def _spawn_powerup(self, x, y):
        self.powerups.append(pygame.Rect(x, y, self.POWERUP_SIZE, self.POWERUP_SIZE))
        logger.debug("Power-up spawned at (%d, %d)", x, y)

    def _update_powerups(self):
        paddle = self.paddle_rect
        survivors = []
        for p_up in self.powerups:
            p_up.y += self.POWERUP_FALL_SPEED
            if p_up.colliderect(paddle):
                self.paddle_width += self.PADDLE_GROWTH
                logger.debug("Power-up collected, paddle width now %d", self.paddle_width)
                continue
            if p_up.y > self.SCREEN_HEIGHT:
                continue
            survivors.append(p_up)
        self.powerups = survivors
        # A wider paddle may now poke past the right wall.
        self._clamp_paddle()

    def _next_level(self):
        self.level += 1
        # Applied to the sign-carrying components as-is; _reset_ball() then
        # restores the base speed.
        self.ball_vel[0] += 1
        self.ball_vel[1] += 1
        self.paddle_width = max(self.PADDLE_WIDTH_MIN, self.paddle_width - self.PADDLE_SHRINK)
        self._init_bricks()
        self._reset_ball()
        logger.info("Level %d reached, paddle width %d", self.level, self.paddle_width)

    # ------------------------------------------------------------------
    # Reset helpers
    # ------------------------------------------------------------------
    def _init_bricks(self):
        self.bricks = np.ones((self.BRICK_ROWS, self.BRICK_COLS), dtype=bool)

    def _reset_ball(self):
        self.ball_x = self.SCREEN_WIDTH // 2 - self.BALL_SIZE // 2
        self.ball_y = self.SCREEN_HEIGHT // 2 - self.BALL_SIZE // 2
        self.ball_vel = list(self.BALL_SPEED_INITIAL)

    def _reset_session(self):
        self.game_over = False
        self.score = 0
        self.lives = self.INITIAL_LIVES
        self.level = 1
        self.steps = 0
        self.paddle_width = self.PADDLE_WIDTH_INITIAL
        self.paddle_x = self.SCREEN_WIDTH // 2 - self.PADDLE_WIDTH_INITIAL // 2
        self.powerups = []
        self._init_bricks()
        self._reset_ball()
