import os

import gymnasium as gym
import numpy as np
import pygame
from gymnasium.spaces import MultiDiscrete

from breakout.render import Renderer
from breakout.state import GameState

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class GameEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"], "render_fps": GameState.FPS}

    # Must be a short, user-facing control string:
    user_guide = "Controls: ← and → move the paddle. Press space to restart after a game over."

    # Must be a short, user-facing description of the game:
    game_description = (
        "Classic Breakout. Clear all 50 bricks to reach the next level, catch yellow "
        "power-ups to widen the paddle, and lose the ball 3 times to end the game."
    )

    # Should frames auto-advance or wait for user input?
    auto_advance = True

    MAX_STEPS = 10000

    # Rewards
    REWARD_BRICK = 1.0
    REWARD_LIFE_LOST = -10.0
    REWARD_LEVEL = 50.0

    def __init__(self, render_mode="rgb_array"):
        super().__init__()
        self.render_mode = render_mode

        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(GameState.SCREEN_HEIGHT, GameState.SCREEN_WIDTH, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        pygame.init()
        self.screen = pygame.Surface((GameState.SCREEN_WIDTH, GameState.SCREEN_HEIGHT))
        self.renderer = Renderer(self.screen)

        # Initialized in reset()
        self.state = None

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        self.state = GameState(np_random=self.np_random)
        return self._get_observation(), self._get_info()

    def step(self, action):
        if not self.action_space.contains(np.asarray(action, dtype=np.int64)):
            raise ValueError(f"Invalid action {action!r} for action space {self.action_space}")

        movement, space_held = int(action[0]), int(action[1])
        state = self.state

        if space_held and state.game_over:
            state.restart()

        if movement == 3:  # Left
            state.move_left()
        elif movement == 4:  # Right
            state.move_right()

        lives_before, level_before = state.lives, state.level
        cleared = state.advance()

        reward = cleared * self.REWARD_BRICK
        reward += (lives_before - state.lives) * self.REWARD_LIFE_LOST
        reward += (state.level - level_before) * self.REWARD_LEVEL

        terminated = state.game_over
        truncated = not terminated and state.steps >= self.MAX_STEPS

        return (
            self._get_observation(),
            reward,
            terminated,
            truncated,
            self._get_info(),
        )

    def render(self):
        return self._get_observation()

    def _get_observation(self):
        self.renderer.draw(self.state)
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _get_info(self):
        return {
            "score": self.state.score,
            "steps": self.state.steps,
            "lives": self.state.lives,
            "level": self.state.level,
            "bricks_left": self.state.bricks_left,
            "powerups": len(self.state.powerups),
        }

    def close(self):
        pygame.quit()
