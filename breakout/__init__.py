from breakout.state import GameState

__all__ = ["GameState"]
