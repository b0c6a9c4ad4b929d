"""Game management layer — turn tracking on top of the rules engine."""

from termchess.game.session import GameSession

__all__ = ["GameSession"]
