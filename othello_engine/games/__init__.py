from __future__ import annotations

from .turn_based_game import TurnBasedGame
from .othello import OthelloEngine

__all__ = ["TurnBasedGame", "OthelloEngine"]
