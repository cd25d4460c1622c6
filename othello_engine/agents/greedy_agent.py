"""Greedy agent: maximise the immediate piece count."""

from typing import Optional

from ..games.othello import Move, OthelloEngine
from ..registry import register_agent
from .base_agent import BaseAgent


@register_agent("greedy")
class GreedyAgent(BaseAgent):
    """
    One-ply greedy computer player.

    Strategy:
    1. Play every legal move on a copy of the game
    2. Keep the move that leaves the mover with the most pieces
    3. On equal gain keep the earliest move in row-major order

    There is no look-ahead, so the agent happily gives away corners.
    """

    name = "greedy"

    def act(
        self,
        engine: OthelloEngine,
        deterministic: bool = False,
    ) -> Optional[Move]:
        # The choice is already deterministic.
        return engine.computer_move()
