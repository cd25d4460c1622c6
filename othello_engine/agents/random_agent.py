"""Random agent implementation."""

import random
from typing import Optional

from ..games.othello import Move, OthelloEngine
from ..registry import register_agent
from .base_agent import BaseAgent


@register_agent("random")
class RandomAgent(BaseAgent):
    """Agent that selects moves uniformly from the legal moves."""

    name = "random"

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize random agent.

        Args:
            seed: Random seed for reproducibility
        """
        self.seed = seed
        self._rng = random.Random(seed)

    def act(
        self,
        engine: OthelloEngine,
        deterministic: bool = False,
    ) -> Optional[Move]:
        """
        Select a random legal move.

        Args:
            engine: Game to move in
            deterministic: If True, always take the first legal move

        Returns:
            Selected (row, col), or None when there is no legal move
        """
        legal_moves = engine.legal_moves()
        if not legal_moves:
            return None
        if deterministic:
            return legal_moves[0]
        return self._rng.choice(legal_moves)

    def reseed(self, seed: int) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def __repr__(self) -> str:
        return f"RandomAgent(seed={self.seed!r})"
