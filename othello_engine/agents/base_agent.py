"""Base agent interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..games.othello import Move, OthelloEngine


class BaseAgent(ABC):
    """Base class for computer players."""

    name: str = "agent"

    @abstractmethod
    def act(
        self,
        engine: OthelloEngine,
        deterministic: bool = False,
    ) -> Optional[Move]:
        """
        Pick a move for the side to move in ``engine``.

        Agents only advise; feeding the move back into ``engine.apply`` is
        the caller's job. Returns None when the side to move has no legal move.
        """

    def reseed(self, seed: int) -> None:
        """Restart the agent's random stream. Deterministic agents ignore it."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
