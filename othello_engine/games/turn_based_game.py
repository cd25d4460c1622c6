from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, Sequence, Tuple, TypeVar

P = TypeVar("P")  # player type
Move = Tuple[int, int]


class TurnBasedGame(ABC, Generic[P]):
    """
    Common interface for a deterministic two-player perfect-information game.

    The game object owns its position; callers only get snapshots back and
    change the position through :meth:`apply`.
    """

    @abstractmethod
    def legal_moves(self) -> Sequence[Move]:
        """All legal moves for the side to move."""

    @abstractmethod
    def apply(self, row: int, col: int) -> bool:
        """Play a move for the side to move. Returns False if it is illegal."""

    @property
    @abstractmethod
    def current_player(self) -> P:
        """Which side moves now."""

    @abstractmethod
    def is_game_over(self) -> bool:
        """Is the position terminal?"""

    @abstractmethod
    def winner(self) -> Optional[P]:
        """
        Who won:

        * the winning player on a finished game
        * None: draw, or the game is not finished yet
        """

    @abstractmethod
    def copy(self) -> "TurnBasedGame[P]":
        """Fully independent copy of the game."""
