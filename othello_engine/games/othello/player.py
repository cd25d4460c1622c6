"""Othello players."""

from __future__ import annotations

from enum import Enum


class Player(Enum):
    """
    Side to move.

    The value is the token stored on the numpy board
    (``1`` for Black, ``-1`` for White, ``0`` means an empty square).
    """

    BLACK = 1
    WHITE = -1

    @property
    def opponent(self) -> "Player":
        if self is Player.BLACK:
            return Player.WHITE
        return Player.BLACK

    @property
    def symbol(self) -> str:
        """Single-character symbol used when printing the board."""
        if self is Player.BLACK:
            return "X"
        return "O"

    def __str__(self) -> str:
        return self.name.capitalize()
