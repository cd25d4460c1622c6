"""Othello rules package."""

from .engine import OthelloEngine
from .player import Player
from .state import OthelloState
from .utils import BOARD_SIZE, DIRECTIONS, Move, render_board

__all__ = [
    "BOARD_SIZE",
    "DIRECTIONS",
    "Move",
    "OthelloEngine",
    "OthelloState",
    "Player",
    "render_board",
]
