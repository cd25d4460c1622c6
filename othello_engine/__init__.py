"""Othello (Reversi) rule engine with a one-ply greedy computer player."""

from .games.othello import OthelloEngine, OthelloState, Player

__all__ = ["OthelloEngine", "OthelloState", "Player"]

__version__ = "0.1.0"
