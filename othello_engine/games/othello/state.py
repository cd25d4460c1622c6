"""Othello game state dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .player import Player


@dataclass
class OthelloState:
    board: np.ndarray
    current_player: Player
    legal_moves: Tuple[Tuple[int, int], ...] = ()
    last_move: Optional[Tuple[int, int]] = None
