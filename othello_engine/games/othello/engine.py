"""Othello game engine (stateful, owns the board)."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from ..turn_based_game import TurnBasedGame
from .player import Player
from .state import OthelloState
from .utils import (
    BOARD_SIZE,
    Move,
    cell_value,
    count_pieces,
    get_flips,
    initial_board,
    is_valid_move,
    legal_moves_for,
    render_board,
)

logger = logging.getLogger(__name__)


class OthelloEngine(TurnBasedGame[Player]):
    """
    Othello rules on a single 8x8 position.

    The engine is the only owner of its board. Every query hands out a copy,
    and the position only changes through :meth:`apply` (or the explicit
    position loaders :meth:`reset` and :meth:`set_state`).
    """

    def __init__(self) -> None:
        self.size = BOARD_SIZE
        self._board: np.ndarray = initial_board(self.size)
        self._current_player = Player.BLACK
        self._legal_moves: Tuple[Move, ...] = ()
        self._last_move: Optional[Move] = None
        self._update_legal_moves()

    @classmethod
    def from_state(cls, state: OthelloState) -> "OthelloEngine":
        """Build an engine positioned at ``state``."""
        engine = cls()
        engine.set_state(state)
        return engine

    def reset(self) -> None:
        """Back to the opening position with Black to move."""
        self._board = initial_board(self.size)
        self._current_player = Player.BLACK
        self._last_move = None
        self._update_legal_moves()

    # --- queries ---

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def last_move(self) -> Optional[Move]:
        return self._last_move

    def board(self) -> List[List[Optional[Player]]]:
        """Snapshot of the board, ``None`` marks an empty square."""
        return [
            [cell_value(self._board[row, col]) for col in range(self.size)]
            for row in range(self.size)
        ]

    def board_array(self) -> np.ndarray:
        """Snapshot of the raw token board (1 Black, -1 White, 0 empty)."""
        return self._board.copy()

    def legal_moves(self) -> Tuple[Move, ...]:
        return self._legal_moves

    def is_legal(self, row: int, col: int) -> bool:
        return is_valid_move(self._board, row, col, self._current_player)

    def flips(self, row: int, col: int) -> List[Move]:
        """Pieces the side to move would flip by playing (row, col)."""
        return get_flips(self._board, row, col, self._current_player)

    def score(self) -> Tuple[int, int]:
        """(black_count, white_count)"""
        return count_pieces(self._board)

    def is_game_over(self) -> bool:
        if self._legal_moves:
            return False
        # The opponent's moves are computed from the board alone, so probing
        # never touches the side to move or the cached legal moves.
        return not legal_moves_for(self._board, self._current_player.opponent)

    def winner(self) -> Optional[Player]:
        if not self.is_game_over():
            return None
        black_count, white_count = self.score()
        if black_count > white_count:
            return Player.BLACK
        if white_count > black_count:
            return Player.WHITE
        return None

    # --- mutation ---

    def apply(self, row: int, col: int) -> bool:
        if not self.is_legal(row, col):
            return False

        mover = self._current_player
        flipped = get_flips(self._board, row, col, mover)
        self._board[row, col] = mover.value
        for flip_row, flip_col in flipped:
            self._board[flip_row, flip_col] = mover.value
        self._last_move = (row, col)
        logger.debug("%s plays %s flipping %d", mover, (row, col), len(flipped))

        self._switch_player()
        self._update_legal_moves()
        if not self._legal_moves:
            logger.debug("%s has no legal move, turn passes back to %s", self._current_player, mover)
            self._switch_player()
            self._update_legal_moves()
            if not self._legal_moves:
                # Both sides are stuck; the mover stays as the double switch left it.
                logger.debug("Game over, score %s", self.score())
        return True

    # --- automated player ---

    def computer_move(self) -> Optional[Move]:
        """
        One-ply greedy choice for the side to move.

        Each legal move is played on an independent copy of the engine and
        scored by how many pieces the mover gains. The first move (row-major)
        with the largest gain wins; ``None`` when there is nothing to play.
        """
        if not self._legal_moves:
            return None

        mover_index = 0 if self._current_player is Player.BLACK else 1
        pieces_before = self.score()[mover_index]

        best_move: Optional[Move] = None
        max_gain = -1
        for move in self._legal_moves:
            simulation = self.copy()
            simulation.apply(*move)
            gain = simulation.score()[mover_index] - pieces_before
            if gain > max_gain:
                max_gain = gain
                best_move = move

        return best_move

    # --- snapshots ---

    def copy(self) -> "OthelloEngine":
        return OthelloEngine.from_state(self.get_state())

    def get_state(self) -> OthelloState:
        return OthelloState(
            board=self._board.copy(),
            current_player=self._current_player,
            legal_moves=self._legal_moves,
            last_move=self._last_move,
        )

    def set_state(self, state: OthelloState) -> None:
        """
        Load an arbitrary position.

        The legal moves stored on ``state`` are ignored and recomputed from
        the board, so the cache always matches the loaded position.
        """
        board = np.asarray(state.board, dtype=np.int8)
        if board.shape != (self.size, self.size):
            raise ValueError(f"Board must be {self.size}x{self.size}, got {board.shape}")
        self._board = board.copy()
        self._current_player = Player(state.current_player)
        self._last_move = state.last_move
        self._update_legal_moves()

    def render(self) -> str:
        black_count, white_count = self.score()
        lines = [render_board(self._board, self._legal_moves)]
        lines.append(f"X: {black_count}, O: {white_count}")
        if self.is_game_over():
            winner = self.winner()
            lines.append(f"{winner} wins!" if winner is not None else "Draw!")
        else:
            lines.append(f"Current player: {self._current_player.symbol}")
        return "\n".join(lines)

    # --- private helpers ---

    def _switch_player(self) -> None:
        self._current_player = self._current_player.opponent

    def _update_legal_moves(self) -> None:
        self._legal_moves = legal_moves_for(self._board, self._current_player)
