"""Shared utilities for Othello game logic."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..turn_based_game import Move
from .player import Player

BOARD_SIZE = 8
EMPTY = 0

DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def initial_board(size: int = BOARD_SIZE) -> np.ndarray:
    """Standard opening: White on the main diagonal of the centre, Black on the other."""
    board = np.zeros((size, size), dtype=np.int8)

    mid = size // 2
    board[mid - 1, mid - 1] = Player.WHITE.value
    board[mid - 1, mid] = Player.BLACK.value
    board[mid, mid - 1] = Player.BLACK.value
    board[mid, mid] = Player.WHITE.value
    return board


def in_bounds(row: int, col: int, size: int = BOARD_SIZE) -> bool:
    return 0 <= row < size and 0 <= col < size


def get_flips_in_direction(
    board: np.ndarray,
    row: int,
    col: int,
    dr: int,
    dc: int,
    player: Player,
) -> List[Move]:
    """
    Opponent pieces bracketed by ``player`` when playing (row, col), along one direction.

    Args:
        board: Game board array.
        row: Row of the candidate square.
        col: Column of the candidate square.
        dr: Row step of the direction.
        dc: Column step of the direction.
        player: Side placing the piece.

    Returns:
        Positions that would flip in this direction; empty when the run of
        opponent pieces is not closed by one of the player's own pieces.
    """
    size = board.shape[0]
    opponent = player.opponent
    flipped: List[Move] = []

    r, c = row + dr, col + dc
    while in_bounds(r, c, size) and board[r, c] != EMPTY:
        if board[r, c] == opponent.value:
            flipped.append((r, c))
            r += dr
            c += dc
        else:
            return flipped
    return []


def get_flips(board: np.ndarray, row: int, col: int, player: Player) -> List[Move]:
    """
    Get all pieces that would be flipped by ``player`` placing a piece at (row, col).

    Returns an empty list for occupied or off-board squares.
    """
    if not in_bounds(row, col, board.shape[0]) or board[row, col] != EMPTY:
        return []

    flips: List[Move] = []
    for dr, dc in DIRECTIONS:
        flips.extend(get_flips_in_direction(board, row, col, dr, dc, player))
    return flips


def is_valid_move(board: np.ndarray, row: int, col: int, player: Player) -> bool:
    if not in_bounds(row, col, board.shape[0]) or board[row, col] != EMPTY:
        return False
    return any(
        get_flips_in_direction(board, row, col, dr, dc, player)
        for dr, dc in DIRECTIONS
    )


def legal_moves_for(board: np.ndarray, player: Player) -> Tuple[Move, ...]:
    """All legal moves for ``player`` in row-major order."""
    size = board.shape[0]
    return tuple(
        (row, col)
        for row in range(size)
        for col in range(size)
        if is_valid_move(board, row, col, player)
    )


def count_pieces(board: np.ndarray) -> Tuple[int, int]:
    """
    Count pieces for each player.

    Returns:
        Tuple of (black_count, white_count).
    """
    black_count = np.sum(board == Player.BLACK.value)
    white_count = np.sum(board == Player.WHITE.value)
    return int(black_count), int(white_count)


def cell_value(token: int) -> Optional[Player]:
    """Translate a board token into the public cell value."""
    if token == EMPTY:
        return None
    return Player(int(token))


def render_board(
    board: np.ndarray,
    legal_moves: Sequence[Move] = (),
) -> str:
    """Plain-text board, Black as ``X``, White as ``O`` and legal moves as ``.``."""
    size = board.shape[0]
    hints = set(legal_moves)
    lines = [
        "=" * (size * 2 + 3),
        "  " + " ".join(str(i) for i in range(size)),
        "=" * (size * 2 + 3),
    ]
    for row in range(size):
        row_str = f"{row}|"
        for col in range(size):
            value = cell_value(board[row, col])
            if value is not None:
                row_str += value.symbol + "|"
            elif (row, col) in hints:
                row_str += ".|"
            else:
                row_str += " |"
        lines.append(row_str)
    lines.append("=" * (size * 2 + 3))
    return "\n".join(lines)
