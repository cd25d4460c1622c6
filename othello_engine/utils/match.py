"""Utilities for playing games between agents."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..agents.base_agent import BaseAgent
from ..games.othello import Move, OthelloEngine, Player

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    """Outcome of a single finished game."""

    score: Tuple[int, int]
    winner: Optional[Player]
    moves: List[Tuple[Player, Move]] = field(default_factory=list)
    skips: int = 0

    @property
    def num_moves(self) -> int:
        return len(self.moves)


def play_game(
    black_agent: BaseAgent,
    white_agent: BaseAgent,
    engine: Optional[OthelloEngine] = None,
    render: bool = False,
) -> GameRecord:
    """
    Play one game to the end.

    Args:
        black_agent: Agent moving for Black
        white_agent: Agent moving for White
        engine: Optional engine to continue from. If None, starts from the opening.
        render: Print the board after every move.

    Returns:
        GameRecord with the final score, winner, move list and forced skip count.
    """
    if engine is None:
        engine = OthelloEngine()
    agents = {Player.BLACK: black_agent, Player.WHITE: white_agent}

    moves: List[Tuple[Player, Move]] = []
    skips = 0

    if render:
        print(engine.render())

    while not engine.is_game_over():
        mover = engine.current_player
        move = agents[mover].act(engine)
        if move is None:
            break

        if not engine.apply(*move):
            # Agents choose from the legal moves, so this is a bug in the agent.
            raise RuntimeError(f"{agents[mover]!r} chose illegal move {move} for {mover}")
        moves.append((mover, move))

        if engine.current_player is mover and not engine.is_game_over():
            skips += 1

        if render:
            print(f"\n{mover} plays {move}")
            print(engine.render())

    record = GameRecord(
        score=engine.score(),
        winner=engine.winner(),
        moves=moves,
        skips=skips,
    )
    logger.info(
        "Game %s (Black) vs %s (White) finished after %d moves: score %s, winner %s",
        black_agent.name,
        white_agent.name,
        record.num_moves,
        record.score,
        record.winner if record.winner is not None else "draw",
    )
    return record


def play_match(
    agent1: BaseAgent,
    agent2: BaseAgent,
    num_games: int = 10,
    seed: Optional[int] = None,
    alternate_colors: bool = True,
    render: bool = False,
) -> Tuple[int, int, int]:
    """
    Play a match between two agents.

    Args:
        agent1: First agent, plays Black in the first game
        agent2: Second agent
        num_games: Number of games to play
        seed: If given, both agents are reseeded before every game
              (``seed + 2 * game_idx`` and the next value), so the tally is reproducible
        alternate_colors: If True, agents swap colors every game.
                          If False, agent1 always plays Black.
        render: Print every game move by move.

    Returns:
        Tuple of (agent1_wins, draws, agent2_wins).
    """
    agent1_wins = 0
    draws = 0
    agent2_wins = 0

    for game_idx in range(num_games):
        if seed is not None:
            agent1.reseed(seed + 2 * game_idx)
            agent2.reseed(seed + 2 * game_idx + 1)

        agent1_is_black = not alternate_colors or game_idx % 2 == 0
        if agent1_is_black:
            record = play_game(agent1, agent2, render=render)
        else:
            record = play_game(agent2, agent1, render=render)

        if record.winner is None:
            draws += 1
        elif (record.winner is Player.BLACK) == agent1_is_black:
            agent1_wins += 1
        else:
            agent2_wins += 1

    logger.info(
        "Match %r vs %r over %d games: %d-%d-%d",
        agent1,
        agent2,
        num_games,
        agent1_wins,
        draws,
        agent2_wins,
    )
    return agent1_wins, draws, agent2_wins
