"""CLI for playing agent vs agent."""

import logging
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import tyro

from othello_engine.agents import BaseAgent
from othello_engine.config import AgentConfig, MatchConfig, MatchSettings, load_config
from othello_engine.registry import make_agent
from othello_engine.utils import play_match


def _build_agent(config: AgentConfig, seed: Optional[int]) -> BaseAgent:
    params: Dict[str, Any] = dict(config.params)
    if config.id == "random" and seed is not None:
        params.setdefault("seed", seed)
    return make_agent(config.id, **params)


def play_agent_vs_agent(
    black: Literal["greedy", "random"] = "greedy",
    white: Literal["greedy", "random"] = "random",
    config: Optional[Path] = None,
    num_games: int = 1,
    alternate_colors: bool = True,
    render: bool = True,
    seed: int = 42,
    log_level: str = "WARNING",
):
    """
    Play agent vs agent games.

    Args:
        black: Agent playing Black in the first game
        white: Agent playing White in the first game
        config: YAML match config; overrides the agent and match options when given
        num_games: Number of games to play
        alternate_colors: Swap colors after every game
        render: Whether to print the games move by move
        seed: Random seed
        log_level: Logging level for the engine and match runner
    """
    logging.basicConfig(level=log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if config is not None:
        match_config = load_config(config)
    else:
        match_config = MatchConfig(
            black=AgentConfig(id=black),
            white=AgentConfig(id=white),
            match=MatchSettings(num_games=num_games, alternate_colors=alternate_colors, render=render),
            seed=seed,
        )

    base_seed = match_config.seed
    agent1 = _build_agent(match_config.black, base_seed)
    agent2 = _build_agent(match_config.white, None if base_seed is None else base_seed + 1)
    settings = match_config.match

    print("=" * 50)
    print("Othello - Agent vs Agent")
    print("=" * 50)
    print(f"Agent 1: {match_config.black.id}")
    print(f"Agent 2: {match_config.white.id}")
    print(f"Games: {settings.num_games}")
    print("=" * 50)
    print()

    agent1_wins, draws, agent2_wins = play_match(
        agent1,
        agent2,
        num_games=settings.num_games,
        seed=base_seed,
        alternate_colors=settings.alternate_colors,
        render=settings.render,
    )

    total = settings.num_games
    print("=" * 50)
    print("Results Summary")
    print("=" * 50)
    print(f"Agent 1 wins: {agent1_wins} ({agent1_wins/total*100:.1f}%)")
    print(f"Agent 2 wins: {agent2_wins} ({agent2_wins/total*100:.1f}%)")
    print(f"Draws: {draws} ({draws/total*100:.1f}%)")
    print("=" * 50)


def main() -> None:
    tyro.cli(play_agent_vs_agent)


if __name__ == "__main__":
    main()
