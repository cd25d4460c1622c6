"""CLI for playing against agent."""

import logging
from typing import Callable, Literal, Optional

import tyro

import othello_engine.agents  # noqa: F401 - registers the default agents
from othello_engine.games.othello import Move, OthelloEngine, Player
from othello_engine.registry import make_agent


def parse_move(text: str) -> Optional[Move]:
    """Parse ``"row col"`` (or ``"row,col"``) into a move; None if malformed."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def play_human_move(engine: OthelloEngine, read: Callable[[str], str] = input) -> Move:
    """Ask until the human enters a legal move, then play it."""
    while True:
        move = parse_move(read("Enter row and column: "))
        if move is None:
            print("Please enter two numbers, e.g. '2 3'!")
        elif engine.apply(*move):
            return move
        else:
            print(f"Invalid move! Legal moves: {list(engine.legal_moves())}")


def play_human_vs_agent(
    agent_type: Literal["greedy", "random"] = "greedy",
    human_color: Literal["black", "white"] = "black",
    seed: int = 42,
    log_level: str = "WARNING",
):
    """
    Play a game against an agent.

    Args:
        agent_type: Type of agent ('greedy' or 'random')
        human_color: Color the human plays; Black moves first
        seed: Random seed
        log_level: Logging level for the engine
    """
    logging.basicConfig(level=log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    params = {"seed": seed} if agent_type == "random" else {}
    agent = make_agent(agent_type, **params)
    human = Player[human_color.upper()]
    engine = OthelloEngine()

    print("=" * 50)
    print("Othello - Human vs Agent")
    print("=" * 50)
    print(f"Agent type: {agent_type}")
    print(f"Human plays: {human} ({human.symbol})")
    print("=" * 50)
    print()

    while not engine.is_game_over():
        print(engine.render())
        mover = engine.current_player

        if mover is human:
            print(f"Your turn! Legal moves: {list(engine.legal_moves())}")
            play_human_move(engine)
        else:
            print("Agent's turn...")
            move = agent.act(engine)
            if move is None:
                break
            engine.apply(*move)
            print(f"Agent played: {move}")

        if not engine.is_game_over() and engine.current_player is mover:
            print(f"{mover.opponent} has no legal move and passes.")
        print()

    print(engine.render())
    winner = engine.winner()
    if winner is None:
        print("It's a draw!")
    elif winner is human:
        print("You win!")
    else:
        print("Agent wins!")


def main() -> None:
    tyro.cli(play_human_vs_agent)


if __name__ == "__main__":
    main()
