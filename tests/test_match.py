"""Tests for the match runner."""

import logging

from othello_engine.agents import GreedyAgent, RandomAgent
from othello_engine.games.othello import BOARD_SIZE, OthelloEngine, Player
from othello_engine.utils import play_game, play_match


def test_play_game_greedy_vs_greedy():
    record = play_game(GreedyAgent(), GreedyAgent())

    black, white = record.score
    assert black + white == BOARD_SIZE * BOARD_SIZE
    assert record.moves[0] == (Player.BLACK, (2, 3))
    assert record.num_moves == len(record.moves)
    assert record.num_moves <= BOARD_SIZE * BOARD_SIZE - 4
    if black > white:
        assert record.winner is Player.BLACK
    elif white > black:
        assert record.winner is Player.WHITE
    else:
        assert record.winner is None


def test_play_game_is_deterministic_for_greedy():
    first = play_game(GreedyAgent(), GreedyAgent())
    second = play_game(GreedyAgent(), GreedyAgent())

    assert first.moves == second.moves
    assert first.score == second.score


def test_play_game_continues_given_engine():
    engine = OthelloEngine()
    engine.apply(2, 3)

    record = play_game(RandomAgent(seed=0), RandomAgent(seed=1), engine=engine)

    assert record.moves[0][0] is Player.WHITE
    assert engine.is_game_over()
    assert record.score == engine.score()


def test_play_game_on_finished_game():
    engine = OthelloEngine()
    while not engine.is_game_over():
        engine.apply(*engine.computer_move())

    record = play_game(GreedyAgent(), GreedyAgent(), engine=engine)

    assert record.moves == []
    assert record.score == engine.score()


def test_play_game_counts_skips():
    record = play_game(RandomAgent(seed=3), GreedyAgent())

    movers = [player for player, _ in record.moves]
    repeats = sum(1 for prev, cur in zip(movers, movers[1:]) if prev is cur)
    assert record.skips > 0
    assert record.skips == repeats


def test_play_game_render(capsys):
    play_game(GreedyAgent(), GreedyAgent(), render=True)

    out = capsys.readouterr().out
    assert "Black plays (2, 3)" in out
    assert "Current player: O" in out


def test_play_match_alternates_colors():
    wins1, draws, wins2 = play_match(GreedyAgent(), GreedyAgent(), num_games=2)

    assert wins1 + draws + wins2 == 2
    # Both games are identical, only the seats are swapped.
    assert wins1 == wins2


def test_play_match_fixed_colors():
    wins1, draws, wins2 = play_match(GreedyAgent(), GreedyAgent(), num_games=3, alternate_colors=False)

    assert wins1 + draws + wins2 == 3
    assert 3 in (wins1, draws, wins2)


def test_play_match_random_vs_greedy(caplog):
    with caplog.at_level(logging.INFO, logger="othello_engine.utils.match"):
        wins1, draws, wins2 = play_match(RandomAgent(seed=5), GreedyAgent(), num_games=4, seed=11)

    assert wins1 + draws + wins2 == 4
    assert "Match" in caplog.text


def test_play_match_seed_makes_the_tally_reproducible():
    def tally():
        return play_match(RandomAgent(), RandomAgent(), num_games=20, seed=123)

    first = tally()
    assert sum(first) == 20
    assert all(tally() == first for _ in range(3))


def test_play_match_logs_agent_names(caplog):
    with caplog.at_level(logging.INFO, logger="othello_engine.utils.match"):
        play_game(RandomAgent(seed=2), GreedyAgent())

    assert "random (Black) vs greedy (White)" in caplog.text
