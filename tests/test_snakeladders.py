import io
import random

import pytest

from arcadebox.snakeladders import (
    FINAL_SQUARE,
    SNAKES_AND_LADDERS,
    move_player,
    play_snake_ladders,
    render_board,
    roll_die,
)


def test_roll_die_range_and_coverage():
    rng = random.Random(0)
    rolls = {roll_die(rng) for _ in range(300)}
    assert rolls == set(range(1, 7))


def test_ladder_at_six():
    assert move_player(0, 6) == 46


def test_snake_at_twenty_three():
    assert move_player(20, 3) == 13


def test_snake_at_ninety_eight():
    assert move_player(95, 3) == 88


def test_exact_finish():
    assert move_player(99, 1) == FINAL_SQUARE


@pytest.mark.parametrize("position,roll", [(96, 5), (100, 1), (99, 6)])
def test_overshoot_stays(position, roll):
    assert move_player(position, roll) == position


@pytest.mark.parametrize("position", [0, 10, 30, 50, 80])
def test_plain_squares_never_move_backwards_by_themselves(position):
    for roll in range(1, 7):
        if position + roll not in SNAKES_AND_LADDERS:
            assert move_player(position, roll) == position + roll


def _rows(text):
    return [line.split() for line in text.split("\n") if line.strip()]


def test_render_board_layout():
    rows = _rows(render_board(0, 0))
    assert len(rows) == 10
    assert all(len(row) == 10 for row in rows)
    assert {int(token) for row in rows for token in row} == set(range(1, 101))
    assert rows[0][0] == "100"
    assert rows[-1][0] == "1"
    for index, row in enumerate(rows):
        numbers = [int(token) for token in row]
        expected_order = sorted(numbers, reverse=index % 2 == 0)
        assert numbers == expected_order


def test_render_board_markers():
    rows = _rows(render_board(5, 100))
    assert rows[-1][4] == "#P1"
    assert rows[0][0] == "#P2"


def test_render_board_shared_square_shows_player_one():
    text = render_board(42, 42)
    assert "#P1" in text
    assert "#P2" not in text


def test_render_board_spacing():
    text = render_board(0, 0)
    assert text.startswith("100    99    ")
    assert text.endswith("\n\n\n")


@pytest.mark.parametrize("seed", range(3))
def test_play_snake_ladders_has_winner(seed):
    out = io.StringIO()
    winner = play_snake_ladders(random.Random(seed), lambda: "", out)
    assert winner in (1, 2)
    text = out.getvalue()
    assert text.startswith("Snake and Ladder Game\n")
    assert f"Player {winner} wins!" in text
    assert f"Player {winner} is now at square {FINAL_SQUARE}." in text