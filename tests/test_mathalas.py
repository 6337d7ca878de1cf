import io
import random
import re

import pytest

from arcadebox.mathalas import (
    BOSS_HP,
    PLAYER_HP,
    BossFight,
    Question,
    boss_battle,
    make_question,
    play_math_alas,
)


def _feed(lines):
    queue = list(lines)

    def reply():
        if not queue:
            raise EOFError("no more input")
        return queue.pop(0)

    return reply


def test_question_answer_addition():
    assert Question(3, "+", 4).answer() == 7


def test_question_answer_subtraction():
    assert Question(3, "-", 4).answer() == -1


def test_question_text():
    assert Question(12, "-", 5).text() == "12 - 5"


@pytest.mark.parametrize("seed", range(20))
def test_make_question_in_range(seed):
    question = make_question(random.Random(seed), 1, 20)
    assert 1 <= question.left <= 20
    assert 1 <= question.right <= 20
    assert question.op in ("+", "-")


def test_make_question_uses_both_operators():
    rng = random.Random(0)
    ops = {make_question(rng, 0, 99).op for _ in range(100)}
    assert ops == {"+", "-"}


def test_play_math_alas_all_correct():
    shadow = random.Random(5)
    answers = [str(make_question(shadow, 0, 99).answer()) for _ in range(10)]
    out = io.StringIO()
    score = play_math_alas(random.Random(5), _feed(answers), out)
    assert score == 10
    assert "Game over! Your score: 10 out of 10" in out.getvalue()


def test_play_math_alas_all_wrong():
    shadow = random.Random(9)
    answers = [str(make_question(shadow, 0, 99).answer() + 1) for _ in range(3)]
    out = io.StringIO()
    score = play_math_alas(random.Random(9), _feed(answers), out, rounds=3)
    assert score == 0
    assert out.getvalue().count("Incorrect! The correct answer was") == 3


def test_play_math_alas_recovers_from_invalid_input():
    shadow = random.Random(2)
    answers = [str(make_question(shadow, 0, 99).answer()) for _ in range(2)]
    out = io.StringIO()
    score = play_math_alas(random.Random(2), _feed(["oops"] + answers), out, rounds=2)
    assert score == 2
    assert "Invalid input! Please enter a number." in out.getvalue()


def test_boss_fight_starts_full():
    fight = BossFight()
    assert (fight.player_hp, fight.boss_hp) == (PLAYER_HP, BOSS_HP)
    assert not fight.over()


@pytest.mark.parametrize("seed", range(10))
def test_resolve_correct_hits_boss(seed):
    fight = BossFight()
    damage = fight.resolve(True, random.Random(seed))
    assert 10 <= damage <= 30
    assert fight.boss_hp == BOSS_HP - damage
    assert fight.player_hp == PLAYER_HP


@pytest.mark.parametrize("seed", range(10))
def test_resolve_wrong_hits_player(seed):
    fight = BossFight()
    damage = fight.resolve(False, random.Random(seed))
    assert 5 <= damage <= 25
    assert fight.player_hp == PLAYER_HP - damage
    assert fight.boss_hp == BOSS_HP


def test_over_when_boss_down():
    assert BossFight(boss_hp=0).over()
    assert BossFight(player_hp=-3).over()


def _solver(out):
    def reply():
        left, op, right = re.findall(r"boss: (\d+) ([+-]) (\d+)", out.getvalue())[-1]
        return str(Question(int(left), op, int(right)).answer())

    return reply


def test_boss_battle_won_by_correct_answers():
    out = io.StringIO()
    assert boss_battle(random.Random(3), _solver(out), out) is True
    assert "Congratulations! You have defeated the boss!" in out.getvalue()
    assert "Wrong!" not in out.getvalue()


def test_boss_battle_lost_by_wrong_answers():
    out = io.StringIO()
    assert boss_battle(random.Random(4), lambda: "1000", out) is False
    assert "Game Over! The boss has defeated you!" in out.getvalue()
    assert "The boss attacks back!" in out.getvalue()