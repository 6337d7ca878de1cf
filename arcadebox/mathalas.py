"""Math-alas quiz and the boss battle that follows it."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from arcadebox.terminal import read_int

ROUNDS = 10
PLAYER_HP = 100
BOSS_HP = 200


@dataclass(frozen=True)
class Question:
    """An addition or subtraction problem."""

    left: int
    op: str
    right: int

    def answer(self) -> int:
        return self.left + self.right if self.op == "+" else self.left - self.right

    def text(self) -> str:
        return f"{self.left} {self.op} {self.right}"


def make_question(rng: random.Random, low: int, high: int) -> Question:
    """Draw two operands in [low, high] and a random + or - operator."""
    left = rng.randint(low, high)
    right = rng.randint(low, high)
    op = "+" if rng.randrange(2) else "-"
    return Question(left, op, right)


def play_math_alas(
    rng: Optional[random.Random] = None,
    input_fn: Callable[[], str] = input,
    out: Optional[TextIO] = None,
    rounds: int = ROUNDS,
) -> int:
    """Run the quiz and return the number of correct answers."""
    rng = random.Random() if rng is None else rng
    out = sys.stdout if out is None else out
    out.write("Welcome to the Math-alas game!\n")
    score = 0
    for number in range(1, rounds + 1):
        question = make_question(rng, 0, 99)
        prompt = f"Round {number}: What is {question.text()}? "
        reply = read_int(prompt, prompt, input_fn, out)
        if reply == question.answer():
            out.write("Correct!\n")
            score += 1
        else:
            out.write(f"Incorrect! The correct answer was {question.answer()}.\n")
    out.write(f"Game over! Your score: {score} out of {rounds}\n")
    return score


@dataclass
class BossFight:
    """Hit points of the player and the boss."""

    player_hp: int = PLAYER_HP
    boss_hp: int = BOSS_HP

    def over(self) -> bool:
        return self.player_hp <= 0 or self.boss_hp <= 0

    def resolve(self, correct: bool, rng: random.Random) -> int:
        """Apply one answer: damage the boss if correct, else the player. Return the damage."""
        if correct:
            damage = rng.randint(10, 30)
            self.boss_hp -= damage
        else:
            damage = rng.randint(5, 25)
            self.player_hp -= damage
        return damage


def boss_battle(
    rng: Optional[random.Random] = None,
    input_fn: Callable[[], str] = input,
    out: Optional[TextIO] = None,
) -> bool:
    """Fight the boss with math problems; return True if the boss is defeated."""
    rng = random.Random() if rng is None else rng
    out = sys.stdout if out is None else out
    out.write("Welcome to the Boss Battle!\n")
    out.write("You need to solve math problems to deal damage to the boss.\n")
    fight = BossFight()
    while not fight.over():
        question = make_question(rng, 1, 20)
        out.write(f"Solve this problem to deal damage to the boss: {question.text()}\n")
        reply = read_int("Your answer: ", "Your answer: ", input_fn, out)
        correct = reply == question.answer()
        damage = fight.resolve(correct, rng)
        if correct:
            out.write(f"Correct! You dealt {damage} damage to the boss.\n")
        else:
            out.write(
                f"Wrong! The correct answer was {question.answer()}. You dealt no damage.\n"
            )
            out.write(f"The boss attacks back! You took {damage} damage.\n")
        out.write(f"Boss HP: {fight.boss_hp}\n")
        out.write(f"Your HP: {fight.player_hp}\n\n")
    won = fight.boss_hp <= 0
    if won:
        out.write("Congratulations! You have defeated the boss!\n")
    else:
        out.write("Game Over! The boss has defeated you!\n")
    return won