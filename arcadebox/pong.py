"""Two-paddle console Pong."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Optional

from arcadebox.terminal import clear_screen, key_pressed, read_key

WIDTH = 40
HEIGHT = 20
PADDLE_HEIGHT = 4
BALL_SPEED = 1
FRAME_SECONDS = 0.1
UP_ARROW = chr(72)
DOWN_ARROW = chr(80)


@dataclass
class PongGame:
    """Ball, paddle and score state; the left paddle sits in column 0, the right in the last."""

    ball_x: int = WIDTH // 2
    ball_y: int = HEIGHT // 2
    velocity_x: int = BALL_SPEED
    velocity_y: int = BALL_SPEED
    left_y: int = (HEIGHT - PADDLE_HEIGHT) // 2
    right_y: int = (HEIGHT - PADDLE_HEIGHT) // 2
    left_score: int = 0
    right_score: int = 0
    left_x: int = 0
    right_x: int = WIDTH - 1

    @staticmethod
    def _covers(paddle_y: int, y: int) -> bool:
        return paddle_y <= y < paddle_y + PADDLE_HEIGHT

    def _reset_ball(self, velocity_x: int) -> None:
        self.ball_x = WIDTH // 2
        self.ball_y = HEIGHT // 2
        self.velocity_x = velocity_x

    def step(self) -> None:
        """Advance the ball one frame, bouncing and scoring as needed."""
        self.ball_x += self.velocity_x
        self.ball_y += self.velocity_y
        if self.ball_y <= 0 or self.ball_y >= HEIGHT - 1:
            self.velocity_y = -self.velocity_y
        if (self.ball_x == self.left_x + 1 and self._covers(self.left_y, self.ball_y)) or (
            self.ball_x == self.right_x - 1 and self._covers(self.right_y, self.ball_y)
        ):
            self.velocity_x = -self.velocity_x
        if self.ball_x < 0:
            self.right_score += 1
            self._reset_ball(BALL_SPEED)
        elif self.ball_x >= WIDTH:
            self.left_score += 1
            self._reset_ball(-BALL_SPEED)

    def handle_key(self, key: str) -> None:
        """w/s move the left paddle; the up/down arrow codes move the right one."""
        if key == "w" and self.left_y > 0:
            self.left_y -= 1
        elif key == "s" and self.left_y < HEIGHT - PADDLE_HEIGHT:
            self.left_y += 1
        elif key == UP_ARROW and self.right_y > 0:
            self.right_y -= 1
        elif key == DOWN_ARROW and self.right_y < HEIGHT - PADDLE_HEIGHT:
            self.right_y += 1

    def _cell(self, x: int, y: int) -> str:
        if x == self.ball_x and y == self.ball_y:
            return "O"
        if x == self.left_x and self._covers(self.left_y, y):
            return "|"
        if x == WIDTH - 1 and self._covers(self.right_y, y):
            return "|"
        return " "

    def render(self) -> str:
        border = "#" * (WIDTH + 2) + "\n"
        rows = (
            "#" + "".join(self._cell(x, y) for x in range(WIDTH)) + "#\n"
            for y in range(HEIGHT)
        )
        score = f"Score: Player 1: {self.left_score} | Player 2: {self.right_score}\n"
        return border + "".join(rows) + border + score


def main(argv: Optional[list[str]] = None) -> int:
    """Run the game until interrupted."""
    game = PongGame()
    out = sys.stdout
    try:
        while True:
            clear_screen(out)
            out.write(game.render())
            out.flush()
            game.step()
            if key_pressed():
                game.handle_key(read_key())
            time.sleep(FRAME_SECONDS)
    except (KeyboardInterrupt, EOFError):
        out.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())