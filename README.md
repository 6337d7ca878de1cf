# arcadebox

A small collection of games that run in your terminal. It needs nothing
beyond the Python standard library.

## Installing

```
pip install .
```

## Playing

### The arcade menu

```
arcadebox
```

You are asked for a name, then offered a menu:

1. **Math-alas** – ten rounds of addition and subtraction with numbers from 0 to 99.
   A line that does not start with a number is reported and the question is asked
   again. When the rounds are over you go straight on to the boss battle.
2. **Pac-Man** – press `Y` to start, then move with `w`, `a`, `s`, `d` and quit
   with `q`. Eat the food (`.`), avoid the demons (`X`) that wander at random, and
   reach a score of 50 to win. Walking into a demon ends the game.
3. **Snake and Ladders** – two players take turns pressing Enter to roll the die.
   A roll that would take a player past square 100 is not moved. The first to land
   on square 100 wins.
4. **Boss Battle** – solve problems with numbers from 1 to 20. A right answer hits
   the boss (200 HP) for 10 to 30 damage; a wrong one lets the boss hit you
   (100 HP) for 5 to 25. The fight ends when either side reaches 0.
5. **Exit**

Any other answer prints the list of valid choices again. End of input or
Ctrl+C leaves the menu.

### Bingo

```
arcadebox-bingo
```

A 5×5 card is dealt from the B, I, N, G and O ranges (1–15, 16–30, 31–45,
46–60, 61–75) with a free centre square. Press Enter to draw each number from
1 to 75 until a row, column or diagonal is fully marked.

### Game store receipt

```
arcadebox-store
```

Enter two products and their prices (whole numbers) and get a receipt with the
total.

### Pong

```
arcadebox-pong
```

The left paddle moves with `w` and `s`. The right paddle moves on the key codes
72 and 80 – the codes the up and down arrow keys send in a Windows console; on
other terminals these are the `H` and `P` keys. The ball scores a point when it
passes a paddle. There is no final score: press Ctrl+C to stop.

The commands are also available as `python -m arcadebox.menu`,
`python -m arcadebox.bingo`, `python -m arcadebox.gamestore` and
`python -m arcadebox.pong`.

## Using the games from code

Each game takes its random generator, its input function and its output stream
as arguments, so it can be driven from a script or a test:

```python
import io
import random

from arcadebox.mathalas import play_math_alas

answers = iter(["0"] * 10)
out = io.StringIO()
score = play_math_alas(random.Random(1), lambda: next(answers), out, 10)
print(out.getvalue())
```

The pieces behind the games can be used on their own:

- `arcadebox.mathalas` – `Question`, `make_question`, `BossFight`,
  `play_math_alas` (returns the score) and `boss_battle` (returns whether the
  boss was defeated).
- `arcadebox.pacman` – `PacmanGame` with `move`, `move_demons` and `render`;
  `Cell`, `Outcome` and `play_pacman`, which takes a key-reading function.
- `arcadebox.snakeladders` – `roll_die`, `move_player`, `render_board` and
  `play_snake_ladders` (returns the winning player's number).
- `arcadebox.bingo` – `BingoCard` with `mark`, `has_won` and `render`;
  `generate_card`, `draw_number` and `play_bingo` (returns the numbers drawn).
- `arcadebox.gamestore` – `Item`, `format_receipt` and `run_store`.
- `arcadebox.pong` – `PongGame` with `step`, `handle_key` and `render`.
- `arcadebox.terminal` – `clear_screen`, `read_key`, `key_pressed` and
  `read_int`.

## Running the tests

```
pip install .[test]
pytest
```