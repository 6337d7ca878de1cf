"""Small terminal games: an arcade menu with Math-alas, a boss battle, Pac-Man and Snake and Ladders, plus Bingo, Pong and a game-store receipt."""

__version__ = "0.1.0"