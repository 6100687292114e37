"""
Tictac - Tic-Tac-Toe Engine with Bot Opponents

A small, deterministic engine for playing 3x3 tic-tac-toe against a bot.
The package provides:
- Board state management with validated moves
- Terminal-state evaluation (win/draw)
- Three bot strategies (random, heuristic, minimax)
- A turn controller and a session tally for the console game
"""

__version__ = "0.1.0"
