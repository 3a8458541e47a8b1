"""
TicTacToe console UI.

Shows:
- The board, with empty cells numbered by their index
- Prompts for the human's move until it is valid
- Game result
"""

import sys
from typing import Optional, TextIO

from logic.config import GameConfig
from logic.game_state import Board, Player
from logic.move_validator import MoveValidator


class ConsoleUI:
    """
    Text input/output for the game.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.validator = MoveValidator()

    def _print(self, *args, end="\n"):
        print(*args, end=end, file=self.stdout)

    def print_board(self, board: Board):
        """Print the board, one row per line."""
        for i, cell in enumerate(board):
            if i % GameConfig.BOARD_SIZE == 0:
                self._print()
            if cell == GameConfig.EMPTY:
                self._print(f"{i} ", end="")
            else:
                self._print(f"{cell} ", end="")
        self._print("\n")

    def get_player_choice(self, board: Board) -> int:
        """
        Ask for a move until a valid one is entered.

        Raises:
            EOFError: if input runs out before a valid move.
        """
        while True:
            self._print(GameConfig.MOVE_PROMPT)
            line = self.stdin.readline()
            if not line:
                raise EOFError("no more input")

            result = self.validator.parse_move(board, line)
            if result.is_valid:
                return result.move

            self._print(GameConfig.INVALID_INPUT_MESSAGE)

    def announce_player(self, human_player: Player):
        self._print(f"You are player {human_player.symbol}")

    def announce_winner(self, winner: Player):
        self._print(f"Player {winner.symbol} wins!")

    def announce_tie(self):
        self._print("It's a tie!")
