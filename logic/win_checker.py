"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple
from .config import GameConfig
from .game_state import Board, GameState, Player


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as cell index triples)
    WINNING_LINES = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    def check_line(self, board: Board, player: Player, a: int, b: int, c: int) -> bool:
        """True if all three cells hold the player's mark."""
        mark = player.symbol
        return board[a] == mark and board[b] == mark and board[c] == mark

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Every line is checked for X before any line is checked for O.

        Args:
            board: The board to check.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for player in (Player.X, Player.O):
            for a, b, c in self.WINNING_LINES:
                if self.check_line(board, player, a, b, c):
                    return player

        return None

    def is_full(self, board: Board) -> bool:
        """True if no cell is empty."""
        return all(cell != GameConfig.EMPTY for cell in board)

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND no winner.
        """
        if self.check_winner(board) is not None:
            return False

        return self.is_full(board)

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        winner = self.check_winner(game_state.board)

        if winner is not None:
            game_state.winner = winner
            game_state.is_game_over = True
        elif self.is_full(game_state.board):
            game_state.is_draw = True
            game_state.is_game_over = True

        return game_state

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a triple of cell indices, or None.
        """
        for player in (Player.X, Player.O):
            for line in self.WINNING_LINES:
                if self.check_line(board, player, *line):
                    return line
        return None


_checker = WinChecker()


def line_check(board: Board, player: Player, a: int, b: int, c: int) -> bool:
    return _checker.check_line(board, player, a, b, c)


def winner(board: Board) -> Optional[Player]:
    return _checker.check_winner(board)


def is_full(board: Board) -> bool:
    return _checker.is_full(board)
