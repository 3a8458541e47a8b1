"""
Move validator for TicTacToe.
Validates moves typed by the human player.
"""

from typing import Optional, List
from dataclasses import dataclass
from .config import GameConfig
from .game_state import Board


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    move: Optional[int] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Input must be a whole number
    2. The number must be a cell index (0-8)
    3. Can only place on empty cells
    """

    def validate_move(self, board: Board, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place a mark on.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not 0 <= index < GameConfig.NUM_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index}. Must be 0-{GameConfig.NUM_CELLS - 1}."
            )

        if board[index] != GameConfig.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board[index]}"
            )

        return ValidationResult(is_valid=True, move=index)

    def parse_move(self, board: Board, text: str) -> ValidationResult:
        """
        Parse a line of user input into a move.

        Args:
            board: Current board.
            text: Raw input, surrounding whitespace is ignored.

        Returns:
            ValidationResult carrying the move index when valid.
        """
        text = text.strip()
        try:
            index = int(text)
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=f"'{text}' is not a number"
            )

        return self.validate_move(board, index)

    def get_valid_moves(self, board: Board) -> List[int]:
        """Get all valid moves on the board."""
        return [i for i, cell in enumerate(board) if cell == GameConfig.EMPTY]
