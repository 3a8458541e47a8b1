"""
Game state management for TicTacToe.
Tracks the board, current player, and move history.
"""

import logging
from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field

from .config import GameConfig

logger = logging.getLogger(__name__)

# A board is a flat list of 9 cells: GameConfig.EMPTY or a player's mark
Board = List[str]


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def symbol(self) -> str:
        """The mark this player puts on the board."""
        return self.value


def new_board() -> Board:
    """Create an empty board."""
    return [GameConfig.EMPTY] * GameConfig.NUM_CELLS


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Which ply of the game this is (0-8)


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 9-cell board
    - Current player
    - Move history
    - Game status (ongoing, won, draw)
    """

    board: Board = field(default_factory=new_board)

    # Current player's turn
    current_player: Player = Player(GameConfig.FIRST_PLAYER)

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Player] = None
    is_draw: bool = False
    is_game_over: bool = False

    def make_move(self, index: int) -> bool:
        """
        Place the current player's mark at the given cell.

        Args:
            index: Cell index (0-8).

        Returns:
            True if move was successful, False otherwise.
        """
        if self.is_game_over:
            logger.warning("Game is already over!")
            return False

        if not 0 <= index < GameConfig.NUM_CELLS:
            logger.warning("Cell %d is off the board!", index)
            return False

        if self.board[index] != GameConfig.EMPTY:
            logger.warning("Cell %d is already occupied!", index)
            return False

        self.board[index] = self.current_player.symbol
        self.moves.append(Move(
            player=self.current_player,
            index=index,
            move_number=len(self.moves)
        ))

        # Winner/draw is decided by WinChecker, just switch turns here
        self.current_player = self.current_player.opposite()

        return True

    def record_move(self, index: int, player: Player):
        """
        Record a mark that was already placed on the board.

        Used after the AI commits its move straight to the board.
        """
        self.moves.append(Move(player=player, index=index, move_number=len(self.moves)))
        self.current_player = player.opposite()

    def get_empty_cells(self) -> List[int]:
        """Get the indices of all empty cells."""
        return [i for i, cell in enumerate(self.board) if cell == GameConfig.EMPTY]

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            moves=list(self.moves),
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )
