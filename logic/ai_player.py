"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import logging
from enum import Enum
from typing import Optional

from .config import GameConfig
from .game_state import Board, Player
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """Result of a position, seen from the computer's side."""
    COMPUTER_WIN = GameConfig.WIN_SCORE
    HUMAN_WIN = GameConfig.LOSS_SCORE
    UNDECIDED = GameConfig.DRAW_SCORE


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The search is exhaustive and scores only exact outcomes
    (+1 computer win, -1 human win, 0 otherwise), so the AI
    never loses. Candidate marks are written straight into the
    board and always cleared again before a call returns.
    """

    def __init__(self, player: Player = Player.O, human_player: Optional[Player] = None):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
            human_player: The opponent (default: the other player)
        """
        self.player = player
        self.human_player = human_player if human_player is not None else player.opposite()
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def evaluate_board(self, board: Board) -> int:
        """Score a position by its outcome only, no heuristics."""
        winner = self.win_checker.check_winner(board)

        if winner == self.player:
            return GameConfig.WIN_SCORE
        elif winner == self.human_player:
            return GameConfig.LOSS_SCORE
        return GameConfig.DRAW_SCORE

    def outcome(self, board: Board) -> Outcome:
        return Outcome(self.evaluate_board(board))

    def minimax(self, board: Board, depth: int, is_maximizing: bool) -> int:
        """
        Minimax search over every continuation of the position.

        Args:
            board: Position to score. Mutated during the search and
                restored before returning.
            depth: Plies left to explore.
            is_maximizing: True if it's the AI's turn to move.

        Returns:
            The score of the position.
        """
        self.positions_evaluated += 1

        score = self.evaluate_board(board)
        if score != GameConfig.DRAW_SCORE or depth == 0 or self.win_checker.is_full(board):
            return score

        mark = self.player.symbol if is_maximizing else self.human_player.symbol
        scores = []
        for index, cell in enumerate(board):
            if cell != GameConfig.EMPTY:
                continue
            board[index] = mark
            try:
                scores.append(self.minimax(board, depth - 1, not is_maximizing))
            finally:
                board[index] = GameConfig.EMPTY

        return max(scores) if is_maximizing else min(scores)

    def get_best_move(self, board: Board) -> Optional[int]:
        """
        Get the best move for the current position.

        Ties keep the lowest cell index.

        Args:
            board: Current board. Left unchanged.

        Returns:
            Index of the best move, or None if no moves available.
        """
        self.positions_evaluated = 0

        best_score = float('-inf')
        best_move = None

        for index, cell in enumerate(board):
            if cell != GameConfig.EMPTY:
                continue

            # Try this move
            board[index] = self.player.symbol
            try:
                score = self.minimax(board, GameConfig.SEARCH_DEPTH, is_maximizing=False)
            finally:
                board[index] = GameConfig.EMPTY

            if score > best_score:
                best_score = score
                best_move = index

        logger.debug(
            "AI evaluated %d positions. Best move: %s (score: %s)",
            self.positions_evaluated, best_move, best_score
        )

        return best_move

    def select_and_apply_move(self, board: Board) -> Optional[int]:
        """
        Pick the best move and place the AI's mark there.

        Returns:
            The committed cell index, or None if the board was full.
        """
        move = self.get_best_move(board)

        if move is None:
            logger.warning("No empty cell left for %s", self.player.symbol)
            return None

        board[move] = self.player.symbol
        return move


def evaluate_board(board: Board, computer_player: Player, human_player: Player) -> int:
    return AIPlayer(computer_player, human_player).evaluate_board(board)


def minimax(
    board: Board,
    depth_remaining: int,
    maximizing: bool,
    computer_player: Player,
    human_player: Player
) -> int:
    return AIPlayer(computer_player, human_player).minimax(board, depth_remaining, maximizing)


def select_and_apply_move(
    board: Board,
    computer_player: Player,
    human_player: Player
) -> Optional[int]:
    return AIPlayer(computer_player, human_player).select_and_apply_move(board)
