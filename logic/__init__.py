"""
Logic module for TicTacToe.
Handles game state, rules, and AI opponent.
"""

from .config import GameConfig
from .game_state import GameState, Player, Move, new_board
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, line_check, winner, is_full
from .ai_player import AIPlayer, Outcome, evaluate_board, minimax, select_and_apply_move

__version__ = "1.0.0"
