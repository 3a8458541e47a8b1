"""
Game configuration for TicTacToe.
Board constants, search settings and console text.
"""

import logging


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, stored as a flat list of 9 cells
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE

    # Marker for an empty cell
    EMPTY = " "

    # X always moves first
    FIRST_PLAYER = "X"

    # ==================== SEARCH SETTINGS ====================
    # Maximum possible remaining plies; win/full stop the search first
    SEARCH_DEPTH = 9

    # Exact outcome scores from the computer's point of view
    WIN_SCORE = 1
    LOSS_SCORE = -1
    DRAW_SCORE = 0

    # ==================== CONSOLE SETTINGS ====================
    MOVE_PROMPT = "Enter your move (0-8): "
    INVALID_INPUT_MESSAGE = "Invalid input, please try again."

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL = logging.WARNING
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
