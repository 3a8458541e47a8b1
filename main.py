"""
Main orchestration script for TicTacToe.

This script ties together:
- Console UI (board display, move input)
- Logic (game state, win checking, minimax AI)

Run this script to play TicTacToe against the computer!
"""

import argparse
import logging
import random
from typing import Optional

from logic.config import GameConfig
from logic.game_state import GameState, Player
from logic.win_checker import WinChecker
from logic.ai_player import AIPlayer

from ui import ConsoleUI

logger = logging.getLogger(__name__)


class TicTacToeGame:
    """
    Main controller for a game against the computer.

    Game flow:
    1. X moves first; if the human is O the computer opens
    2. Human types a cell index, computer answers with minimax
    3. Board is printed after every move
    4. Repeat until someone wins or the board is full
    """

    def __init__(self, human_player: Player = Player.X, ui: Optional[ConsoleUI] = None):
        """
        Initialize the game.

        Args:
            human_player: Which player the human controls.
            ui: Console to talk to (default: stdin/stdout).
        """
        self.human_player = human_player
        self.computer_player = human_player.opposite()

        self.ui = ui if ui is not None else ConsoleUI()
        self.game_state = GameState()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(self.computer_player, self.human_player)

    def play(self) -> Optional[Player]:
        """
        Play one game to the end.

        Returns:
            The winner, or None for a tie.
        """
        self.ui.announce_player(self.human_player)

        if self.game_state.current_player == self.computer_player:
            self._computer_move()

        self.ui.print_board(self.game_state.board)

        while True:
            if self.game_state.current_player == self.human_player:
                self._human_move()
            else:
                self._computer_move()

            self.ui.print_board(self.game_state.board)

            self.win_checker.update_game_state(self.game_state)
            if self.game_state.winner is not None:
                self.ui.announce_winner(self.game_state.winner)
                return self.game_state.winner
            if self.game_state.is_draw:
                self.ui.announce_tie()
                return None

    def _human_move(self):
        choice = self.ui.get_player_choice(self.game_state.board)
        self.game_state.make_move(choice)
        logger.info("Human played %s at %d", self.human_player.symbol, choice)

    def _computer_move(self):
        move = self.ai.select_and_apply_move(self.game_state.board)
        if move is None:
            return

        self.game_state.record_move(move, self.computer_player)
        logger.info("Computer played %s at %d", self.computer_player.symbol, move)


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe against a minimax AI")
    parser.add_argument(
        "--play-as",
        choices=[p.value for p in Player],
        help="Mark to play as (default: random)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for picking sides"
    )
    parser.add_argument(
        "--log-level",
        default=logging.getLevelName(GameConfig.LOG_LEVEL),
        help="Logging level (DEBUG, INFO, WARNING, ...)"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format=GameConfig.LOG_FORMAT)

    if args.play_as:
        human_player = Player(args.play_as)
    else:
        human_player = random.Random(args.seed).choice(list(Player))

    game = TicTacToeGame(human_player=human_player)

    try:
        game.play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
