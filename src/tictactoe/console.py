"""
Console front end: prompts, board printing and replay.

Usage:
    python -m tictactoe.console
    python -m tictactoe.console --opponent engine --seed 7
"""

import argparse
from typing import Callable, Optional

from .game import EMPTY, GLYPHS, O, X, winning_line
from .session import TIED, WON, GameSession, SessionConfig

GREEN = "\033[1;32m"
YELLOW = "\033[1;33m"
RESET = "\033[0m"

POSITION_GUIDE = "\n".join([
    " 0 | 1 | 2 ",
    "---+---+---",
    " 3 | 4 | 5 ",
    "---+---+---",
    " 6 | 7 | 8 ",
])


class ConsoleGame:
    """Text loop around a GameSession. input_fn/print_fn are swappable for tests."""

    def __init__(
        self,
        session: Optional[GameSession] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        print_fn: Optional[Callable[..., None]] = None,
    ):
        self.session = session
        self.input = input_fn or input
        self.print = print_fn or print

    def ask_int(self, prompt: str, error: str) -> int:
        while True:
            raw = self.input(prompt)
            try:
                return int(raw.strip())
            except ValueError:
                self.print(error)

    def prompt_opponent(self) -> str:
        while True:
            choice = self.ask_int(
                "Do you want to play against (1) another human or (2) the engine? ",
                "Invalid input. Please enter 1 or 2.",
            )
            if choice == 1:
                return "human"
            if choice == 2:
                return "engine"
            self.print("Invalid input. Please enter 1 or 2.")

    def continue_playing(self) -> bool:
        return self.ask_int(
            "Do you want to continue playing? (1) Yes (2) No ",
            "Invalid input. Please enter 1 or 2.",
        ) == 1

    def read_position(self):
        """Prompt until the side to move makes a legal placement."""
        mark = GLYPHS[self.session.turn]
        while True:
            position = self.ask_int(
                f"Player {mark}, enter a position (0-8): ",
                "Invalid input. Please enter a number between 0 and 8.",
            )
            if self.session.play(position):
                return
            self.print("Invalid position, try again.")

    def announce_result(self):
        session = self.session
        status = session.status
        if status.phase == WON:
            line = winning_line(session.board.cells, status.mark)
            self.print(f"{GREEN}Player {GLYPHS[status.mark]} wins! (line {line}){RESET}\n")
        elif status.phase == TIED:
            self.print(f"{YELLOW}It's a tie!{RESET}\n")
        self.print(session.board.render())
        self.print(
            f"Score - X: {session.scores[X]}  O: {session.scores[O]}  "
            f"Ties: {session.scores[EMPTY]}"
        )

    def run(self, opponent: Optional[str] = None, seed: Optional[int] = None):
        try:
            if self.session is None:
                if opponent is None:
                    opponent = self.prompt_opponent()
                self.session = GameSession(SessionConfig(opponent=opponent, seed=seed))
        except (EOFError, KeyboardInterrupt):
            self.print("\nGame aborted")
            return

        def announce():
            self.print("\n=== NEW GAME\n")

        self.session.board.on_reset.append(announce)
        try:
            self.print(POSITION_GUIDE)
            self._loop()
        except (EOFError, KeyboardInterrupt):
            self.print("\nGame aborted")
        finally:
            self.session.board.on_reset.remove(announce)

    def _loop(self):
        session = self.session
        self.print("\n=== NEW GAME\n")
        while True:
            self.print(session.board.render())
            if session.is_engine_turn():
                position = session.play_engine()
                self.print(f"Engine plays: {position}")
                self.print("---")
            else:
                self.read_position()

            if session.status.is_over:
                self.announce_result()
                if not self.continue_playing():
                    return
                session.new_game()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play TicTacToe in the terminal")
    parser.add_argument("--opponent", choices=["human", "engine"], default=None,
                        help="Who plays O (asked interactively when omitted)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the engine's random moves")
    args = parser.parse_args(argv)

    ConsoleGame().run(opponent=args.opponent, seed=args.seed)


if __name__ == "__main__":
    main()
