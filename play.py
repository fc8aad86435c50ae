#!/usr/bin/env python3
"""
Play TicTacToe in the terminal.

Usage:
    python play.py                       # asks who plays O
    python play.py --opponent engine
    python play.py --opponent engine --seed 3
"""

import sys
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictactoe.console import main


if __name__ == "__main__":
    main()
