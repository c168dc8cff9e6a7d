"""Solve a pyramid from the command line.

Usage:
    python scripts/solve_pyramid.py 4 10
    python scripts/solve_pyramid.py 4 5 5 10 --json-path pyramid.json
"""

from __future__ import annotations

import tyro

from pyrsolver._cli import main


if __name__ == "__main__":
    tyro.cli(main)
