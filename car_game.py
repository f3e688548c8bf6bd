#!/usr/bin/env python3
"""Launcher for `lanedash.ui.app_game` — run `python car_game.py` to play."""

from lanedash.ui.app_game import main

__all__ = ["main"]


if __name__ == "__main__":
    raise SystemExit(main())
