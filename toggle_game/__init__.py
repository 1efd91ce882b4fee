"""Solver and front end for the 3x3 toggle ("Lights Out") game."""

from toggle_game.board import ALL_WHITE, BOARD_STATES, BUTTON_COUNT, MASKS
from toggle_game.engine import ToggleGameEngine
from toggle_game.graph import StateGraph
from toggle_game.paths import BreadthFirstPaths

__all__ = [
    "ALL_WHITE",
    "BOARD_STATES",
    "BUTTON_COUNT",
    "MASKS",
    "BreadthFirstPaths",
    "StateGraph",
    "ToggleGameEngine",
]
