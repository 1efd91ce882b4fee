"""The toggle game engine.

The game is a 3x3 grid of squares that are either black or white. Clicking
a square flips the colour of that square and its north, south, east and west
neighbours. The engine builds a graph with one vertex per possible board,
then answers "how many clicks" and "which clicks" with a breadth first
search from the current board.
"""

from typing import Final

import structlog

from toggle_game import board
from toggle_game.graph import StateGraph
from toggle_game.paths import BreadthFirstPaths

logger = structlog.get_logger()


class ToggleGameEngine:
    def __init__(self):
        self.graph: Final = StateGraph.from_masks(board.MASKS)

    def initialize_game(self) -> str:
        """A board with every square white"""
        return board.ALL_WHITE

    def button_clicked(self, current: str, button: int) -> str:
        return board.click(current, button)

    def shortest_paths(self, source: int) -> BreadthFirstPaths:
        return BreadthFirstPaths(self.graph, source)

    def distance(self, source: int, target: int) -> int:
        return self.shortest_paths(source).dist_to(target)

    def button_for(self, v: int, w: int) -> int:
        """The button that moves the board from vertex v to vertex w.

        If several buttons make the same transition the last one wins.
        """
        matches = self.graph.buttons_between(v, w)
        if not matches:
            raise ValueError(f"no button moves vertex {v} to {w}")
        return matches[-1]

    def moves_between(self, source: int, target: int) -> list[int]:
        path = self.shortest_paths(source).path_to(target)
        return [self.button_for(v, w) for v, w in zip(path, path[1:])]

    def min_number_of_moves(self, current: str, target: str) -> int:
        """Fewest clicks that turn the current board into the target"""
        moves = self.distance(board.encode(current), board.encode(target))
        logger.debug("min moves", current=current, target=target, moves=moves)
        return moves

    def moves_to_solve(self, current: str, target: str) -> list[int]:
        """Buttons to click, in order, to turn current into target in the fewest clicks.

        Empty when the boards are already equal.
        """
        moves = self.moves_between(board.encode(current), board.encode(target))
        logger.debug("moves to solve", current=current, target=target, moves=moves)
        return moves
