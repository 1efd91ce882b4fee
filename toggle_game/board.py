"""Board strings, vertex encoding and the button mask table.

Buttons have the following placement on the board:

    0 1 2
    3 4 5
    6 7 8

A board is written as a string of "1" (white) and "0" (black), one character
per cell in button order. As a vertex it is that string read as a binary
number, so cell 0 is the most significant bit.
"""

from typing import Final, Iterable

ROWS: Final = 3
COLS: Final = 3
BUTTON_COUNT: Final = ROWS * COLS
BOARD_STATES: Final = 2**BUTTON_COUNT
ALL_WHITE: Final = "1" * BUTTON_COUNT


def neighbours(button: int, rows: int = ROWS, cols: int = COLS) -> list[int]:
    """The button itself plus its north, south, west and east neighbours."""
    row, col = divmod(button, cols)
    cells = [button]
    if row > 0:
        cells.append(button - cols)
    if row < rows - 1:
        cells.append(button + cols)
    if col > 0:
        cells.append(button - 1)
    if col < cols - 1:
        cells.append(button + 1)
    return cells


def button_masks(rows: int = ROWS, cols: int = COLS) -> tuple[int, ...]:
    """Return the XOR mask for every button on a rows x cols grid."""
    size = rows * cols
    masks = []
    for button in range(size):
        mask = 0
        for cell in neighbours(button, rows, cols):
            mask |= 1 << (size - 1 - cell)
        masks.append(mask)
    return tuple(masks)


MASKS: Final = button_masks()


def validate_button(button: int) -> int:
    if not 0 <= button < BUTTON_COUNT:
        raise ValueError(f"Button must be between 0-{BUTTON_COUNT - 1}, got {button}")
    return button


def validate_board(board: str) -> str:
    if len(board) != BUTTON_COUNT:
        raise ValueError(
            f"Board must have {BUTTON_COUNT} cells, got {len(board)}: {board!r}"
        )
    if set(board) - {"0", "1"}:
        raise ValueError(f"Board may only contain '0' and '1': {board!r}")
    return board


def encode(board: str) -> int:
    """Board string to vertex"""
    return int(validate_board(board), 2)


def decode(vertex: int) -> str:
    """Vertex to board string"""
    if not 0 <= vertex < BOARD_STATES:
        raise ValueError(f"vertex {vertex} is not between 0 and {BOARD_STATES - 1}")
    return format(vertex, f"0{BUTTON_COUNT}b")


def click(board: str, button: int) -> str:
    """Return the board after clicking a button"""
    validate_button(button)
    return decode(encode(board) ^ MASKS[button])


def apply_moves(vertex: int, moves: Iterable[int]) -> int:
    """XOR the mask of every move onto vertex, in order."""
    for button in moves:
        vertex ^= MASKS[validate_button(button)]
    return vertex


def render(board: str) -> list[str]:
    """Split a board into its rows, for display."""
    validate_board(board)
    return [board[i : i + COLS] for i in range(0, BUTTON_COUNT, COLS)]
