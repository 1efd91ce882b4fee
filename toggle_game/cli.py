"""Play the toggle game from the command line.

    toggle-game new --scramble 5
    toggle-game show
    toggle-game click 4
    toggle-game hint
    toggle-game solve 111111111 101000101
"""

import logging
import pathlib
import random
from typing import Optional

import rich.console
import structlog
import typer
from rich.markup import escape

from toggle_game import board
from toggle_game.engine import ToggleGameEngine
from toggle_game.state import STATE_FILENAME, GameState

console = rich.console.Console()
app = typer.Typer(no_args_is_help=True)


def fail(error: ValueError):
    console.print(f"[red]error:[/red] {escape(str(error))}", highlight=False)
    raise typer.Exit(code=2)


def print_board(current: str):
    for row in board.render(current):
        squares = ("[white]■[/white]" if c == "1" else "[grey30]■[/grey30]" for c in row)
        console.print(" ".join(squares))


def load_state(ctx: typer.Context) -> GameState:
    try:
        return GameState.load(ctx.obj)
    except ValueError as error:
        fail(error)


def print_solution(moves: list[int]):
    console.print(f"solvable in {len(moves)} moves")
    if moves:
        console.print("click: " + " ".join(str(m) for m in moves))


@app.callback()
def main(
    ctx: typer.Context,
    state_file: pathlib.Path = typer.Option(
        STATE_FILENAME, envvar="TOGGLE_GAME_STATE", help="Where the game is saved."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(level))
    ctx.obj = state_file


@app.command()
def new(
    ctx: typer.Context,
    target: str = typer.Option(board.ALL_WHITE, help="Board to aim for."),
    scramble: int = typer.Option(0, min=0, help="Random clicks to start from."),
    seed: Optional[int] = typer.Option(None),
):
    """Start a new game"""
    try:
        state = GameState(target=target)
    except ValueError as error:
        fail(error)
    rng = random.Random(seed)
    for _ in range(scramble):
        state.board = board.click(state.board, rng.randrange(board.BUTTON_COUNT))
    state.save(ctx.obj)
    print_board(state.board)


@app.command()
def show(ctx: typer.Context):
    """Print the saved board"""
    state = load_state(ctx)
    print_board(state.board)
    console.print(f"clicks: {state.clicks}")
    if state.solved:
        console.print("[green]solved[/green]")


@app.command()
def click(ctx: typer.Context, button: int):
    """Click a button on the saved board"""
    try:
        with GameState.auto_load_and_save(ctx.obj) as state:
            state.click(button)
    except ValueError as error:
        fail(error)
    print_board(state.board)
    if state.solved:
        console.print(f"[green]solved in {state.clicks} clicks[/green]")


@app.command()
def hint(ctx: typer.Context):
    """Show the fewest clicks from the saved board to its target"""
    state = load_state(ctx)
    engine = ToggleGameEngine()
    print_solution(engine.moves_to_solve(state.board, state.target))


@app.command()
def solve(current: str, target: str = typer.Argument(board.ALL_WHITE)):
    """Show the fewest clicks between two boards"""
    engine = ToggleGameEngine()
    try:
        moves = engine.moves_to_solve(current, target)
    except ValueError as error:
        fail(error)
    print_solution(moves)


@app.command()
def graph(limit: Optional[int] = typer.Option(None, min=0, help="Vertices to print.")):
    """Dump the state graph"""
    lines = str(ToggleGameEngine().graph).splitlines()
    if limit is not None:
        lines = lines[: limit + 1]
    for line in lines:
        print(line)


if __name__ == "__main__":
    app()
