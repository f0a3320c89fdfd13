"""
Terminal front end for Connect-Four.

Usage:
    connect4 --help
    connect4 play
    connect4 play --width 8 --height 7 --match-length 5
    connect4 replay "0,6,1,6,2,6,3"
"""

import logging
import re
from typing import Annotated

import typer

from ..core.config import MAX_BOARD_SIZE, clamp_match_length, get_settings
from ..core.errors import ConnectFourError, GameAlreadyOverError
from ..core.types import GameState
from ..game.engine import GameEngine, new_game


app = typer.Typer(
    name="connect4",
    help="Connect-Four in the terminal.",
    add_completion=False,
)

SYMBOLS = {
    "emoji": {1: "🔴", -1: "🟡", 0: "  "},
    "ascii": {1: " R", -1: " Y", 0: "  "},
}

WidthOption = Annotated[
    int | None,
    typer.Option("--width", "-w", min=1, max=MAX_BOARD_SIZE, help="Number of columns"),
]
HeightOption = Annotated[
    int | None,
    typer.Option("--height", min=1, max=MAX_BOARD_SIZE, help="Number of rows"),
]
MatchLengthOption = Annotated[
    int | None,
    typer.Option("--match-length", "-n", help="Tokens in a row to win (clamped to the board)"),
]
StrategyOption = Annotated[
    str | None,
    typer.Option("--strategy", help="Win check: last_move or full_scan"),
]
AsciiOption = Annotated[bool, typer.Option("--ascii", help="Plain letters instead of emoji")]
LogLevelOption = Annotated[str | None, typer.Option("--log-level", help="Logging level")]


def board_to_text(engine: GameEngine, symbols: str = "emoji") -> str:
    """Render the board top row first, with column numbers."""
    glyphs = SYMBOLS[symbols]
    matrix = engine.grid.as_matrix()
    width = engine.width

    lines = []
    lines.append(" " + " ".join(f"{col % 100:^3}" for col in range(width)))
    lines.append("+" + "---+" * width)
    for row in matrix:
        cells = "".join(f"{glyphs[int(cell)]} |" for cell in row)
        lines.append("|" + cells)
        lines.append("+" + "---+" * width)

    return "\n".join(lines)


def print_status(engine: GameEngine, symbols: str = "emoji") -> None:
    """Print board and whose turn it is."""
    typer.echo("\n" + board_to_text(engine, symbols))
    typer.echo(f"\nBoard: {engine.width}x{engine.height}, {engine.match_length} in a row")

    if not engine.is_game_over:
        color = engine.current_color
        typer.echo(f"Turn {engine.move_count + 1}: {color.label} ({color.symbol})")
        typer.echo(f"Open columns: {engine.open_columns()}")


def announce(state: GameState) -> None:
    """Finish observer: print the end-of-game text."""
    typer.echo(f"\n🎉 {state.message}")


def _configure_logging(level: str | None) -> None:
    name = (level or get_settings().ui.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _start_game(
    width: int | None,
    height: int | None,
    match_length: int | None,
    strategy: str | None,
) -> GameEngine:
    """Build an engine from CLI values, falling back to settings."""
    game = get_settings().game
    width = width or game.width
    height = height or game.height
    match_length = clamp_match_length(
        width, height, match_length if match_length is not None else game.match_length
    )
    engine = new_game(width, height, match_length, strategy=strategy or game.win_check)
    engine.subscribe_on_finish(announce)
    return engine


def _restart(engine: GameEngine, width: int, height: int, match_length: int) -> GameEngine:
    """Replace the game; the old engine and its observers are dropped."""
    fresh = engine.reset(width, height, clamp_match_length(width, height, match_length))
    fresh.subscribe_on_finish(announce)
    return fresh


def _reconfigure(engine: GameEngine) -> GameEngine:
    width = typer.prompt("Width", default=engine.width, type=int)
    height = typer.prompt("Height", default=engine.height, type=int)
    match_length = typer.prompt("Match length", default=engine.match_length, type=int)

    if not (1 <= width <= MAX_BOARD_SIZE and 1 <= height <= MAX_BOARD_SIZE):
        typer.echo(f"Board size must be between 1 and {MAX_BOARD_SIZE}. Keeping current game.")
        return engine
    return _restart(engine, width, height, match_length)


@app.command()
def play(
    width: WidthOption = None,
    height: HeightOption = None,
    match_length: MatchLengthOption = None,
    strategy: StrategyOption = None,
    ascii_: AsciiOption = False,
    log_level: LogLevelOption = None,
):
    """
    Play Connect-Four, two players on one terminal.

    Enter a column number to drop a token, 'r' to restart,
    'c' to change the board, 'q' to quit.
    """
    _configure_logging(log_level)
    symbols = "ascii" if ascii_ else get_settings().ui.symbols

    typer.echo("\n" + "=" * 50)
    typer.echo("  CONNECT FOUR")
    typer.echo("=" * 50)

    try:
        engine = _start_game(width, height, match_length, strategy)
    except ConnectFourError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    while True:
        print_status(engine, symbols)

        if engine.is_game_over:
            prompt = "\n'r' restart, 'c' change board, 'q' quit"
        else:
            prompt = f"\n{engine.current_color.label}, your move (0-{engine.width - 1})"

        user_input = typer.prompt(prompt).strip().lower()

        if user_input == "q":
            typer.echo("Game quit.")
            return
        if user_input == "r":
            engine = _restart(engine, engine.width, engine.height, engine.match_length)
            continue
        if user_input == "c":
            engine = _reconfigure(engine)
            continue

        try:
            column = int(user_input)
        except ValueError:
            typer.echo(f"Enter a column number 0-{engine.width - 1}, or r/c/q")
            continue

        try:
            engine.drop_token(column)
        except GameAlreadyOverError:
            typer.echo(f"{engine.state.message} Press 'r' to play again.")
        except ConnectFourError as e:
            typer.echo(f"Invalid! {e}")


def parse_columns(raw: str) -> list[int]:
    """Parse a comma or space separated column list."""
    parts = [p for p in re.split(r"[,\s]+", raw.strip()) if p]
    try:
        return [int(p) for p in parts]
    except ValueError as e:
        raise typer.BadParameter(f"Columns must be integers (got {raw!r})") from e


@app.command()
def replay(
    columns: Annotated[str, typer.Argument(help="Columns to play in order, e.g. '0,6,1,6'")],
    width: WidthOption = None,
    height: HeightOption = None,
    match_length: MatchLengthOption = None,
    strategy: StrategyOption = None,
    ascii_: AsciiOption = False,
    log_level: LogLevelOption = None,
):
    """Play a sequence of moves and show the final board."""
    _configure_logging(log_level)
    symbols = "ascii" if ascii_ else get_settings().ui.symbols
    moves = parse_columns(columns)

    try:
        engine = _start_game(width, height, match_length, strategy)
    except ConnectFourError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    for i, column in enumerate(moves, start=1):
        try:
            engine.drop_token(column)
        except ConnectFourError as e:
            print_status(engine, symbols)
            typer.echo(f"Move {i} rejected: {e}", err=True)
            raise typer.Exit(1) from e

    print_status(engine, symbols)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
