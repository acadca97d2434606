"""Rich terminal frontend — the puzzle as a styled table.

There is no photo in a terminal, so each tile shows its position in the
solved picture (1 = top-left piece).  Arrow keys / WASD slide the tile next
to the gap through the same engine the GUI drives with drags.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from photofinish.backend.engine.gameplay import PuzzleEngine
from photofinish.backend.engine.gameplay.engine import MAX_SIZE, MIN_SIZE, SIZE_LABELS
from photofinish.backend.models.board import Direction
from photofinish.frontend.cli.input_handler import get_key

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def new_engine(size: int, rng: random.Random | None = None) -> PuzzleEngine[int]:
    """Start a session whose tiles are the piece numbers of the split."""
    # One terminal cell per unit; only the commit threshold depends on it.
    return PuzzleEngine(size, list(range(size * size - 1)), tile_size=1.0, rng=rng)


# -- board rendering ----------------------------------------------------------


def render_board(engine: PuzzleEngine[int]) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(engine.size * engine.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(engine.size):
        table.add_column(width=width + 1, justify="center")

    for r in range(engine.size):
        cells: list[str] = []
        for c in range(engine.size):
            i = engine.board.index_at(r, c)
            tile = engine.slots[i]
            if tile is None:
                cells.append("[dim]·[/dim]")
            elif tile == engine.goal[i]:
                cells.append(f"[bold green]{tile + 1:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{tile + 1:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def _draw_menu(sel_size: int) -> None:
    console.clear()

    sizes = Text()
    for s in range(MIN_SIZE, MAX_SIZE + 1):
        if s > MIN_SIZE:
            sizes.append("  ")
        label = f" {SIZE_LABELS[s]} {s}×{s} "
        if s == sel_size:
            sizes.append(label, style="bold green on #313244")
        else:
            sizes.append(label, style="dim")

    nav = Text("  ← →  change size", style="dim")

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Start    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )
    panel = Panel(
        body,
        title="[bold]P H O T O   F I N I S H[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))


def _draw_game(engine: PuzzleEngine[int], status: str = "") -> None:
    console.clear()

    size = engine.size
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  reshuffle   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Align.center(render_board(engine)),
        title=f"[bold cyan]PhotoFinish  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_solved(engine: PuzzleEngine[int]) -> None:
    console.clear()

    size = engine.size
    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("PHOTO FINISH!", style="bold green")
    congrats.append("  The picture is whole again.  ", style="green")
    congrats.append("★\n", style="bold yellow")

    panel = Panel(
        Group(Align.center(render_board(engine)), Align.center(congrats)),
        title=f"[bold green]PhotoFinish  {size}×{size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to go back.\n", style="dim"))
    )


# -- game loop ----------------------------------------------------------------


def _play(size: int, rng: random.Random | None) -> None:
    while True:
        engine = new_engine(size, rng)
        status = ""

        while not engine.is_solved:
            _draw_game(engine, status)
            status = ""
            key = get_key()

            if key in _DIRECTIONS:
                if not engine.move(_DIRECTIONS[key]):
                    status = "[yellow]Nothing can slide that way.[/yellow]"
            elif key == "shuffle":
                engine.shuffle()
                status = "[yellow]Reshuffled![/yellow]"
            elif key == "quit":
                return

        _draw_solved(engine)
        while True:
            key = get_key()
            if key == "shuffle":
                break
            if key == "quit":
                return


def _menu_loop(sel_size: int, rng: random.Random | None) -> None:
    while True:
        _draw_menu(sel_size)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "left":
            sel_size = max(MIN_SIZE, sel_size - 1)
        elif key == "right":
            sel_size = min(MAX_SIZE, sel_size + 1)
        elif key == "enter":
            _play(sel_size, rng)


# -- public entry point -------------------------------------------------------


def run(size: int = MIN_SIZE, seed: int | None = None) -> None:
    """Launch the Rich CLI with its size menu."""
    rng = random.Random(seed) if seed is not None else None
    _menu_loop(size, rng)
