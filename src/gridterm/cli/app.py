"""Typer CLI application."""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from gridterm.core.errors import LayoutError
from gridterm.core.grid import DEFAULT_AXIS_LENGTH, Grid, GridConfig


def parse_shares(values: Optional[list[str]], name: str) -> dict[int, int]:
    """
    Turn ``["2=40", "5=10"]`` into ``{1: 40, 4: 10}``.

    Numbers on the command line are 1-based like the rest of the output;
    the returned keys are 0-based axis indices.
    """
    shares: dict[int, int] = {}
    for value in values or []:
        position, sep, percent = value.partition("=")
        try:
            if not sep:
                raise ValueError(value)
            index = int(position) - 1
            shares[index] = int(percent)
        except ValueError:
            raise typer.BadParameter(
                f"expected {name.upper()}=PERCENT, got {value!r}",
                param_hint=f"--{name}-share",
            ) from None
        if index < 0:
            raise typer.BadParameter(
                f"{name} numbers start at 1, got {value!r}",
                param_hint=f"--{name}-share",
            )
    return shares


def _axis_table(title: str, entries: list[dict]) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Share %", justify="right")
    table.add_column("Pinned")
    table.add_column("Offset %", justify="right")
    table.add_column("Chars", justify="right")
    for entry in entries:
        table.add_row(
            str(entry["index"]),
            str(entry["share"]),
            "yes" if entry["pinned"] else "",
            str(entry["offset"]),
            str(entry["chars"]),
        )
    return table


def _cell_rects(grid: Grid) -> list[dict]:
    cells = []
    for row in range(1, len(grid.rows) + 1):
        for column in range(1, len(grid.columns) + 1):
            x, y, width, height = grid.get_cell_chars(column, row)
            cells.append({
                "column": column,
                "row": row,
                "x": x,
                "y": y,
                "width": width,
                "height": height,
            })
    return cells


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="gridterm",
        help="Proportional grid layouts for terminal UIs.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug-level file logging")] = False,
        log_dir: Annotated[Optional[Path], typer.Option("--log-dir", help="Directory for gridterm.log")] = None,
    ) -> None:
        """Proportional grid layouts for terminal UIs."""
        from gridterm.utils.logging import setup_logging
        setup_logging(verbose=verbose, log_dir=log_dir)

    @app.command()
    def layout(
        columns: Annotated[int, typer.Option("--columns", "-c", help="Number of columns")] = DEFAULT_AXIS_LENGTH,
        rows: Annotated[int, typer.Option("--rows", "-r", help="Number of rows")] = DEFAULT_AXIS_LENGTH,
        width: Annotated[Optional[int], typer.Option("--width", "-W", help="Screen width in chars (default: terminal)")] = None,
        height: Annotated[Optional[int], typer.Option("--height", "-H", help="Screen height in chars (default: terminal)")] = None,
        column_share: Annotated[Optional[list[str]], typer.Option("--column-share", help="Pin a column: COLUMN=PERCENT")] = None,
        row_share: Annotated[Optional[list[str]], typer.Option("--row-share", help="Pin a row: ROW=PERCENT")] = None,
        cells: Annotated[bool, typer.Option("--cells", help="Also list every cell's rectangle")] = False,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show the computed shares and character sizes of a grid."""
        from gridterm.cli.core.terminal import Terminal

        size = Terminal.size()
        config = GridConfig(
            width_chars=size.cols if width is None else width,
            height_chars=size.rows if height is None else height,
            columns=columns,
            rows=rows,
            column_shares=parse_shares(column_share, "column"),
            row_shares=parse_shares(row_share, "row"),
        )
        try:
            grid = Grid.from_config(config)
        except LayoutError as e:
            console.print(f"[red]Invalid layout: {e}[/]")
            raise typer.Exit(1)

        data = grid.to_dict()
        if cells:
            data["cells"] = _cell_rects(grid)

        if json_output:
            print(json.dumps(data, indent=2))
            return

        console.print(f"[bold cyan]Grid {columns}x{rows} on {grid.width_chars}x{grid.height_chars} chars[/]")
        console.print(_axis_table("Columns", data["columns"]))
        console.print(_axis_table("Rows", data["rows"]))
        for axis, total in (("columns", data["column_total"]), ("rows", data["row_total"])):
            if total < 100:
                console.print(f"[yellow]{axis} cover {total}% ({100 - total}% unassigned)[/]")
        if cells:
            table = Table(title="Cells")
            for heading in ("Column", "Row", "X", "Y", "Width", "Height"):
                table.add_column(heading, justify="right")
            for cell in data["cells"]:
                table.add_row(*(str(cell[k]) for k in ("column", "row", "x", "y", "width", "height")))
            console.print(table)

    @app.command()
    def demo(
        columns: Annotated[int, typer.Option("--columns", "-c", help="Number of columns")] = DEFAULT_AXIS_LENGTH,
        rows: Annotated[int, typer.Option("--rows", "-r", help="Number of rows")] = DEFAULT_AXIS_LENGTH,
        column_share: Annotated[Optional[list[str]], typer.Option("--column-share", help="Pin a column: COLUMN=PERCENT")] = None,
        row_share: Annotated[Optional[list[str]], typer.Option("--row-share", help="Pin a row: ROW=PERCENT")] = None,
        border: Annotated[bool, typer.Option("--border/--no-border", help="Draw label borders")] = True,
    ) -> None:
        """Fill a window with one label per grid cell. Quit with q or Ctrl-C."""
        from gridterm.cli.widgets.label import Label
        from gridterm.cli.window import Window, WindowConfig

        config = WindowConfig(
            grid=GridConfig(
                columns=columns,
                rows=rows,
                column_shares=parse_shares(column_share, "column"),
                row_shares=parse_shares(row_share, "row"),
            )
        )
        try:
            window = Window(config)
        except LayoutError as e:
            console.print(f"[red]Invalid layout: {e}[/]")
            raise typer.Exit(1)

        for row in range(1, rows + 1):
            for column in range(1, columns + 1):
                window.place(Label(f"{column},{row}", border=border, theme=window.theme), column, row)
        window.run()

    return app
