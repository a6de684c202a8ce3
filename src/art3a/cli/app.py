"""Typer CLI application."""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from art3a.errors import ArtError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="art3a",
        help="Inspect, check and reformat 3a animated ASCII art.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    @app.callback()
    def configure(
        log_level: Annotated[str, typer.Option("--log-level", "-l", help="Logging level")] = "WARNING",
    ) -> None:
        """Inspect, check and reformat 3a animated ASCII art."""
        level = log_level.upper()
        if level not in LOG_LEVELS:
            raise typer.BadParameter(f"must be one of {', '.join(LOG_LEVELS)}", param_hint="--log-level")
        logging.basicConfig(
            level=getattr(logging, level),
            format="%(asctime)s - %(levelname)s - %(message)s",
        )

    def load_or_exit(path: Path):
        import art3a

        try:
            return art3a.load(path)
        except ArtError as err:
            err_console.print(f"[red]{path}: {err}[/]")
            raise typer.Exit(1)

    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(help="3a file to inspect")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show size, timing, tags and palette of a 3a file."""
        art = load_or_exit(path)
        text_pinned, color_pinned = art.pinned()
        palette = {str(name): str(entry.pair) for name, entry in art.header.palette}

        if json_output:
            data = {
                "title": art.get_title_key(),
                "authors": art.get_authors_key(),
                "orig_authors": art.get_orig_authors_key(),
                "frames": art.frames(),
                "width": art.width(),
                "height": art.height(),
                "colors": art.color(),
                "text_pinned": text_pinned,
                "color_pinned": color_pinned,
                "loop": art.get_loop_key(),
                "duration": art.duration(),
                "tags": sorted(art.tags()),
                "palette": palette,
            }
            print(json.dumps(data, indent=2, ensure_ascii=False))
            return

        console.print(f"[bold cyan]{art.title_line() or path.name}[/]")
        console.print(f"  [bold]Frames:[/]   {art.frames()}")
        console.print(f"  [bold]Size:[/]     {art.width()}x{art.height()}")
        console.print(f"  [bold]Colors:[/]   {'yes' if art.color() else 'no'}")
        console.print(f"  [bold]Pinned:[/]   text={text_pinned} color={color_pinned}")
        console.print(f"  [bold]Duration:[/] {art.duration():.2f}s (loop={art.get_loop_key()})")
        if art.tags():
            console.print(f"  [bold]Tags:[/]     {' '.join('#' + t for t in sorted(art.tags()))}")
        if palette:
            table = Table(title="Palette")
            table.add_column("Name")
            table.add_column("Colors")
            for name, pair in palette.items():
                table.add_row(name, pair or "(default)")
            console.print(table)

    @app.command()
    def check(
        paths: Annotated[list[Path], typer.Argument(help="3a files to check")],
    ) -> None:
        """Parse files and report errors."""
        import art3a

        failed = 0
        for path in paths:
            try:
                art = art3a.load(path)
            except ArtError as err:
                failed += 1
                console.print(f"[red]FAIL[/] {path}: {err}")
                continue
            console.print(f"[green]OK[/]   {path} ({art.frames()} frames, {art.width()}x{art.height()})")
        if failed:
            raise typer.Exit(1)

    @app.command()
    def fmt(
        source: Annotated[Path, typer.Argument(help="Source 3a file")],
        dest: Annotated[Optional[Path], typer.Argument(help="Destination file (stdout if omitted)")] = None,
        strip_comments: Annotated[bool, typer.Option("--strip-comments", help="Drop header comments")] = False,
    ) -> None:
        """Rewrite a 3a file in the modern dialect."""
        import art3a

        art = load_or_exit(source)
        if dest is None:
            print(art3a.dumps(art, strip_comments=strip_comments), end="")
            return
        try:
            art3a.save(art, dest, strip_comments=strip_comments)
        except ArtError as err:
            err_console.print(f"[red]{err}[/]")
            raise typer.Exit(1)
        console.print(f"[green]Formatted {source} → {dest}[/]")

    @app.command()
    def show(
        path: Annotated[Path, typer.Argument(help="3a file to show")],
        frame: Annotated[Optional[int], typer.Option("--frame", "-f", help="Frame index (preview frame if omitted)")] = None,
    ) -> None:
        """Print one frame of a 3a file in the terminal."""
        art = load_or_exit(path)
        index = frame if frame is not None else (art.get_preview_key() or 0)
        selected = art.frame(index)
        if selected is None:
            err_console.print(f"[red]{path} has no frame {index}[/]")
            raise typer.Exit(1)
        console.print(Text.from_ansi(selected.to_ansi(art.header.palette, art.color())))

    return app
