"""Typer CLI application."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from term_resume.config import (
    ENV_FILE,
    ENV_LOG,
    ENV_SPEED,
    TYPING_INTERVAL,
    ViewerConfig,
    configure_logging,
)
from term_resume.core.content import ContentCollection

ResumeArg = Annotated[
    Optional[Path],
    typer.Argument(help="Resume JSON file (built-in resume if omitted)", envvar=ENV_FILE),
]
LogFileOpt = Annotated[
    Optional[Path],
    typer.Option("--log-file", help="Write debug logs to this file", envvar=ENV_LOG),
]


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="term-resume",
        help="Scroll through a year-banded resume in your terminal.",
        invoke_without_command=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    def load_content(path: Optional[Path]) -> ContentCollection:
        from term_resume.content.resume import build_resume
        from term_resume.io.reader import ContentError, load

        if path is None:
            return build_resume()
        try:
            return load(path)
        except (ContentError, OSError) as e:
            console.print(f"[red]Cannot load resume:[/] {e}")
            raise typer.Exit(1)

    @app.callback()
    def main(ctx: typer.Context) -> None:
        """Show the built-in resume when no command is given."""
        if ctx.invoked_subcommand is None:
            # Parse an empty command line so envvar fallbacks apply
            command = ctx.command.get_command(ctx, "show")
            with command.make_context("show", [], parent=ctx) as sub_ctx:
                command.invoke(sub_ctx)

    @app.command()
    def show(
        resume: ResumeArg = None,
        no_banner: Annotated[bool, typer.Option("--no-banner", help="Skip the typing banner")] = False,
        speed: Annotated[float, typer.Option("--speed", help="Seconds per typed character", envvar=ENV_SPEED, min=0.0)] = TYPING_INTERVAL,
        log_file: LogFileOpt = None,
    ) -> None:
        """View the resume interactively (arrow keys scroll, Ctrl+C quits)."""
        from term_resume.cli.viewer.app import run_viewer

        configure_logging(log_file)
        content = load_content(resume)
        config = ViewerConfig(
            content_path=resume,
            banner=not no_banner,
            speed=speed,
            log_file=log_file,
        )
        run_viewer(content, config)

    @app.command()
    def dump(
        resume: ResumeArg = None,
        width: Annotated[int, typer.Option("--width", "-w", help="Columns to lay out for", min=10)] = 80,
        plain: Annotated[bool, typer.Option("--plain", "-p", help="Strip colors and styles")] = False,
    ) -> None:
        """Print every line of the resume without entering raw mode."""
        from term_resume.cli.core.ansi_text import strip_ansi
        from term_resume.cli.core.terminal import Terminal, TerminalGeometry
        from term_resume.cli.viewer.renderer import HEADER_LINES, ViewportRenderer

        content = load_content(resume)
        # Tall enough that nothing is cut off
        geometry = TerminalGeometry(rows=len(content) + HEADER_LINES + 1, columns=width)
        renderer = ViewportRenderer(Terminal())
        rows = renderer.header_rows(content.header, geometry)
        rows.extend(renderer.content_rows(content, 0, geometry))
        for row in rows:
            typer.echo(strip_ansi(row) if plain else row)

    @app.command()
    def keys(log_file: LogFileOpt = None) -> None:
        """Print decoded key events until Ctrl+C (for checking a terminal)."""
        from term_resume.cli.core.input import KeyEvent, RawInputSource

        configure_logging(log_file)
        out = Console(highlight=False)
        out.print("[bold]Press keys to see how they decode; Ctrl+C quits.[/]")
        done = False

        def show_event(event: KeyEvent) -> None:
            nonlocal done
            name = event.name or "[dim](none)[/]"
            ctrl = "[yellow]ctrl[/] " if event.is_control else ""
            out.print(f"{ctrl}{name}  [dim]{escape(repr(event.raw))}[/]")
            if event.is_control and event.name == 'c':
                done = True

        with RawInputSource() as source:
            source.subscribe(show_event)
            while not done and not source.eof:
                if not source.poll(0.1):
                    source.flush()

    return app
