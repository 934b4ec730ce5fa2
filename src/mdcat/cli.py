"""CLI entry point for mdcat. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import sys
from typing import IO

import click

from mdcat.config import RenderConfig
from mdcat.renderer import MarkdownRenderer

logger = logging.getLogger(__name__)

STDIN = "-"


def _render_stream(renderer: MarkdownRenderer, stream: IO[str]) -> None:
    for chunk in renderer.render(stream):
        click.echo(chunk, nl=False)


@click.command()
# Not checked by click: unreadable inputs are reported when they are reached
@click.argument("files", nargs=-1, type=click.Path(allow_dash=True, readable=False))
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    show_default=True,
    help="Diagnostics written to stderr",
)
def main(files: tuple[str, ...], log_level: str) -> None:
    """Render markdown FILES to the terminal (standard input if none are given)."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # Decided once, before any input is read
    config = RenderConfig(color=sys.stdout.isatty())
    renderer = MarkdownRenderer(config)
    logger.debug("Styling %s", "enabled" if config.color else "disabled")

    for name in files or (STDIN,):
        try:
            handle = click.open_file(name, "r", encoding="utf-8", errors="replace")
        except OSError as e:
            click.echo(f"mdcat: cannot open '{name}': {e.strerror or e}", err=True)
            sys.exit(1)

        logger.debug("Rendering %s", "<stdin>" if name == STDIN else name)
        with handle:
            _render_stream(renderer, handle)


if __name__ == "__main__":
    main()
