from __future__ import annotations

from typing import TextIO

import click

from colprint import __version__
from colprint.aligner import render
from colprint.config import load_settings
from colprint.errors import ColprintError
from colprint.width import WIDTH_FUNCTIONS, get_width_fn


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="colprint")
@click.argument("files", nargs=-1, required=True, type=click.File("r", encoding="utf-8"))
@click.option(
    "-s",
    "--sep",
    "separator",
    default=None,
    help="Column separator (default: $COLPRINT_SEP or two spaces).",
)
@click.option(
    "--width",
    "width_mode",
    type=click.Choice(sorted(WIDTH_FUNCTIONS)),
    default=None,
    help="Measure code points (chars) or terminal cells (cells).",
)
@click.option("--trim-last", is_flag=True, default=False, help="Do not pad the last column.")
@click.option(
    "--min-width",
    "min_widths",
    type=click.IntRange(min=0),
    multiple=True,
    metavar="N",
    help="Minimum width of the next column; repeat once per column.",
)
def main(
    files: tuple[TextIO, ...],
    separator: str | None,
    width_mode: str | None,
    trim_last: bool,
    min_widths: tuple[int, ...],
) -> None:
    """colprint: print FILE... side by side in aligned columns.

    Each FILE (or - for stdin) becomes one column.
    """
    settings = load_settings()
    if len(min_widths) > len(files):
        msg = f"{len(min_widths)} --min-width values for {len(files)} column(s)"
        click.echo(f"error: {msg}", err=True)
        raise SystemExit(1)
    widths: list[int | None] = [*min_widths, *([None] * (len(files) - len(min_widths)))]
    blocks: list[str] = []
    for f in files:
        try:
            blocks.append(f.read())
        except UnicodeDecodeError as exc:
            click.echo(f"error: {f.name}: not valid UTF-8", err=True)
            raise SystemExit(1) from exc
    try:
        text = render(
            blocks,
            settings.separator if separator is None else separator,
            widths=widths,
            pad_last=settings.pad_last and not trim_last,
            width_fn=get_width_fn(width_mode or settings.width_mode),
        )
    except ColprintError as exc:
        click.echo(f"error: {exc}", err=True)
        raise SystemExit(1) from exc
    click.echo(text)


if __name__ == "__main__":
    main()
