"""Convenience layer: format values with a template or a builder and print them."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from colprint.aligner import render
from colprint.config import load_settings
from colprint.convert import to_text
from colprint.errors import InvalidArgumentError
from colprint.template import ColumnFormat, FormatType, parse_template
from colprint.width import WidthFn, get_width_fn


def _defaults(
    width_fn: WidthFn | None, pad_last: bool | None, pretty_width: int | None
) -> tuple[WidthFn, bool, int]:
    """Fill unset options from the COLPRINT_* environment."""
    settings = load_settings()
    return (
        width_fn or get_width_fn(settings.width_mode),
        settings.pad_last if pad_last is None else pad_last,
        settings.pretty_width if pretty_width is None else pretty_width,
    )


def _wrap_rows(text: str, prefix: str, suffix: str) -> str:
    if not prefix and not suffix:
        return text
    return "\n".join(prefix + row + suffix for row in text.split("\n"))


def format_columns(
    template: str,
    *values: Any,
    width_fn: WidthFn | None = None,
    pad_last: bool | None = None,
    pretty_width: int | None = None,
) -> str:
    """Render *values* side by side as laid out by *template*.

    Options left as None come from the environment (see colprint.config).

    >>> format_columns("{} | {:?}", "a\\nbb", "c")
    "a  | 'c'\\nbb |    "
    """
    parsed = parse_template(template)
    width_fn, pad_last, pretty_width = _defaults(width_fn, pad_last, pretty_width)
    if len(values) != len(parsed.formats):
        raise InvalidArgumentError(
            f"template has {len(parsed.formats)} column(s) but {len(values)} value(s) were given"
        )
    blocks = [
        to_text(value, fmt.format_type, pretty_width=pretty_width)
        for fmt, value in zip(parsed.formats, values)
    ]
    text = render(
        blocks,
        parsed.separators,
        widths=parsed.widths,
        pad_last=pad_last,
        width_fn=width_fn,
    )
    return _wrap_rows(text, parsed.prefix, parsed.suffix)


def colprint(
    template: str,
    *values: Any,
    out: TextIO | None = None,
    width_fn: WidthFn | None = None,
    pad_last: bool | None = None,
    pretty_width: int | None = None,
) -> None:
    """Format *values* with *template* and write them, newline-terminated, to *out*.

    *out* defaults to ``sys.stdout``.
    """
    dest = out or sys.stdout
    text = format_columns(
        template, *values, width_fn=width_fn, pad_last=pad_last, pretty_width=pretty_width
    )
    dest.write(text + "\n")


class ColumnBuilder:
    """Collect values column by column, each with its own conversion mode.

    >>> ColumnBuilder(" | ").add("a").add("b", FormatType.DEBUG).render()
    "a | 'b'"
    """

    def __init__(
        self,
        separator: str = "",
        *,
        pad_last: bool | None = None,
        pretty_width: int | None = None,
    ) -> None:
        self.separator = separator
        self.pad_last = pad_last
        self.pretty_width = pretty_width
        self._values: list[Any] = []
        self._formats: list[ColumnFormat] = []

    def __len__(self) -> int:
        return len(self._values)

    def add(
        self, value: Any, mode: FormatType | str = FormatType.DISPLAY, width: int | None = None
    ) -> ColumnBuilder:
        """Append a column holding *value*."""
        if width is not None and width < 0:
            raise InvalidArgumentError(f"column width must be >= 0, got {width}")
        try:
            format_type = FormatType(mode)
        except ValueError:
            raise InvalidArgumentError(f"unknown format mode {mode!r}") from None
        self._values.append(value)
        self._formats.append(ColumnFormat(format_type=format_type, width=width))
        return self

    def sep(self, separator: str) -> ColumnBuilder:
        """Set the separator after the most recently added column."""
        if not self._formats:
            raise InvalidArgumentError("sep() called before any column was added")
        self._formats[-1].separator = separator
        return self

    def render(self, width_fn: WidthFn | None = None) -> str:
        width_fn, pad_last, pretty_width = _defaults(width_fn, self.pad_last, self.pretty_width)
        blocks = [
            to_text(value, fmt.format_type, pretty_width=pretty_width)
            for fmt, value in zip(self._formats, self._values)
        ]
        seps = [
            self.separator if fmt.separator is None else fmt.separator
            for fmt in self._formats[:-1]
        ]
        return render(
            blocks,
            seps,
            widths=[fmt.width for fmt in self._formats],
            pad_last=pad_last,
            width_fn=width_fn,
        )

    def print(self, out: TextIO | None = None, width_fn: WidthFn | None = None) -> None:
        dest = out or sys.stdout
        dest.write(self.render(width_fn) + "\n")
