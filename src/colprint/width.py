"""Display-width measurement.

The aligner only ever measures text through one of these functions, so the
counting strategy can change without touching the padding logic.
"""

from __future__ import annotations

from collections.abc import Callable

from wcwidth import wcswidth, wcwidth

from colprint.errors import InvalidArgumentError

WidthFn = Callable[[str], int]


def char_width(text: str) -> int:
    """Return the number of Unicode code points in *text*."""
    return len(text)


def cell_width(text: str) -> int:
    """Return the number of terminal cells *text* occupies.

    East Asian wide characters count as two cells and combining marks as
    zero. Non-printable characters, for which ``wcswidth`` gives up and
    returns -1, count as zero instead of poisoning the whole line.
    """
    width = wcswidth(text)
    if width >= 0:
        return width
    return sum(max(wcwidth(ch), 0) for ch in text)


WIDTH_FUNCTIONS: dict[str, WidthFn] = {
    "chars": char_width,
    "cells": cell_width,
}


def get_width_fn(name: str) -> WidthFn:
    """Look up a width strategy by name (``chars`` or ``cells``)."""
    try:
        return WIDTH_FUNCTIONS[name]
    except KeyError:
        choices = ", ".join(sorted(WIDTH_FUNCTIONS))
        raise InvalidArgumentError(f"unknown width mode {name!r} (choose from {choices})") from None
