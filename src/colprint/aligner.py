"""Column alignment: lay out multi-line text blocks side by side.

Each block becomes one column. A column is as wide as its widest line and
every line in it is right-padded with spaces to that width, so the columns
after it start at the same offset on every row.
"""

from __future__ import annotations

from collections.abc import Sequence

from colprint.errors import InvalidArgumentError
from colprint.width import WidthFn, char_width


def split_lines(block: str) -> list[str]:
    """Split a block into lines.

    ``\\n`` and ``\\r\\n`` both end a line. A single trailing line break does
    not open an extra empty line, but an empty block is still one (empty)
    line.

    >>> split_lines("a\\r\\nb\\n")
    ['a', 'b']
    >>> split_lines("")
    ['']
    """
    lines = block.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def pad(text: str, width: int, width_fn: WidthFn = char_width) -> str:
    """Right-pad *text* with spaces up to *width* display positions."""
    missing = width - width_fn(text)
    if missing <= 0:
        return text
    return text + " " * missing


def column_widths(
    columns: Sequence[Sequence[str]],
    width_fn: WidthFn = char_width,
    minimums: Sequence[int | None] | None = None,
) -> list[int]:
    """Return the display width of each column.

    A minimum widens a column but never narrows it below its widest line.
    """
    widths: list[int] = []
    for idx, lines in enumerate(columns):
        natural = max((width_fn(line) for line in lines), default=0)
        minimum = minimums[idx] if minimums is not None else None
        widths.append(max(natural, minimum or 0))
    return widths


def _separators(separator: str | Sequence[str], count: int) -> list[str]:
    gaps = max(count - 1, 0)
    if isinstance(separator, str):
        return [separator] * gaps
    if not isinstance(separator, Sequence):
        raise InvalidArgumentError(
            f"separator must be str or a sequence of str, not {type(separator).__name__}"
        )
    seps = list(separator)
    if len(seps) != gaps:
        raise InvalidArgumentError(
            f"expected {gaps} separators for {count} columns, got {len(seps)}"
        )
    for sep in seps:
        if not isinstance(sep, str):
            raise InvalidArgumentError(f"separator must be str, not {type(sep).__name__}")
    return seps


def _minimums(widths: Sequence[int | None] | None, count: int) -> list[int | None] | None:
    if widths is None:
        return None
    if isinstance(widths, str) or not isinstance(widths, Sequence):
        raise InvalidArgumentError(f"widths must be a sequence, not {type(widths).__name__}")
    minimums = list(widths)
    if len(minimums) != count:
        raise InvalidArgumentError(f"expected {count} column widths, got {len(minimums)}")
    for width in minimums:
        if width is None:
            continue
        if isinstance(width, bool) or not isinstance(width, int):
            raise InvalidArgumentError(f"column width must be int, not {type(width).__name__}")
        if width < 0:
            raise InvalidArgumentError(f"column width must be >= 0, got {width}")
    return minimums


def render(
    blocks: Sequence[str],
    separator: str | Sequence[str] = "",
    *,
    widths: Sequence[int | None] | None = None,
    pad_last: bool = True,
    width_fn: WidthFn | None = None,
) -> str:
    """Render text blocks as aligned columns.

    Args:
        blocks: One string per column, left to right. Each may span
            several lines.
        separator: Text placed between adjacent columns on every row.
            Either one string for all gaps or one string per gap.
        widths: Optional minimum width per column (``None`` = automatic).
        pad_last: Pad the last column too. When False its lines are left
            as they are.
        width_fn: Display-width function. Defaults to code-point count.

    Returns:
        One output line per row, joined with ``\\n``, without a trailing
        line break. An empty *blocks* sequence renders as ``""``.

    >>> render(["Alice", "30"], " | ")
    'Alice | 30'
    >>> render(["x", "yy", "zzz"], "-")
    'x  -yy -zzz'
    """
    measure = width_fn or char_width
    if isinstance(blocks, str):
        raise InvalidArgumentError("blocks must be a sequence of str, not a single str")
    if not isinstance(blocks, Sequence):
        raise InvalidArgumentError(f"blocks must be a sequence, not {type(blocks).__name__}")
    for block in blocks:
        if not isinstance(block, str):
            raise InvalidArgumentError(f"block must be str, not {type(block).__name__}")
    if not blocks:
        return ""

    seps = _separators(separator, len(blocks))
    minimums = _minimums(widths, len(blocks))

    columns = [split_lines(block) for block in blocks]
    row_count = max(len(lines) for lines in columns)
    for lines in columns:
        lines.extend([""] * (row_count - len(lines)))

    col_widths = column_widths(columns, measure, minimums)
    last = len(columns) - 1
    padded = [
        lines
        if idx == last and not pad_last
        else [pad(line, col_widths[idx], measure) for line in lines]
        for idx, lines in enumerate(columns)
    ]

    rows: list[str] = []
    for row_idx in range(row_count):
        parts: list[str] = []
        for idx, lines in enumerate(padded):
            if idx:
                parts.append(seps[idx - 1])
            parts.append(lines[row_idx])
        rows.append("".join(parts))
    return "\n".join(rows)
