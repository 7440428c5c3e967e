"""Turn arbitrary values into column text."""

from __future__ import annotations

import pprint
from typing import Any

from colprint.template import FormatType


def to_text(value: Any, mode: FormatType = FormatType.DISPLAY, *, pretty_width: int = 80) -> str:
    """Convert *value* to text according to *mode*.

    ``DISPLAY`` uses ``str``, ``DEBUG`` uses ``repr`` and ``PRETTY`` uses
    ``pprint.pformat``, which breaks containers across lines once they no
    longer fit in *pretty_width* characters.
    """
    if mode is FormatType.PRETTY:
        return pprint.pformat(value, width=pretty_width)
    if mode is FormatType.DEBUG:
        return repr(value)
    return str(value)
