"""Format template parsing.

A template such as ``"{} | {:?} => {:#?:60}"`` names one column per ``{...}``
specifier and uses the literal text between specifiers as the separators:

- ``{}``      display text (``str``)
- ``{:?}``    debug text (``repr``)
- ``{:#?}``   pretty debug text (``pprint``)

Any specifier may carry a minimum column width: ``{:80}``, ``{:?:60}``,
``{:#?:100}``. ``{{`` and ``}}`` are literal braces.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from colprint.errors import InvalidArgumentError

log = logging.getLogger(__name__)

_SPEC_RE = re.compile(r"^(?::(?P<mode>#?\?)?(?::?(?P<width>\d+))?)?$")


class FormatType(str, Enum):
    """How a value is turned into text for its column."""

    DISPLAY = "display"
    DEBUG = "debug"
    PRETTY = "pretty"


_MODES: dict[str | None, FormatType] = {
    None: FormatType.DISPLAY,
    "?": FormatType.DEBUG,
    "#?": FormatType.PRETTY,
}


@dataclass
class ColumnFormat:
    """Formatting rules for one column."""

    format_type: FormatType = FormatType.DISPLAY
    width: int | None = None
    separator: str | None = None


@dataclass
class Template:
    """A parsed template: column formats plus text around them."""

    formats: list[ColumnFormat] = field(default_factory=list)
    prefix: str = ""
    suffix: str = ""

    @property
    def separators(self) -> list[str]:
        """Separators between adjacent columns, one per gap."""
        return [fmt.separator or "" for fmt in self.formats[:-1]]

    @property
    def widths(self) -> list[int | None]:
        return [fmt.width for fmt in self.formats]


def parse_spec(body: str) -> ColumnFormat:
    """Parse the text between ``{`` and ``}`` into a ColumnFormat."""
    match = _SPEC_RE.match(body)
    if match is None:
        raise InvalidArgumentError(f"invalid format specifier {{{body}}}")
    width = match.group("width")
    return ColumnFormat(
        format_type=_MODES[match.group("mode")],
        width=int(width) if width is not None else None,
    )


def parse_template(template: str) -> Template:
    """Split a template into column formats and separators.

    Raises:
        InvalidArgumentError: on an unterminated ``{``, a stray ``}`` or an
            unknown specifier.
    """
    result = Template()
    literal: list[str] = []
    i = 0
    n = len(template)
    while i < n:
        ch = template[i]
        if ch == "{":
            if template.startswith("{{", i):
                literal.append("{")
                i += 2
                continue
            end = template.find("}", i + 1)
            if end == -1:
                raise InvalidArgumentError(f"unterminated '{{' at position {i} in {template!r}")
            fmt = parse_spec(template[i + 1 : end])
            text = "".join(literal)
            if result.formats:
                result.formats[-1].separator = text
            else:
                result.prefix = text
            result.formats.append(fmt)
            literal = []
            i = end + 1
        elif ch == "}":
            if not template.startswith("}}", i):
                raise InvalidArgumentError(f"single '}}' at position {i} in {template!r}")
            literal.append("}")
            i += 2
        else:
            literal.append(ch)
            i += 1

    text = "".join(literal)
    if result.formats:
        result.suffix = text
    else:
        result.prefix = text
    log.debug("parsed template %r into %d columns", template, len(result.formats))
    return result
