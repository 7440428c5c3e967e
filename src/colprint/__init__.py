"""colprint package: print values side by side in aligned columns."""

from importlib.metadata import PackageNotFoundError, version

from colprint.aligner import render
from colprint.errors import ColprintError, InvalidArgumentError
from colprint.printer import ColumnBuilder, colprint, format_columns
from colprint.template import FormatType

__all__ = [
    "__version__",
    "ColprintError",
    "ColumnBuilder",
    "FormatType",
    "InvalidArgumentError",
    "colprint",
    "format_columns",
    "render",
]

try:
    __version__ = version("colprint")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
