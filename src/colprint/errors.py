"""Exceptions raised by colprint."""

from __future__ import annotations


class ColprintError(Exception):
    """Base class for colprint errors."""


class InvalidArgumentError(ColprintError, ValueError):
    """Raised when a caller passes blocks, separators, widths or a template colprint cannot use."""
