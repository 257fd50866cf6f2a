"""Exception types raised by listsampling."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A size, index or bound passed to a listsampling call is out of range."""
