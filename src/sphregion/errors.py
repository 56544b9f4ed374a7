"""Exceptions raised by sphregion."""

from typing import Optional


class RegionError(Exception):
    """Base class for all sphregion errors."""
    pass


class InvalidArgument(RegionError, ValueError):
    """A sample count or resolution that cannot produce a grid."""
    pass


class ExpressionError(RegionError, ValueError):
    """Failure to tokenize or evaluate an arithmetic bound expression."""

    def __init__(self, message: str, text: str = "", column: Optional[int] = None):
        self.message = message
        self.text = text
        self.column = column  # 1-indexed, None when not tied to a position
        super().__init__(self.format())

    def format(self) -> str:
        if self.column is None:
            return self.message
        return f"column {self.column}: {self.message}"
