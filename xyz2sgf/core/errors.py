"""
xyz2sgf exception hierarchy.

Provides a base exception class with user-facing messages and debug context,
plus specialized subclasses for the conversion stages.
"""

from typing import Any, Dict, Optional


class Xyz2SgfError(Exception):
    """Base exception for conversion errors.

    Attributes:
        user_message: Safe, user-facing error message.
        context: Dictionary of debug information.
    """

    def __init__(
        self,
        message: str,
        *,
        user_message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.user_message = user_message or message
        self.context = context or {}


class CoordinateRangeError(Xyz2SgfError, ValueError):
    """A board coordinate cannot be expressed as an SGF point (outside 1..26)."""

    pass


class BadBoardSizeError(Xyz2SgfError):
    """The normalized board size is missing, unparsable or outside 1..19."""

    pass


class ParseError(Xyz2SgfError):
    """Structural problem in a legacy record (bad section order, handicap range, no moves)."""

    pass


class UnknownFormatError(Xyz2SgfError):
    """The file extension does not map to any supported legacy format."""

    pass
