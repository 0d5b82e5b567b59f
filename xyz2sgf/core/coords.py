import re

from xyz2sgf.core.errors import CoordinateRangeError

SGF_LETTERS = "abcdefghijklmnopqrstuvwxyz"
MAX_COORD = len(SGF_LETTERS)

_ESCAPE_PAT = re.compile(r"([\]\\])")
_UNESCAPE_PAT = re.compile(r"\\([\]\\])")


def point_in_range(x: int, y: int) -> bool:
    """True when (x, y) can be written as an SGF point, i.e. both in 1..26."""
    return 1 <= x <= MAX_COORD and 1 <= y <= MAX_COORD


def encode_point(x: int, y: int) -> str:
    """Convert one-based x, y into an SGF coordinate, e.g. (16, 4) -> "pd"

    Raises:
        CoordinateRangeError: If either coordinate is outside 1..26
    """
    if not point_in_range(x, y):
        raise CoordinateRangeError(
            f"Point ({x}, {y}) outside encodable range 1..{MAX_COORD}", context={"x": x, "y": y}
        )
    return SGF_LETTERS[x - 1] + SGF_LETTERS[y - 1]


def escape_value(value: str) -> str:
    return _ESCAPE_PAT.sub(r"\\\1", str(value))  # escape \ and ]


def unescape_value(value: str) -> str:
    return _UNESCAPE_PAT.sub(r"\1", value)  # unescape \ and ]
