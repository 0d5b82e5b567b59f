"""Parsers for the legacy record dialects.

Each parser takes decoded text and returns a finalized PropertyTree, or
raises ParseError. Single records are turned into a MoveRecord by a helper
that returns None for anything malformed, and the parser loop skips those.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from xyz2sgf.core.coords import encode_point
from xyz2sgf.core.handicap import Point
from xyz2sgf.core.tree import PropertyTree


@dataclass(frozen=True)
class MoveRecord:
    """One decoded move: property key ("B" or "W") and SGF point ("" for a pass)."""

    key: str
    value: str


def add_handicap_stones(tree: PropertyTree, node: int, points: Iterable[Point]) -> None:
    """Store handicap points as one AB property, sorted so output is stable."""
    for point in sorted(points):
        tree.add_value(node, "AB", encode_point(point.x, point.y))


def play(tree: PropertyTree, node: int, record: Optional[MoveRecord]) -> int:
    """Append record as a new child of node and return it; node itself when record is None."""
    if record is None:
        return node
    child = tree.new_child(node)
    tree.set_value(child, record.key, record.value)
    return child
