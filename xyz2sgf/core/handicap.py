"""Standard handicap stone layouts (star points) for square boards."""

from typing import NamedTuple

MAX_HANDICAP = 9


class Point(NamedTuple):
    """One-based board position, (1, 1) is the top left corner."""

    x: int
    y: int


def handicap_points(board_size: int, handicap: int, tygem: bool = False) -> frozenset[Point]:
    """Star points for `handicap` stones on a `board_size` board.

    Args:
        board_size: Width (and height) of the board
        handicap: Number of stones, values above 9 are treated as 9
        tygem: Tygem puts its 3rd handicap stone in the top left rather than
            the bottom right; NGF files follow the same layout

    Returns:
        The set of points, empty when the board is smaller than 4x4
    """
    points: set[Point] = set()

    if board_size < 4:
        return frozenset(points)

    handicap = min(handicap, MAX_HANDICAP)
    d = 2 if board_size < 13 else 3
    near = 1 + d
    far = board_size - d

    if handicap >= 2:
        points.add(Point(far, near))
        points.add(Point(near, far))

    if handicap >= 3:
        points.add(Point(near, near) if tygem else Point(far, far))

    if handicap >= 4:
        points.add(Point(far, far) if tygem else Point(near, near))

    if board_size % 2 == 0:  # no handicap > 4 on even sided boards
        return frozenset(points)

    mid = (board_size + 1) // 2

    if handicap in (5, 7, 9):
        points.add(Point(mid, mid))

    if handicap in (6, 7, 8, 9):
        points.add(Point(near, mid))
        points.add(Point(far, mid))

    if handicap in (8, 9):
        points.add(Point(mid, near))
        points.add(Point(mid, far))

    return frozenset(points)
