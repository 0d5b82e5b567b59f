import pytest

from xyz2sgf.core.handicap import Point, handicap_points


def expected_count(board_size: int, handicap: int) -> int:
    handicap = min(handicap, 9)
    if handicap < 2:
        return 0
    if board_size % 2 == 0:
        return min(handicap, 4)
    return handicap


def test_small_boards_get_nothing():
    for size in range(0, 4):
        assert frozenset() == handicap_points(size, 9)


@pytest.mark.parametrize("size", [4] + list(range(6, 26)))
def test_counts_and_bounds(size):
    """Every size from 4 to 25 except 5: on 5x5 the corners, sides and center are all (3, 3),
    so the set holds a single point whatever the handicap (see test_five_by_five_stays_on_board)."""
    for handicap in range(0, 10):
        points = handicap_points(size, handicap)
        assert expected_count(size, handicap) == len(points), (size, handicap)
        assert all(1 <= p.x <= size and 1 <= p.y <= size for p in points)


def test_five_by_five_stays_on_board():
    for handicap in range(0, 10):
        assert all(1 <= x <= 5 and 1 <= y <= 5 for x, y in handicap_points(5, handicap))


def test_handicap_clamped_to_nine():
    assert handicap_points(19, 9) == handicap_points(19, 25)


def test_standard_19x19_layouts():
    assert {Point(16, 4), Point(4, 16)} == handicap_points(19, 2)
    assert Point(16, 16) in handicap_points(19, 3)
    assert Point(4, 4) not in handicap_points(19, 3)
    assert Point(10, 10) in handicap_points(19, 5)
    assert Point(10, 10) not in handicap_points(19, 6)
    assert {Point(4, 10), Point(16, 10)} <= handicap_points(19, 6)
    assert {Point(10, 4), Point(10, 16)} <= handicap_points(19, 8)


def test_tygem_third_stone_top_left():
    assert Point(4, 4) in handicap_points(19, 3, tygem=True)
    assert Point(16, 16) not in handicap_points(19, 3, tygem=True)
    assert handicap_points(19, 4) == handicap_points(19, 4, tygem=True)


def test_small_board_edge_distance():
    assert {Point(7, 3), Point(3, 7)} == handicap_points(9, 2)
    assert {Point(10, 4), Point(4, 10)} == handicap_points(13, 2)


def test_even_boards_cap_at_four():
    assert 4 == len(handicap_points(18, 9))
    assert Point(9, 9) not in handicap_points(18, 5)


def test_five_by_five_collapses_to_center():
    for handicap in range(2, 10):
        assert {Point(3, 3)} == handicap_points(5, handicap)
