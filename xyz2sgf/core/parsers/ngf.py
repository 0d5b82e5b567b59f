# NGF parser, after the gofish converter by fohristiwhirl
import logging
from typing import Optional

from xyz2sgf.core.coords import encode_point, point_in_range
from xyz2sgf.core.errors import ParseError
from xyz2sgf.core.handicap import MAX_HANDICAP, handicap_points
from xyz2sgf.core.parsers import MoveRecord, add_handicap_stones, play
from xyz2sgf.core.tree import PropertyTree
from xyz2sgf.core.utils import parse_float, parse_int

logger = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = 19

# fixed line numbers of the header fields
LINE_BOARD_SIZE = 1
LINE_WHITE = 2
LINE_BLACK = 3
LINE_HANDICAP = 5
LINE_KOMI = 7
LINE_DATE = 8
LINE_RESULT = 10


def _line(lines: list[str], index: int) -> str:
    return lines[index] if index < len(lines) else ""


def _first_token(text: str) -> str:
    tokens = text.split()
    return tokens[0] if tokens else ""


def parse_date(raw: str) -> Optional[str]:
    """20170316 -> 2017-03-16, None unless the first 8 characters are all digits."""
    rawdate = raw[0:8]
    if len(rawdate) != 8 or not all(c in "0123456789" for c in rawdate):
        return None
    return f"{rawdate[0:4]}-{rawdate[4:6]}-{rawdate[6:8]}"


def parse_result(line: str) -> str:
    if "hite win" in line:
        return "W+"
    if "lack win" in line:
        return "B+"
    return ""


def parse_move(line: str) -> Optional[MoveRecord]:
    """PM<nn><colour><x><y>..., uppercase, with "B" representing 1 (so "AA" is a pass)."""
    line = line.strip().upper()
    if len(line) < 7 or line[0:2] != "PM" or line[4] not in ("B", "W"):
        return None
    key = line[4]
    x = ord(line[5]) - ord("A")
    y = ord(line[6]) - ord("A")
    if x == 0 and y == 0:
        return MoveRecord(key, "")
    if not point_in_range(x, y):
        return None
    return MoveRecord(key, encode_point(x, y))


def parse_ngf(ngf: str) -> PropertyTree:
    lines = ngf.strip().split("\n")

    boardsize = parse_int(_line(lines, LINE_BOARD_SIZE))
    if boardsize is None:
        boardsize = DEFAULT_BOARD_SIZE
    handicap = parse_int(_line(lines, LINE_HANDICAP))
    if handicap is None:
        handicap = 0
    pw = _first_token(_line(lines, LINE_WHITE))
    pb = _first_token(_line(lines, LINE_BLACK))
    date = parse_date(_line(lines, LINE_DATE))
    result = parse_result(_line(lines, LINE_RESULT))

    komi = parse_float(_line(lines, LINE_KOMI))
    if komi is None:
        komi = 0.0
    elif handicap == 0 and komi.is_integer():
        komi += 0.5

    if not 0 <= handicap <= MAX_HANDICAP:
        raise ParseError(f"Handicap {handicap} out of range", context={"handicap": handicap})

    tree = PropertyTree()
    root = tree.root
    node = root

    # Set root values...

    tree.set_value(root, "SZ", boardsize)

    if handicap >= 2:
        tree.set_value(root, "HA", handicap)
        if point_in_range(boardsize, boardsize):
            # While this isn't Tygem, it uses the same layout
            add_handicap_stones(tree, root, handicap_points(boardsize, handicap, tygem=True))
        else:
            logger.debug("NGF handicap stones skipped for board size %d", boardsize)

    if komi:
        tree.set_value(root, "KM", komi)
    if date:
        tree.set_value(root, "DT", date)
    if pw:
        tree.safe_commit(root, "PW", pw)
    if pb:
        tree.safe_commit(root, "PB", pb)
    if result:
        tree.set_value(root, "RE", result)

    # Main parser...

    for line in lines:
        if not line.strip().upper().startswith("PM"):
            continue
        record = parse_move(line)
        if record is None:
            logger.debug("NGF move line skipped: %r", line)
        node = play(tree, node, record)

    if not tree.children(root):  # We'll assume we failed in this case
        raise ParseError("Found no moves", user_message="No moves found in NGF file")

    return tree.finalize()
