# GIB (Tygem) parser, after the gofish converter by fohristiwhirl
import logging
import re
from typing import Optional

from xyz2sgf.core.coords import encode_point, point_in_range
from xyz2sgf.core.errors import ParseError
from xyz2sgf.core.handicap import MAX_HANDICAP, handicap_points
from xyz2sgf.core.parsers import MoveRecord, add_handicap_stones, play
from xyz2sgf.core.tree import PropertyTree
from xyz2sgf.core.utils import format_number, parse_int

logger = logging.getLogger(__name__)

GIB_BOARD_SIZE = 19

_RESULT_EASY_CASES = {3: "B+R", 4: "W+R", 7: "B+T", 8: "W+T"}


def parse_player_name(raw: str) -> tuple[str, str]:
    """Split "Name (Rank)" into its parts; anything else is all name."""
    name = ""
    rank = ""
    parts = raw.split("(")
    if len(parts) == 2 and parts[1].endswith(")"):
        name = parts[0].strip()
        rank = parts[1][:-1]
    if not name:
        return raw, ""
    return name, rank


def make_result(grlt: int, zipsu: int) -> str:
    """GRLT is the kind of result, ZIPSU the margin in tenths of a point."""
    if grlt in _RESULT_EASY_CASES:
        return _RESULT_EASY_CASES[grlt]
    if grlt in (0, 1):
        return "{}+{}".format("B" if grlt == 0 else "W", format_number(zipsu / 10))
    return ""


def get_result(line: str, grlt_regex: str, zipsu_regex: str) -> str:
    grlt_match = re.search(grlt_regex, line)
    zipsu_match = re.search(zipsu_regex, line)
    if grlt_match is None or zipsu_match is None:
        return ""
    return make_result(int(grlt_match.group(1)), int(zipsu_match.group(1)))


def get_komi(line: str, regex: str) -> Optional[float]:
    match = re.search(regex, line)
    if match is None:
        return None
    return int(match.group(1)) / 10


def parse_move(line: str) -> Optional[MoveRecord]:
    """STO <n> <n> <colour> <x> <y>, with zero based x, y from the top left."""
    move = line.split()
    if len(move) < 6:
        return None
    key = "B" if move[3] == "1" else "W"
    x = parse_int(move[4])
    y = parse_int(move[5])
    if x is None or y is None or not point_in_range(x + 1, y + 1):
        return None
    return MoveRecord(key, encode_point(x + 1, y + 1))


def _commit_player(tree: PropertyTree, raw: str, name_key: str, rank_key: str) -> None:
    name, rank = parse_player_name(raw)
    if name and not tree.has_property(tree.root, name_key):
        tree.safe_commit(tree.root, name_key, name)
    if rank and not tree.has_property(tree.root, rank_key):
        tree.safe_commit(tree.root, rank_key, rank)


def _setup_handicap(tree: PropertyTree, line: str) -> None:
    setup = line.split()
    handicap = parse_int(setup[3]) if len(setup) > 3 else None
    if handicap is None:
        logger.debug("GIB setup line without handicap skipped: %r", line)
        return
    if not 0 <= handicap <= MAX_HANDICAP:
        raise ParseError(f"Handicap {handicap} out of range", context={"line": line})
    if handicap >= 2:
        tree.set_value(tree.root, "HA", handicap)
        add_handicap_stones(tree, tree.root, handicap_points(GIB_BOARD_SIZE, handicap, tygem=True))


def parse_gib(gib: str) -> PropertyTree:
    tree = PropertyTree()
    root = tree.root
    node = root

    for line in gib.split("\n"):
        line = line.strip()

        if line.startswith("\\[GAMEBLACKNAME=") and line.endswith("\\]"):
            _commit_player(tree, line[16:-2], "PB", "BR")

        if line.startswith("\\[GAMEWHITENAME=") and line.endswith("\\]"):
            _commit_player(tree, line[16:-2], "PW", "WR")

        if line.startswith("\\[GAMEINFOMAIN="):
            if not tree.has_property(root, "RE"):
                result = get_result(line, r"GRLT:(\d+),", r"ZIPSU:(\d+),")
                if result:
                    tree.set_value(root, "RE", result)
            if not tree.has_property(root, "KM"):
                komi = get_komi(line, r"GONGJE:(\d+),")
                if komi:
                    tree.set_value(root, "KM", komi)

        if line.startswith("\\[GAMETAG="):
            if not tree.has_property(root, "DT"):
                date_match = re.search(r"C(\d\d\d\d):(\d\d):(\d\d)", line)
                if date_match is not None:
                    tree.set_value(root, "DT", "-".join(date_match.groups()))
            if not tree.has_property(root, "RE"):
                result = get_result(line, r",W(\d+),", r",Z(\d+),")
                if result:
                    tree.set_value(root, "RE", result)
            if not tree.has_property(root, "KM"):
                komi = get_komi(line, r",G(\d+),")
                if komi is not None:
                    tree.set_value(root, "KM", komi)

        if line[0:3] == "INI":
            if node != root:
                raise ParseError("Setup line found after the first move", context={"line": line})
            _setup_handicap(tree, line)

        if line[0:3] == "STO":
            record = parse_move(line)
            if record is None:
                logger.debug("GIB move line skipped: %r", line)
            node = play(tree, node, record)

    if not tree.children(root):  # We'll assume we failed in this case
        raise ParseError("No valid nodes found", user_message="No moves found in GIB file")

    return tree.finalize()
