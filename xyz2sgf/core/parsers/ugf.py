# UGF / UGI parser, after the gofish converter by fohristiwhirl
# Format notes: http://homepages.cwi.nl/~aeb/go/misc/ugf.html
import logging
from dataclasses import dataclass
from typing import Optional

from xyz2sgf.core.coords import encode_point
from xyz2sgf.core.errors import ParseError
from xyz2sgf.core.tree import PropertyTree
from xyz2sgf.core.utils import parse_float, parse_int

logger = logging.getLogger(__name__)

SECTION_HEADER = "[HEADER]"
SECTION_DATA = "[DATA]"

MAX_BOARD_SIZE = 19

# header keys holding free text, stored escaped
_TEXT_KEYS = {
    "PLAYERB=": "PB",
    "PLAYERW=": "PW",
    "PLACE=": "PC",
    "TITLE=": "GN",
}


@dataclass(frozen=True)
class DataRecord:
    """One [DATA] line: colour, SGF point ("" for a pass) and the node marker character."""

    colour: str
    value: str
    marker: str


class _UgfParser:
    def __init__(self) -> None:
        self.tree = PropertyTree()
        self.node = self.tree.root
        self.section: Optional[str] = None
        self.boardsize: Optional[int] = None
        self.handicap: Optional[int] = None
        self.handicap_stones_set = 0
        self.coordinate_type = ""

    def enter_section(self, line: str) -> None:
        self.section = line.upper()
        if self.section != SECTION_DATA:
            return
        # Since we're entering the data section, we need to ensure we have
        # gotten sane info from the header; check this now...
        if self.handicap is None or self.boardsize is None:
            raise ParseError(
                "Data section before board size and handicap were set",
                context={"boardsize": self.boardsize, "handicap": self.handicap},
            )
        if not 1 <= self.boardsize <= MAX_BOARD_SIZE or self.handicap < 0:
            raise ParseError(
                f"Bad header values: size {self.boardsize}, handicap {self.handicap}",
                context={"boardsize": self.boardsize, "handicap": self.handicap},
            )

    def header_line(self, line: str) -> None:
        root = self.tree.root
        upper = line.upper()
        value = line.split("=", 1)[1] if "=" in line else ""

        if upper.startswith("HDCP="):
            fields = value.split(",")
            handicap = parse_int(fields[0])
            if handicap is None:
                logger.debug("UGF handicap line skipped: %r", line)
                return
            self.handicap = handicap
            if handicap >= 2:
                self.tree.set_value(root, "HA", handicap)  # The actual stones are placed in the data section
            komi = parse_float(fields[1]) if len(fields) > 1 else None
            if komi is not None:
                self.tree.set_value(root, "KM", komi)

        elif upper.startswith("SIZE="):
            boardsize = parse_int(value)
            if boardsize is None:
                logger.debug("UGF size line skipped: %r", line)
                return
            self.boardsize = boardsize
            self.tree.set_value(root, "SZ", boardsize)

        elif upper.startswith("COORDINATETYPE="):
            self.coordinate_type = value.upper()

        elif upper.startswith("WINNER=B"):
            self.tree.set_value(root, "RE", "B+")

        elif upper.startswith("WINNER=W"):
            self.tree.set_value(root, "RE", "W+")

        else:
            for prefix, key in _TEXT_KEYS.items():
                if upper.startswith(prefix):
                    self.tree.safe_commit(root, key, line[len(prefix) :])
                    break

    def parse_record(self, line: str) -> Optional[DataRecord]:
        """XY,<colour><n>,<marker>,<time> -- letters from A, off-board coordinates are passes."""
        slist = line.upper().split(",")
        if len(slist) < 2 or len(slist[0]) < 2 or not slist[1]:
            return None
        x_chr, y_chr = slist[0][0], slist[0][1]
        colour = slist[1][0]
        marker = slist[2][0] if len(slist) > 2 and slist[2] else ""
        if colour not in ("B", "W"):
            return None

        assert self.boardsize is not None
        x = ord(x_chr) - 64
        y = ord(y_chr) - 64
        if self.coordinate_type == "IGS":  # apparently "IGS" format is from the bottom left
            y = self.boardsize - y + 1

        if x > self.boardsize or x < 1 or y > self.boardsize or y < 1:  # Likely a pass, "YA" is often used
            value = ""
        else:
            value = encode_point(x, y)
        return DataRecord(colour, value, marker)

    def data_line(self, line: str) -> None:
        record = self.parse_record(line)
        if record is None:
            logger.debug("UGF data record skipped: %r", line)
            return
        assert self.handicap is not None
        root = self.tree.root
        # In case of the initial handicap placement, don't create a new node...
        if (
            self.handicap >= 2
            and self.handicap_stones_set != self.handicap
            and record.marker == "0"
            and record.colour == "B"
            and self.node == root
        ):
            self.handicap_stones_set += 1
            self.tree.add_value(root, "AB", record.value)
        else:
            self.node = self.tree.new_child(self.node)
            self.tree.set_value(self.node, record.colour, record.value)

    def feed(self, line: str) -> None:
        line = line.strip()
        if line.startswith("[") and line.endswith("]"):
            self.enter_section(line)
        elif self.section == SECTION_HEADER:
            self.header_line(line)
        elif self.section == SECTION_DATA:
            self.data_line(line)


def parse_ugf(ugf: str) -> PropertyTree:
    """Note that the files are often (always?) named .ugi"""
    parser = _UgfParser()
    for line in ugf.split("\n"):
        parser.feed(line)

    tree = parser.tree
    if not tree.children(tree.root):  # We'll assume we failed in this case
        raise ParseError("No valid nodes found", user_message="No moves found in UGF file")

    return tree.finalize()
