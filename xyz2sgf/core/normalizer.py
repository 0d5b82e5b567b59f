import logging

from xyz2sgf.core.errors import BadBoardSizeError
from xyz2sgf.core.tree import PropertyTree
from xyz2sgf.core.utils import parse_int

logger = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = 19
MIN_BOARD_SIZE = 1
MAX_BOARD_SIZE = 19


def normalize(tree: PropertyTree) -> PropertyTree:
    """Set the fixed SGF root tags and check the board size of a freshly parsed tree.

    Raises:
        BadBoardSizeError: If SZ is not an integer in 1..19
    """
    root = tree.root
    tree.set_value(root, "FF", 4)
    tree.set_value(root, "GM", 1)
    tree.set_value(root, "CA", "UTF-8")  # Force UTF-8

    raw_size = tree.get_property(root, "SZ")
    if raw_size is None:
        tree.set_value(root, "SZ", DEFAULT_BOARD_SIZE)
        size = DEFAULT_BOARD_SIZE
    else:
        size = parse_int(raw_size)

    if size is None or not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
        raise BadBoardSizeError(
            f"Board size {raw_size} not supported",
            user_message=f"Board size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}",
            context={"SZ": raw_size},
        )
    moves = sum(1 for node in tree.nodes() if tree.has_property(node, "B") or tree.has_property(node, "W"))
    logger.debug("Normalized tree with %d nodes, %d moves, board size %d", len(tree), moves, size)
    return tree
