"""SGF text output for a normalized PropertyTree."""

import io
from typing import Protocol, Union

from xyz2sgf.core.tree import PropertyTree


class TextSink(Protocol):
    def write(self, s: str) -> int: ...


def node_sgf_str(tree: PropertyTree, node: int) -> str:
    """The node as ";KEY[v1][v2]...". Relies on values already being correctly backslash-escaped"""
    return ";" + "".join(
        key + "".join(f"[{value}]" for value in values) for key, values in tree.properties(node).items()
    )


def write_tree(sink: TextSink, tree: PropertyTree, node: int = PropertyTree.ROOT) -> None:
    """Write the tree below `node` as an SGF game to sink, in output order.

    A single child continues the current group; two or more children each get
    their own group. Every group is closed with ")" and a newline.
    """
    stack: list[Union[str, int]] = [")\n", node, "("]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            sink.write(item)
            continue
        sink.write(node_sgf_str(tree, item))
        children = tree.children(item)
        if len(children) == 1:
            stack.append(children[0])
        elif children:
            for child in reversed(children):
                stack.extend([")\n", child, "("])


def tree_to_string(tree: PropertyTree) -> str:
    buffer = io.StringIO()
    write_tree(buffer, tree)
    return buffer.getvalue()
