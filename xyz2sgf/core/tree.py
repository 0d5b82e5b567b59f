"""SGF-style property tree shared by the legacy parsers and the writer.

Nodes live in an arena and are addressed by integer handles. Handle 0 is the
root. A node's parent handle is only kept while a parser is building the
tree; `finalize()` drops it, after which the tree is only read (apart from a
few root tags set by the normalizer).
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Optional

from xyz2sgf.core.coords import escape_value
from xyz2sgf.core.utils import format_value


@dataclass
class _NodeEntry:
    properties: dict[str, list[str]] = field(default_factory=dict)
    children: list[int] = field(default_factory=list)
    parent: Optional[int] = None


class PropertyTree:
    ROOT = 0

    def __init__(self) -> None:
        self._nodes: list[_NodeEntry] = [_NodeEntry()]
        self._finalized = False

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"PropertyTree(nodes={len(self._nodes)}, root={self._nodes[self.ROOT].properties})"

    @property
    def root(self) -> int:
        return self.ROOT

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _entry(self, node: int) -> _NodeEntry:
        if not 0 <= node < len(self._nodes):
            raise IndexError(f"No node with handle {node}")
        return self._nodes[node]

    # building

    def new_child(self, parent: int) -> int:
        """Create a fresh node as the last child of `parent` and return its handle."""
        if self._finalized:
            raise RuntimeError("Cannot add nodes to a finalized tree")
        entry = self._entry(parent)
        handle = len(self._nodes)
        self._nodes.append(_NodeEntry(parent=parent))
        entry.children.append(handle)
        return handle

    def parent(self, node: int) -> Optional[int]:
        """Returns the parent handle, only available while the tree is being built"""
        if self._finalized:
            raise RuntimeError("Parent links are dropped once the tree is finalized")
        return self._entry(node).parent

    def finalize(self) -> "PropertyTree":
        """Freeze the structure: drop parent links and forbid new nodes."""
        for entry in self._nodes:
            entry.parent = None
        self._finalized = True
        return self

    # properties

    def set_value(self, node: int, key: str, value: Any) -> None:
        """Only allows the node to have 1 value for this key. Value must already be SGF-safe."""
        self._entry(node).properties[key] = [format_value(value)]

    def add_value(self, node: int, key: str, value: Any) -> None:
        """Append a value for the key unless it is already present, e.g. AB[dd][pp]."""
        values = self._entry(node).properties.setdefault(key, [])
        text = format_value(value)
        if text not in values:
            values.append(text)

    def safe_commit(self, node: int, key: str, text: str) -> None:
        """Escape a free-text value and store it as the only value. Removes the key if text is empty."""
        safe = escape_value(text)
        if safe:
            self._entry(node).properties[key] = [safe]
        else:
            self.clear_property(node, key)

    def clear_property(self, node: int, key: str) -> Optional[list[str]]:
        """Removes property if it exists."""
        return self._entry(node).properties.pop(key, None)

    def has_property(self, node: int, key: str) -> bool:
        return key in self._entry(node).properties

    def get_property(self, node: int, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get the first value of the property, typically when exactly one is expected."""
        values = self._entry(node).properties.get(key)
        return values[0] if values else default

    def get_list_property(self, node: int, key: str) -> list[str]:
        return list(self._entry(node).properties.get(key, []))

    def properties(self, node: int) -> Mapping[str, list[str]]:
        """Read-only snapshot of a node's properties, in insertion order."""
        return {k: list(v) for k, v in self._entry(node).properties.items()}

    # structure

    def children(self, node: int) -> tuple[int, ...]:
        return tuple(self._entry(node).children)

    def nodes(self) -> Iterator[int]:
        """All handles in pre-order, depth first."""
        stack = [self.ROOT]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(self._nodes[node].children))
