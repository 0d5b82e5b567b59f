"""
Pytest configuration and shared fixtures for xyz2sgf tests.

Fixture files under tests/fixtures/ each hold a 2 stone handicap game with a
single recorded move, one per legacy dialect.
"""

from pathlib import Path

import pytest

from xyz2sgf.core.tree import PropertyTree


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
FIXTURES_DIR = TESTS_DIR / "fixtures"

GIB_FIXTURE = FIXTURES_DIR / "handicap2.gib"
NGF_FIXTURE = FIXTURES_DIR / "handicap2.ngf"
UGI_FIXTURE = FIXTURES_DIR / "handicap2.ugi"


def read_fixture(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def main_line(tree: PropertyTree) -> list[int]:
    """Handles from the root following first children, root included."""
    line = [tree.root]
    while tree.children(line[-1]):
        line.append(tree.children(line[-1])[0])
    return line


def move_count(tree: PropertyTree) -> int:
    """Number of nodes after the root along the main line."""
    return len(main_line(tree)) - 1


@pytest.fixture
def gib_text() -> str:
    return read_fixture(GIB_FIXTURE)


@pytest.fixture
def ngf_text() -> str:
    return read_fixture(NGF_FIXTURE)


@pytest.fixture
def ugi_text() -> str:
    return read_fixture(UGI_FIXTURE)
