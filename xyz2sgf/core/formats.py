"""Static table of the supported legacy formats.

Each format tag is bound to the text encoding its files are written in and
to the parser for its dialect. The table is built once at import and is
read-only.
"""

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from xyz2sgf.core.errors import UnknownFormatError
from xyz2sgf.core.parsers.gib import parse_gib
from xyz2sgf.core.parsers.ngf import parse_ngf
from xyz2sgf.core.parsers.ugf import parse_ugf
from xyz2sgf.core.tree import PropertyTree

_EXTENSION_PAT = re.compile(r"(\.\w+)$")


class GameFormat(Enum):
    GIB = ".gib"
    NGF = ".ngf"
    UGF = ".ugf"
    UGI = ".ugi"

    @property
    def extension(self) -> str:
        return self.value


@dataclass(frozen=True)
class FormatSpec:
    encoding: str
    parser: Callable[[str], PropertyTree]


FORMATS: Mapping[GameFormat, FormatSpec] = MappingProxyType(
    {
        GameFormat.GIB: FormatSpec(encoding="utf-8", parser=parse_gib),
        GameFormat.NGF: FormatSpec(encoding="gb18030", parser=parse_ngf),
        GameFormat.UGF: FormatSpec(encoding="shift_jisx0213", parser=parse_ugf),
        GameFormat.UGI: FormatSpec(encoding="shift_jisx0213", parser=parse_ugf),
    }
)

SUPPORTED_EXTENSIONS = tuple(fmt.extension for fmt in GameFormat)


def get_extension(filename: str) -> Optional[str]:
    """Lower-cased extension including the dot, e.g. "game.GIB" -> ".gib", or None."""
    match = _EXTENSION_PAT.search(str(filename))
    return match.group(1).lower() if match else None


def format_from_filename(filename: str) -> GameFormat:
    """Pick the format from the file extension.

    Raises:
        UnknownFormatError: If the extension is missing or not supported
    """
    ext = get_extension(filename)
    for fmt in GameFormat:
        if fmt.extension == ext:
            return fmt
    raise UnknownFormatError(
        f"Unknown file type {ext!r} for {filename}",
        user_message="Couldn't detect file type -- make sure it has an extension of "
        + ", ".join(SUPPORTED_EXTENSIONS),
        context={"filename": str(filename), "extension": ext},
    )
