"""Convert GIB, NGF and UGF/UGI Go game records to SGF."""

from xyz2sgf.core.converter import (
    convert,
    convert_to_stream,
    file_to_converted_string,
    load,
    parse,
    save_file,
)
from xyz2sgf.core.errors import (
    BadBoardSizeError,
    CoordinateRangeError,
    ParseError,
    UnknownFormatError,
    Xyz2SgfError,
)
from xyz2sgf.core.formats import GameFormat, get_extension

__version__ = "1.0.0"

__all__ = [
    "BadBoardSizeError",
    "CoordinateRangeError",
    "GameFormat",
    "ParseError",
    "UnknownFormatError",
    "Xyz2SgfError",
    "convert",
    "convert_to_stream",
    "file_to_converted_string",
    "get_extension",
    "load",
    "parse",
    "save_file",
]
