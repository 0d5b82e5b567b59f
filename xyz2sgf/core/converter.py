"""Conversion entry points: text -> normalized tree -> SGF text, plus file helpers."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

import chardet

from xyz2sgf.core.formats import FORMATS, GameFormat, format_from_filename
from xyz2sgf.core.normalizer import normalize
from xyz2sgf.core.tree import PropertyTree
from xyz2sgf.core.writer import TextSink, tree_to_string, write_tree

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "UTF-8"
OUTPUT_EXTENSION = ".sgf"
ASCII_MARKUP = b"\\[GAME=0123456789,:()]\nSTO INI PM HDCP=ABCXYZabcxyz+-.\n"

PathLike = Union[str, "os.PathLike[str]"]


def parse(contents: str, fmt: GameFormat) -> PropertyTree:
    """Parse decoded text in the given format and normalize the resulting tree.

    Raises:
        ParseError: If the parser rejects the text
        BadBoardSizeError: If the board size is unsupported
    """
    root = FORMATS[fmt].parser(contents)
    return normalize(root)


def convert(contents: str, fmt: GameFormat) -> str:
    """Complete SGF text for decoded legacy text."""
    return tree_to_string(parse(contents, fmt))


def convert_to_stream(contents: str, fmt: GameFormat, sink: TextSink) -> None:
    """Like convert(), but the SGF text is written to sink as it is produced."""
    write_tree(sink, parse(contents, fmt))


def _detect_encoding(bin_contents: bytes) -> str:
    detected = chardet.detect(bin_contents[:300])["encoding"]
    # workaround for some compatibility issues for Windows-1252 and GB2312 encodings
    if detected == "Windows-1252" or detected == "GB2312":
        return "GBK"
    return detected or DEFAULT_ENCODING


def _keeps_ascii(encoding: str) -> bool:
    """Record markup is ASCII, so a usable codec must decode it unchanged (rules out EBCDIC guesses)."""
    try:
        return ASCII_MARKUP.decode(encoding) == ASCII_MARKUP.decode("ascii")
    except (LookupError, UnicodeDecodeError):
        return False


def decode_contents(bin_contents: bytes, encoding: str) -> str:
    """Decode with the format's encoding; if that fails, guess the encoding and replace bad bytes."""
    try:
        return bin_contents.decode(encoding)
    except LookupError:
        reason = "unknown encoding"
    except UnicodeDecodeError as e:
        reason = e.reason
    fallback = _detect_encoding(bin_contents)
    if not _keeps_ascii(fallback):
        fallback = encoding if _keeps_ascii(encoding) else DEFAULT_ENCODING
    logger.warning("Could not decode as %s (%s), falling back to %s", encoding, reason, fallback)
    return bin_contents.decode(fallback, errors="replace")


def read_text(filename: PathLike, fmt: GameFormat, encoding: Optional[str] = None) -> str:
    """Read a legacy file as text. FileNotFoundError is just allowed to bubble up."""
    with open(filename, "rb") as f:
        bin_contents = f.read()
    return decode_contents(bin_contents, encoding or FORMATS[fmt].encoding)


def load(filename: PathLike, encoding: Optional[str] = None) -> PropertyTree:
    """Read, parse and normalize a legacy file, picking the format from its extension.

    Raises:
        UnknownFormatError: If the extension is not supported
        ParseError, BadBoardSizeError: If the contents cannot be converted
    """
    fmt = format_from_filename(str(filename))
    contents = read_text(filename, fmt, encoding)
    logger.debug("Parsing %s as %s", filename, fmt.name)
    return parse(contents, fmt)


def file_to_converted_string(filename: PathLike, encoding: Optional[str] = None) -> str:
    return tree_to_string(load(filename, encoding))


def save_file(filename: PathLike, tree: PropertyTree) -> None:
    """Write the tree as an SGF file, always UTF-8 to match the CA tag."""
    with open(filename, "w", encoding="utf-8", newline="") as f:
        write_tree(f, tree)


def output_path(
    filename: PathLike, extension: str = OUTPUT_EXTENSION, output_dir: Optional[PathLike] = None
) -> Path:
    """Same base name with the output extension, next to the input unless output_dir is given."""
    source = Path(filename)
    target_dir = Path(output_dir) if output_dir is not None else source.parent
    return target_dir / (source.stem + extension)
