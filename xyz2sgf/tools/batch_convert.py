#!/usr/bin/env python
"""
Batch converter from GIB / NGF / UGF / UGI game records to SGF.

Every input file that converts is written next to it (or into --output-dir)
with the same base name and an .sgf extension. Failures are logged per file
and do not stop the batch.

Usage:
    python -m xyz2sgf game1.gib game2.ngf game3.ugi
    python -m xyz2sgf --output-dir ./sgf --config xyz2sgf.json *.gib
"""

import argparse
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from xyz2sgf.common.typed_config import ConvertConfig, load_convert_config, normalize_extension
from xyz2sgf.core.converter import load, output_path, save_file
from xyz2sgf.core.errors import Xyz2SgfError
from xyz2sgf.core.formats import SUPPORTED_EXTENSIONS, get_extension

logger = logging.getLogger(__name__)


@dataclass
class FileFailure:
    """Structured entry for one file that could not be converted."""

    filename: str
    exception_type: str  # e.g. "ParseError", "FileNotFoundError"
    message: str


@dataclass
class BatchResult:
    """Result of a batch conversion."""

    converted: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failures: List[FileFailure] = field(default_factory=list)

    @property
    def fail_count(self) -> int:
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures


def convert_file(filename: str, config: ConvertConfig) -> Optional[str]:
    """Convert one file and return the written path, or None if skipped because the output exists.

    Raises:
        Xyz2SgfError: If the file cannot be converted
        OSError: If the file cannot be read or the output written
    """
    target = output_path(filename, config.output_extension, config.output_dir)
    if target.exists() and not config.overwrite:
        logger.warning("Skipping %s: %s already exists", filename, target)
        return None
    tree = load(filename, encoding=config.encoding_for(get_extension(filename)))
    if config.output_dir is not None:
        os.makedirs(config.output_dir, exist_ok=True)
    save_file(target, tree)
    return str(target)


def convert_files(filenames: Sequence[str], config: ConvertConfig) -> BatchResult:
    result = BatchResult()
    for i, filename in enumerate(filenames):
        logger.info("[%d/%d] Converting: %s", i + 1, len(filenames), filename)
        try:
            written = convert_file(filename, config)
        except (Xyz2SgfError, OSError) as e:
            user_message = getattr(e, "user_message", str(e))
            logger.error("Conversion failed for %s: %s", filename, user_message)
            logger.debug("Failure details for %s", filename, exc_info=True)
            result.failures.append(FileFailure(filename, type(e).__name__, user_message))
            continue
        if written is None:
            result.skipped.append(filename)
        else:
            logger.info("  Saved: %s", written)
            result.converted.append(written)
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xyz2sgf",
        description="Convert GIB, NGF and UGF/UGI Go game records to SGF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Convert files, writing game1.sgf next to game1.gib etc.
    python -m xyz2sgf game1.gib game2.ngf

    # Collect the results in one folder, keeping existing files
    python -m xyz2sgf --output-dir ./sgf --no-overwrite *.ugi
""",
    )
    parser.add_argument("files", nargs="*", help="Input files (" + ", ".join(SUPPORTED_EXTENSIONS) + ")")
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save converted files (default: next to each input file)",
    )
    parser.add_argument("--extension", default=None, help="Output file extension (default: .sgf)")
    parser.add_argument("--config", default=None, help="JSON config file with a 'convert' section")
    parser.add_argument(
        "--no-overwrite",
        action="store_true",
        help="Skip files whose output already exists",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Enable debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only report problems")
    return parser


def resolve_config(args: argparse.Namespace) -> ConvertConfig:
    """Config file values, overridden by command line flags."""
    base = load_convert_config(args.config)
    return ConvertConfig(
        output_extension=normalize_extension(args.extension, base.output_extension),
        output_dir=args.output_dir if args.output_dir else base.output_dir,
        overwrite=False if args.no_overwrite else base.overwrite,
        encodings=base.encodings,
        log_level="DEBUG" if args.verbose else "WARNING" if args.quiet else base.log_level,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.files:
        parser.print_usage()
        return 0

    config = resolve_config(args)
    logging.basicConfig(level=config.level, format="%(levelname)s %(name)s: %(message)s")

    result = convert_files(args.files, config)

    logger.info(
        "Batch conversion complete: %d converted, %d failed, %d skipped",
        len(result.converted),
        result.fail_count,
        len(result.skipped),
    )
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
