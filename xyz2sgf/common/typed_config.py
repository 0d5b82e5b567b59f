# xyz2sgf/common/typed_config.py
#
# Frozen dataclass view of the "convert" config section plus the lenient
# conversion helpers used to build it.

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from xyz2sgf.common.config_store import JsonFileConfigStore

_TRUE_STRINGS = frozenset({"true", "1", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "no"})

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

CONVERT_SECTION = "convert"


def safe_bool(value: Any, default: bool) -> bool:
    """bool conversion. Unrecognised strings ("fasle" etc.) give default.

    Args:
        value: Value from the config file
        default: Returned for None, empty or unrecognised values

    Returns:
        The converted value, or default
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lower = value.lower()
        if lower in _TRUE_STRINGS:
            return True
        if lower in _FALSE_STRINGS:
            return False
    return default


def safe_str(value: Any, default: str) -> str:
    """str passthrough. None, empty and non-str values give default (never "None")."""
    if not isinstance(value, str) or not value:
        return default
    return value


def normalize_path(value: Any) -> str | None:
    """Path passthrough. None, non-str and whitespace-only values give None."""
    if not isinstance(value, str) or not value.strip():
        return None
    return value


def normalize_extension(value: Any, default: str) -> str:
    """".sgf" style extension; a missing dot is added, junk gives default."""
    ext = safe_str(value, default).strip()
    if not ext or ext == ".":
        return default
    return ext if ext.startswith(".") else "." + ext


def safe_encodings(value: Any) -> Mapping[str, str]:
    """{".ngf": "gbk"} overrides, keys lower-cased with a leading dot. Non-str entries dropped."""
    if not isinstance(value, dict):
        return MappingProxyType({})
    result = {}
    for ext, encoding in value.items():
        if isinstance(ext, str) and ext.strip() and isinstance(encoding, str) and encoding:
            key = ext.strip().lower()
            result[key if key.startswith(".") else "." + key] = encoding
    return MappingProxyType(result)


@dataclass(frozen=True)
class ConvertConfig:
    """Batch conversion settings (convert section).

    Attributes:
        output_extension: Extension of the written files
        output_dir: Directory for output files, None for next to each input
        overwrite: Replace existing output files
        encodings: Per-extension overrides of the legacy text encoding
        log_level: Root log level name when not set on the command line
    """

    output_extension: str = ".sgf"
    output_dir: str | None = None
    overwrite: bool = True
    encodings: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "ConvertConfig":
        """Build from a dict. Missing keys get defaults, bad types are converted safely."""
        log_level = safe_str(d.get("log_level"), "INFO").upper()
        return cls(
            output_extension=normalize_extension(d.get("output_extension"), ".sgf"),
            output_dir=normalize_path(d.get("output_dir")),
            overwrite=safe_bool(d.get("overwrite"), default=True),
            encodings=safe_encodings(d.get("encodings")),
            log_level=log_level if log_level in _LOG_LEVELS else "INFO",
        )

    def encoding_for(self, extension: str | None) -> str | None:
        return self.encodings.get(extension) if extension else None

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


def load_convert_config(filename: str | None) -> ConvertConfig:
    """ConvertConfig from a JSON config file, defaults when filename is None or the file is missing."""
    if not filename:
        return ConvertConfig()
    store = JsonFileConfigStore(filename)
    return ConvertConfig.from_dict(store.get(CONVERT_SECTION) or {})
