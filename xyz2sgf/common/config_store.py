# xyz2sgf/common/config_store.py
"""JSON-based configuration store for the batch converter.

Usage:
    from xyz2sgf.common.config_store import JsonFileConfigStore

    store = JsonFileConfigStore("xyz2sgf.json")
    section = store.get("convert") or {}
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator, Mapping
from typing import Any


def _get_logger() -> logging.Logger:
    """Get module logger (lazy to avoid side effect at import time)."""
    return logging.getLogger(__name__)


class JsonFileConfigStore(Mapping[str, dict[str, Any]]):
    """Read-only view of a JSON file holding named config sections.

    A missing file is an empty store. A corrupt file, or a top level value
    that is not a dict of dicts, is logged and ignored rather than raised:
    the converter then runs on its defaults.

    Args:
        filename: Path to JSON file
    """

    def __init__(self, filename: str | os.PathLike[str]):
        self._filename = os.fspath(filename)
        self._data: dict[str, dict[str, Any]] = {}
        self._load()

    def _load(self) -> None:
        """Load data from JSON file."""
        if not os.path.exists(self._filename):
            self._data = {}
            return
        try:
            with open(self._filename, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            _get_logger().warning("Corrupt config file %s: %s", self._filename, e)
            self._data = {}
            return
        if not isinstance(data, dict):
            _get_logger().warning("Config file %s is not a JSON object, ignoring it", self._filename)
            self._data = {}
            return
        for key, value in list(data.items()):
            if not isinstance(value, dict):
                _get_logger().warning("Config section %s is not a dict (got %s), removing", key, type(value).__name__)
                del data[key]
        self._data = data

    def get(self, key: str) -> dict[str, Any] | None:  # type: ignore[override]
        """Section data as dict (shallow copy), or None if not found"""
        value = self._data.get(key)
        return dict(value) if value is not None else None

    def __getitem__(self, key: str) -> dict[str, Any]:
        return dict(self._data[key])

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data.keys()))

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"JsonFileConfigStore({self._filename!r})"
