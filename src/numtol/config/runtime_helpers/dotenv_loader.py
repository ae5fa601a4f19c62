"""Dotenv file loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Dict

from ..errors import ConfigurationError


class DotenvLoader:
    """Loads NAME=value pairs from .env-style files."""

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        """
        Read ``path`` into a name/value mapping.

        Blank lines, ``#`` comments and lines without ``=`` are skipped;
        surrounding quotes are removed from values. A missing file yields an
        empty mapping.

        Raises:
            ConfigurationError: If the file exists but cannot be read
        """
        if not path.exists():
            return {}

        try:
            lines = path.read_text().splitlines()
        except OSError as exc:
            raise ConfigurationError.unreadable_source("dotenv loader", path) from exc

        values: Dict[str, str] = {}
        for line in lines:
            stripped = line.strip()
            if not stripped or stripped.startswith("#") or "=" not in stripped:
                continue
            key, raw_value = stripped.split("=", 1)
            key = key.strip()
            if key:
                values[key] = raw_value.strip().strip("'").strip('"')
        return values
