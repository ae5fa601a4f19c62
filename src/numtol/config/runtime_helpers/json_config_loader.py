"""JSON configuration file loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import orjson

from ..errors import ConfigurationError


class JsonConfigLoader:
    """Loads NAME -> scalar mappings from JSON files as string values."""

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        """
        Read a JSON object from ``path`` and stringify its scalar values.

        A missing file yields an empty mapping.

        Raises:
            ConfigurationError: If the file cannot be read, is not valid JSON,
                is not an object, or maps a name to a nested structure
        """
        if not path.exists():
            return {}

        try:
            payload = orjson.loads(path.read_bytes())
        except OSError as exc:
            raise ConfigurationError.unreadable_source("JSON defaults loader", path) from exc
        except orjson.JSONDecodeError as exc:
            raise ConfigurationError.malformed_source(path, "failed to parse as JSON") from exc

        if not isinstance(payload, dict):
            raise ConfigurationError.malformed_source(path, "must contain an object at the top level")

        return JsonConfigLoader._normalize_values(payload, path)

    @staticmethod
    def _normalize_values(payload: Dict[str, Any], path: Path) -> Dict[str, str]:
        normalized: Dict[str, str] = {}
        for key, value in payload.items():
            if isinstance(value, (dict, list)):
                raise ConfigurationError.malformed_source(path, f"must map names to scalar values (problematic key: {key})")
            if value is None:
                normalized[str(key)] = ""
            elif isinstance(value, bool):
                normalized[str(key)] = "true" if value else "false"
            else:
                normalized[str(key)] = str(value)
        return normalized
