# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Termplot Contributors
#
# This file is part of Termplot.
#
# Termplot is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Termplot is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from termplot.config import ASCII_SYMBOLS, UNICODE_SYMBOLS, ChartConfig, Symbols

logger = logging.getLogger(__name__)

_INT_KEYS = ("height", "width", "label_ticks")
_FLOAT_KEYS = ("min", "max")
_KNOWN_KEYS = frozenset((*_INT_KEYS, *_FLOAT_KEYS, "show_labels", "label_format", "symbols"))
_SYMBOL_PRESETS = {"unicode": UNICODE_SYMBOLS, "ascii": ASCII_SYMBOLS}


@dataclass(frozen=True, slots=True)
class ConfigLoadError(Exception):
    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ChartConfigLoader:
    """
    Loads a ChartConfig from chart.yaml / chart.yml / chart.json

    Example (YAML):
        height: 15
        width: 60
        min: 0
        label_ticks: 3
        label_format: "{:.1}"
        symbols: ascii
    """

    def load(self, path: Path | str, base: ChartConfig | None = None) -> ChartConfig:
        if not isinstance(path, Path):
            path = Path(path)

        if not path.exists():
            raise ConfigLoadError(code="config_not_found", message=f"Config file does not exist: {path}")

        data = self._read_config_file(path)
        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigLoadError(code="invalid_config", message="Chart config root must be a mapping/object.")

        config = self.from_mapping(data, base=base)
        logger.debug("loaded chart config from %s: %r", path, config)
        return config

    def from_mapping(self, data: Mapping[str, Any], base: ChartConfig | None = None) -> ChartConfig:
        unknown = sorted(set(data) - _KNOWN_KEYS)
        if unknown:
            raise ConfigLoadError(
                code="unknown_key",
                message=f"Unknown chart config key(s): {', '.join(map(str, unknown))}",
                details={"supported": sorted(_KNOWN_KEYS)},
            )

        config = base or ChartConfig()
        updates: dict[str, Any] = {}

        for key in _INT_KEYS:
            if key in data:
                updates[key] = self._int(key, data[key])

        for key in _FLOAT_KEYS:
            if key in data and data[key] is not None:
                updates[key] = self._float(key, data[key])

        if "show_labels" in data:
            if not isinstance(data["show_labels"], bool):
                raise ConfigLoadError(code="invalid_value", message="'show_labels' must be a boolean.")
            updates["show_labels"] = data["show_labels"]

        if "label_format" in data:
            label_format = data["label_format"]
            if isinstance(label_format, int) and not isinstance(label_format, bool):
                label_format = f"{{:.{label_format}}}"
            if not isinstance(label_format, str):
                raise ConfigLoadError(code="invalid_value", message="'label_format' must be a string.")
            updates["label_format"] = label_format

        if "symbols" in data:
            updates["symbols"] = self._parse_symbols(data["symbols"])

        return replace(config, **updates)

    def _read_config_file(self, path: Path) -> Any:
        suffix = path.suffix.lower()
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigLoadError(code="config_unreadable", message=f"Cannot read config file: {path}") from e

        if suffix == ".json":
            try:
                return json.loads(raw)
            except json.JSONDecodeError as e:
                raise ConfigLoadError(code="invalid_json", message=str(e), details={"path": str(path)}) from e

        if suffix in (".yaml", ".yml"):
            return self._load_yaml(raw, path)

        # Unknown extension: try JSON then YAML
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            return self._load_yaml(raw, path)

    def _load_yaml(self, raw: str, path: Path) -> Any:
        try:
            import yaml
        except ImportError as e:
            raise ConfigLoadError(
                code="yaml_dependency_missing",
                message="YAML chart config requires PyYAML.",
                details={"hint": "pip install pyyaml", "path": str(path)},
            ) from e
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigLoadError(code="invalid_yaml", message=str(e), details={"path": str(path)}) from e

    def _parse_symbols(self, raw: Any) -> Symbols:
        if isinstance(raw, str):
            preset = _SYMBOL_PRESETS.get(raw.lower())
            if preset is None:
                raise ConfigLoadError(
                    code="invalid_value",
                    message=f"Unknown symbol preset: {raw!r}",
                    details={"supported": sorted(_SYMBOL_PRESETS)},
                )
            return preset

        if not isinstance(raw, dict):
            raise ConfigLoadError(code="invalid_value", message="'symbols' must be a preset name or a mapping.")

        names = {f.name for f in fields(Symbols)}
        unknown = sorted(set(raw) - names)
        if unknown:
            raise ConfigLoadError(code="unknown_key", message=f"Unknown symbol(s): {', '.join(map(str, unknown))}")

        for name, glyph in raw.items():
            if not isinstance(glyph, str) or len(glyph) != 1:
                raise ConfigLoadError(code="invalid_value", message=f"Symbol '{name}' must be a single character.")

        return Symbols(**raw)

    @staticmethod
    def _int(key: str, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigLoadError(code="invalid_value", message=f"'{key}' must be an integer.")
        return value

    @staticmethod
    def _float(key: str, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigLoadError(code="invalid_value", message=f"'{key}' must be a number.")
        return float(value)
